"""Resume bullet normalization and style linting."""

from .domain import (
    FormatIssue,
    IssueSeverity,
    IssueType,
    LengthThresholds,
    analyze_bullet,
    format_bullet_text,
    get_bullet_length_status,
    suggest_tense_correction,
)

__version__ = "0.1.0"

__all__ = [
    "FormatIssue",
    "IssueSeverity",
    "IssueType",
    "LengthThresholds",
    "analyze_bullet",
    "format_bullet_text",
    "get_bullet_length_status",
    "suggest_tense_correction",
]
