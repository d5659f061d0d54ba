"""Resume Bullets Domain - Pure logic for bullet formatting and linting.

This package contains pure functions with no file system dependencies.
All I/O is handled by the tools layer; this package operates on strings and models.
"""

from .bullet_format import (
    DEFAULT_THRESHOLDS,
    MAX_BULLET_LENGTH,
    PRESENT_TENSE_RULES,
    WARNING_BULLET_LENGTH,
    BulletLengthStatus,
    FormatIssue,
    IssueSeverity,
    IssueType,
    LengthStatus,
    LengthThresholds,
    VerbRule,
    analyze_bullet,
    find_tense_rule,
    format_bullet_text,
    get_bullet_length_status,
    is_bullet_length_warning,
    is_bullet_too_long,
    suggest_tense_correction,
)
from .bullet_linter import (
    BulletFinding,
    BulletLintResult,
    format_bullet_report,
    lint_bullets,
    lint_resume_bullets,
    lint_resume_data,
    merge_results,
)
from .date_format import format_date, format_date_range

__all__ = [
    # Bullet formatting
    "format_bullet_text",
    "analyze_bullet",
    "suggest_tense_correction",
    "find_tense_rule",
    "get_bullet_length_status",
    "is_bullet_too_long",
    "is_bullet_length_warning",
    "FormatIssue",
    "IssueType",
    "IssueSeverity",
    "LengthStatus",
    "LengthThresholds",
    "BulletLengthStatus",
    "VerbRule",
    "PRESENT_TENSE_RULES",
    "MAX_BULLET_LENGTH",
    "WARNING_BULLET_LENGTH",
    "DEFAULT_THRESHOLDS",
    # Bullet linter
    "lint_bullets",
    "lint_resume_bullets",
    "lint_resume_data",
    "merge_results",
    "BulletFinding",
    "BulletLintResult",
    "format_bullet_report",
    # Dates
    "format_date",
    "format_date_range",
]
