"""Pure domain logic for achievement-bullet formatting and style checks.

All functions operate on a single bullet string -- no file I/O, no state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_BULLET_LENGTH = 150
WARNING_BULLET_LENGTH = 120

BULLET_MARKERS = "•-*→"


class IssueType(str, Enum):
    LENGTH = "length"
    TENSE = "tense"
    PUNCTUATION = "punctuation"
    SPACING = "spacing"


class IssueSeverity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class LengthStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class FormatIssue:
    """One style problem found in a bullet."""

    type: IssueType
    message: str
    severity: IssueSeverity

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "message": self.message, "severity": self.severity.value}


@dataclass(frozen=True)
class VerbRule:
    """Present-tense matcher paired with its past-tense replacement."""

    present: "re.Pattern[str]"
    past: str

    def matches(self, word: str) -> bool:
        return self.present.search(word) is not None


@dataclass(frozen=True)
class LengthThresholds:
    """Character limits applied to the trimmed bullet length."""

    warning: int = WARNING_BULLET_LENGTH
    max: int = MAX_BULLET_LENGTH


@dataclass(frozen=True)
class BulletLengthStatus:
    length: int
    max: int
    warning: int
    status: LengthStatus

    def to_dict(self) -> Dict[str, object]:
        return {"length": self.length, "max": self.max, "warning": self.warning, "status": self.status.value}


DEFAULT_THRESHOLDS = LengthThresholds()


def _verb(*forms: str, past: str) -> VerbRule:
    return VerbRule(present=re.compile(r"^(%s)\b" % "|".join(forms), re.IGNORECASE), past=past)


# Present-tense openers that should read as past tense in experience bullets.
# Order matters: the first matching rule wins.
PRESENT_TENSE_RULES: Tuple[VerbRule, ...] = (
    _verb("achieve", "achieves", "achieving", past="Achieved"),
    _verb("build", "builds", "building", past="Built"),
    _verb("create", "creates", "creating", past="Created"),
    _verb("deliver", "delivers", "delivering", past="Delivered"),
    _verb("design", "designs", "designing", past="Designed"),
    _verb("develop", "develops", "developing", past="Developed"),
    _verb("establish", "establishes", "establishing", past="Established"),
    _verb("generate", "generates", "generating", past="Generated"),
    _verb("implement", "implements", "implementing", past="Implemented"),
    _verb("improve", "improves", "improving", past="Improved"),
    _verb("increase", "increases", "increasing", past="Increased"),
    _verb("launch", "launches", "launching", past="Launched"),
    _verb("lead", "leads", "leading", past="Led"),
    _verb("manage", "manages", "managing", past="Managed"),
    _verb("optimize", "optimizes", "optimizing", past="Optimized"),
    _verb("reduce", "reduces", "reducing", past="Reduced"),
    _verb("save", "saves", "saving", past="Saved"),
    _verb("streamline", "streamlines", "streamlining", past="Streamlined"),
    _verb("transform", "transforms", "transforming", past="Transformed"),
    _verb("drive", "drives", "driving", past="Drove"),
    _verb("grow", "grows", "growing", past="Grew"),
    _verb("win", "wins", "winning", past="Won"),
    _verb("conduct", "conducts", "conducting", past="Conducted"),
    _verb("execute", "executes", "executing", past="Executed"),
    _verb("spearhead", "spearheads", "spearheading", past="Spearheaded"),
    _verb("pioneer", "pioneers", "pioneering", past="Pioneered"),
    _verb("orchestrate", "orchestrates", "orchestrating", past="Orchestrated"),
)

_LINE_BREAKS_RE = re.compile(r"[\r\n]+")
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_MARKERS_RE = re.compile(r"^(?:[%s]\s*)+" % re.escape(BULLET_MARKERS))
_REPEATED_SPACE_RE = re.compile(r"\s{2,}")
_LOWERCASE_START_RE = re.compile(r"^[a-z]")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_bullet_text(text: str) -> str:
    """Normalize raw bullet input into single-line display form.

    Line breaks and whitespace runs collapse to single spaces, leading
    bullet glyphs (``•``, ``-``, ``*``, ``→``) are dropped, the first
    character is uppercased and trailing periods are removed.
    """
    if not text:
        return ""

    formatted = _LINE_BREAKS_RE.sub(" ", text)
    formatted = _WHITESPACE_RE.sub(" ", formatted).strip()
    formatted = _LEADING_MARKERS_RE.sub("", formatted, count=1)
    formatted = formatted[:1].upper() + formatted[1:]
    # Whitespace is already collapsed to single spaces, so this also drops a
    # space left in front of the removed periods.
    return formatted.rstrip(". ")


def find_tense_rule(text: str) -> Optional[VerbRule]:
    """Return the first verb rule matching the opening word of *text*."""
    first_word = _first_word(text)
    if not first_word:
        return None
    for rule in PRESENT_TENSE_RULES:
        if rule.matches(first_word):
            return rule
    return None


def analyze_bullet(text: str, thresholds: Optional[LengthThresholds] = None) -> List[FormatIssue]:
    """Scan *text* for style issues.

    Issues come back in a fixed order: length, tense, trailing period,
    spacing, lowercase start.
    """
    if not text or not text.strip():
        return []

    limits = thresholds or DEFAULT_THRESHOLDS
    trimmed = text.strip()

    issues: List[FormatIssue] = []
    for check in _BULLET_CHECKS:
        issue = check(trimmed, limits)
        if issue is not None:
            issues.append(issue)
    return issues


def suggest_tense_correction(text: str) -> Optional[str]:
    """Rewrite a present-tense opener to past tense, or ``None`` if not applicable."""
    if not text:
        return None

    trimmed = text.strip()
    rule = find_tense_rule(trimmed)
    if rule is None:
        return None
    return rule.present.sub(rule.past, trimmed, count=1)


def get_bullet_length_status(text: str, thresholds: Optional[LengthThresholds] = None) -> BulletLengthStatus:
    limits = thresholds or DEFAULT_THRESHOLDS
    length = len(text.strip())
    if length > limits.max:
        status = LengthStatus.ERROR
    elif length > limits.warning:
        status = LengthStatus.WARNING
    else:
        status = LengthStatus.OK
    return BulletLengthStatus(length=length, max=limits.max, warning=limits.warning, status=status)


def is_bullet_too_long(text: str, thresholds: Optional[LengthThresholds] = None) -> bool:
    return get_bullet_length_status(text, thresholds).status is LengthStatus.ERROR


def is_bullet_length_warning(text: str, thresholds: Optional[LengthThresholds] = None) -> bool:
    return get_bullet_length_status(text, thresholds).status is LengthStatus.WARNING


# ---------------------------------------------------------------------------
# Private checks
# ---------------------------------------------------------------------------


def _first_word(text: str) -> str:
    parts = text.strip().split(maxsplit=1)
    return parts[0] if parts else ""


def _check_length(trimmed: str, limits: LengthThresholds) -> Optional[FormatIssue]:
    length = len(trimmed)
    if length > limits.max:
        return FormatIssue(
            type=IssueType.LENGTH,
            message=f"Bullet is too long ({length} chars). Consider shortening to under {limits.max} characters.",
            severity=IssueSeverity.ERROR,
        )
    if length > limits.warning:
        return FormatIssue(
            type=IssueType.LENGTH,
            message=f"Bullet is getting long ({length} chars). Consider keeping under {limits.warning} characters.",
            severity=IssueSeverity.WARNING,
        )
    return None


def _check_tense(trimmed: str, limits: LengthThresholds) -> Optional[FormatIssue]:
    rule = find_tense_rule(trimmed)
    if rule is None:
        return None
    return FormatIssue(
        type=IssueType.TENSE,
        message=f'Consider using past tense: "{rule.past}" instead of "{_first_word(trimmed)}"',
        severity=IssueSeverity.WARNING,
    )


def _check_trailing_period(trimmed: str, limits: LengthThresholds) -> Optional[FormatIssue]:
    if not trimmed.endswith("."):
        return None
    return FormatIssue(
        type=IssueType.PUNCTUATION,
        message="Resume bullets typically don't end with periods",
        severity=IssueSeverity.WARNING,
    )


def _check_spacing(trimmed: str, limits: LengthThresholds) -> Optional[FormatIssue]:
    if not _REPEATED_SPACE_RE.search(trimmed):
        return None
    return FormatIssue(
        type=IssueType.SPACING,
        message="Contains multiple consecutive spaces",
        severity=IssueSeverity.WARNING,
    )


def _check_lowercase_start(trimmed: str, limits: LengthThresholds) -> Optional[FormatIssue]:
    if not _LOWERCASE_START_RE.match(trimmed):
        return None
    return FormatIssue(
        type=IssueType.PUNCTUATION,
        message="Bullets should start with a capital letter",
        severity=IssueSeverity.WARNING,
    )


_BULLET_CHECKS: Tuple[Callable[[str, LengthThresholds], Optional[FormatIssue]], ...] = (
    _check_length,
    _check_tense,
    _check_trailing_period,
    _check_spacing,
    _check_lowercase_start,
)
