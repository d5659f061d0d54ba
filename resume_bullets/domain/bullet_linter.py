"""Pure domain logic for linting every bullet of a resume.

All functions operate on strings and resume models -- no file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..models import ResumeData
from .bullet_format import (
    FormatIssue,
    IssueSeverity,
    IssueType,
    LengthThresholds,
    analyze_bullet,
    format_bullet_text,
    suggest_tense_correction,
)
from .linting import parse_resume_ast

ERROR_PENALTY = 15
WARNING_PENALTY = 5


@dataclass
class BulletFinding:
    """Issues found in one bullet, with an optional tense rewrite.

    *index* is the position within the bullet list it came from; *entry_id*
    names the experience entry owning that list, when there is one.
    """

    index: int
    text: str
    issues: List[FormatIssue] = field(default_factory=list)
    suggestion: Optional[str] = None
    entry_id: Optional[str] = None

    @property
    def is_clean(self) -> bool:
        return not self.issues

    def to_dict(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "entry_id": self.entry_id,
            "text": self.text,
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestion": self.suggestion,
        }


@dataclass
class BulletLintResult:
    """Structured result from linting a batch of bullets."""

    findings: List[BulletFinding] = field(default_factory=list)
    scope: str = "bullets"

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings for i in f.issues if i.severity is IssueSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings for i in f.issues if i.severity is IssueSeverity.WARNING)

    @property
    def clean_count(self) -> int:
        return sum(1 for f in self.findings if f.is_clean)

    @property
    def issue_counts(self) -> Dict[str, int]:
        counts = {t.value: 0 for t in IssueType}
        for finding in self.findings:
            for issue in finding.issues:
                counts[issue.type.value] += 1
        return counts

    @property
    def score(self) -> int:
        if not self.findings:
            return 100
        total = 0
        for finding in self.findings:
            penalty = sum(
                ERROR_PENALTY if i.severity is IssueSeverity.ERROR else WARNING_PENALTY for i in finding.issues
            )
            total += max(0, 100 - penalty)
        return round(total / len(self.findings))

    @property
    def passed(self) -> bool:
        return self.error_count == 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "scope": self.scope,
            "score": self.score,
            "passed": self.passed,
            "bullet_count": len(self.findings),
            "clean_count": self.clean_count,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "issue_counts": self.issue_counts,
            "findings": [f.to_dict() for f in self.findings],
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def lint_bullets(
    bullets: Iterable[str],
    thresholds: Optional[LengthThresholds] = None,
    scope: str = "bullets",
    entry_id: Optional[str] = None,
) -> BulletLintResult:
    """Analyze each non-blank bullet; *index* keeps the caller's position."""
    findings: List[BulletFinding] = []
    for index, text in enumerate(bullets):
        if not text or not text.strip():
            continue
        findings.append(
            BulletFinding(
                index=index,
                text=text,
                issues=analyze_bullet(text, thresholds),
                suggestion=_suggest(text),
                entry_id=entry_id,
            )
        )
    return BulletLintResult(findings=findings, scope=scope)


def merge_results(results: Iterable[BulletLintResult], scope: str) -> BulletLintResult:
    """Combine per-entry results into one result; findings keep their entry ids."""
    findings: List[BulletFinding] = []
    for result in results:
        findings.extend(result.findings)
    return BulletLintResult(findings=findings, scope=scope)


def lint_resume_bullets(
    content: str,
    strict_scope: bool = True,
    thresholds: Optional[LengthThresholds] = None,
) -> BulletLintResult:
    """Lint bullets of a markdown/plain-text resume.

    With *strict_scope* only the experience section is checked; when the
    resume has no experience section every bullet is checked instead.
    """
    ast = parse_resume_ast(content)
    if strict_scope and ast.has_experience_section:
        return lint_bullets(ast.get_experience_bullets(), thresholds, scope="experience")
    return lint_bullets(ast.bullets, thresholds, scope="all")


def lint_resume_data(data: ResumeData, thresholds: Optional[LengthThresholds] = None) -> Dict[str, BulletLintResult]:
    """Lint the highlights of every experience entry, keyed by entry id."""
    return {
        exp.id: lint_bullets(exp.highlights, thresholds, scope=exp.position or exp.company or exp.id, entry_id=exp.id)
        for exp in data.experience
    }


# ---------------------------------------------------------------------------
# Report formatting
# ---------------------------------------------------------------------------


def format_bullet_report(result: BulletLintResult) -> str:
    """Render a :class:`BulletLintResult` as a human-readable report."""
    lines = [
        f"## Bullet Score: {result.score}/100 {_score_to_grade(result.score)}",
        _score_bar(result.score),
        "",
        f"Checked {len(result.findings)} bullet(s) ({result.scope}): "
        f"{result.clean_count} clean, {result.error_count} error(s), {result.warning_count} warning(s)",
    ]

    flagged = [f for f in result.findings if not f.is_clean]
    if not flagged:
        lines.append("")
        lines.append("No issues found. Bullets look good!")
        return "\n".join(lines)

    lines.append("")
    lines.append("### Findings")
    for finding in flagged:
        prefix = f"[{finding.entry_id}] " if finding.entry_id else ""
        lines.append(f"{finding.index + 1}. {prefix}{finding.text.strip()}")
        for issue in finding.issues:
            lines.append(f"   - [{issue.severity.value}:{issue.type.value}] {issue.message}")
        if finding.suggestion:
            lines.append(f"   - Suggested: {finding.suggestion}")

    return "\n".join(lines)


def _suggest(text: str) -> Optional[str]:
    corrected = suggest_tense_correction(text)
    return format_bullet_text(corrected) if corrected is not None else None


def _score_to_grade(score: int) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 60:
        return "Fair"
    else:
        return "Needs Work"


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"
