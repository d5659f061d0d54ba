"""Bullet check and resume bullet linter tools."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..config import LintConfig
from ..domain import (
    analyze_bullet,
    format_bullet_report,
    format_bullet_text,
    get_bullet_length_status,
    lint_resume_bullets,
    lint_resume_data,
    merge_results,
    suggest_tense_correction,
)
from ..domain.bullet_linter import BulletLintResult
from ..models import ResumeData
from ..observability import LintObserver
from .base import BaseTool, ToolResult

logger = logging.getLogger(__name__)


class BulletCheckTool(BaseTool):
    """Normalize one achievement bullet and report its style issues."""

    name = "bullet_check"
    description = """Check a single resume achievement bullet. Returns the normalized text,
style issues (length, tense, punctuation, spacing) and a past-tense rewrite when the
bullet opens with a present-tense verb."""
    parameters = {
        "text": {
            "type": "string",
            "description": "The bullet text to check",
            "required": True,
        },
    }

    async def execute(self, text: str) -> ToolResult:
        started = time.perf_counter()
        thresholds = self.config.thresholds

        issues = analyze_bullet(text, thresholds)
        formatted = format_bullet_text(text)
        corrected = suggest_tense_correction(text)
        suggestion = format_bullet_text(corrected) if corrected is not None else None
        length = get_bullet_length_status(text, thresholds)

        lines = [f"Formatted: {formatted}", f"Length: {length.length}/{length.max} ({length.status.value})"]
        if issues:
            lines.append("Issues:")
            lines.extend(f"- [{i.severity.value}:{i.type.value}] {i.message}" for i in issues)
        else:
            lines.append("No issues found.")
        if suggestion:
            lines.append(f"Suggested: {suggestion}")

        result = ToolResult(
            success=True,
            output="\n".join(lines),
            data={
                "formatted": formatted,
                "issues": [i.to_dict() for i in issues],
                "suggestion": suggestion,
                "length": length.to_dict(),
            },
        )
        return self._record({"text": text[:80]}, result, started, issue_count=len(issues))


class BulletLinterTool(BaseTool):
    """Lint every achievement bullet of a resume file."""

    name = "lint_bullets"
    description = """Lint the achievement bullets of a resume file (.md, .txt or JSON resume data).
Returns a 0-100 bullet score with per-bullet issues and suggested tense corrections.
By default only the Experience section of markdown resumes is checked."""
    parameters = {
        "path": {
            "type": "string",
            "description": "Path to the resume file to lint",
            "required": True,
        },
        "strict_scope": {
            "type": "boolean",
            "description": "Only lint Experience bullets (default from config)",
        },
    }

    def __init__(
        self,
        workspace_dir: str = ".",
        config: Optional[LintConfig] = None,
        observer: Optional[LintObserver] = None,
    ):
        super().__init__(config=config, observer=observer)
        self.workspace_dir = Path(workspace_dir).resolve()

    async def execute(self, path: str, strict_scope: Optional[bool] = None) -> ToolResult:
        started = time.perf_counter()
        args = {"path": path, "strict_scope": strict_scope}
        try:
            file_path = self._resolve_path(path)
            if not file_path.exists():
                missing = ToolResult(success=False, output="", error=f"File not found: {path}")
                return self._record(args, missing, started)

            content = file_path.read_text(encoding="utf-8")
            scope = self.config.strict_scope if strict_scope is None else strict_scope

            if file_path.suffix.lower() == ".json":
                result = self._lint_json(content)
            else:
                result = lint_resume_bullets(content, strict_scope=scope, thresholds=self.config.thresholds)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.debug("Bullet lint failed for %s", path, exc_info=True)
            return self._record(args, ToolResult(success=False, output="", error=str(e)), started)

        issue_count = result.error_count + result.warning_count
        tool_result = ToolResult(success=True, output=format_bullet_report(result), data=result.to_dict())
        return self._record(args, tool_result, started, issue_count=issue_count)

    def _lint_json(self, content: str) -> BulletLintResult:
        """Lint experience highlights of exported resume data, entry by entry."""
        try:
            data = ResumeData.model_validate(json.loads(content))
        except ValidationError as e:
            raise ValueError(f"Invalid resume data: {e.error_count()} validation error(s)") from e

        per_entry = lint_resume_data(data, self.config.thresholds)
        return merge_results(per_entry.values(), scope="experience")

    def _resolve_path(self, path: str) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self.workspace_dir / p
