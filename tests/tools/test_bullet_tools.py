"""Tests for the bullet check and bullet linter tools."""

from __future__ import annotations

import json

import pytest

from resume_bullets.config import LintConfig
from resume_bullets.observability import LintObserver
from resume_bullets.tools import BulletCheckTool, BulletLinterTool


@pytest.fixture
def observer():
    return LintObserver()


@pytest.fixture
def linter(tmp_path, observer):
    return BulletLinterTool(workspace_dir=str(tmp_path), observer=observer)


def _write(tmp_path, name, content):
    p = tmp_path / name
    p.write_text(content, encoding="utf-8")
    return p


RESUME = """# Sam Lee
sam@example.com

## Experience
### Engineer — Acme
- Led the payments migration, cutting failures by 22%
- develop internal tooling for releases.

## Projects
- build a toy compiler.
"""


class TestBulletCheckTool:
    @pytest.mark.asyncio
    async def test_reports_issues_and_suggestion(self, observer):
        tool = BulletCheckTool(observer=observer)
        result = await tool.execute(text="  building new features.")
        assert result.success
        assert result.data["formatted"] == "Building new features"
        assert result.data["suggestion"] == "Built new features"
        assert [i["type"] for i in result.data["issues"]] == ["tense", "punctuation", "punctuation"]
        assert "Suggested: Built new features" in result.output.splitlines()
        assert observer.get_session_stats()["issues_reported"] == 3

    @pytest.mark.asyncio
    async def test_clean_bullet(self):
        result = await BulletCheckTool().execute(text="Led a team of engineers")
        assert result.success
        assert result.data["issues"] == []
        assert result.data["suggestion"] is None
        assert "No issues found." in result.output

    @pytest.mark.asyncio
    async def test_uses_configured_thresholds(self):
        tool = BulletCheckTool(config=LintConfig(warning_length=5, max_length=10))
        result = await tool.execute(text="Led a large team")
        assert result.data["length"]["status"] == "error"
        assert result.data["issues"][0]["severity"] == "error"

    def test_schema(self):
        schema = BulletCheckTool().to_schema()
        assert schema["function"]["name"] == "bullet_check"
        assert schema["function"]["parameters"]["required"] == ["text"]
        assert "required" not in schema["function"]["parameters"]["properties"]["text"]


class TestBulletLinterTool:
    @pytest.mark.asyncio
    async def test_markdown_experience_only(self, linter, tmp_path):
        _write(tmp_path, "resume.md", RESUME)
        result = await linter.execute(path="resume.md")
        assert result.success
        assert result.data["scope"] == "experience"
        assert result.data["bullet_count"] == 2
        assert result.data["warning_count"] == 3
        assert "   - Suggested: Developed internal tooling for releases" in result.output.splitlines()

    @pytest.mark.asyncio
    async def test_loose_scope(self, linter, tmp_path):
        _write(tmp_path, "resume.md", RESUME)
        result = await linter.execute(path="resume.md", strict_scope=False)
        assert result.data["bullet_count"] == 3

    @pytest.mark.asyncio
    async def test_json_resume_data(self, linter, tmp_path):
        payload = {
            "contact": {"fullName": "Sam Lee"},
            "experience": [
                {"id": "1", "company": "Acme", "highlights": ["Led migration", "manage budgets"]},
                {"id": "2", "company": "Beta", "highlights": ["A" * 160]},
            ],
        }
        _write(tmp_path, "resume.json", json.dumps(payload))
        result = await linter.execute(path="resume.json")
        assert result.success
        assert result.data["bullet_count"] == 3
        assert result.data["error_count"] == 1
        assert [(f["entry_id"], f["index"]) for f in result.data["findings"]] == [("1", 0), ("1", 1), ("2", 0)]
        assert "1. [2] " in result.output

    @pytest.mark.asyncio
    async def test_invalid_json(self, linter, tmp_path, observer):
        _write(tmp_path, "resume.json", "{not json")
        result = await linter.execute(path="resume.json")
        assert not result.success
        assert result.error
        assert observer.get_session_stats()["errors"] == 1

    @pytest.mark.asyncio
    async def test_invalid_resume_shape(self, linter, tmp_path):
        _write(tmp_path, "resume.json", json.dumps({"experience": [{"highlights": "not a list"}]}))
        result = await linter.execute(path="resume.json")
        assert not result.success
        assert "Invalid resume data" in result.error

    @pytest.mark.asyncio
    async def test_missing_file(self, linter):
        result = await linter.execute(path="missing.md")
        assert not result.success
        assert "File not found" in result.to_message()

    @pytest.mark.asyncio
    async def test_absolute_path(self, tmp_path):
        path = _write(tmp_path, "resume.md", RESUME)
        result = await BulletLinterTool(workspace_dir="/nonexistent").execute(path=str(path))
        assert result.success
