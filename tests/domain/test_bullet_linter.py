"""Tests for document-level bullet linting and reports."""

from __future__ import annotations

import pytest

from resume_bullets.domain import (
    IssueType,
    LengthThresholds,
    format_bullet_report,
    lint_bullets,
    lint_resume_bullets,
    lint_resume_data,
    merge_results,
)
from resume_bullets.domain.linting import LineKind, classify_line, parse_resume_ast
from resume_bullets.models import Experience, ResumeData

RESUME = """# Jane Smith
jane@example.com | (555) 123-4567

## Summary
Engineer who likes tidy bullets.

## Experience

### Senior Software Engineer — Acme Corp
Jan 2020 - Present
- Led a team of 5 engineers to deliver a microservices platform
- building automated testing framework using Python.
- Reduced deployment time by 60%

### Software Engineer — StartupCo
* Manage  PostgreSQL tuning

## Projects
- write helper scripts.

## Skills
- Python
"""


class TestParseResumeAst:
    def test_experience_bullets_include_sub_headings(self):
        ast = parse_resume_ast(RESUME)
        assert ast.has_experience_section
        assert ast.get_experience_bullets() == [
            "Led a team of 5 engineers to deliver a microservices platform",
            "building automated testing framework using Python.",
            "Reduced deployment time by 60%",
            "Manage  PostgreSQL tuning",
        ]

    def test_other_sections_kept_separately(self):
        ast = parse_resume_ast(RESUME)
        assert ast.bullets_by_section["projects"] == ["write helper scripts."]
        assert "Python" in ast.bullets

    def test_uppercase_headings_and_synonyms(self):
        ast = parse_resume_ast("WORK HISTORY\n• Built a thing\n\nEDUCATION\n- BS")
        assert ast.get_experience_bullets() == ["Built a thing"]
        assert ast.bullets_by_section["education"] == ["BS"]

    def test_capitalised_bullets_stay_bullets(self):
        ast = parse_resume_ast("## Experience\n- LED TEAM OF FIVE\n- build the platform.")
        assert ast.get_experience_bullets() == ["LED TEAM OF FIVE", "build the platform."]
        assert set(ast.bullets_by_section) == {"root", "experience"}

    def test_caps_employer_lines_are_entry_titles(self):
        ast = parse_resume_ast("EXPERIENCE\nACME CORP\n- build the platform.\n- managed  budget\n\nSKILLS\n- Python")
        assert ast.get_experience_bullets() == ["build the platform.", "managed  budget"]
        assert "ACME CORP" in ast.sections["experience"]
        assert ast.bullets_by_section["skills"] == ["Python"]

    def test_plain_section_names_with_colon(self):
        ast = parse_resume_ast("Work Experience:\n- Led a team\nEducation\n- BS")
        assert ast.get_experience_bullets() == ["Led a team"]
        assert ast.bullets_by_section["education"] == ["BS"]

    def test_caps_line_outside_known_section_starts_section(self):
        ast = parse_resume_ast("JANE SMITH\nLEADERSHIP\n- Ran the club")
        assert ast.bullets_by_section["leadership"] == ["Ran the club"]


class TestClassifyLine:
    @pytest.mark.parametrize(
        "line, section, expected",
        [
            ("", "experience", LineKind.BLANK),
            ("- SHIPPED V2", "root", LineKind.BULLET),
            ("1. Reduced costs", "experience", LineKind.BULLET),
            ("## Education", "experience", LineKind.SECTION),
            ("### Education", "experience", LineKind.SECTION),
            ("### Engineer - Acme", "experience", LineKind.ENTRY),
            ("### Engineer - Acme", "root", LineKind.SECTION),
            ("ACME CORP", "experience", LineKind.ENTRY),
            ("PROFESSIONAL EXPERIENCE", "skills", LineKind.SECTION),
            ("Jan 2020 - Present", "experience", LineKind.TEXT),
            ("-", "experience", LineKind.TEXT),
        ],
    )
    def test_kinds(self, line, section, expected):
        assert classify_line(line, section)[0] is expected

    def test_payloads(self):
        assert classify_line("  * tuned  queries", "experience") == (LineKind.BULLET, "tuned  queries")
        assert classify_line("WORK HISTORY") == (LineKind.SECTION, "experience")


class TestLintBullets:
    def test_skips_blank_and_keeps_index(self):
        result = lint_bullets(["Led a team", "", "building things."])
        assert [f.index for f in result.findings] == [0, 2]
        assert result.findings[1].suggestion == "Built things"

    def test_counts_and_score(self):
        result = lint_bullets(["Led a team", "A" * 160, "led a team."])
        assert result.clean_count == 1
        assert result.error_count == 1
        assert result.warning_count == 2
        assert result.issue_counts[IssueType.PUNCTUATION.value] == 2
        assert result.issue_counts[IssueType.LENGTH.value] == 1
        # (100 + 85 + 90) / 3
        assert result.score == 92
        assert not result.passed

    def test_empty_batch(self):
        result = lint_bullets([])
        assert result.score == 100
        assert result.passed

    def test_thresholds_passed_through(self):
        result = lint_bullets(["A" * 30], LengthThresholds(warning=10, max=20))
        assert result.error_count == 1


class TestLintResumeBullets:
    def test_strict_scope_only_experience(self):
        result = lint_resume_bullets(RESUME)
        assert result.scope == "experience"
        assert len(result.findings) == 4
        assert all("helper" not in f.text for f in result.findings)

    def test_loose_scope_lints_everything(self):
        result = lint_resume_bullets(RESUME, strict_scope=False)
        assert result.scope == "all"
        assert any("helper" in f.text for f in result.findings)

    def test_falls_back_when_experience_missing(self):
        result = lint_resume_bullets("## Projects\n- build a tool")
        assert result.scope == "all"
        assert result.findings[0].suggestion == "Built a tool"

    def test_caps_entry_titles_do_not_hide_experience(self):
        result = lint_resume_bullets("EXPERIENCE\nACME CORP\n- build the platform.\n- managed  budget\n\nSKILLS\n- Python")
        assert result.scope == "experience"
        assert [f.text for f in result.findings] == ["build the platform.", "managed  budget"]
        assert result.score < 100


class TestLintResumeData:
    def test_keyed_by_entry(self):
        data = ResumeData(
            experience=[
                Experience(id="a", position="Engineer", highlights=["Led migration", "manage budget."]),
                Experience(id="b", company="Acme", highlights=[]),
            ]
        )
        results = lint_resume_data(data)
        assert set(results) == {"a", "b"}
        assert results["a"].scope == "Engineer"
        assert results["a"].warning_count == 3
        assert results["b"].findings == []

    def test_findings_carry_entry_id(self):
        data = ResumeData(
            experience=[
                Experience(id="a", highlights=["Led migration", "manage budget."]),
                Experience(id="b", highlights=["build tools"]),
            ]
        )
        merged = merge_results(lint_resume_data(data).values(), scope="experience")
        assert [(f.entry_id, f.index) for f in merged.findings] == [("a", 0), ("a", 1), ("b", 0)]
        assert merged.findings[2].suggestion == "Built tools"
        assert merged.to_dict()["findings"][1]["entry_id"] == "a"


class TestFormatReport:
    def test_clean_report(self):
        report = format_bullet_report(lint_bullets(["Led a team"]))
        assert "Bullet Score: 100/100 Excellent" in report
        assert "No issues found" in report

    def test_report_lists_findings_and_suggestions(self):
        report = format_bullet_report(lint_resume_bullets(RESUME))
        assert "### Findings" in report
        assert "[warning:tense]" in report
        assert "[warning:spacing]" in report
        assert "   - Suggested: Built automated testing framework using Python" in report.splitlines()
        assert "Led a team of 5" not in report
