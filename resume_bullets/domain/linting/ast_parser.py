"""Section-aware reader for plain-text and markdown resumes.

Each line is classified before it is placed. Bullet markers win over
everything else, so ``- LED TEAM OF FIVE`` is a bullet even though it is
written in capitals. Inside a recognised section, headings that do not name
another section (``### Engineer - Acme``, ``ACME CORP``) are entry titles and
keep their bullets in the enclosing section.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

ROOT_SECTION = "root"

EXPERIENCE_SECTION_KEYWORDS = {
    "experience",
    "professional experience",
    "work experience",
    "work history",
    "employment",
    "employment history",
    "relevant experience",
    "career history",
}

# Headings that open a new top-level section wherever they appear.
KNOWN_SECTIONS = {
    "summary",
    "profile",
    "professional summary",
    "objective",
    "education",
    "skills",
    "technical skills",
    "core competencies",
    "projects",
    "certifications",
    "awards",
    "honors",
    "publications",
    "volunteering",
    "volunteer experience",
    "languages",
    "interests",
} | EXPERIENCE_SECTION_KEYWORDS

_BULLET_LINE_RE = re.compile(r"^\s*(?:[-*•→]|\d+\.)\s+(\S.*)$")
_MARKDOWN_HEADING_RE = re.compile(r"^(#{1,6})\s*(.*?)\s*#*$")
_MAX_CAPS_HEADING_WORDS = 6


class LineKind(str, Enum):
    BLANK = "blank"
    BULLET = "bullet"
    SECTION = "section"
    ENTRY = "entry"
    TEXT = "text"


@dataclass
class ResumeAst:
    """Sections and bullets extracted from resume text."""

    text: str
    lines: List[str]
    sections: Dict[str, List[str]]
    bullets_by_section: Dict[str, List[str]]

    @property
    def bullets(self) -> List[str]:
        merged: List[str] = []
        for values in self.bullets_by_section.values():
            merged.extend(values)
        return merged

    @property
    def has_experience_section(self) -> bool:
        return "experience" in self.sections

    def get_experience_bullets(self) -> List[str]:
        return list(self.bullets_by_section.get("experience", []))


def normalize_section_name(raw: str) -> str:
    """Lower-case, collapse spaces, drop a trailing colon and fold experience synonyms."""
    section = re.sub(r"\s+", " ", raw.strip().rstrip(":")).lower()
    if section in EXPERIENCE_SECTION_KEYWORDS:
        return "experience"
    return section


def classify_line(line: str, current_section: str = ROOT_SECTION) -> Tuple[LineKind, str]:
    """Classify one line and return it with its payload.

    The payload is the bullet text for bullets, the normalized section key
    for section headings, the title for entry headings and the stripped line
    otherwise.
    """
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK, ""

    bullet = _BULLET_LINE_RE.match(line)
    if bullet:
        return LineKind.BULLET, bullet.group(1).strip()

    in_section = current_section != ROOT_SECTION
    in_known_section = current_section in KNOWN_SECTIONS
    heading = _MARKDOWN_HEADING_RE.match(stripped)
    if heading:
        title = heading.group(2)
        if not title:
            return LineKind.TEXT, stripped
        key = normalize_section_name(title)
        if len(heading.group(1)) >= 3 and in_section and key not in KNOWN_SECTIONS:
            return LineKind.ENTRY, title
        return LineKind.SECTION, key

    key = normalize_section_name(stripped)
    if key in KNOWN_SECTIONS:
        return LineKind.SECTION, key

    if _looks_like_caps_heading(stripped):
        if in_known_section:
            return LineKind.ENTRY, stripped
        return LineKind.SECTION, key

    return LineKind.TEXT, stripped


def parse_resume_ast(content: str) -> ResumeAst:
    """Group resume lines and bullets by the section they belong to."""
    lines = [line.rstrip() for line in content.splitlines()]
    sections: Dict[str, List[str]] = {ROOT_SECTION: []}
    bullets_by_section: Dict[str, List[str]] = {ROOT_SECTION: []}
    current = ROOT_SECTION

    for raw_line in lines:
        kind, value = classify_line(raw_line, current)
        if kind is LineKind.SECTION:
            current = value
            sections.setdefault(current, [])
            bullets_by_section.setdefault(current, [])
            continue

        sections[current].append("" if kind is LineKind.BLANK else raw_line)
        if kind is LineKind.BULLET:
            bullets_by_section[current].append(value)

    return ResumeAst(
        text=content,
        lines=lines,
        sections=sections,
        bullets_by_section=bullets_by_section,
    )


def _looks_like_caps_heading(line: str) -> bool:
    letters = sum(1 for ch in line if ch.isalpha())
    return letters >= 3 and line.isupper() and len(line.split()) <= _MAX_CAPS_HEADING_WORDS
