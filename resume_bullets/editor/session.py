"""Session-scoped editor state for one resume being edited.

The session is created by the UI root, passed to whatever renders or edits
the resume, and dropped when editing ends. Bullets go through the
normalizer when they are committed, never while they are being typed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TypeVar

from pydantic import BaseModel

from ..domain.bullet_format import (
    FormatIssue,
    LengthThresholds,
    analyze_bullet,
    format_bullet_text,
    suggest_tense_correction,
)
from ..models import (
    ContactInfo,
    Education,
    Experience,
    ResumeData,
    SectionConfig,
    SectionKind,
    Skill,
    TemplateKind,
    section_title,
)

logger = logging.getLogger(__name__)

MIN_ZOOM = 50
MAX_ZOOM = 200
DEFAULT_ZOOM = 100

DEFAULT_SECTION_KINDS = (
    SectionKind.CONTACT,
    SectionKind.SUMMARY,
    SectionKind.EXPERIENCE,
    SectionKind.EDUCATION,
    SectionKind.SKILLS,
)

_M = TypeVar("_M", bound=BaseModel)


def default_sections() -> List[SectionConfig]:
    return [
        SectionConfig(kind=kind, title=section_title(kind), visible=True, order=i)
        for i, kind in enumerate(DEFAULT_SECTION_KINDS)
    ]


def sample_resume() -> ResumeData:
    """Starter content shown in a fresh editor."""
    return ResumeData(
        contact=ContactInfo(
            full_name="Alex Johnson",
            title="Senior Product Designer",
            email="alex.johnson@email.com",
            phone="(555) 123-4567",
            location="San Francisco, CA",
            linkedin="linkedin.com/in/alexjohnson",
            website="alexjohnson.design",
        ),
        summary=(
            "Product designer with 8+ years of experience crafting user-centered digital experiences "
            "for startups and enterprise clients."
        ),
        experience=[
            Experience(
                id="1",
                company="TechCorp Inc.",
                position="Senior Product Designer",
                start_date="2021",
                end_date="Present",
                description="Lead designer for the core product team.",
                highlights=[
                    "Led redesign of flagship product, increasing user engagement by 40%",
                    "Built and maintained design system used by 50+ designers",
                    "Conducted user research with 200+ participants",
                ],
            ),
            Experience(
                id="2",
                company="StartupXYZ",
                position="Product Designer",
                start_date="2018",
                end_date="2021",
                description="Full-stack designer responsible for product design from concept to launch.",
                highlights=[
                    "Designed MVP that helped secure $5M Series A funding",
                    "Created brand identity and marketing materials",
                    "Established design culture and hiring practices",
                ],
            ),
        ],
        education=[
            Education(
                id="1",
                institution="University of California, Berkeley",
                degree="Bachelor of Arts",
                field="Cognitive Science",
                start_date="2010",
                end_date="2014",
                gpa="3.8",
            )
        ],
        skills=[
            Skill(id="1", name="Figma", category="Design Tools"),
            Skill(id="2", name="User Research", category="Skills"),
            Skill(id="3", name="HTML/CSS", category="Technical"),
        ],
    )


@dataclass
class EditorSession:
    """Resume data plus the UI state around it.

    All updates go through methods so renderers only ever read fields.
    Unknown entry ids raise ``KeyError``.
    """

    data: ResumeData = field(default_factory=ResumeData)
    sections: List[SectionConfig] = field(default_factory=default_sections)
    template: TemplateKind = TemplateKind.CLASSIC
    editing_field: Optional[str] = None
    zoom: int = DEFAULT_ZOOM
    thresholds: Optional[LengthThresholds] = None

    @classmethod
    def with_defaults(cls, thresholds: Optional[LengthThresholds] = None) -> "EditorSession":
        return cls(data=sample_resume(), thresholds=thresholds)

    # -- contact / summary -------------------------------------------------

    def update_contact(self, **changes: Any) -> ContactInfo:
        self.data.contact = _patched(self.data.contact, changes)
        return self.data.contact

    def update_summary(self, summary: str) -> None:
        self.data.summary = summary

    # -- experience ----------------------------------------------------------

    def add_experience(self, **fields: Any) -> Experience:
        entry = Experience(**fields)
        self.data.experience.append(entry)
        return entry

    def update_experience(self, exp_id: str, **changes: Any) -> Experience:
        idx = _index_of(self.data.experience, exp_id)
        self.data.experience[idx] = _patched(self.data.experience[idx], changes)
        return self.data.experience[idx]

    def remove_experience(self, exp_id: str) -> None:
        del self.data.experience[_index_of(self.data.experience, exp_id)]

    # -- education -----------------------------------------------------------

    def add_education(self, **fields: Any) -> Education:
        entry = Education(**fields)
        self.data.education.append(entry)
        return entry

    def update_education(self, edu_id: str, **changes: Any) -> Education:
        idx = _index_of(self.data.education, edu_id)
        self.data.education[idx] = _patched(self.data.education[idx], changes)
        return self.data.education[idx]

    def remove_education(self, edu_id: str) -> None:
        del self.data.education[_index_of(self.data.education, edu_id)]

    # -- skills --------------------------------------------------------------

    def add_skill(self, name: str, category: Optional[str] = None) -> Skill:
        skill = Skill(name=name, category=category)
        self.data.skills.append(skill)
        return skill

    def update_skills(self, skills: Sequence[Skill]) -> None:
        self.data.skills = list(skills)

    def remove_skill(self, skill_id: str) -> None:
        del self.data.skills[_index_of(self.data.skills, skill_id)]

    # -- highlights ----------------------------------------------------------

    def add_highlight(self, exp_id: str, raw: str = "") -> int:
        """Append a bullet to an experience entry and return its index."""
        highlights = self._highlights(exp_id)
        highlights.append(format_bullet_text(raw))
        return len(highlights) - 1

    def commit_highlight(self, exp_id: str, index: int, raw: str) -> str:
        """Store the normalized form of *raw* at *index*."""
        highlights = self._highlights(exp_id)
        _check_index(highlights, index)
        highlights[index] = format_bullet_text(raw)
        return highlights[index]

    def remove_highlight(self, exp_id: str, index: int) -> None:
        highlights = self._highlights(exp_id)
        _check_index(highlights, index)
        del highlights[index]

    def apply_tense_correction(self, exp_id: str, index: int) -> Optional[str]:
        """Replace a bullet with its past-tense rewrite; ``None`` when nothing applies."""
        highlights = self._highlights(exp_id)
        _check_index(highlights, index)
        corrected = suggest_tense_correction(highlights[index])
        if corrected is None:
            return None
        highlights[index] = format_bullet_text(corrected)
        logger.debug("Applied tense correction to %s[%d]", exp_id, index)
        return highlights[index]

    def highlight_issues(self, exp_id: str) -> List[List[FormatIssue]]:
        return [analyze_bullet(text, self.thresholds) for text in self._highlights(exp_id)]

    # -- layout --------------------------------------------------------------

    def reorder_sections(self, keys: Sequence[str]) -> None:
        """Reorder sections by key; *keys* must be a permutation of the current keys."""
        by_key: Dict[str, SectionConfig] = {s.key: s for s in self.sections}
        if sorted(keys) != sorted(by_key):
            raise ValueError(f"Section order must list each section exactly once: {list(keys)}")
        self.sections = [by_key[key].model_copy(update={"order": i}) for i, key in enumerate(keys)]

    def toggle_section_visibility(self, key: str) -> bool:
        for i, section in enumerate(self.sections):
            if section.key == key:
                self.sections[i] = section.model_copy(update={"visible": not section.visible})
                return self.sections[i].visible
        raise KeyError(key)

    def visible_sections(self) -> List[SectionConfig]:
        return sorted((s for s in self.sections if s.visible), key=lambda s: s.order)

    def set_template(self, template: TemplateKind) -> None:
        self.template = TemplateKind(template)

    def set_editing_field(self, name: Optional[str]) -> None:
        self.editing_field = name

    def set_zoom(self, zoom: int) -> int:
        self.zoom = max(MIN_ZOOM, min(MAX_ZOOM, int(zoom)))
        return self.zoom

    def _highlights(self, exp_id: str) -> List[str]:
        return self.data.experience[_index_of(self.data.experience, exp_id)].highlights


def _index_of(entries: Sequence[Any], entry_id: str) -> int:
    for i, entry in enumerate(entries):
        if entry.id == entry_id:
            return i
    raise KeyError(entry_id)


def _check_index(highlights: List[str], index: int) -> None:
    if not 0 <= index < len(highlights):
        raise IndexError(f"Highlight index {index} out of range (0-{len(highlights) - 1})")


def _patched(model: _M, changes: Dict[str, Any]) -> _M:
    unknown = set(changes) - set(type(model).model_fields)
    if unknown:
        raise ValueError(f"Unknown {type(model).__name__} field(s): {', '.join(sorted(unknown))}")
    return type(model).model_validate({**model.model_dump(), **changes})
