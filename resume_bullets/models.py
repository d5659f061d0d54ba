"""Resume document models shared by the editor and the document linter.

Field names are snake_case in Python and camelCase on the wire, so data
exported by the browser editor validates as-is.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_entry_id() -> str:
    return uuid.uuid4().hex[:12]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectionKind(str, Enum):
    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    PUBLICATIONS = "publications"
    AWARDS = "awards"
    CUSTOM = "custom"


class TemplateKind(str, Enum):
    CLASSIC = "classic"
    MODERN = "modern"
    MINIMAL = "minimal"
    TWO_COLUMN = "two-column"


_SECTION_TITLES = {
    SectionKind.CONTACT: "Contact",
    SectionKind.SUMMARY: "Summary",
    SectionKind.EXPERIENCE: "Experience",
    SectionKind.EDUCATION: "Education",
    SectionKind.SKILLS: "Skills",
    SectionKind.CERTIFICATIONS: "Certifications",
    SectionKind.PUBLICATIONS: "Publications",
    SectionKind.AWARDS: "Awards",
    SectionKind.CUSTOM: "Custom Section",
}

_TEMPLATE_LABELS = {
    TemplateKind.CLASSIC: "Classic",
    TemplateKind.MODERN: "Modern",
    TemplateKind.MINIMAL: "Minimal",
    TemplateKind.TWO_COLUMN: "Two Column",
}


def section_title(kind: SectionKind) -> str:
    """Default heading for a section kind."""
    return _SECTION_TITLES[kind]


def template_label(kind: TemplateKind) -> str:
    return _TEMPLATE_LABELS[kind]


class ContactInfo(_ResumeModel):
    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    website: Optional[str] = None


class Experience(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    highlights: list[str] = Field(default_factory=list)


class Education(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None


class Skill(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    name: str
    category: Optional[str] = None


class Certification(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: Optional[str] = None
    credential_id: Optional[str] = None


class Publication(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    title: str = ""
    publisher: str = ""
    date: str = ""
    url: Optional[str] = None
    description: Optional[str] = None


class Award(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    title: str = ""
    issuer: str = ""
    date: str = ""
    description: Optional[str] = None


class CustomSectionItem(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    title: str = ""
    subtitle: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None


class CustomSection(_ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    title: str = ""
    items: list[CustomSectionItem] = Field(default_factory=list)


class ResumeData(_ResumeModel):
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    publications: list[Publication] = Field(default_factory=list)
    awards: list[Award] = Field(default_factory=list)
    custom_sections: list[CustomSection] = Field(default_factory=list)


class SectionConfig(_ResumeModel):
    """Placement of one section in the rendered resume.

    Built-in sections are identified by *kind*; custom sections use
    ``SectionKind.CUSTOM`` plus the ``custom_id`` of their
    :class:`CustomSection`.
    """

    kind: SectionKind
    title: str = ""
    visible: bool = True
    order: int = 0
    custom_id: Optional[str] = None

    @property
    def key(self) -> str:
        if self.kind is SectionKind.CUSTOM:
            return f"custom-{self.custom_id}"
        return self.kind.value

    @property
    def is_custom(self) -> bool:
        return self.kind is SectionKind.CUSTOM
