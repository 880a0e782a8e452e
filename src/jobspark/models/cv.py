"""CV data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_to_model_list(v: Any) -> list[Any]:
    """Coerce a missing list (null in stored records) to an empty list."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return list(v)
    return [v]


class CVSection(BaseModel):
    """A titled CV section whose content is Markdown."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str = ""


class ParsedCV(BaseModel):
    """CV segmented from a Markdown document."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    contact: str = ""
    sections: tuple[CVSection, ...] = ()

    def section(self, title: str) -> CVSection | None:
        """Return the first section with the given title (case-insensitive)."""
        wanted = title.strip().lower()
        for section in self.sections:
            if section.title.strip().lower() == wanted:
                return section
        return None


class UserProfile(BaseModel):
    """Personal information of a job seeker."""

    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    professional_summary: str | None = None
    profile_image_url: str | None = None


class Experience(BaseModel):
    """Work experience entry."""

    title: str
    company: str
    location: str | None = None
    start_date: str = ""
    end_date: str | None = None
    is_current: bool = False
    description: str | None = None
    created_at: datetime | None = None


class Education(BaseModel):
    """Education entry."""

    degree: str
    institution: str
    location: str | None = None
    graduation_year: str | None = None
    description: str | None = None
    created_at: datetime | None = None


class Skill(BaseModel):
    """Skill with a self-assessed level."""

    name: str
    level: str = "Intermediate"
    created_at: datetime | None = None

    @property
    def is_strong(self) -> bool:
        return self.level in ("Advanced", "Expert")


class GeneratedCV(BaseModel):
    """A CV document produced for the user."""

    title: str
    content: str = ""
    job_description: str | None = None
    version: int = 1
    created_at: datetime | None = None


class StructuredCV(BaseModel):
    """Structured representation of a CV, as edited in the CV builder."""

    personal_info: UserProfile = Field(default_factory=UserProfile)
    experiences: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)

    @field_validator("experiences", "education", "skills", mode="before")
    @classmethod
    def coerce_model_lists(cls, v: Any) -> list[Any]:
        return _coerce_to_model_list(v)
