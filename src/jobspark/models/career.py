"""Job, interview and dashboard models."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from jobspark.models.cv import (
    Education,
    Experience,
    GeneratedCV,
    Skill,
    UserProfile,
    _coerce_to_model_list,
)

JobStatus = Literal["saved", "applied", "interviewing", "offered", "rejected"]


class InterviewSession(BaseModel):
    """A completed mock interview practice session."""

    role: str
    overall_score: float = Field(default=0, ge=0, le=100)
    experience_years: int = 0
    duration_minutes: int = 0
    questions_count: int = 0
    session_type: str = "practice"
    created_at: datetime | None = None


class JobPosting(BaseModel):
    """A job advert returned by a job search."""

    title: str
    company: str
    location: str | None = None
    description: str = ""
    salary_min: int | None = None
    salary_max: int | None = None
    url: str | None = None


class SavedJob(JobPosting):
    """A job the user saved or applied to."""

    status: JobStatus = "saved"
    applied_at: datetime | None = None

    @property
    def has_applied(self) -> bool:
        return self.status != "saved"


class CareerProfile(BaseModel):
    """Everything the career readiness dashboard scores."""

    profile: UserProfile = Field(default_factory=UserProfile)
    experiences: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    cvs: list[GeneratedCV] = Field(default_factory=list)
    interview_sessions: list[InterviewSession] = Field(default_factory=list)

    @field_validator(
        "experiences", "education", "skills", "cvs", "interview_sessions", mode="before"
    )
    @classmethod
    def coerce_model_lists(cls, v: Any) -> list[Any]:
        return _coerce_to_model_list(v)
