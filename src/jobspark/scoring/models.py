"""Pydantic models for career readiness and job relevance scoring."""

from typing import Literal

from pydantic import BaseModel, Field

from jobspark.models.career import JobPosting

ScoreStatus = Literal["excellent", "good", "needs-work"]
Priority = Literal["high", "medium", "low"]


class CategoryScore(BaseModel):
    """Score for one readiness category (profile, CV, interview, market)."""

    name: str
    score: int = Field(ge=0, le=100)
    max_score: int = 100
    status: ScoreStatus
    description: str
    improvements: list[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    """Suggested next step shown on the dashboard."""

    title: str
    description: str
    impact: str
    action: str
    href: str
    priority: Priority


class CareerScoreReport(BaseModel):
    """Full career readiness report."""

    overall: int = Field(ge=0, le=100)
    categories: list[CategoryScore]
    recommendations: list[Recommendation] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list)
    strongest_skills: list[str] = Field(default_factory=list)
    average_interview_score: int = 0
    last_activity: str = "No recent activity"
    profile_completion: int = Field(default=0, ge=0, le=100)

    def category(self, name: str) -> CategoryScore | None:
        """Look up a category score by name."""
        return next((c for c in self.categories if c.name == name), None)


class RankedJob(BaseModel):
    """A job posting with its relevance to the user."""

    job: JobPosting
    match: int = Field(ge=0, le=100)
