"""Data models for JobSpark."""

from jobspark.models.career import CareerProfile, InterviewSession, JobPosting, SavedJob
from jobspark.models.cv import (
    CVSection,
    Education,
    Experience,
    GeneratedCV,
    ParsedCV,
    Skill,
    StructuredCV,
    UserProfile,
)

__all__ = [
    "CVSection",
    "CareerProfile",
    "Education",
    "Experience",
    "GeneratedCV",
    "InterviewSession",
    "JobPosting",
    "ParsedCV",
    "SavedJob",
    "Skill",
    "StructuredCV",
    "UserProfile",
]
