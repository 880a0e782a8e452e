"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from jobspark.models.career import CareerProfile, InterviewSession, JobPosting
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

JANE_DOE_CV = (
    "# Jane Doe\n\n### jane@x.com\n\n## Experience\n\nSenior Engineer at Acme"
    "\n\n## Skills\n\n- Go\n- Rust"
)


@pytest.fixture
def now() -> datetime:
    """Fixed clock for date-dependent scoring."""
    return datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def jane_doe_markdown() -> str:
    """Minimal CV with name, contact and two sections."""
    return JANE_DOE_CV


@pytest.fixture
def sample_cv_markdown() -> str:
    """A fuller Markdown CV."""
    return """# John Doe

john.doe@example.com | +27 82 555 0101 | Cape Town

## Professional Summary

Experienced software engineer with 10+ years building scalable systems.

## Experience

**Senior Software Engineer at Tech Corp**
Cape Town | 2020 - Present

- Led team of 5 engineers
- Reduced deployment time by 50%

**Software Engineer at Startup Inc**
Johannesburg | 2015 - 2019

- Built the payments API

## Education

**MSc Computer Science**
University of Cape Town | 2015

## Skills

- Python
- AWS
- Docker
"""


@pytest.fixture
def sample_profile() -> UserProfile:
    """Create a complete UserProfile."""
    return UserProfile(
        full_name="John Doe",
        email="john.doe@example.com",
        phone="+27 82 555 0101",
        location="Cape Town",
        professional_summary="Experienced software engineer building scalable systems.",
        profile_image_url="https://example.com/john.png",
    )


@pytest.fixture
def sample_experiences() -> list[Experience]:
    """Create a current and a past Experience."""
    return [
        Experience(
            title="Senior Software Engineer",
            company="Tech Corp",
            location="Cape Town",
            start_date="2021-01",
            is_current=True,
            description=(
                "Led development of cloud-native applications using Python and AWS. "
                "Mentored five engineers and introduced CI/CD pipelines. "
                "Reduced deployment time by 50% across twelve services."
            ),
            created_at=datetime(2026, 10, 10, 12, 0),
        ),
        Experience(
            title="Software Engineer",
            company="Startup Inc",
            start_date="2017-01",
            end_date="2020-12",
            description="Built APIs",
            created_at=datetime(2026, 1, 5, 9, 0),
        ),
    ]


@pytest.fixture
def sample_education() -> list[Education]:
    """Create a sample Education list."""
    return [
        Education(
            degree="MSc Computer Science",
            institution="University of Cape Town",
            graduation_year="2015",
            description="Thesis on distributed systems",
        )
    ]


@pytest.fixture
def sample_skills() -> list[Skill]:
    """Five skills, two of them strong."""
    return [
        Skill(name="Python", level="Expert"),
        Skill(name="React", level="Advanced"),
        Skill(name="Docker", level="Intermediate"),
        Skill(name="SQL", level="Intermediate"),
        Skill(name="Rust", level="Beginner"),
    ]


@pytest.fixture
def sample_structured_cv(
    sample_profile: UserProfile,
    sample_experiences: list[Experience],
    sample_education: list[Education],
    sample_skills: list[Skill],
) -> StructuredCV:
    """Create a sample StructuredCV."""
    return StructuredCV(
        personal_info=sample_profile,
        experiences=sample_experiences,
        education=sample_education,
        skills=sample_skills,
    )


@pytest.fixture
def sample_career_profile(
    sample_profile: UserProfile,
    sample_experiences: list[Experience],
    sample_education: list[Education],
    sample_skills: list[Skill],
) -> CareerProfile:
    """A well-filled career profile with recent interview practice."""
    return CareerProfile(
        profile=sample_profile,
        experiences=sample_experiences,
        education=sample_education,
        skills=sample_skills,
        cvs=[
            GeneratedCV(title="Backend CV", created_at=datetime(2026, 9, 1)),
            GeneratedCV(title="Platform CV", created_at=datetime(2026, 9, 20)),
        ],
        interview_sessions=[
            InterviewSession(
                role="Backend Engineer", overall_score=80, created_at=datetime(2026, 10, 16, 12)
            ),
            InterviewSession(
                role="Backend Engineer", overall_score=90, created_at=datetime(2026, 10, 1, 12)
            ),
            InterviewSession(
                role="Tech Lead", overall_score=70, created_at=datetime(2026, 9, 25, 12)
            ),
        ],
    )


@pytest.fixture
def sample_jobs() -> list[JobPosting]:
    """Job postings of varying relevance."""
    return [
        JobPosting(
            title="Data Analyst",
            company="Retail Co",
            location="Durban",
            description="Excel and SQL reporting.",
        ),
        JobPosting(
            title="Senior Python Developer",
            company="Acme",
            location="Cape Town",
            description="We need Python and Docker skills. React is a plus.",
        ),
        JobPosting(
            title="Warehouse Supervisor",
            company="Logistics Ltd",
            description="Manage shifts.",
        ),
    ]


@pytest.fixture
def long_parsed_cv() -> ParsedCV:
    """A CV whose content needs more than one page."""
    lines = "\n".join(
        f"Delivered project number {i} on time and within budget." for i in range(120)
    )
    return ParsedCV(
        name="Jane Doe",
        contact="jane@x.com",
        sections=(
            CVSection(title="Experience", content=lines + "\n"),
            CVSection(title="Skills", content="- Go\n- Rust\n"),
        ),
    )
