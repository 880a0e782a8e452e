"""Job relevance scoring against a user's skills and experience."""

from collections.abc import Iterable

from jobspark.models.career import JobPosting
from jobspark.models.cv import Experience
from jobspark.scoring.models import RankedJob

BASE_SCORE = 50
SKILL_MATCH_POINTS = 10
TITLE_MATCH_POINTS = 15
TECH_BACKGROUND_POINTS = 20

TECH_COMPANY_TERMS = ("tech", "software")
TECH_TITLE_TERMS = ("tech", "software", "developer")


def _first_word(text: str) -> str:
    return text.lower().split(" ")[0]


def _titles_match(job_title: str, experience_title: str) -> bool:
    """Either title's first word appears in the other title."""
    job_title = job_title.lower()
    experience_title = experience_title.lower()
    exp_word = _first_word(experience_title)
    job_word = _first_word(job_title)
    return bool(exp_word and exp_word in job_title) or bool(
        job_word and job_word in experience_title
    )


def calculate_job_relevance(
    job: JobPosting, user_skills: Iterable[str], experiences: list[Experience]
) -> int:
    """Score how well a job matches the user on a 0-100 scale.

    Args:
        job: The job posting.
        user_skills: Names of the user's skills.
        experiences: The user's work history.

    Returns:
        Relevance score, capped at 100.
    """
    score = BASE_SCORE

    description = job.description.lower()
    skill_matches = [s for s in user_skills if s.strip() and s.lower() in description]
    score += len(skill_matches) * SKILL_MATCH_POINTS

    title_matches = [exp for exp in experiences if _titles_match(job.title, exp.title)]
    score += len(title_matches) * TITLE_MATCH_POINTS

    job_title = job.title.lower()
    companies = [exp.company.lower() for exp in experiences]
    has_tech_background = any(
        term in company for company in companies for term in TECH_COMPANY_TERMS
    )
    if has_tech_background and any(term in job_title for term in TECH_TITLE_TERMS):
        score += TECH_BACKGROUND_POINTS

    return min(100, score)


def rank_jobs(
    jobs: Iterable[JobPosting], user_skills: Iterable[str], experiences: list[Experience]
) -> list[RankedJob]:
    """Score every job and sort by relevance, best first.

    Jobs with equal scores keep their input order.
    """
    skills = list(user_skills)
    ranked = [
        RankedJob(job=job, match=calculate_job_relevance(job, skills, experiences))
        for job in jobs
    ]
    return sorted(ranked, key=lambda r: r.match, reverse=True)
