"""Career readiness and job relevance scoring.

Simple, deterministic weighted-sum heuristics over the user's profile:
- CareerScorer: profile, CV, interview and market scores for the dashboard
- calculate_job_relevance / rank_jobs: order job postings for the user
"""

from jobspark.scoring.career import CareerScorer, calculate_profile_completion, score_status
from jobspark.scoring.jobs import calculate_job_relevance, rank_jobs
from jobspark.scoring.models import CareerScoreReport, CategoryScore, RankedJob, Recommendation

__all__ = [
    "CareerScoreReport",
    "CareerScorer",
    "CategoryScore",
    "RankedJob",
    "Recommendation",
    "calculate_job_relevance",
    "calculate_profile_completion",
    "rank_jobs",
    "score_status",
]
