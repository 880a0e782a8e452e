"""Career readiness scoring.

Four weighted-sum heuristics, each on a 0-100 scale:
- Profile completeness: contact details, summary, experience, education, skills
- CV quality: generated CVs and the depth of the underlying profile
- Interview readiness: practice session scores, frequency and recency
- Market alignment: in-demand skills and recent experience

The overall score is the rounded mean of the four.
"""

from __future__ import annotations

import logging
from datetime import datetime

from jobspark.models.career import CareerProfile, InterviewSession
from jobspark.models.cv import Education, Experience, GeneratedCV, Skill, UserProfile
from jobspark.scoring.models import CareerScoreReport, CategoryScore, Recommendation, ScoreStatus
from jobspark.utils.date_utils import (
    describe_elapsed,
    is_ongoing,
    is_recent,
    parse_partial_date,
)

logger = logging.getLogger(__name__)

DEFAULT_IN_DEMAND_SKILLS = (
    "React",
    "Python",
    "JavaScript",
    "AWS",
    "Docker",
    "Kubernetes",
    "Machine Learning",
    "Data Analysis",
)

MAX_SCORE = 100
RECENT_SESSION_DAYS = 30
RECENT_EXPERIENCE_DAYS = 2 * 365

# Description per status band, keyed by category
DESCRIPTIONS: dict[str, dict[ScoreStatus, str]] = {
    "Profile Completeness": {
        "excellent": "Your profile is comprehensive and professional",
        "good": "Good profile with room for enhancement",
        "needs-work": "Profile needs more details to stand out",
    },
    "CV Quality": {
        "excellent": "Strong CV that showcases your experience well",
        "good": "Good CV with room for improvement",
        "needs-work": "CV needs more work to be competitive",
    },
    "Interview Readiness": {
        "excellent": "Excellent interview skills and preparation",
        "good": "Good interview skills, keep practicing",
        "needs-work": "More practice needed to improve confidence",
    },
    "Market Alignment": {
        "excellent": "Your skills are highly aligned with market demands",
        "good": "Good market alignment with some gaps",
        "needs-work": "Skills need updating for current market",
    },
}

# Short names used when listing the weakest areas
AREA_NAMES = {
    "Profile Completeness": "Profile",
    "CV Quality": "CV",
    "Interview Readiness": "Interview",
    "Market Alignment": "Market",
}


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores."""
    return int(value + 0.5)


def score_status(score: int) -> ScoreStatus:
    """Map a 0-100 score to its status band."""
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    return "needs-work"


def _has_long_description(experiences: list[Experience], min_length: int) -> bool:
    return any(exp.description and len(exp.description) > min_length for exp in experiences)


def _average_score(sessions: list[InterviewSession]) -> float:
    return sum(s.overall_score for s in sessions) / len(sessions)


def calculate_profile_completion(
    profile: UserProfile, experiences: list[Experience], skills: list[Skill]
) -> int:
    """Percentage of the eight onboarding checks the user has completed."""
    checks = [
        bool(profile.full_name),
        bool(profile.email),
        bool(profile.phone),
        bool(profile.location),
        bool(profile.professional_summary),
        len(experiences) > 0,
        len(skills) >= 3,
        bool(profile.profile_image_url),
    ]
    return round_half_up(sum(checks) / len(checks) * 100)


class CareerScorer:
    """Compute the career readiness report shown on the dashboard."""

    def __init__(
        self,
        in_demand_skills: tuple[str, ...] | list[str] = DEFAULT_IN_DEMAND_SKILLS,
        now: datetime | None = None,
    ) -> None:
        self.in_demand_skills = tuple(in_demand_skills)
        self._now = now

    @property
    def now(self) -> datetime:
        return self._now or datetime.now()

    def profile_score(
        self,
        profile: UserProfile,
        experiences: list[Experience],
        education: list[Education],
        skills: list[Skill],
    ) -> int:
        score = 0

        # Basic profile info (30 points)
        if profile.full_name:
            score += 5
        if profile.email:
            score += 5
        if profile.phone:
            score += 5
        if profile.location:
            score += 5
        if profile.professional_summary:
            score += 10

        # Experience (25 points)
        if experiences:
            score += 10
        if len(experiences) >= 2:
            score += 10
        if _has_long_description(experiences, 100):
            score += 5

        # Education (20 points)
        if education:
            score += 15
        if any(edu.description for edu in education):
            score += 5

        # Skills (25 points)
        if len(skills) >= 3:
            score += 10
        if len(skills) >= 5:
            score += 10
        if any(skill.is_strong for skill in skills):
            score += 5

        return min(MAX_SCORE, score)

    def cv_score(
        self, cvs: list[GeneratedCV], experiences: list[Experience], skills: list[Skill]
    ) -> int:
        score = 40

        if cvs:
            score += 20
        if len(cvs) >= 2:
            score += 10

        if len(experiences) >= 2:
            score += 10
        if len(skills) >= 5:
            score += 10
        if _has_long_description(experiences, 150):
            score += 10

        return min(MAX_SCORE, score)

    def interview_score(self, sessions: list[InterviewSession]) -> int:
        if not sessions:
            return 30

        recent = [s for s in sessions if is_recent(s.created_at, RECENT_SESSION_DAYS, self.now)]

        score = round_half_up(_average_score(sessions) * 0.7)
        if len(sessions) >= 3:
            score += 10
        if recent:
            score += 10
        if len(sessions) >= 5:
            score += 10

        return min(MAX_SCORE, score)

    def matching_in_demand_skills(self, skills: list[Skill]) -> list[str]:
        """In-demand skills covered by at least one of the user's skills."""
        user_skills = [s.name.lower() for s in skills]
        return [
            wanted
            for wanted in self.in_demand_skills
            if any(wanted.lower() in user_skill for user_skill in user_skills)
        ]

    def _is_recent_experience(self, exp: Experience) -> bool:
        if exp.is_current or is_ongoing(exp.end_date):
            return True
        moment = parse_partial_date(exp.end_date or exp.start_date)
        return is_recent(moment, RECENT_EXPERIENCE_DAYS, self.now)

    def market_score(self, skills: list[Skill], experiences: list[Experience]) -> int:
        score = 50
        score += len(self.matching_in_demand_skills(skills)) * 5

        if any(self._is_recent_experience(exp) for exp in experiences):
            score += 15
        if len(experiences) >= 3:
            score += 10

        return min(MAX_SCORE, score)

    def profile_improvements(self, data: CareerProfile) -> list[str]:
        improvements = []
        if not data.profile.professional_summary:
            improvements.append("Add a professional summary")
        if not data.profile.phone:
            improvements.append("Add contact information")
        if len(data.experiences) < 2:
            improvements.append("Add more work experience")
        if len(data.skills) < 5:
            improvements.append("Add more relevant skills")
        return improvements[:3]

    def cv_improvements(self, data: CareerProfile) -> list[str]:
        improvements = []
        if not data.cvs:
            improvements.append("Generate your first CV")
        if any(not exp.description or len(exp.description) < 100 for exp in data.experiences):
            improvements.append("Add detailed job descriptions")
        if len(data.skills) < 5:
            improvements.append("Add more technical skills")
        improvements.append("Quantify your achievements")
        return improvements[:3]

    def interview_improvements(self, data: CareerProfile) -> list[str]:
        sessions = data.interview_sessions
        improvements = []
        if not sessions:
            improvements.append("Start practicing with mock interviews")
        if len(sessions) < 3:
            improvements.append("Complete more practice sessions")
        if sessions and _average_score(sessions) < 80:
            improvements.append("Focus on improving response quality")
        improvements.append("Practice behavioral questions")
        return improvements[:3]

    def market_improvements(self, data: CareerProfile) -> list[str]:
        improvements = ["Learn in-demand technologies", "Update skills with current trends"]
        if len(data.experiences) < 2:
            improvements.append("Gain more relevant experience")
        return improvements[:3]

    def recommendations(
        self, cv_score: int, interview_score: int, market_score: int
    ) -> list[Recommendation]:
        recommendations = []
        if interview_score < 70:
            recommendations.append(
                Recommendation(
                    title="Complete Interview Practice",
                    description="Boost your interview readiness with AI-powered mock interviews",
                    impact="+15 points",
                    action="Start Practice",
                    href="/interview-practice",
                    priority="high",
                )
            )
        if cv_score < 80:
            recommendations.append(
                Recommendation(
                    title="Enhance Your CV",
                    description="Use AI to improve your CV with better descriptions and formatting",
                    impact="+10 points",
                    action="Improve CV",
                    href="/cv-builder",
                    priority="medium",
                )
            )
        if market_score < 75:
            recommendations.append(
                Recommendation(
                    title="Update Your Skills",
                    description="Add in-demand skills to improve your market alignment",
                    impact="+8 points",
                    action="Add Skills",
                    href="/onboarding",
                    priority="medium",
                )
            )
        recommendations.append(
            Recommendation(
                title="Apply to More Jobs",
                description="Increase your visibility by applying to relevant positions",
                impact="+5 points",
                action="View Jobs",
                href="/job-matches",
                priority="low",
            )
        )
        return recommendations[:3]

    def last_activity(self, data: CareerProfile) -> str:
        dates = [
            item.created_at
            for item in (*data.experiences, *data.cvs, *data.interview_sessions)
            if item.created_at is not None
        ]
        if not dates:
            return "No recent activity"
        latest = max(dates, key=lambda d: d.timestamp())
        return describe_elapsed(latest, self.now)

    def compute(self, data: CareerProfile) -> CareerScoreReport:
        """Compute all category scores and the dashboard insights.

        Args:
            data: The user's profile, history and activity.

        Returns:
            CareerScoreReport with the four categories in display order.
        """
        scores = {
            "Profile Completeness": self.profile_score(
                data.profile, data.experiences, data.education, data.skills
            ),
            "CV Quality": self.cv_score(data.cvs, data.experiences, data.skills),
            "Interview Readiness": self.interview_score(data.interview_sessions),
            "Market Alignment": self.market_score(data.skills, data.experiences),
        }
        improvements = {
            "Profile Completeness": self.profile_improvements(data),
            "CV Quality": self.cv_improvements(data),
            "Interview Readiness": self.interview_improvements(data),
            "Market Alignment": self.market_improvements(data),
        }
        overall = round_half_up(sum(scores.values()) / len(scores))
        logger.debug("Career scores %s -> overall %d", scores, overall)

        categories = [
            CategoryScore(
                name=name,
                score=score,
                status=score_status(score),
                description=DESCRIPTIONS[name][score_status(score)],
                improvements=improvements[name],
            )
            for name, score in scores.items()
        ]

        weakest = sorted(scores.items(), key=lambda item: item[1])[:2]
        sessions = data.interview_sessions

        return CareerScoreReport(
            overall=overall,
            categories=categories,
            recommendations=self.recommendations(
                scores["CV Quality"], scores["Interview Readiness"], scores["Market Alignment"]
            ),
            improvement_areas=[AREA_NAMES[name] for name, _ in weakest],
            strongest_skills=[s.name for s in data.skills if s.is_strong][:3],
            average_interview_score=round_half_up(_average_score(sessions)) if sessions else 0,
            last_activity=self.last_activity(data),
            profile_completion=calculate_profile_completion(
                data.profile, data.experiences, data.skills
            ),
        )
