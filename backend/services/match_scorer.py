"""Candidate-to-job match scoring.

Primary path asks Gemini for a judgment that also weighs transferable skills.
The local path is a case-insensitive overlap of required skills and is the
basis for every deterministic guarantee (each required skill is reported
exactly once as matched or missing).
"""

import asyncio
import logging
import math
from typing import Protocol

from models.schemas import JobRecommendation, MatchResult
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60
FAIR_THRESHOLD = 40

NO_RECOMMENDATION = "No recommendation available"


class ScorableJob(Protocol):
    id: str
    required_skills: list[str]
    description: str


def recommendation_for(score: int) -> str:
    """Map a 0-100 score to its advice tier. Lower bounds are inclusive."""
    if score >= EXCELLENT_THRESHOLD:
        return "Excellent match! Apply now."
    elif score >= GOOD_THRESHOLD:
        return "Good match. Consider upskilling in missing areas."
    elif score >= FAIR_THRESHOLD:
        return "Partial match. Review requirements carefully."
    return "Limited match. Focus on building relevant skills."


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; 12.5 must score 13
    return int(math.floor(value + 0.5))


def _clamp_score(raw) -> int:
    return min(100, max(0, _round_half_up(float(raw))))


def score_match_basic(candidate_skills: list[str], job_skills: list[str]) -> MatchResult:
    """Score by exact case-insensitive overlap with the job's required skills."""
    candidate_lower = {s.lower() for s in candidate_skills}

    matched: list[str] = []
    missing: list[str] = []
    for skill in job_skills:
        if skill.lower() in candidate_lower:
            matched.append(skill)
        else:
            missing.append(skill)

    score = _round_half_up(100 * len(matched) / len(job_skills)) if job_skills else 0

    return MatchResult(
        score=score,
        matched_skills=matched,
        missing_skills=missing,
        recommendation=recommendation_for(score),
    )


def _parse_llm_match(data: dict) -> MatchResult | None:
    try:
        score = _clamp_score(data.get("score") or 0)
    except (TypeError, ValueError, OverflowError):
        return None

    matched = data.get("matchedSkills") or []
    missing = data.get("missingSkills") or []
    if not isinstance(matched, list) or not isinstance(missing, list):
        return None

    return MatchResult(
        score=score,
        matched_skills=[str(s) for s in matched],
        missing_skills=[str(s) for s in missing],
        recommendation=str(data.get("recommendation") or NO_RECOMMENDATION),
    )


async def score_match(
    candidate_skills: list[str],
    candidate_bio: str,
    job_skills: list[str],
    job_description: str,
) -> MatchResult:
    """Score a candidate against a job, falling back to local overlap on any Gemini failure."""
    data = await gemini_client.generate_json(
        prompt_builder.MATCH_SCORING_SYSTEM,
        prompt_builder.build_match_message(
            candidate_skills, candidate_bio, job_skills, job_description
        ),
    )

    result = _parse_llm_match(data) if data else None
    if result is None:
        if data:
            logger.warning("Gemini match score unusable, using local overlap")
        return score_match_basic(candidate_skills, job_skills)
    return result


async def rank_jobs(
    candidate_skills: list[str],
    candidate_bio: str,
    jobs: list[ScorableJob],
) -> list[JobRecommendation]:
    """Score every job for one candidate and order best first."""
    matches = await asyncio.gather(
        *(
            score_match(candidate_skills, candidate_bio, job.required_skills, job.description)
            for job in jobs
        )
    )

    recommendations = [
        JobRecommendation(job_id=job.id, score=match.score, recommendation=match.recommendation)
        for job, match in zip(jobs, matches)
    ]
    # sorted() is stable, so equal scores keep request order
    return sorted(recommendations, key=lambda r: r.score, reverse=True)
