"""Candidate-to-job compatibility results."""

from pydantic import Field

from models.schemas.base import CamelModel


class MatchResult(CamelModel):
    """Compatibility of one candidate with one job.

    On the local path every required job skill lands in exactly one of
    ``matched_skills`` / ``missing_skills``. Gemini results are trusted as-is.
    """
    score: int = Field(default=0, ge=0, le=100)
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    recommendation: str = ""


class JobRecommendation(CamelModel):
    job_id: str
    score: int = Field(default=0, ge=0, le=100)
    recommendation: str = ""
