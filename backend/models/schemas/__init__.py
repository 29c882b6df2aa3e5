"""Domain result models for the matching services."""

from models.schemas.external_job import Budget, ExternalJob
from models.schemas.interview_question import InterviewQuestion
from models.schemas.match_result import JobRecommendation, MatchResult
from models.schemas.skill_extraction import ExtractionResult

__all__ = [
    "Budget",
    "ExternalJob",
    "ExtractionResult",
    "InterviewQuestion",
    "JobRecommendation",
    "MatchResult",
]
