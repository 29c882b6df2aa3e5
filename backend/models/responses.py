from models.schemas import (
    ExternalJob,
    InterviewQuestion,
    JobRecommendation,
    MatchResult,
)
from models.schemas.base import CamelModel


class HealthResponse(CamelModel):
    status: str = "ok"
    gemini_configured: bool = False
    version: str = ""


class ExtractSkillsResponse(CamelModel):
    success: bool = True
    skills: list[str] = []
    confidence: float = 0.0


class MatchScoreResponse(CamelModel):
    success: bool = True
    match: MatchResult


class RecommendJobsResponse(CamelModel):
    success: bool = True
    recommendations: list[JobRecommendation] = []


class InterviewPrepResponse(CamelModel):
    success: bool = True
    questions: list[InterviewQuestion] = []
    job_title: str = ""
    generated_at: str = ""


class CareerSuggestionsResponse(CamelModel):
    success: bool = True
    suggestions: list[str] = []


class ExternalJobsResponse(CamelModel):
    success: bool = True
    jobs: list[ExternalJob] = []
    source: str = "remoteok"
    cached: bool = False
