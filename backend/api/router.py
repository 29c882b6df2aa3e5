import logging
import random
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_external_job_feed, get_question_rng
from config import settings
from models.requests import (
    CareerSuggestionsRequest,
    ExtractSkillsRequest,
    InterviewPrepRequest,
    MatchScoreRequest,
    RecommendJobsRequest,
)
from models.responses import (
    CareerSuggestionsResponse,
    ExternalJobsResponse,
    ExtractSkillsResponse,
    HealthResponse,
    InterviewPrepResponse,
    MatchScoreResponse,
    RecommendJobsResponse,
)
from services import career_suggestions, gemini_client, interview_prep, match_scorer, skill_extractor
from services.external_jobs import ExternalJobFeed, filter_jobs

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.default_rate_limit])

MIN_EXTRACTION_CHARS = 10


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        gemini_configured=gemini_client.is_configured(),
        version=settings.app_version,
    )


@router.post("/skills/extract", response_model=ExtractSkillsResponse)
@limiter.limit(settings.strict_rate_limit)
async def extract_skills(request: Request, body: ExtractSkillsRequest):
    text = body.text.strip()
    if len(text) < MIN_EXTRACTION_CHARS:
        raise HTTPException(
            status_code=400,
            detail=f"Please provide at least {MIN_EXTRACTION_CHARS} characters of text to analyze",
        )

    result = await skill_extractor.extract_skills(text)
    logger.info("Skills extracted: %d", len(result.skills))
    return ExtractSkillsResponse(skills=result.skills, confidence=result.confidence)


@router.post("/match/score", response_model=MatchScoreResponse)
@limiter.limit(settings.strict_rate_limit)
async def match_score(request: Request, body: MatchScoreRequest):
    match = await match_scorer.score_match(
        body.candidate.skills,
        body.candidate.bio,
        body.job.required_skills,
        body.job.description,
    )
    return MatchScoreResponse(match=match)


@router.post("/match/recommendations", response_model=RecommendJobsResponse)
@limiter.limit(settings.strict_rate_limit)
async def recommend_jobs(request: Request, body: RecommendJobsRequest):
    missing_ids = [i for i, job in enumerate(body.jobs) if not job.id]
    if missing_ids:
        raise HTTPException(status_code=400, detail=f"Jobs at positions {missing_ids} have no id")

    recommendations = await match_scorer.rank_jobs(
        body.candidate.skills, body.candidate.bio, body.jobs
    )
    return RecommendJobsResponse(recommendations=recommendations)


@router.post("/interview-prep", response_model=InterviewPrepResponse)
@limiter.limit(settings.strict_rate_limit)
async def prepare_interview(
    request: Request,
    body: InterviewPrepRequest,
    rng: random.Random = Depends(get_question_rng),
):
    questions = interview_prep.generate_questions(
        body.job.required_skills,
        body.job.description,
        body.candidate.skills,
        rng=rng,
    )
    logger.info("Interview prep generated: %d questions for job %r", len(questions), body.job.id)
    return InterviewPrepResponse(
        questions=questions,
        job_title=body.job.title,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/career/suggestions", response_model=CareerSuggestionsResponse)
@limiter.limit(settings.strict_rate_limit)
async def suggest_careers(request: Request, body: CareerSuggestionsRequest):
    suggestions = await career_suggestions.suggest_roles(body.candidate.bio, body.candidate.skills)
    return CareerSuggestionsResponse(suggestions=suggestions)


@router.get("/jobs/external", response_model=ExternalJobsResponse)
async def external_jobs(
    search: str = "",
    skills: str = "",
    feed: ExternalJobFeed = Depends(get_external_job_feed),
):
    jobs, cached = await feed.get_jobs()
    return ExternalJobsResponse(jobs=filter_jobs(jobs, search, skills), cached=cached)
