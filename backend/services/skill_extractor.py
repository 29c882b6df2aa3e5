"""Gemini-backed skill extraction with a vocabulary fallback.

Gemini normalizes abbreviations and ranks skills by relevance. When it is
unconfigured or its reply is unusable, the keyword extractor answers instead;
callers always receive a normal result.
"""

import logging

from models.schemas import ExtractionResult
from services import gemini_client, prompt_builder
from services.keyword_extractor import extract_skills_keyword

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.5


def _parse_confidence(raw) -> float:
    """Coerce the model's confidence to float. Not clamped to [0, 1]."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE
    return value or DEFAULT_CONFIDENCE


async def extract_skills(text: str) -> ExtractionResult:
    """Extract skills from a bio, resume or job description."""
    data = await gemini_client.generate_json(
        prompt_builder.SKILL_EXTRACTION_SYSTEM,
        text,
    )

    skills = data.get("skills") if data else None
    if not isinstance(skills, list):
        if data is not None:
            logger.warning("Gemini skill extraction returned no skills list, using keyword fallback")
        return extract_skills_keyword(text)

    return ExtractionResult(
        skills=[s for s in skills if isinstance(s, str)],
        confidence=_parse_confidence(data.get("confidence")),
    )
