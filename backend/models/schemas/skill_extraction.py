"""Skill extraction output shared by the keyword and Gemini extractors."""

from models.schemas.base import CamelModel


class ExtractionResult(CamelModel):
    """Skills found in a piece of free text.

    Created fresh per call and never persisted; the caller decides whether
    to merge ``skills`` into a profile.
    """
    skills: list[str] = []
    confidence: float = 0.0
