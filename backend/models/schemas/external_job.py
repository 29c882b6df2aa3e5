"""Normalized listing pulled from an external job board."""

from typing import Literal

from models.schemas.base import CamelModel


class Budget(CamelModel):
    min: int = 0
    max: int = 0
    currency: str = "USD"


class ExternalJob(CamelModel):
    id: str
    title: str = ""
    description: str = ""
    required_skills: list[str] = []
    budget: Budget = Budget()
    location: str = "Remote"
    location_type: str = "remote"
    tags: list[str] = []
    company: str = ""
    company_logo: str | None = None
    created_at: str = ""
    source: Literal["external"] = "external"
    external_url: str = ""
