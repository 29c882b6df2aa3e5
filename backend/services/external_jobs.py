"""RemoteOK job feed with a time-boxed in-memory cache.

The feed object owns its cache; the app keeps one feed on ``app.state``.
Fetch failures are logged and produce an empty listing, never an error.
"""

import html
import logging
import re
import time
from dataclasses import dataclass, field

import httpx
from pydantic import ValidationError

from models.schemas import Budget, ExternalJob

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_CHARS = 500
MAX_REQUIRED_SKILLS = 6
MAX_TAGS = 4

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


@dataclass
class ExternalJobCache:
    entries: list[ExternalJob] = field(default_factory=list)
    fetched_at: float = 0.0
    ttl: float = 300.0

    def is_stale(self, now: float) -> bool:
        """Empty caches are always stale, otherwise stale once older than ``ttl``."""
        return not self.entries or now - self.fetched_at > self.ttl

    def store(self, entries: list[ExternalJob], now: float) -> None:
        self.entries = entries
        self.fetched_at = now


def clean_description(raw: str | None) -> str:
    """Strip HTML tags, decode entities and collapse whitespace."""
    if not raw:
        return ""
    text = _TAG_RE.sub(" ", raw)
    text = html.unescape(text)
    text = _WS_RE.sub(" ", text).strip()
    return text[:MAX_DESCRIPTION_CHARS]


def normalize_remoteok_job(job: dict) -> ExternalJob:
    tags = [str(t) for t in (job.get("tags") or [])]
    logo = job.get("company_logo") or None
    return ExternalJob(
        id=f"remote-{job.get('id', '')}",
        title=job.get("position") or "",
        description=clean_description(job.get("description")),
        required_skills=tags[:MAX_REQUIRED_SKILLS],
        budget=Budget(
            min=job.get("salary_min") or 0,
            max=job.get("salary_max") or 0,
            currency="USD",
        ),
        location=job.get("location") or "Remote",
        location_type="remote",
        tags=tags[:MAX_TAGS],
        company=job.get("company") or "",
        company_logo=logo,
        created_at=job.get("date") or "",
        external_url=job.get("url") or "",
    )


def parse_remoteok_payload(payload, limit: int) -> list[ExternalJob]:
    """Normalize a RemoteOK API response. The first element is legal metadata."""
    if not isinstance(payload, list):
        return []
    normalized: list[ExternalJob] = []
    for job in payload[1:]:
        if len(normalized) >= limit:
            break
        if not isinstance(job, dict):
            continue
        try:
            normalized.append(normalize_remoteok_job(job))
        except ValidationError as e:
            logger.warning("Skipping malformed RemoteOK job %s: %s", job.get("id"), e)
    return normalized


def filter_jobs(jobs: list[ExternalJob], search: str = "", skills: str = "") -> list[ExternalJob]:
    """Filter by free-text search and comma-separated skills, case-insensitively."""
    search = search.strip().lower()
    if search:
        jobs = [
            j for j in jobs
            if search in j.title.lower()
            or search in j.company.lower()
            or search in j.description.lower()
        ]

    wanted = [s.strip() for s in skills.lower().split(",") if s.strip()]
    if wanted:
        jobs = [
            j for j in jobs
            if any(w in rs.lower() for w in wanted for rs in j.required_skills)
        ]

    return jobs


class ExternalJobFeed:
    """Fetches RemoteOK listings and serves them from cache until the TTL lapses."""

    def __init__(
        self,
        url: str,
        ttl: float = 300.0,
        limit: int = 20,
        timeout: float = 10.0,
        user_agent: str = "Employly Job Portal",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.limit = limit
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport
        self.cache = ExternalJobCache(ttl=ttl)

    async def fetch(self) -> list[ExternalJob]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.url, headers={"User-Agent": self.user_agent})
        except httpx.HTTPError as e:
            logger.error("Failed to fetch RemoteOK jobs: %s", e)
            return []

        if response.is_error:
            logger.error("RemoteOK API error: %s", response.status_code)
            return []

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("RemoteOK returned invalid JSON: %s", e)
            return []
        return parse_remoteok_payload(payload, self.limit)

    async def get_jobs(self, now: float | None = None) -> tuple[list[ExternalJob], bool]:
        """Return ``(jobs, cached)`` where ``cached`` says whether the cache is fresh."""
        now = time.time() if now is None else now
        if self.cache.is_stale(now):
            self.cache.store(await self.fetch(), now)
        return list(self.cache.entries), not self.cache.is_stale(now)
