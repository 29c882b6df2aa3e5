"""Tests for the RemoteOK feed: normalization, filtering and cache freshness."""

from unittest.mock import AsyncMock

import httpx
import pytest

from models.schemas import ExternalJob
from services.external_jobs import (
    ExternalJobCache,
    ExternalJobFeed,
    clean_description,
    filter_jobs,
    parse_remoteok_payload,
)

REMOTEOK_PAYLOAD = [
    {"legal": "API terms of service"},
    {
        "id": "101",
        "position": "Senior React Engineer",
        "company": "Acme",
        "company_logo": "https://example.com/acme.png",
        "tags": ["react", "typescript", "node", "graphql", "aws", "docker", "css"],
        "description": "<p>Build&nbsp;our <b>dashboard</b> &amp; APIs</p>",
        "location": "",
        "salary_min": 90000,
        "salary_max": 120000,
        "date": "2026-10-01T10:00:00+00:00",
        "url": "https://remoteok.com/remote-jobs/101",
    },
    {
        "id": "102",
        "position": "Data Engineer",
        "company": "Globex",
        "company_logo": "",
        "tags": ["python", "spark"],
        "description": "Pipelines in Python",
        "location": "Europe",
        "date": "2026-10-02T10:00:00+00:00",
        "url": "https://remoteok.com/remote-jobs/102",
    },
]


def _job(**kwargs) -> ExternalJob:
    return ExternalJob(**{"id": "remote-1", **kwargs})


# --- Cache ---

def test_empty_cache_is_stale():
    assert ExternalJobCache(ttl=300).is_stale(now=0.0)


def test_cache_fresh_until_ttl():
    cache = ExternalJobCache(ttl=300)
    cache.store([_job()], now=1000.0)
    assert not cache.is_stale(now=1000.0)
    assert not cache.is_stale(now=1300.0)
    assert cache.is_stale(now=1300.5)


# --- Normalization ---

def test_clean_description():
    assert clean_description("<p>Build&nbsp;our <b>dashboard</b> &amp; APIs</p>") == (
        "Build our dashboard & APIs"
    )
    assert clean_description(None) == ""
    assert len(clean_description("x" * 900)) == 500


def test_parse_remoteok_payload():
    jobs = parse_remoteok_payload(REMOTEOK_PAYLOAD, limit=20)
    assert [j.id for j in jobs] == ["remote-101", "remote-102"]

    first = jobs[0]
    assert first.title == "Senior React Engineer"
    assert first.required_skills == ["react", "typescript", "node", "graphql", "aws", "docker"]
    assert first.tags == ["react", "typescript", "node", "graphql"]
    assert first.location == "Remote"
    assert first.budget.min == 90000
    assert first.company_logo == "https://example.com/acme.png"

    second = jobs[1]
    assert second.budget.max == 0
    assert second.company_logo is None
    assert second.location == "Europe"


def test_parse_remoteok_payload_limit_and_garbage():
    assert len(parse_remoteok_payload(REMOTEOK_PAYLOAD, limit=1)) == 1
    assert parse_remoteok_payload({"error": "blocked"}, limit=20) == []
    assert parse_remoteok_payload([{"legal": "x"}, "junk"], limit=20) == []


def test_parse_remoteok_payload_skips_malformed_job():
    payload = [{}, {"id": "1", "salary_min": "lots"}, {"id": "2", "position": "Dev"}]
    assert [j.id for j in parse_remoteok_payload(payload, limit=20)] == ["remote-2"]


# --- Filtering ---

def test_filter_jobs_by_search():
    jobs = parse_remoteok_payload(REMOTEOK_PAYLOAD, limit=20)
    assert [j.id for j in filter_jobs(jobs, search="GLOBEX")] == ["remote-102"]
    assert [j.id for j in filter_jobs(jobs, search="dashboard")] == ["remote-101"]


def test_filter_jobs_by_skills():
    jobs = parse_remoteok_payload(REMOTEOK_PAYLOAD, limit=20)
    assert [j.id for j in filter_jobs(jobs, skills="Python, rust")] == ["remote-102"]
    assert [j.id for j in filter_jobs(jobs, skills="type")] == ["remote-101"]
    assert len(filter_jobs(jobs, skills=" , ")) == 2


# --- Feed ---

def _feed(handler) -> ExternalJobFeed:
    return ExternalJobFeed(
        url="https://remoteok.test/api",
        ttl=300,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_feed_fetch_sends_user_agent():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, json=REMOTEOK_PAYLOAD)

    jobs = await _feed(handler).fetch()
    assert len(jobs) == 2
    assert seen["ua"] == "Employly Job Portal"


@pytest.mark.asyncio
async def test_feed_fetch_http_error_returns_empty():
    jobs = await _feed(lambda request: httpx.Response(503)).fetch()
    assert jobs == []


@pytest.mark.asyncio
async def test_feed_fetch_transport_error_returns_empty():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    assert await _feed(handler).fetch() == []


@pytest.mark.asyncio
async def test_feed_fetch_invalid_json_returns_empty():
    jobs = await _feed(lambda request: httpx.Response(200, text="<html>")).fetch()
    assert jobs == []


@pytest.mark.asyncio
async def test_get_jobs_uses_cache_until_stale():
    feed = ExternalJobFeed(url="unused", ttl=300)
    feed.fetch = AsyncMock(return_value=[_job()])

    jobs, cached = await feed.get_jobs(now=1000.0)
    assert len(jobs) == 1 and cached is True
    await feed.get_jobs(now=1200.0)
    assert feed.fetch.await_count == 1

    await feed.get_jobs(now=1400.0)
    assert feed.fetch.await_count == 2


@pytest.mark.asyncio
async def test_get_jobs_refetches_after_empty_result():
    feed = ExternalJobFeed(url="unused", ttl=300)
    feed.fetch = AsyncMock(return_value=[])

    jobs, cached = await feed.get_jobs(now=1000.0)
    assert jobs == [] and cached is False
    await feed.get_jobs(now=1001.0)
    assert feed.fetch.await_count == 2
