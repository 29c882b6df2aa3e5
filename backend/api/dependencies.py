"""Shared dependencies for API routes."""

import random

from fastapi import Request

from services.external_jobs import ExternalJobFeed


def get_external_job_feed(request: Request) -> ExternalJobFeed:
    return request.app.state.external_jobs


def get_question_rng() -> random.Random:
    return random.Random()
