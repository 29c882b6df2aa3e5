import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.router import limiter, router
from config import settings
from services.external_jobs import ExternalJobFeed

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

app = FastAPI(
    title="Employly Match API",
    description="AI-assisted skill extraction, job matching and interview prep",
    version=settings.app_version,
)

app.state.limiter = limiter
app.state.external_jobs = ExternalJobFeed(
    url=settings.external_jobs_url,
    ttl=settings.external_jobs_ttl_seconds,
    limit=settings.external_jobs_limit,
    timeout=settings.external_jobs_timeout_seconds,
    user_agent=settings.external_jobs_user_agent,
)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
