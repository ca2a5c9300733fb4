import logging

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_ats.api.v1.health import router as health_router
from resume_ats.api.v1.scan import router as scan_router
from resume_ats.core.config import settings
from resume_ats.core.scoring import get_scoring_config

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

# Fail at startup rather than on the first scan when scoring.yaml is broken.
get_scoring_config()

app = FastAPI(title="Resume ATS Scanner API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(scan_router, prefix="/v1", tags=["Scan"])
