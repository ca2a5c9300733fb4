from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    max_upload_bytes: int
    min_job_description_chars: int
    scoring_config_path: str | None


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
        ],
    ),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
    min_job_description_chars=_get_env_int("MIN_JOB_DESCRIPTION_CHARS", 50),
    scoring_config_path=_get_env("SCORING_CONFIG_PATH"),
)

if settings.max_upload_bytes <= 0:
    raise RuntimeError("MAX_UPLOAD_BYTES must be greater than 0.")

if settings.min_job_description_chars < 0:
    raise RuntimeError("MIN_JOB_DESCRIPTION_CHARS must not be negative.")
