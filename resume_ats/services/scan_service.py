from __future__ import annotations

import logging
import random
import time

from resume_ats.core.config import settings
from resume_ats.normalize.normalize_jd import parse_job_description
from resume_ats.parsing.parse import DOCX_MIME_TYPE, PDF_MIME_TYPE, SUPPORTED_MIME_TYPES, parse_resume
from resume_ats.schemas import ScanResult

from .ats_scorer import calculate_ats_score

logger = logging.getLogger(__name__)

_EXTENSION_MIME_TYPES = {"pdf": PDF_MIME_TYPE, "docx": DOCX_MIME_TYPE}


class ScanRequestError(ValueError):
    def __init__(self, message: str, *, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def resolve_mime_type(content_type: str | None, filename: str | None = None) -> str:
    """Prefer the declared type; fall back to the file extension for generic uploads."""
    declared = (content_type or "").split(";", 1)[0].strip().lower()
    if declared in SUPPORTED_MIME_TYPES:
        return declared
    name = (filename or "").lower()
    extension = name.rsplit(".", 1)[-1] if "." in name else ""
    return _EXTENSION_MIME_TYPES.get(extension, declared)


def validate_scan_request(mime_type: str, file_size: int, job_description: str) -> None:
    if file_size <= 0:
        raise ScanRequestError("The uploaded resume is empty.", status_code=400)
    if file_size > settings.max_upload_bytes:
        raise ScanRequestError(
            f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            status_code=413,
        )
    if mime_type not in SUPPORTED_MIME_TYPES:
        raise ScanRequestError(
            f"Unsupported file type '{mime_type or 'unknown'}'. Upload a PDF or DOCX file.",
            status_code=415,
        )
    if len((job_description or "").strip()) < settings.min_job_description_chars:
        raise ScanRequestError(
            f"Job description must be at least {settings.min_job_description_chars} characters.",
            status_code=422,
        )


def run_scan(
    content: bytes,
    mime_type: str,
    job_description: str,
    file_size: int | None = None,
    rng: random.Random | None = None,
) -> ScanResult:
    size = len(content) if file_size is None else file_size
    validate_scan_request(mime_type, size, job_description)

    started = time.perf_counter()
    resume = parse_resume(content, mime_type, size)
    parsed_job = parse_job_description(job_description)
    result = calculate_ats_score(resume, parsed_job, rng=rng)

    logger.info(
        "scan_completed id=%s file_type=%s overall=%s missing_keywords=%s elapsed_ms=%s",
        result.id,
        resume.metadata.file_type,
        result.score.overall,
        len(result.missing_keywords),
        int((time.perf_counter() - started) * 1000),
    )
    return result
