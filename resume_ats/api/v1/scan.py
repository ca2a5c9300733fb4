import asyncio
import logging

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from resume_ats.core.config import settings
from resume_ats.core.errors import DocumentParseError, UnsupportedFileTypeError
from resume_ats.normalize.normalize_jd import parse_job_description
from resume_ats.schemas import JobDescriptionRequest, ParsedJobDescription, ScanResult
from resume_ats.services.scan_service import ScanRequestError, resolve_mime_type, run_scan

logger = logging.getLogger(__name__)

router = APIRouter()

_READ_CHUNK_BYTES = 1024 * 64


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/scan", response_model=ScanResult)
async def scan_resume(
    resume: UploadFile = File(...),
    job_description: str = Form(...),
):
    content = await _read_upload(resume)
    mime_type = resolve_mime_type(resume.content_type, resume.filename)

    try:
        return await asyncio.to_thread(run_scan, content, mime_type, job_description, len(content))
    except ScanRequestError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except UnsupportedFileTypeError as exc:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(exc)) from exc
    except DocumentParseError as exc:
        logger.info("scan_rejected kind=%s file=%s", exc.kind.value, resume.filename or "-")
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.to_dict()) from exc


@router.post("/job-description/parse", response_model=ParsedJobDescription)
async def parse_job_description_endpoint(payload: JobDescriptionRequest):
    if len(payload.text.strip()) < settings.min_job_description_chars:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Job description must be at least {settings.min_job_description_chars} characters.",
        )
    return parse_job_description(payload.text)
