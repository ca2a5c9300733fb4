from __future__ import annotations

import logging
from typing import Callable

from resume_ats.core.errors import UnsupportedFileTypeError
from resume_ats.normalize.sections import detect_sections
from resume_ats.schemas import ExtractedDocument, ParsedResume, ResumeMetadata

from .docx import extract_docx
from .layout import count_lines, count_words
from .normalizer import normalize_text
from .pdf import extract_pdf

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

EXTRACTORS: dict[str, Callable[[bytes], ExtractedDocument]] = {
    PDF_MIME_TYPE: extract_pdf,
    DOCX_MIME_TYPE: extract_docx,
}
SUPPORTED_MIME_TYPES = frozenset(EXTRACTORS)


def _canonical_mime_type(mime_type: str | None) -> str:
    # Browsers may append parameters, e.g. "application/pdf; charset=binary".
    return (mime_type or "").split(";", 1)[0].strip().lower()


def extract_document(content: bytes, mime_type: str) -> ExtractedDocument:
    extractor = EXTRACTORS.get(_canonical_mime_type(mime_type))
    if extractor is None:
        raise UnsupportedFileTypeError(mime_type)
    return extractor(content)


def parse_resume(content: bytes, mime_type: str, file_size: int | None = None) -> ParsedResume:
    extracted = extract_document(content, mime_type)
    normalized_text = normalize_text(extracted.text)
    sections = detect_sections(normalized_text)

    source = extracted.metadata
    metadata = ResumeMetadata(
        word_count=source.word_count or count_words(normalized_text),
        line_count=source.line_count or count_lines(normalized_text),
        has_images=source.has_images,
        has_tables=source.has_tables,
        has_columns=source.has_columns,
        has_headers_footers=source.has_headers_footers,
        estimated_pages=source.estimated_pages or 1,
        file_size=len(content) if file_size is None else file_size,
        file_type=source.file_type,
    )
    logger.info(
        "resume_parsed file_type=%s words=%s sections=%s",
        metadata.file_type,
        metadata.word_count,
        ",".join(section.name for section in sections) or "-",
    )
    return ParsedResume(
        raw_text=extracted.text,
        normalized_text=normalized_text,
        sections=sections,
        metadata=metadata,
    )
