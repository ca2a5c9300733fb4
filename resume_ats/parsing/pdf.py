from __future__ import annotations

import logging
import re
from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import FileNotDecryptedError, PdfReadError, PyPdfError

from resume_ats.core.errors import DocumentParseError, DocumentParseErrorKind
from resume_ats.schemas import ExtractedDocument, ResumeMetadata

from .layout import count_lines, count_words, detect_columns, detect_headers_footers, detect_tables

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF-"
_SIGNATURE_WINDOW = 1024
MIN_CHARS_PER_PAGE = 500

_STRUCTURE_MARKERS = ("xref", "trailer", "startxref", "eof", "truncated", "ended unexpectedly")
_HEADER_MARKERS = ("header", "%pdf-")

_HYPHEN_BREAK_RE = re.compile(r"(\w)-\n([a-z])")
_SOFT_WRAP_RE = re.compile(r"([A-Za-z])\n([a-z])")
_GLUED_BULLET_RE = re.compile(r"([.!?;:%)])[ \t]*([•●▪■◆◇►▸▹▶➤➢➣➔○◦‣⁃∙])")


def repair_line_wraps(text: str) -> str:
    """Undo line breaks introduced by PDF text layout."""
    repaired = text.replace("\r\n", "\n").replace("\r", "\n")
    repaired = _HYPHEN_BREAK_RE.sub(r"\1\2", repaired)
    repaired = _SOFT_WRAP_RE.sub(r"\1 \2", repaired)
    return _GLUED_BULLET_RE.sub(r"\1\n\2", repaired)


def _classify_read_error(exc: Exception) -> DocumentParseError:
    message = str(exc) or exc.__class__.__name__
    lowered = message.lower()
    if isinstance(exc, FileNotDecryptedError) or "password" in lowered or "decrypt" in lowered:
        return DocumentParseError(
            DocumentParseErrorKind.PASSWORD_PROTECTED,
            "This PDF is password-protected and cannot be read.",
        )
    if any(marker in lowered for marker in _STRUCTURE_MARKERS):
        return DocumentParseError(
            DocumentParseErrorKind.CORRUPTED,
            "This PDF has a damaged cross-reference table or is truncated.",
        )
    if any(marker in lowered for marker in _HEADER_MARKERS):
        return DocumentParseError(
            DocumentParseErrorKind.INVALID_FORMAT,
            "This file does not have a valid PDF header.",
        )
    return DocumentParseError(DocumentParseErrorKind.UNKNOWN, f"Failed to read PDF: {message}")


def _has_acroform(reader: PdfReader) -> bool:
    root = reader.trailer.get("/Root")
    if root is None:
        return False
    return "/AcroForm" in root.get_object()


def _open_reader(content: bytes) -> PdfReader:
    if PDF_SIGNATURE not in content[:_SIGNATURE_WINDOW]:
        raise DocumentParseError(
            DocumentParseErrorKind.INVALID_FORMAT,
            "This file is not a PDF (missing %PDF- signature).",
        )

    try:
        reader = PdfReader(BytesIO(content))
    except (PdfReadError, PyPdfError, ValueError, KeyError, TypeError) as exc:
        logger.warning("pdf_open_failed size=%s: %s", len(content), exc)
        raise _classify_read_error(exc) from exc

    if reader.is_encrypted:
        try:
            unlocked = reader.decrypt("")
        except (PyPdfError, NotImplementedError) as exc:
            logger.warning("pdf_decrypt_failed size=%s: %s", len(content), exc)
            raise DocumentParseError(
                DocumentParseErrorKind.PASSWORD_PROTECTED,
                "This PDF is encrypted and cannot be read.",
            ) from exc
        if not unlocked:
            raise DocumentParseError(
                DocumentParseErrorKind.PASSWORD_PROTECTED,
                "This PDF is password-protected and cannot be read.",
            )
    return reader


def extract_pdf(content: bytes) -> ExtractedDocument:
    reader = _open_reader(content)

    try:
        page_texts = [(page.extract_text() or "").strip() for page in reader.pages]
        has_acroform = _has_acroform(reader)
    except (PdfReadError, PyPdfError, ValueError, KeyError, TypeError) as exc:
        logger.warning("pdf_extract_failed size=%s: %s", len(content), exc)
        raise _classify_read_error(exc) from exc

    page_count = len(page_texts)
    text = repair_line_wraps("\n\n".join(page_texts))
    has_images = has_acroform or (page_count > 0 and len(text) < page_count * MIN_CHARS_PER_PAGE)

    logger.debug("pdf_extracted pages=%s chars=%s", page_count, len(text))
    return ExtractedDocument(
        text=text,
        metadata=ResumeMetadata(
            word_count=count_words(text),
            line_count=count_lines(text),
            has_images=has_images,
            has_tables=detect_tables(text),
            has_columns=detect_columns(text),
            has_headers_footers=detect_headers_footers(text),
            estimated_pages=page_count,
            file_size=len(content),
            file_type="pdf",
        ),
    )
