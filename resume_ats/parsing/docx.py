from __future__ import annotations

import logging
import re
import zlib
from io import BytesIO
from xml.etree.ElementTree import Element, ParseError
from zipfile import BadZipFile, ZipFile

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException
from docx import Document
from docx.table import Table

from resume_ats.core.errors import DocumentParseError, DocumentParseErrorKind
from resume_ats.schemas import ExtractedDocument, ResumeMetadata

from .layout import (
    count_lines,
    count_words,
    detect_columns,
    detect_headers_footers,
    detect_tables,
    estimate_pages,
)

logger = logging.getLogger(__name__)

ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")
# Encrypted OOXML is wrapped in an OLE compound file.
OLE_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
DOCUMENT_PART = "word/document.xml"

_HEADER_FOOTER_PART_RE = re.compile(r"^word/(header|footer)\d*\.xml$")
_IMAGE_TAG_SUFFIXES = ("}drawing", "}pict", "}blip")


def _check_signature(content: bytes) -> None:
    if content.startswith(OLE_MAGIC):
        raise DocumentParseError(
            DocumentParseErrorKind.PASSWORD_PROTECTED,
            "This Word document is encrypted or password-protected.",
        )
    if not any(content.startswith(prefix) for prefix in ZIP_MAGICS):
        raise DocumentParseError(
            DocumentParseErrorKind.INVALID_FORMAT,
            "This file is not a DOCX document.",
        )


def _read_parts(content: bytes) -> tuple[Element, list[Element]]:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
            if DOCUMENT_PART not in names:
                raise DocumentParseError(
                    DocumentParseErrorKind.INVALID_FORMAT,
                    "This archive is not a Word document (word/document.xml missing).",
                )
            body = ET.fromstring(archive.read(DOCUMENT_PART))
            edges = [ET.fromstring(archive.read(name)) for name in names if _HEADER_FOOTER_PART_RE.match(name)]
    except (BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as exc:
        # Damaged deflate streams, encrypted entries and unknown compression methods.
        logger.warning("docx_archive_failed size=%s: %s", len(content), exc)
        raise DocumentParseError(
            DocumentParseErrorKind.CORRUPTED,
            "This Word document is damaged and could not be opened.",
        ) from exc
    except DefusedXmlException as exc:
        logger.warning("docx_xml_rejected size=%s: %s", len(content), exc)
        raise DocumentParseError(
            DocumentParseErrorKind.INVALID_FORMAT,
            "This Word document contains unsupported XML constructs.",
        ) from exc
    except ParseError as exc:
        logger.warning("docx_xml_failed size=%s: %s", len(content), exc)
        raise DocumentParseError(
            DocumentParseErrorKind.CORRUPTED,
            "This Word document has malformed content.",
        ) from exc
    return body, edges


def _has_tag(root: Element, suffixes: tuple[str, ...]) -> bool:
    return any(str(node.tag).endswith(suffixes) for node in root.iter())


def _has_text(root: Element) -> bool:
    return any(str(node.tag).endswith("}t") and (node.text or "").strip() for node in root.iter())


def _table_lines(table: Table) -> list[str]:
    lines: list[str] = []
    for row in table.rows:
        previous = None
        for cell in row.cells:
            # Merged cells repeat the same underlying element.
            if cell._tc is previous:
                continue
            previous = cell._tc
            lines.extend(paragraph.text for paragraph in cell.paragraphs)
    return lines


def _document_text(content: bytes) -> str:
    try:
        document = Document(BytesIO(content))
        lines: list[str] = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                lines.extend(_table_lines(block))
            else:
                lines.append(block.text)
    except (KeyError, ValueError, BadZipFile) as exc:
        logger.warning("docx_extract_failed size=%s: %s", len(content), exc)
        raise DocumentParseError(
            DocumentParseErrorKind.CORRUPTED,
            "This Word document is damaged and could not be read.",
        ) from exc
    except Exception as exc:
        logger.warning("docx_extract_failed size=%s: %s", len(content), exc)
        raise DocumentParseError(
            DocumentParseErrorKind.UNKNOWN, f"Failed to read Word document: {exc}"
        ) from exc
    return "\n".join(lines)


def extract_docx(content: bytes) -> ExtractedDocument:
    _check_signature(content)
    body, edges = _read_parts(content)
    text = _document_text(content)

    has_images = _has_tag(body, _IMAGE_TAG_SUFFIXES)
    has_tables = _has_tag(body, ("}tbl",)) or detect_tables(text)
    has_headers_footers = any(_has_text(part) for part in edges) or detect_headers_footers(text)

    logger.debug("docx_extracted chars=%s tables=%s images=%s", len(text), has_tables, has_images)
    return ExtractedDocument(
        text=text,
        metadata=ResumeMetadata(
            word_count=count_words(text),
            line_count=count_lines(text),
            has_images=has_images,
            has_tables=has_tables,
            has_columns=detect_columns(text),
            has_headers_footers=has_headers_footers,
            estimated_pages=estimate_pages(text),
            file_size=len(content),
            file_type="docx",
        ),
    )
