from __future__ import annotations

import re

from resume_ats.core.scoring import get_scoring_value
from resume_ats.schemas import FormattingIssue, ParsedResume

_EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w{2,}")
_PHONE_RE = re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}|\+\d{1,3}[-.\s]?\d{3}[-.\s]?\d{3}[-.\s]?\d{4}")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")


def has_contact_details(text: str) -> bool:
    return bool(_EMAIL_RE.search(text)) and bool(_PHONE_RE.search(text))


def analyze_formatting(resume: ParsedResume) -> list[FormattingIssue]:
    metadata = resume.metadata
    text = resume.normalized_text
    issues: list[FormattingIssue] = []

    if metadata.has_images:
        issues.append(
            FormattingIssue(
                type="has_images",
                severity="error",
                message="Resume contains images that ATS systems cannot parse.",
                suggestion="Remove all images, logos, and graphics from your resume.",
            )
        )
    if metadata.has_tables:
        issues.append(
            FormattingIssue(
                type="has_tables",
                severity="error",
                message="Resume contains tables that may confuse ATS parsing.",
                suggestion="Convert table content to standard text with bullet points.",
            )
        )
    if metadata.has_columns:
        issues.append(
            FormattingIssue(
                type="has_columns",
                severity="error",
                message="Resume uses multiple columns which ATS cannot read correctly.",
                suggestion="Use a single-column layout for better ATS compatibility.",
            )
        )
    if metadata.has_headers_footers:
        issues.append(
            FormattingIssue(
                type="has_headers_footers",
                severity="warning",
                message="Headers/footers detected. Content may be missed by ATS.",
                suggestion="Move important information from headers/footers to the main body.",
            )
        )

    max_pages = int(get_scoring_value("formatting.max_pages", 2))
    if metadata.estimated_pages > max_pages:
        issues.append(
            FormattingIssue(
                type="too_long",
                severity="warning",
                message=f"Resume is {metadata.estimated_pages} pages. Most positions prefer 1-{max_pages} pages.",
                suggestion=f"Condense your resume to 1-{max_pages} pages focusing on recent, relevant experience.",
            )
        )
    if metadata.word_count < int(get_scoring_value("formatting.min_words", 200)):
        issues.append(
            FormattingIssue(
                type="too_short",
                severity="warning",
                message="Resume appears too brief with limited content.",
                suggestion="Expand your resume with more detail about your experience and achievements.",
            )
        )

    if not has_contact_details(text):
        issues.append(
            FormattingIssue(
                type="missing_contact",
                severity="error",
                message="Missing contact information (email or phone).",
                suggestion="Add your email address and phone number at the top of your resume.",
            )
        )

    special_characters = set(_NON_ASCII_RE.findall(text))
    if len(special_characters) > int(get_scoring_value("formatting.max_unique_special_chars", 5)):
        issues.append(
            FormattingIssue(
                type="special_characters",
                severity="warning",
                message="Resume contains special characters that may not parse correctly.",
                suggestion="Replace special characters with standard ASCII equivalents.",
            )
        )
    return issues
