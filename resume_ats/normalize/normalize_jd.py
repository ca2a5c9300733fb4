from __future__ import annotations

import logging
import re

from resume_ats.features.keywords import extract_keywords
from resume_ats.parsing.normalizer import match_bullet_prefix, normalize_text, strip_bullet_prefix
from resume_ats.schemas import ParsedJobDescription

logger = logging.getLogger(__name__)

_MIN_ITEM_CHARS = 10
_LOOSE_ITEM_MIN_CHARS = 20


def _patterns(*sources: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(source, re.IGNORECASE) for source in sources)


REQUIREMENT_HEADERS = _patterns(
    r"requirements?:?",
    r"what you('ll)? need",
    r"must have",
    r"required skills?",
    r"minimum requirements?",
)
REQUIREMENT_CLOSERS = _patterns(
    r"responsibilities?:?",
    r"what you('ll)? do",
    r"benefits?:?",
    r"about (us|the company)",
    r"nice to have",
    r"preferred",
)

RESPONSIBILITY_HEADERS = _patterns(
    r"responsibilities?:?",
    r"what you('ll)? do",
    r"duties:?",
    r"role:?",
    r"job description:?",
    r"key responsibilities?:?",
    r"you will:?",
)
RESPONSIBILITY_CLOSERS = _patterns(
    r"requirements?:?",
    r"qualifications?:?",
    r"what you('ll)? need",
    r"benefits?:?",
    r"about (us|the company)",
)

QUALIFICATION_HEADERS = _patterns(
    r"qualifications?:?",
    r"preferred qualifications?:?",
    r"nice to have:?",
    r"bonus points?:?",
    r"preferred skills?:?",
    r"preferred experience:?",
)
QUALIFICATION_CLOSERS = _patterns(
    r"responsibilities?:?",
    r"benefits?:?",
    r"about (us|the company)",
    r"how to apply",
    r"compensation",
)

_YEARS_RE = re.compile(r"\d+\+?\s*years?\s*(?:of\s+)?experience", re.IGNORECASE)
_DEGREE_RE = re.compile(
    r"\b(?:bachelor'?s?|master'?s?|phd|doctorate)\b[ \t]*(?:degree)?[ \t]*(?:in[ \t]+[\w ,]+)?",
    re.IGNORECASE,
)


def _matches_any(line: str, patterns: tuple[re.Pattern[str], ...]) -> bool:
    return any(pattern.search(line) for pattern in patterns)


def is_list_item(line: str) -> bool:
    if match_bullet_prefix(line):
        return True
    return len(line) > _LOOSE_ITEM_MIN_CHARS and not line.endswith(":")


def _collect_section_items(
    text: str,
    headers: tuple[re.Pattern[str], ...],
    closers: tuple[re.Pattern[str], ...],
) -> list[str]:
    items: dict[str, None] = {}
    in_section = False
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if _matches_any(line, headers):
            in_section = True
            continue
        if _matches_any(line, closers):
            in_section = False
            continue
        if in_section and is_list_item(line):
            cleaned = strip_bullet_prefix(line)
            if len(cleaned) > _MIN_ITEM_CHARS:
                items.setdefault(cleaned, None)
    return list(items)


def _append_unless_contained(items: list[str], candidates: list[str]) -> None:
    for candidate in candidates:
        value = candidate.strip()
        if not value:
            continue
        lowered = value.lower()
        if any(lowered in existing.lower() for existing in items):
            continue
        items.append(value)


def extract_requirements(text: str) -> list[str]:
    requirements = _collect_section_items(text, REQUIREMENT_HEADERS, REQUIREMENT_CLOSERS)
    # Experience and degree asks often sit outside any headed list.
    _append_unless_contained(requirements, [match.group(0) for match in _YEARS_RE.finditer(text)])
    _append_unless_contained(requirements, [match.group(0) for match in _DEGREE_RE.finditer(text)])
    return list(dict.fromkeys(requirements))


def extract_responsibilities(text: str) -> list[str]:
    return _collect_section_items(text, RESPONSIBILITY_HEADERS, RESPONSIBILITY_CLOSERS)


def extract_qualifications(text: str) -> list[str]:
    return _collect_section_items(text, QUALIFICATION_HEADERS, QUALIFICATION_CLOSERS)


def parse_job_description(text: str) -> ParsedJobDescription:
    normalized_text = normalize_text(text)
    keywords = extract_keywords(normalized_text)

    parsed = ParsedJobDescription(
        raw_text=text,
        normalized_text=normalized_text,
        hard_skills=keywords.hard_skills,
        soft_skills=keywords.soft_skills,
        tools=keywords.tools,
        technologies=keywords.technologies,
        requirements=extract_requirements(normalized_text),
        responsibilities=extract_responsibilities(normalized_text),
        qualifications=extract_qualifications(normalized_text),
        all_keywords=keywords.all_keywords,
    )
    logger.info(
        "job_description_parsed keywords=%s requirements=%s responsibilities=%s qualifications=%s",
        len(parsed.all_keywords),
        len(parsed.requirements),
        len(parsed.responsibilities),
        len(parsed.qualifications),
    )
    return parsed
