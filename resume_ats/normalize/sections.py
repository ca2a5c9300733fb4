from __future__ import annotations

import re

from resume_ats.core.scoring import get_scoring_value, round_half_up
from resume_ats.parsing.normalizer import extract_bullets
from resume_ats.schemas import ResumeSection, SectionCoverage, SectionType

REQUIRED_SECTIONS: tuple[SectionType, ...] = ("experience", "education", "skills")
IMPORTANT_SECTIONS: tuple[SectionType, ...] = ("summary", "projects")
OPTIONAL_SECTIONS: tuple[SectionType, ...] = ("certifications", "awards", "publications", "languages")

_LEADING_MARKERS_RE = re.compile(r"^[\d.)\-•*\s]+")
_HEADER_PUNCTUATION_RE = re.compile(r"[:\-_•|]")
_TITLE_CASE_RE = re.compile(r"^[A-Z][a-z]*(\s+[A-Z][a-z]*)*$")
_SEPARATOR_RE = re.compile(r"^[-=_]{3,}$")
_UPPER_RE = re.compile(r"[A-Z]")
_NAME_WORD_RE = re.compile(r"^(?:[A-Z][a-z]*|[A-Z]+)$")
_DIGIT_RE = re.compile(r"\d")

DIRECT_HEADERS: dict[str, SectionType] = {
    "experience": "experience",
    "work experience": "experience",
    "professional experience": "experience",
    "employment": "experience",
    "employment history": "experience",
    "education": "education",
    "educational background": "education",
    "academic background": "education",
    "skills": "skills",
    "technical skills": "skills",
    "core skills": "skills",
    "key skills": "skills",
    "competencies": "skills",
    "summary": "summary",
    "professional summary": "summary",
    "profile": "summary",
    "objective": "summary",
    "career objective": "summary",
    "projects": "projects",
    "certifications": "certifications",
    "certificates": "certifications",
    "awards": "awards",
    "honors": "awards",
    "publications": "publications",
    "languages": "languages",
    "interests": "interests",
    "hobbies": "interests",
    "references": "references",
}


def _rules(section: SectionType, *patterns: str) -> list[tuple[re.Pattern[str], SectionType]]:
    return [(re.compile(pattern, re.IGNORECASE), section) for pattern in patterns]


# Evaluated top to bottom; the first matching pattern decides the type.
HEADER_RULES: tuple[tuple[re.Pattern[str], SectionType], ...] = tuple(
    _rules(
        "summary",
        r"^(professional\s+)?summary",
        r"^(career\s+)?objective",
        r"^(career\s+)?profile",
        r"^about\s*me",
        r"^executive\s+summary",
        r"^personal\s+statement",
        r"^overview",
        r"summary$",
        r"profile$",
        r"objective$",
    )
    + _rules(
        "experience",
        r"^(work\s+)?experience",
        r"^(professional\s+)?experience",
        r"^employment(\s+history)?",
        r"^work\s+history",
        r"^career\s+history",
        r"^relevant\s+experience",
        r"^professional\s+background",
        r"experience$",
        r"work\s+experience",
        r"professional\s+experience",
    )
    + _rules(
        "education",
        r"^education",
        r"^academic(\s+background)?",
        r"^educational\s+background",
        r"^qualifications",
        r"^academic\s+qualifications",
        r"^degrees",
        r"education$",
        r"educational\s+background",
    )
    + _rules(
        "skills",
        r"^(technical\s+)?skills",
        r"^core\s+competencies",
        r"^competencies",
        r"^expertise",
        r"^areas\s+of\s+expertise",
        r"^proficiencies",
        r"^technical\s+proficiencies",
        r"^key\s+skills",
        r"^skill\s+set",
        r"skills$",
        r"technical\s+skills",
        r"core\s+skills",
    )
    + _rules(
        "projects",
        r"^projects",
        r"^personal\s+projects",
        r"^key\s+projects",
        r"^notable\s+projects",
        r"^selected\s+projects",
        r"^portfolio",
    )
    + _rules(
        "certifications",
        r"^certifications?",
        r"^licenses?(\s+and\s+certifications?)?",
        r"^professional\s+certifications?",
        r"^credentials",
        r"^accreditations?",
    )
    + _rules(
        "awards",
        r"^awards?(\s+and\s+honors?)?",
        r"^honors?(\s+and\s+awards?)?",
        r"^recognition",
        r"^achievements?",
        r"^accomplishments?",
    )
    + _rules(
        "publications",
        r"^publications?",
        r"^papers?",
        r"^research(\s+papers?)?",
        r"^articles?",
    )
    + _rules(
        "languages",
        r"^languages?",
        r"^language\s+skills",
        r"^linguistic\s+skills",
    )
    + _rules(
        "interests",
        r"^interests?",
        r"^hobbies(\s+and\s+interests?)?",
        r"^personal\s+interests?",
        r"^activities",
        r"^extracurricular(\s+activities)?",
    )
    + _rules(
        "references",
        r"^references?",
        r"^professional\s+references?",
        r"^referees?",
    )
)

CONTACT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b[\w.-]+@[\w.-]+\.\w{2,}\b"),
    re.compile(r"\b\d{3}[-.\s]?\d{3}[-.\s]?\d{4}\b"),
    re.compile(r"\b\+\d{1,3}[-.\s]?\d{3}[-.\s]?\d{3}[-.\s]?\d{4}\b"),
    re.compile(r"linkedin\.com", re.IGNORECASE),
    re.compile(r"github\.com", re.IGNORECASE),
    re.compile(r"twitter\.com", re.IGNORECASE),
    re.compile(r"\b\d+\s+[\w\s]+,\s*[\w\s]+,?\s*[A-Z]{2}\s*\d{5}"),
)


def _clean_header(line: str) -> str:
    cleaned = _LEADING_MARKERS_RE.sub("", line)
    return _HEADER_PUNCTUATION_RE.sub("", cleaned).strip().lower()


def identify_section_header(line: str) -> SectionType:
    cleaned = _clean_header(line)
    direct = DIRECT_HEADERS.get(cleaned)
    if direct is not None:
        return direct
    for pattern, section in HEADER_RULES:
        if pattern.search(cleaned):
            return section
    return "unknown"


def is_section_header(line: str, all_lines: list[str], index: int) -> bool:
    if len(line) > 60:
        return False
    words = line.split()
    if len(words) > 6:
        return False
    if len(words) <= 3 and len(line) < 25:
        return True

    cleaned = _HEADER_PUNCTUATION_RE.sub("", line).strip()
    next_line = all_lines[index + 1].strip() if index + 1 < len(all_lines) else ""
    previous_line = all_lines[index - 1].strip() if index > 0 else ""

    score = 0
    if line == line.upper() and _UPPER_RE.search(line):
        score += 2
    if _TITLE_CASE_RE.match(cleaned):
        score += 1
    if line.endswith(":"):
        score += 1
    if len(line) < 40:
        score += 1
    if not next_line or _SEPARATOR_RE.match(next_line):
        score += 1
    if not previous_line:
        score += 1
    return score >= 1


def is_contact_info(line: str) -> bool:
    return any(pattern.search(line) for pattern in CONTACT_PATTERNS)


def is_name_header(line: str, index: int) -> bool:
    if index > 3:
        return False
    words = line.split()
    if len(words) < 2 or len(words) > 5:
        return False
    if "@" in line or _DIGIT_RE.search(line):
        return False
    return all(_NAME_WORD_RE.match(word) for word in words)


def _merge_duplicates(drafts: list[dict[str, object]]) -> list[ResumeSection]:
    merged: dict[str, dict[str, object]] = {}
    for draft in drafts:
        existing = merged.get(str(draft["name"]))
        if existing is None:
            merged[str(draft["name"])] = dict(draft)
            continue
        existing["content"] = f"{existing['content']}\n\n{draft['content']}"
        existing["end_index"] = draft["end_index"]

    return [
        ResumeSection(
            name=draft["name"],
            content=str(draft["content"]),
            start_index=int(draft["start_index"]),
            end_index=int(draft["end_index"]),
            bullets=extract_bullets(str(draft["content"])),
        )
        for draft in merged.values()
    ]


def detect_sections(text: str) -> list[ResumeSection]:
    lines = (text or "").split("\n")
    drafts: list[dict[str, object]] = []
    pending: dict[str, object] | None = None
    buffer: list[str] = []

    def flush_pending(end_index: int) -> None:
        nonlocal pending
        if pending is None:
            return
        pending["content"] = "\n".join(buffer).strip()
        pending["end_index"] = end_index
        drafts.append(pending)
        pending = None

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not line:
            if pending is not None:
                buffer.append("")
            continue

        section = identify_section_header(line)
        if section != "unknown" and is_section_header(line, lines, index):
            flush_pending(index - 1)
            pending = {"name": section, "start_index": index}
            buffer = []
        elif pending is not None:
            buffer.append(line)
        elif not (is_contact_info(line) or is_name_header(line, index)):
            pending = {"name": "summary", "start_index": index}
            buffer = [line]

    flush_pending(len(lines) - 1)
    return _merge_duplicates(drafts)


def get_section_score(sections: list[ResumeSection]) -> SectionCoverage:
    points = get_scoring_value("sections.points", {}) or {}
    required_points = float(points.get("required", 30))
    important_points = float(points.get("important", 15))
    optional_points = float(points.get("optional", 5))

    present = {section.name for section in sections}
    found: list[SectionType] = []
    missing: list[SectionType] = []
    achieved = 0.0
    maximum = 0.0

    for names, weight in ((REQUIRED_SECTIONS, required_points), (IMPORTANT_SECTIONS, important_points)):
        for name in names:
            maximum += weight
            if name in present:
                achieved += weight
                found.append(name)
            else:
                missing.append(name)

    # Optional sections only add to the achieved score; their absence costs nothing.
    for name in OPTIONAL_SECTIONS:
        if name in present:
            achieved += optional_points
            found.append(name)

    score = min(100, round_half_up(achieved / maximum * 100)) if maximum else 0
    return SectionCoverage(score=score, found=found, missing=missing)
