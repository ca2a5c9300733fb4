from __future__ import annotations

import math
import re

WORDS_PER_PAGE = 500
_EDGE_LINES = 5

_TAB_RE = re.compile(r"\t")
_PIPE_RE = re.compile(r"\|")
_WIDE_GAP_RUN_RE = re.compile(r"\s{3,}")
_COLUMN_GAP_RE = re.compile(r"\S\s{10,}\S")

_HEADER_FOOTER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"page\s*\d+\s*(of\s*\d+)?", re.IGNORECASE),
    re.compile(r"^\d+$"),
    re.compile(r"confidential", re.IGNORECASE),
    re.compile(r"(?:©|\(c\))\s*\d{4}", re.IGNORECASE),
    re.compile(r"all rights reserved", re.IGNORECASE),
)


def _is_table_row(line: str) -> bool:
    return (
        len(_TAB_RE.findall(line)) >= 2
        or len(_PIPE_RE.findall(line)) >= 2
        or len(_WIDE_GAP_RUN_RE.findall(line)) >= 3
    )


def detect_tables(text: str, min_rows: int = 3) -> bool:
    consecutive = 0
    for line in (text or "").split("\n"):
        consecutive = consecutive + 1 if _is_table_row(line) else 0
        if consecutive >= min_rows:
            return True
    return False


def detect_columns(text: str) -> bool:
    lines = [line for line in (text or "").split("\n") if line.strip()]
    if not lines:
        return False
    short_lines = sum(1 for line in lines if len(line) < 50 and len(line.strip()) > 5)
    if short_lines / len(lines) > 0.6:
        return True
    return any(_COLUMN_GAP_RE.search(line) for line in lines)


def detect_headers_footers(text: str) -> bool:
    lines = (text or "").split("\n")
    edge_indices = set(range(min(_EDGE_LINES, len(lines))))
    edge_indices.update(range(max(0, len(lines) - _EDGE_LINES), len(lines)))
    # A short document shares lines between both ends; count each line once.
    matches = sum(
        1
        for index in edge_indices
        if any(pattern.search(lines[index]) for pattern in _HEADER_FOOTER_PATTERNS)
    )
    return matches >= 2


def count_words(text: str) -> int:
    return len((text or "").split())


def count_lines(text: str) -> int:
    return sum(1 for line in (text or "").split("\n") if line.strip())


def estimate_pages(text: str) -> int:
    return max(1, math.ceil(count_words(text) / WORDS_PER_PAGE))
