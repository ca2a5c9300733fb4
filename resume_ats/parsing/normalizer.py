from __future__ import annotations

import re

_CHAR_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile("[\u2018\u2019]"), "'"),
    (re.compile("[\u201c\u201d]"), '"'),
    (re.compile("\u2013"), "-"),
    (re.compile("\u2014"), "--"),
    (re.compile("\u2026"), "..."),
    (re.compile("\u00a0"), " "),
    (re.compile("[\u00ad\u200b-\u200d\ufeff]"), ""),
)
BULLET_GLYPH = "\u2022"
_BULLET_GLYPHS_RE = re.compile(
    "[\u2022\u2023\u25e6\u2043\u2219\u25aa\u25ab\u25cf\u25cb\u25a0\u25a1"
    "\u25ba\u25b8\u25b9\u25b6\u27a4\u27a2\u27a3\u2794\u2192\u21d2\u27f6"
    "\u25c6\u25c7]"
)
_HORIZONTAL_SPACE_RE = re.compile(r"[ \t]+")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
_ANALYSIS_STRIP_RE = re.compile(r"[^\w\s\-.]")
_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"^\d+$")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")

# Ordered, first match wins.
BULLET_PREFIX_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[\u2022\-*+]\s*"),
    re.compile(r"^[a-z]\)\s*", re.IGNORECASE),
    re.compile(r"^\d+[.)]\s*"),
    re.compile(r"^[ivxIVX]+[.)]\s*"),
    re.compile(r"^\u25cb\s*"),
)

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "shall", "can", "need",
        "dare", "ought", "used", "i", "me", "my", "myself", "we", "our",
        "ours", "ourselves", "you", "your", "yours", "yourself", "yourselves",
        "he", "him", "his", "himself", "she", "her", "hers", "herself", "it",
        "its", "itself", "they", "them", "their", "theirs", "themselves",
        "what", "which", "who", "whom", "this", "that", "these", "those",
        "am", "being", "having", "doing", "because", "until", "while",
        "about", "against", "between", "into", "through", "during", "before",
        "after", "above", "below", "up", "down", "out", "off", "over", "under",
        "again", "further", "then", "once", "here", "there", "when", "where",
        "why", "how", "all", "each", "few", "more", "most", "other", "some",
        "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too",
        "very", "just", "also", "now", "etc", "eg", "ie",
    }
)
# Phrase boundaries only; a smaller list so "time management" style phrases survive.
_PHRASE_STOP_WORDS = frozenset(
    {"the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
)
_PHRASE_EDGE_PUNCTUATION = ".,;:!?()[]{}\"'"


def normalize_text(text: str) -> str:
    normalized = text or ""
    for pattern, replacement in _CHAR_REPLACEMENTS:
        normalized = pattern.sub(replacement, normalized)
    normalized = _BULLET_GLYPHS_RE.sub(BULLET_GLYPH, normalized)
    normalized = normalized.replace("\r\n", "\n").replace("\r", "\n")
    normalized = _HORIZONTAL_SPACE_RE.sub(" ", normalized)
    # Trim lines before collapsing so whitespace-only lines count as blank.
    normalized = "\n".join(line.strip() for line in normalized.split("\n"))
    normalized = _EXCESS_NEWLINES_RE.sub("\n\n", normalized)
    return normalized.strip()


def clean_for_analysis(text: str) -> str:
    cleaned = normalize_text(text).lower()
    cleaned = _ANALYSIS_STRIP_RE.sub(" ", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def tokenize(text: str) -> list[str]:
    return [
        token
        for token in clean_for_analysis(text).split(" ")
        if len(token) > 1 and not _DIGITS_RE.match(token)
    ]


def remove_stop_words(tokens: list[str]) -> list[str]:
    return [token for token in tokens if token.lower() not in STOP_WORDS]


def extract_sentences(text: str) -> list[str]:
    sentences = (match.group(0).strip() for match in _SENTENCE_RE.finditer(text or ""))
    return [sentence for sentence in sentences if len(sentence) > 10]


def _is_valid_phrase(words: list[str]) -> bool:
    if words[0] in _PHRASE_STOP_WORDS or words[-1] in _PHRASE_STOP_WORDS:
        return False
    return any(word not in _PHRASE_STOP_WORDS for word in words)


def extract_phrases(text: str, min_words: int = 2, max_words: int = 4) -> list[str]:
    phrases: dict[str, None] = {}
    for sentence in extract_sentences(text):
        words = [word.strip(_PHRASE_EDGE_PUNCTUATION) for word in sentence.split()]
        words = [word for word in words if word]
        for length in range(min_words, min(max_words, len(words)) + 1):
            for start in range(0, len(words) - length + 1):
                window = [word.lower() for word in words[start : start + length]]
                if _is_valid_phrase(window):
                    phrases.setdefault(" ".join(window), None)
    return list(phrases)


def match_bullet_prefix(line: str) -> re.Match[str] | None:
    for pattern in BULLET_PREFIX_PATTERNS:
        match = pattern.match(line)
        if match:
            return match
    return None


def strip_bullet_prefix(line: str) -> str:
    stripped = line.strip()
    match = match_bullet_prefix(stripped)
    if match is None:
        return stripped
    return stripped[match.end() :].strip()


def extract_bullets(text: str) -> list[str]:
    bullets: list[str] = []
    for line in (text or "").split("\n"):
        trimmed = line.strip()
        match = match_bullet_prefix(trimmed)
        if match is None:
            continue
        bullet_text = trimmed[match.end() :].strip()
        if len(bullet_text) > 10:
            bullets.append(bullet_text)
    return bullets
