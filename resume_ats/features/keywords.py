from __future__ import annotations

import re
from functools import lru_cache

from resume_ats.parsing.normalizer import extract_phrases, remove_stop_words, tokenize
from resume_ats.schemas import KeywordMatch, KeywordMatchResult, KeywordSet
from resume_ats.taxonomy import CATEGORIES, TaxonomyProvider, get_default_taxonomy_provider

_BOUNDARY = r"""[\s,;:.!?()\[\]{}/"'\-]"""

_CATEGORY_FIELDS = {
    "hard_skill": "hard_skills",
    "soft_skill": "soft_skills",
    "tool": "tools",
    "technology": "technologies",
}


@lru_cache(maxsize=2048)
def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?:^|{_BOUNDARY}){re.escape(term)}(?:{_BOUNDARY}|$)", re.IGNORECASE)


def contains_whole_word(text: str, term: str) -> bool:
    """Match a taxonomy term only when punctuation, whitespace or an edge surrounds it."""
    return bool(_term_pattern(term).search(text))


def extract_keywords(text: str, taxonomy: TaxonomyProvider | None = None) -> KeywordSet:
    provider = taxonomy or get_default_taxonomy_provider()
    lowered = (text or "").lower()
    candidates = [*remove_stop_words(tokenize(lowered)), *extract_phrases(lowered, 2, 3)]

    found: dict[str, dict[str, None]] = {category: {} for category in CATEGORIES}
    for candidate in candidates:
        term = candidate.strip().lower()
        for category in CATEGORIES:
            if provider.contains(category, term):
                found[category].setdefault(term, None)

    # Multi-word terms can straddle stopwords or sentence limits, so scan the full text too.
    for category in CATEGORIES:
        for term in provider.terms(category):
            if term not in found[category] and contains_whole_word(lowered, term):
                found[category].setdefault(term, None)

    grouped = {_CATEGORY_FIELDS[category]: list(terms) for category, terms in found.items()}
    all_keywords = list(dict.fromkeys(term for category in CATEGORIES for term in found[category]))
    return KeywordSet(**grouped, all_keywords=all_keywords)


def get_keyword_category(keyword: str, taxonomy: TaxonomyProvider | None = None) -> str:
    provider = taxonomy or get_default_taxonomy_provider()
    return provider.category_of(keyword)


def match_keywords(
    resume_keywords: list[str],
    job_keywords: list[str],
    taxonomy: TaxonomyProvider | None = None,
) -> KeywordMatchResult:
    provider = taxonomy or get_default_taxonomy_provider()
    resume_lookup = {keyword.lower() for keyword in resume_keywords}

    matches: list[KeywordMatch] = []
    matched: list[str] = []
    missing: list[str] = []
    for keyword in job_keywords:
        found = keyword.lower() in resume_lookup
        matches.append(
            KeywordMatch(
                keyword=keyword,
                found=found,
                category=provider.category_of(keyword),
                frequency=1 if found else 0,
            )
        )
        (matched if found else missing).append(keyword)

    percentage = (len(matched) / len(job_keywords) * 100) if job_keywords else 0.0
    return KeywordMatchResult(
        matches=matches,
        matched_keywords=matched,
        missing_keywords=missing,
        match_percentage=percentage,
    )
