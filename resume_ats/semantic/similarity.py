from __future__ import annotations

from collections.abc import Iterable

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from resume_ats.core.scoring import get_scoring_value
from resume_ats.parsing.normalizer import remove_stop_words, tokenize


def _content_tokens(text: str) -> list[str]:
    return remove_stop_words(tokenize(text))


def compute_cosine_similarity(text1: str, text2: str) -> float:
    """TF-IDF cosine where the two texts are the whole corpus.

    Term frequencies are raw counts; cosine is invariant to the per-document
    scaling, so this equals the max-normalized formulation.
    """
    vectorizer = TfidfVectorizer(analyzer=_content_tokens, smooth_idf=True)
    try:
        matrix = vectorizer.fit_transform([text1, text2])
    except ValueError:
        # Empty vocabulary: neither text has a content word.
        return 0.0
    return min(float(cosine_similarity(matrix[0:1], matrix[1:2])[0][0]), 1.0)


def compute_jaccard_similarity(left: Iterable[str], right: Iterable[str]) -> float:
    left_set, right_set = set(left), set(right)
    union = left_set | right_set
    if not union:
        return 0.0
    return len(left_set & right_set) / len(union)


def compute_overlap_coefficient(left: Iterable[str], right: Iterable[str]) -> float:
    left_set, right_set = set(left), set(right)
    smaller = min(len(left_set), len(right_set))
    if smaller == 0:
        return 0.0
    return len(left_set & right_set) / smaller


def compute_weighted_similarity(
    resume_text: str,
    job_description_text: str,
    resume_keywords: list[str],
    job_keywords: list[str],
) -> float:
    weights = get_scoring_value("similarity.weights", {}) or {}
    resume_set = {keyword.lower() for keyword in resume_keywords}
    job_set = {keyword.lower() for keyword in job_keywords}

    weighted = (
        compute_cosine_similarity(resume_text, job_description_text) * float(weights.get("cosine", 0.3))
        + compute_jaccard_similarity(resume_set, job_set) * float(weights.get("jaccard", 0.3))
        + compute_overlap_coefficient(resume_set, job_set) * float(weights.get("overlap", 0.4))
    )
    return min(weighted, 1.0)
