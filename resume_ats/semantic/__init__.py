from .similarity import (
    compute_cosine_similarity,
    compute_jaccard_similarity,
    compute_overlap_coefficient,
    compute_weighted_similarity,
)

__all__ = [
    "compute_cosine_similarity",
    "compute_jaccard_similarity",
    "compute_overlap_coefficient",
    "compute_weighted_similarity",
]
