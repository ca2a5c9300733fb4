from __future__ import annotations

from typing import Protocol

CATEGORIES: tuple[str, ...] = ("hard_skill", "soft_skill", "tool", "technology")


class TaxonomyProvider(Protocol):
    def terms(self, category: str) -> tuple[str, ...]:
        """Return the ordered terms of one category."""

    def contains(self, category: str, term: str) -> bool:
        """Return True when the lowercased term belongs to the category."""

    def category_of(self, term: str) -> str:
        """Return the first category holding the term, or "other"."""
