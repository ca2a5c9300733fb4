from __future__ import annotations

import json
from pathlib import Path

from .provider import CATEGORIES, TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, skills_path: str | Path | None = None) -> None:
        path = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")
        self._terms = self._load_terms(path)
        self._lookup = {category: frozenset(terms) for category, terms in self._terms.items()}

    @staticmethod
    def _load_terms(path: Path) -> dict[str, tuple[str, ...]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        terms: dict[str, tuple[str, ...]] = {}
        for category in CATEGORIES:
            values = raw.get(category) or []
            # Keep file order, drop repeats within a category.
            cleaned = (str(value).strip().lower() for value in values)
            terms[category] = tuple(dict.fromkeys(value for value in cleaned if value))
        return terms

    def terms(self, category: str) -> tuple[str, ...]:
        return self._terms.get(category, ())

    def contains(self, category: str, term: str) -> bool:
        return term.strip().lower() in self._lookup.get(category, frozenset())

    def category_of(self, term: str) -> str:
        normalized = term.strip().lower()
        for category in CATEGORIES:
            if normalized in self._lookup[category]:
                return category
        return "other"
