from __future__ import annotations

import random
import re

from resume_ats.core.scoring import get_scoring_value
from resume_ats.schemas import BulletAnalysis, BulletIssue, ResumeSection, SectionType

ANALYZED_SECTIONS: frozenset[str] = frozenset({"experience", "projects"})

STRONG_ACTION_VERBS = frozenset(
    {
        "achieved", "accelerated", "accomplished", "acquired", "advanced", "amplified",
        "analyzed", "architected", "automated", "boosted", "built", "captured",
        "championed", "consolidated", "converted", "created", "decreased", "delivered",
        "designed", "developed", "directed", "doubled", "drove", "eliminated",
        "enabled", "engineered", "established", "exceeded", "executed", "expanded",
        "generated", "grew", "headed", "identified", "implemented", "improved",
        "increased", "influenced", "initiated", "innovated", "integrated", "introduced",
        "launched", "led", "leveraged", "managed", "maximized", "mentored",
        "modernized", "negotiated", "optimized", "orchestrated", "overhauled", "partnered",
        "pioneered", "planned", "produced", "propelled", "quadrupled", "raised",
        "rebranded", "rebuilt", "recaptured", "redesigned", "reduced", "reengineered",
        "refactored", "refined", "reformed", "reinvented", "relaunched", "remediated",
        "reorganized", "replaced", "resolved", "restructured", "revamped", "reversed",
        "revolutionized", "scaled", "secured", "shaped", "simplified", "slashed",
        "solved", "spearheaded", "standardized", "steered", "streamlined", "strengthened",
        "surpassed", "synchronized", "systematized", "targeted", "trained", "transformed",
        "tripled", "troubleshot", "turned around", "unified", "upgraded", "utilized",
    }
)

WEAK_VERBS = frozenset(
    {
        "assisted", "helped", "worked", "was responsible", "responsible for",
        "duties included", "handled", "participated", "contributed", "involved",
        "supported", "aided", "tasked with", "assigned to", "served as",
    }
)
_WEAK_PHRASES = tuple(sorted(verb for verb in WEAK_VERBS if " " in verb))

BUZZWORDS: tuple[str, ...] = (
    "synergy", "leverage", "proactive", "paradigm", "holistic", "ecosystem",
    "bandwidth", "circle back", "deep dive", "drill down", "move the needle",
    "low-hanging fruit", "best practices", "value-add", "thought leader",
    "game changer", "disruptive", "ninja", "rockstar", "guru", "wizard",
)
VAGUE_TERMS: tuple[str, ...] = ("various", "several", "many", "some", "numerous", "multiple")

REWRITE_VERBS: tuple[str, ...] = ("Developed", "Implemented", "Led", "Designed", "Optimized", "Streamlined")
METRIC_PLACEHOLDER = "[Add: resulting in X% improvement / saving $X / impacting X users]"

_NON_LETTER_RE = re.compile(r"[^a-z]")
_INFLECTED_RE = re.compile(r"^[a-z]+(?:ed|ing)$")
_METRIC_RE = re.compile(
    r"\d+%|\$\d+|\d+\s*(?:k|m|million|billion|thousand)|\d+x"
    r"|\d+\s*(?:users?|customers?|clients?|projects?|teams?|members?)",
    re.IGNORECASE,
)
_PASSIVE_RE = re.compile(r"\b(?:was|were|been|being)\s+\w+ed\b", re.IGNORECASE)
_FIRST_PERSON_RE = re.compile(r"\b(?:i|my|me)\b", re.IGNORECASE)


def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w-]){re.escape(term)}(?![\w-])", re.IGNORECASE)


_BUZZWORD_PATTERNS = tuple((term, _word_pattern(term)) for term in BUZZWORDS)
_VAGUE_PATTERNS = tuple((term, _word_pattern(term)) for term in VAGUE_TERMS)


def _penalty(name: str, default: int) -> int:
    return int(get_scoring_value(f"bullets.penalties.{name}", default))


def _first_word(bullet: str) -> str:
    parts = bullet.split()
    return parts[0] if parts else ""


def _weak_phrase(bullet: str) -> str | None:
    lowered = bullet.lower()
    for phrase in _WEAK_PHRASES:
        if lowered == phrase or lowered.startswith(f"{phrase} "):
            return phrase
    return None


def _starts_with_weak_verb(bullet: str, first_word: str) -> bool:
    return first_word in WEAK_VERBS or _weak_phrase(bullet) is not None


def has_metrics(text: str) -> bool:
    return bool(_METRIC_RE.search(text))


def find_terms(text: str, patterns: tuple[tuple[str, re.Pattern[str]], ...]) -> list[str]:
    return [term for term, pattern in patterns if pattern.search(text)]


def build_rewrite_suggestion(bullet: str, issues: list[BulletIssue], rng: random.Random) -> str | None:
    weak_opening = any(issue.type == "weak_action_verb" for issue in issues)
    missing_metrics = any(issue.type == "no_metrics" for issue in issues)
    if not (weak_opening or missing_metrics):
        return None

    suggestion = bullet
    if weak_opening:
        # Multi-word openers such as "responsible for" are replaced whole.
        opening = _weak_phrase(bullet) or _first_word(bullet)
        suggestion = f"{rng.choice(REWRITE_VERBS)}{bullet[len(opening):]}"
    if missing_metrics:
        suggestion = f"{suggestion} {METRIC_PLACEHOLDER}"
    return suggestion


def analyze_bullet(bullet: str, section: SectionType, rng: random.Random | None = None) -> BulletAnalysis:
    rng = rng or random.Random()
    issues: list[BulletIssue] = []
    suggestions: list[str] = []
    score = 100

    def flag(issue_type: str, message: str, suggestion: str, penalty: int) -> None:
        nonlocal score
        issues.append(BulletIssue(type=issue_type, message=message))
        suggestions.append(suggestion)
        score -= penalty

    first_word = _NON_LETTER_RE.sub("", _first_word(bullet).lower())
    if _starts_with_weak_verb(bullet, first_word):
        flag(
            "weak_action_verb",
            f'Starts with weak verb "{first_word}". Use a stronger action verb.',
            f'Replace "{first_word}" with a strong action verb like "Led", "Developed", or "Implemented"',
            _penalty("weak_verb", 15),
        )
    elif first_word not in STRONG_ACTION_VERBS and not _INFLECTED_RE.match(first_word):
        flag(
            "weak_action_verb",
            "Does not start with a strong action verb.",
            "Start bullet points with a strong past-tense action verb",
            _penalty("not_action_verb", 10),
        )

    if not has_metrics(bullet):
        flag(
            "no_metrics",
            "No quantifiable metrics found.",
            "Add specific numbers, percentages, or dollar amounts to quantify your impact",
            _penalty("no_metrics", 20),
        )

    max_length = int(get_scoring_value("bullets.max_length", 200))
    min_length = int(get_scoring_value("bullets.min_length", 30))
    if len(bullet) > max_length:
        flag(
            "too_long",
            f"Bullet is too long ({len(bullet)} characters). Keep under 150 characters.",
            "Shorten this bullet point to make it more concise and scannable",
            _penalty("too_long", 10),
        )
    elif len(bullet) < min_length:
        flag(
            "too_short",
            "Bullet is too short. Add more detail about your impact.",
            "Expand this bullet with more context about your responsibilities and results",
            _penalty("too_short", 10),
        )

    if _PASSIVE_RE.search(bullet):
        flag(
            "passive_voice",
            "Uses passive voice. Rewrite in active voice.",
            "Rewrite using active voice to emphasize your direct contributions",
            _penalty("passive_voice", 10),
        )

    if _FIRST_PERSON_RE.search(bullet):
        flag(
            "first_person",
            'Uses first person pronouns. Resume bullets should not use "I", "my", or "me".',
            "Remove first-person pronouns and start directly with the action verb",
            _penalty("first_person", 5),
        )

    buzzwords = find_terms(bullet, _BUZZWORD_PATTERNS)
    if buzzwords:
        flag(
            "buzzwords",
            f"Contains overused buzzwords: {', '.join(buzzwords)}",
            "Replace buzzwords with specific, concrete descriptions of your work",
            _penalty("buzzword", 5) * len(buzzwords),
        )

    vague = find_terms(bullet, _VAGUE_PATTERNS)
    if vague:
        flag(
            "vague_language",
            f"Uses vague quantifiers: {', '.join(vague)}. Be specific.",
            "Replace vague terms with specific numbers or details",
            _penalty("vague_term", 5) * len(vague),
        )

    return BulletAnalysis(
        text=bullet,
        section=section,
        score=max(0, score),
        issues=issues,
        suggestions=suggestions,
        rewrite_suggestion=build_rewrite_suggestion(bullet, issues, rng),
    )


def analyze_bullets(sections: list[ResumeSection], rng: random.Random | None = None) -> list[BulletAnalysis]:
    rng = rng or random.Random()
    return [
        analyze_bullet(bullet, section.name, rng)
        for section in sections
        if section.name in ANALYZED_SECTIONS
        for bullet in section.bullets
    ]
