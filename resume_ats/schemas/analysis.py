from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .resume import SectionType

KeywordCategory = Literal["hard_skill", "soft_skill", "tool", "technology", "other"]
Severity = Literal["error", "warning", "info"]
Priority = Literal["high", "medium", "low"]
BulletIssueType = Literal[
    "weak_action_verb",
    "no_metrics",
    "too_long",
    "too_short",
    "passive_voice",
    "first_person",
    "buzzwords",
    "vague_language",
]
FormattingIssueType = Literal[
    "has_images",
    "has_tables",
    "has_columns",
    "has_headers_footers",
    "too_long",
    "too_short",
    "missing_contact",
    "inconsistent_formatting",
    "non_standard_fonts",
    "special_characters",
]
SuggestionType = Literal[
    "add_keywords",
    "improve_bullets",
    "add_section",
    "fix_formatting",
    "add_metrics",
    "strengthen_verbs",
    "tailor_content",
]


class KeywordMatch(BaseModel):
    keyword: str
    found: bool
    category: KeywordCategory = "other"
    frequency: int = Field(default=0, ge=0)


class KeywordMatchResult(BaseModel):
    matches: list[KeywordMatch] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)


class BulletIssue(BaseModel):
    type: BulletIssueType
    message: str


class BulletAnalysis(BaseModel):
    text: str
    section: SectionType
    score: int = Field(ge=0, le=100)
    issues: list[BulletIssue] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    rewrite_suggestion: str | None = None


class SectionAnalysis(BaseModel):
    name: SectionType
    found: bool
    score: int = Field(ge=0, le=100)
    feedback: str
    suggestions: list[str] = Field(default_factory=list)


class FormattingIssue(BaseModel):
    type: FormattingIssueType
    severity: Severity
    message: str
    suggestion: str


class Suggestion(BaseModel):
    type: SuggestionType
    priority: Priority
    title: str
    description: str
    action_items: list[str] = Field(default_factory=list)
