from __future__ import annotations

from pydantic import BaseModel, Field

from .analysis import BulletAnalysis, FormattingIssue, KeywordMatch, SectionAnalysis, Suggestion
from .jd import ParsedJobDescription
from .resume import ParsedResume


class ATSScore(BaseModel):
    overall: int = Field(ge=0, le=100)
    keyword: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)
    section: int = Field(ge=0, le=100)
    similarity: int = Field(ge=0, le=100)


class ScanResult(BaseModel):
    id: str
    score: ATSScore
    keyword_matches: list[KeywordMatch] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    found_keywords: list[str] = Field(default_factory=list)
    formatting_issues: list[FormattingIssue] = Field(default_factory=list)
    section_analysis: list[SectionAnalysis] = Field(default_factory=list)
    bullet_analysis: list[BulletAnalysis] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    parsed_resume: ParsedResume
    parsed_job_description: ParsedJobDescription


class JobDescriptionRequest(BaseModel):
    text: str = Field(min_length=1, max_length=50000)
