from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class KeywordSet(BaseModel):
    hard_skills: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    all_keywords: list[str] = Field(default_factory=list)


class ParsedJobDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    normalized_text: str
    hard_skills: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    qualifications: list[str] = Field(default_factory=list)
    all_keywords: list[str] = Field(default_factory=list)
