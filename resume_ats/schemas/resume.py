from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SectionType = Literal[
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "awards",
    "publications",
    "languages",
    "interests",
    "references",
    "unknown",
]
FileType = Literal["pdf", "docx"]


class ResumeSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: SectionType
    content: str = ""
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)
    bullets: list[str] = Field(default_factory=list)


class ResumeMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(default=0, ge=0)
    line_count: int = Field(default=0, ge=0)
    has_images: bool = False
    has_tables: bool = False
    has_columns: bool = False
    has_headers_footers: bool = False
    estimated_pages: int = Field(default=1, ge=0)
    file_size: int = Field(default=0, ge=0)
    file_type: FileType = "pdf"


class ExtractedDocument(BaseModel):
    text: str
    metadata: ResumeMetadata


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    normalized_text: str
    sections: list[ResumeSection] = Field(default_factory=list)
    metadata: ResumeMetadata

    def get_section(self, name: SectionType) -> ResumeSection | None:
        for section in self.sections:
            if section.name == name:
                return section
        return None


class SectionCoverage(BaseModel):
    score: int = Field(ge=0, le=100)
    found: list[SectionType] = Field(default_factory=list)
    missing: list[SectionType] = Field(default_factory=list)
