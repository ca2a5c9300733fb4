from .analysis import (
    BulletAnalysis,
    BulletIssue,
    FormattingIssue,
    KeywordMatch,
    KeywordMatchResult,
    SectionAnalysis,
    Suggestion,
)
from .jd import KeywordSet, ParsedJobDescription
from .resume import (
    ExtractedDocument,
    ParsedResume,
    ResumeMetadata,
    ResumeSection,
    SectionCoverage,
    SectionType,
)
from .scan import ATSScore, JobDescriptionRequest, ScanResult

__all__ = [
    "SectionType",
    "ResumeSection",
    "ResumeMetadata",
    "ExtractedDocument",
    "ParsedResume",
    "SectionCoverage",
    "KeywordSet",
    "ParsedJobDescription",
    "KeywordMatch",
    "KeywordMatchResult",
    "BulletIssue",
    "BulletAnalysis",
    "SectionAnalysis",
    "FormattingIssue",
    "Suggestion",
    "ATSScore",
    "ScanResult",
    "JobDescriptionRequest",
]
