from __future__ import annotations

from enum import Enum


class DocumentParseErrorKind(str, Enum):
    CORRUPTED = "corrupted"
    PASSWORD_PROTECTED = "password_protected"
    INVALID_FORMAT = "invalid_format"
    UNKNOWN = "unknown"


_GUIDANCE: dict[DocumentParseErrorKind, str] = {
    DocumentParseErrorKind.CORRUPTED: (
        "The file appears to be damaged. Re-export it from your editor "
        "(File > Save As / Export) and upload the new copy."
    ),
    DocumentParseErrorKind.PASSWORD_PROTECTED: (
        "The file is password-protected. Remove the password or export an "
        "unprotected copy, then upload it again."
    ),
    DocumentParseErrorKind.INVALID_FORMAT: (
        "The file content does not match its type. Make sure you upload a real "
        "PDF or DOCX file rather than a renamed one."
    ),
    DocumentParseErrorKind.UNKNOWN: (
        "Try saving the resume again as a standard PDF or DOCX and re-upload it."
    ),
}


class UnsupportedFileTypeError(ValueError):
    def __init__(self, mime_type: str):
        super().__init__(f"Unsupported file type: {mime_type or 'unknown'}. Upload a PDF or DOCX file.")
        self.mime_type = mime_type


class DocumentParseError(ValueError):
    """Extraction failure classified into a user-actionable kind."""

    def __init__(self, kind: DocumentParseErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def guidance(self) -> str:
        return _GUIDANCE[self.kind]

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message, "guidance": self.guidance}
