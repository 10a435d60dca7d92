"""Verification service models."""

from dataclasses import dataclass
from typing import Any

from docverify.config.constants import (
    PENDING_CONFIDENCE,
    PENDING_EXPLANATION,
    VerificationStatus,
)


@dataclass(frozen=True)
class ClassificationResult:
    """Status, explanation and confidence chosen by the classifier."""

    status: VerificationStatus
    explanation: str
    confidence: int

    @classmethod
    def pending(cls) -> "ClassificationResult":
        """Initial value before any branch is chosen."""
        return cls(
            status=VerificationStatus.PENDING,
            explanation=PENDING_EXPLANATION,
            confidence=PENDING_CONFIDENCE,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "status": self.status.value,
            "explanation": self.explanation,
            "confidence": self.confidence,
        }


@dataclass
class DocumentUpload:
    """A document received from the caller."""

    filename: str
    content_type: str
    content: bytes
    document_id: str | None = None

    def __post_init__(self) -> None:
        # Blank form values mean "no document record"
        if self.document_id is not None and not self.document_id.strip():
            self.document_id = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class VerificationOutcome:
    """A persisted verification record."""

    id: str
    filename: str
    status: VerificationStatus
    explanation: str
    confidence: int
    document_id: str | None = None
    user_id: str | None = None
    extracted_text_sample: str = ""
    created_at: str | None = None

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "VerificationOutcome":
        """Build an outcome from a ``verifications`` row."""
        document_id = row.get("document_id")
        user_id = row.get("user_id")
        return cls(
            id=str(row["id"]),
            filename=row.get("filename") or "",
            status=VerificationStatus(row["status"]),
            explanation=row.get("explanation") or "",
            confidence=int(row.get("ai_confidence_score") or 0),
            document_id=str(document_id) if document_id is not None else None,
            user_id=str(user_id) if user_id is not None else None,
            extracted_text_sample=row.get("processed_text") or "",
            created_at=row.get("created_at"),
        )

    def to_response(self) -> dict[str, Any]:
        """Payload returned to the caller after a verification pass."""
        return {
            "id": self.id,
            "status": self.status.value,
            "explanation": self.explanation,
            "confidence": self.confidence,
        }
