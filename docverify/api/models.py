"""Request/Response models for API endpoints."""

from pydantic import BaseModel, Field

from docverify.services.verification.models import VerificationOutcome


class VerificationSummary(BaseModel):
    """Result of one verification pass as returned to the caller."""

    id: str = Field(..., description="Verification record id")
    status: str = Field(..., description="pending, verified, suspicious or failed")
    explanation: str = Field(..., description="Human-readable explanation")
    confidence: int = Field(..., ge=0, le=100, description="Confidence score (0-100)")


class VerifyDocumentResponse(BaseModel):
    """Response model for the verify-document endpoint."""

    success: bool = True
    verification: VerificationSummary


class VerificationRecord(VerificationSummary):
    """A stored verification record."""

    filename: str
    document_id: str | None = None
    created_at: str | None = None

    @classmethod
    def from_outcome(cls, outcome: VerificationOutcome) -> "VerificationRecord":
        return cls(
            **outcome.to_response(),
            filename=outcome.filename,
            document_id=outcome.document_id,
            created_at=outcome.created_at,
        )


class VerificationListResponse(BaseModel):
    """Response model for listing a caller's verification records."""

    success: bool = True
    verifications: list[VerificationRecord] = []


class ErrorResponse(BaseModel):
    """Error envelope shared by every endpoint."""

    success: bool = False
    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
