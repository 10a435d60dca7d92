"""Keyword-based document classifier."""

from collections.abc import Iterable

from docverify.config.constants import (
    EDUCATION_KEYWORDS,
    EDUCATIONAL_CONFIDENCE,
    EDUCATIONAL_EXPLANATION,
    FAILED_CONFIDENCE,
    FAILED_EXPLANATION,
    PROFESSIONAL_CONFIDENCE,
    PROFESSIONAL_EXPLANATION,
    SUSPICIOUS_CONFIDENCE,
    SUSPICIOUS_EXPLANATION,
    SUSPICIOUS_KEYWORDS,
    VerificationStatus,
)
from docverify.services.verification.models import ClassificationResult


def matched_keywords(text: str, filename: str, keywords: Iterable[str]) -> list[str]:
    """
    Return the keywords present in the text or the filename.

    Matching is a case-insensitive substring test. A keyword found in both
    places is reported once.
    """
    text_lower = (text or "").lower()
    filename_lower = (filename or "").lower()
    return [kw for kw in keywords if kw in text_lower or kw in filename_lower]


def score_keywords(text: str, filename: str) -> tuple[int, int]:
    """Return ``(education_score, suspicious_score)`` for a document."""
    education = len(matched_keywords(text, filename, EDUCATION_KEYWORDS))
    suspicious = len(matched_keywords(text, filename, SUSPICIOUS_KEYWORDS))
    return education, suspicious


def decide(education_score: int, suspicious_score: int) -> ClassificationResult:
    """Map keyword scores to a result. Branch order matters."""
    if suspicious_score > 0:
        return ClassificationResult(
            VerificationStatus.SUSPICIOUS, SUSPICIOUS_EXPLANATION, SUSPICIOUS_CONFIDENCE
        )
    if education_score >= 2:
        return ClassificationResult(
            VerificationStatus.VERIFIED, EDUCATIONAL_EXPLANATION, EDUCATIONAL_CONFIDENCE
        )
    if education_score >= 1:
        return ClassificationResult(
            VerificationStatus.VERIFIED, PROFESSIONAL_EXPLANATION, PROFESSIONAL_CONFIDENCE
        )
    return ClassificationResult(VerificationStatus.FAILED, FAILED_EXPLANATION, FAILED_CONFIDENCE)


def classify_document(text: str, filename: str) -> ClassificationResult:
    """
    Classify extracted text and filename into a verification result.

    Args:
        text: Text produced by the extractor
        filename: Original upload filename

    Returns:
        ClassificationResult with status, explanation and confidence
    """
    education_score, suspicious_score = score_keywords(text, filename)
    return decide(education_score, suspicious_score)
