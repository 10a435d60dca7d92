"""Verification record persistence."""

import logging

import httpx

from docverify.config.constants import VERIFICATIONS_TABLE
from docverify.config.settings import Settings
from docverify.infrastructure.database.helpers import audit_log, check_db_row
from docverify.infrastructure.platform.client import PlatformClient
from docverify.services.verification.errors import PersistenceError
from docverify.services.verification.models import (
    ClassificationResult,
    DocumentUpload,
    VerificationOutcome,
)

logger = logging.getLogger(__name__)

STORE_FAILED_MESSAGE = "Failed to store verification result"
LIST_FAILED_MESSAGE = "Failed to load verification results"


class VerificationRepository:
    """Reads and writes rows of the ``verifications`` table."""

    def __init__(self, settings: Settings, platform: PlatformClient) -> None:
        self.settings = settings
        self.platform = platform

    async def create(
        self,
        token: str,
        user_id: str,
        upload: DocumentUpload,
        extracted_text: str,
        result: ClassificationResult,
    ) -> VerificationOutcome:
        """Insert one verification record and return it as stored."""
        row = {
            "user_id": user_id,
            "document_id": upload.document_id,
            "filename": upload.filename,
            "status": result.status.value,
            "explanation": result.explanation,
            "ai_confidence_score": result.confidence,
            "processed_text": extracted_text[: self.settings.processed_text_max_chars],
        }
        try:
            stored = await self.platform.insert_row(token, VERIFICATIONS_TABLE, row)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Database error: %s", e)
            raise PersistenceError(STORE_FAILED_MESSAGE) from e

        check_db_row(stored, "store verification result")
        outcome = VerificationOutcome.from_db_row(stored)
        audit_log("CREATE", "verification", outcome.id)
        return outcome

    async def list_for_user(
        self,
        token: str,
        user_id: str,
        limit: int,
        offset: int,
    ) -> list[VerificationOutcome]:
        """List a user's verification records, newest first."""
        params = {
            "select": "*",
            "user_id": f"eq.{user_id}",
            "order": "created_at.desc",
            "limit": limit,
            "offset": offset,
        }
        try:
            rows = await self.platform.select_rows(token, VERIFICATIONS_TABLE, params)
            return [VerificationOutcome.from_db_row(r) for r in rows]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error("Error fetching verifications: %s", e)
            raise PersistenceError(LIST_FAILED_MESSAGE) from e
