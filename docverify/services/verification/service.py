"""Document verification service."""

import logging
import time

import httpx

from docverify.config.constants import USERS_TABLE, PipelineStep
from docverify.config.settings import Settings
from docverify.infrastructure.logging.logger import StructuredLogger
from docverify.infrastructure.platform.client import PlatformClient
from docverify.services.verification.classifier import classify_document, score_keywords
from docverify.services.verification.errors import (
    ConfigurationMissing,
    MissingInput,
    Unauthenticated,
    VerificationError,
)
from docverify.services.verification.extractor import TextExtractor
from docverify.services.verification.models import DocumentUpload, VerificationOutcome
from docverify.services.verification.repository import VerificationRepository

logger = logging.getLogger(__name__)


class VerificationService:
    """
    Runs one verification pass per request.

    Checks run in a fixed order and the first failure ends the request:
    caller identity, internal user row, document present, Document AI
    configuration. Only then is the document extracted, classified and
    stored.
    """

    def __init__(
        self,
        settings: Settings,
        platform: PlatformClient,
        extractor: TextExtractor,
        repository: VerificationRepository | None = None,
    ) -> None:
        self.settings = settings
        self.platform = platform
        self.extractor = extractor
        self.repository = repository or VerificationRepository(settings, platform)
        self.events = StructuredLogger(__name__)

    async def resolve_user_id(self, token: str | None) -> str:
        """
        Map a caller bearer token to the internal user id.

        Raises:
            Unauthenticated: If the token is missing or rejected, or no users row matches
        """
        if not token:
            raise Unauthenticated("User not authenticated")

        auth_user = await self.platform.get_auth_user(token)
        if not auth_user or not auth_user.get("id"):
            raise Unauthenticated("User not authenticated")

        try:
            rows = await self.platform.select_rows(
                token,
                USERS_TABLE,
                {"select": "id", "auth_id": f"eq.{auth_user['id']}"},
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("User lookup failed: %s", e)
            raise Unauthenticated("User data not found") from e

        if len(rows) != 1 or rows[0].get("id") is None:
            raise Unauthenticated("User data not found")

        user_id = str(rows[0]["id"])
        self.events.log_step(PipelineStep.IDENTITY.value, {"user_id": user_id})
        return user_id

    def require_document_ai_config(self) -> None:
        """Raise ConfigurationMissing if any Document AI setting is empty."""
        missing = self.settings.missing_document_ai_settings()
        if missing:
            logger.error("Missing Document AI settings: %s", ", ".join(missing))
            raise ConfigurationMissing("Google Document AI credentials not configured")
        logger.debug("Document AI processor: %s", self.settings.document_ai_processor_name)

    async def verify(self, token: str | None, upload: DocumentUpload | None) -> VerificationOutcome:
        """
        Verify one uploaded document and store the outcome.

        Args:
            token: Caller bearer token
            upload: The uploaded document, or None if the request had no file

        Returns:
            The stored VerificationOutcome

        Raises:
            Unauthenticated, MissingInput, ConfigurationMissing, PersistenceError
        """
        logger.info("Document verification request received")
        start = time.perf_counter()
        step = PipelineStep.IDENTITY
        context = {
            "filename": upload.filename if upload else None,
            "document_id": upload.document_id if upload else None,
        }

        try:
            user_id = await self.resolve_user_id(token)
            context["user_id"] = user_id

            step = PipelineStep.INTAKE
            if upload is None:
                raise MissingInput("No document file provided")
            self.events.log_step(
                step.value,
                {
                    "filename": upload.filename,
                    "size": upload.size,
                    "content_type": upload.content_type,
                    "document_id": upload.document_id,
                },
            )

            step = PipelineStep.CONFIGURATION
            self.require_document_ai_config()
            self.events.log_step(
                step.value,
                {"processor": self.settings.document_ai_processor_name},
            )

            step = PipelineStep.EXTRACTION
            text = await self.extractor.extract(upload.content, upload.content_type)
            self.events.log_step(step.value, {"chars": len(text)})

            step = PipelineStep.CLASSIFICATION
            result = classify_document(text, upload.filename)
            education_score, suspicious_score = score_keywords(text, upload.filename)
            self.events.log_step(
                step.value,
                {
                    **result.to_dict(),
                    "education_score": education_score,
                    "suspicious_score": suspicious_score,
                },
            )

            step = PipelineStep.PERSISTENCE
            outcome = await self.repository.create(token, user_id, upload, text, result)
        except VerificationError as e:
            self.events.log_error(step.value, e, context)
            raise

        self.events.log_step(
            step.value,
            {"verification_id": outcome.id},
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return outcome

    async def list_verifications(
        self,
        token: str | None,
        limit: int,
        offset: int,
    ) -> list[VerificationOutcome]:
        """List the caller's verification records, newest first."""
        user_id = await self.resolve_user_id(token)
        return await self.repository.list_for_user(token, user_id, limit, offset)
