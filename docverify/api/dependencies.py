"""FastAPI dependencies."""

from fastapi import Depends, Header, Request

from docverify.config.settings import Settings, get_settings
from docverify.infrastructure.platform.client import PlatformClient
from docverify.services.verification.extractor import MockDocumentExtractor, TextExtractor
from docverify.services.verification.service import VerificationService


def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


def get_platform_client(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> PlatformClient:
    """Shared platform client, created by the app lifespan or on first use."""
    client = getattr(request.app.state, "platform_client", None)
    if client is None:
        client = PlatformClient(settings)
        request.app.state.platform_client = client
    return client


def get_extractor() -> TextExtractor:
    """Text extractor used for uploaded documents."""
    return MockDocumentExtractor()


def get_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the bearer token from the Authorization header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_verification_service(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    platform: PlatformClient = Depends(get_platform_client),  # noqa: B008
    extractor: TextExtractor = Depends(get_extractor),  # noqa: B008
) -> VerificationService:
    """Build the verification service for a request."""
    return VerificationService(settings, platform, extractor)
