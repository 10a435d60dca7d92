"""Application settings using Pydantic BaseSettings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docverify.config.constants import DEFAULT_GOOGLE_LOCATION, PROCESSED_TEXT_MAX_CHARS

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Document Verification Service"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("platform_timeout")
    @classmethod
    def validate_timeout_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"platform_timeout must be positive, got {v}")
        return v

    @field_validator("google_location")
    @classmethod
    def default_blank_location(cls, v: str) -> str:
        return v.strip() or DEFAULT_GOOGLE_LOCATION

    # Hosted platform (auth + row store)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    platform_timeout: float = 10.0

    # Google Document AI. Required before extraction even though the
    # current extractor never calls out to it.
    google_project_id: str = ""
    google_location: str = DEFAULT_GOOGLE_LOCATION
    google_processor_id: str = ""
    google_application_credentials: str = ""

    # Verification
    processed_text_max_chars: int = PROCESSED_TEXT_MAX_CHARS

    def missing_document_ai_settings(self) -> list[str]:
        """Names of the Document AI settings that are empty."""
        required = {
            "google_project_id": self.google_project_id,
            "google_location": self.google_location,
            "google_processor_id": self.google_processor_id,
            "google_application_credentials": self.google_application_credentials,
        }
        return [name for name, value in required.items() if not value or not value.strip()]

    @property
    def document_ai_processor_name(self) -> str:
        """Fully-qualified processor resource name."""
        return (
            f"projects/{self.google_project_id}/locations/{self.google_location}"
            f"/processors/{self.google_processor_id}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
