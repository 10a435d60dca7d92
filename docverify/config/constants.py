"""
Constants, enums, and static values.
"""

from enum import Enum


class VerificationStatus(str, Enum):
    """Outcome of a document verification pass."""

    PENDING = "pending"  # Initial value only, never produced by the classifier
    VERIFIED = "verified"
    SUSPICIOUS = "suspicious"
    FAILED = "failed"


class PipelineStep(str, Enum):
    """Verification pipeline steps."""

    IDENTITY = "identity"
    INTAKE = "intake"
    CONFIGURATION = "configuration"
    EXTRACTION = "extraction"
    CLASSIFICATION = "classification"
    PERSISTENCE = "persistence"


# Keyword sets driving the classifier (matched case-insensitively)
EDUCATION_KEYWORDS: tuple[str, ...] = (
    "university",
    "college",
    "degree",
    "certificate",
    "diploma",
    "graduation",
)
SUSPICIOUS_KEYWORDS: tuple[str, ...] = ("fake", "copy", "template", "sample")

# Fixed explanations per decision branch
PENDING_EXPLANATION = "Document is being processed for verification."
SUSPICIOUS_EXPLANATION = "Document contains suspicious elements that require manual review."
EDUCATIONAL_EXPLANATION = "Document appears to be a legitimate educational credential."
PROFESSIONAL_EXPLANATION = "Document appears to be a valid professional document."
FAILED_EXPLANATION = "Document does not contain recognizable credential information."

# Fixed confidence scores per decision branch (0-100)
PENDING_CONFIDENCE = 50
SUSPICIOUS_CONFIDENCE = 30
EDUCATIONAL_CONFIDENCE = 85
PROFESSIONAL_CONFIDENCE = 70
FAILED_CONFIDENCE = 20

# Extracted text stored alongside each outcome for audit
PROCESSED_TEXT_MAX_CHARS = 1000

# Document AI region used when GOOGLE_LOCATION is unset or blank
DEFAULT_GOOGLE_LOCATION = "us"

# Platform tables
USERS_TABLE = "users"
VERIFICATIONS_TABLE = "verifications"

# Pagination
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}
