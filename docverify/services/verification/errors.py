"""Verification error taxonomy.

Every error is terminal for the request and is reported to the caller as
``{"success": false, "error": <message>}``.
"""


class VerificationError(Exception):
    """Base class for errors raised while verifying a document."""


class Unauthenticated(VerificationError):
    """No valid caller identity."""


class MissingInput(VerificationError):
    """The request did not include a document file."""


class ConfigurationMissing(VerificationError):
    """Required Document AI settings are absent."""


class PersistenceError(VerificationError):
    """Writing or reading verification records failed."""
