"""Standardized JSON envelopes."""

from fastapi.responses import JSONResponse

from docverify.api.models import ErrorResponse

ERROR_STATUS_CODE = 500


def build_error_response(message: str) -> JSONResponse:
    """Build the ``{"success": false, "error": ...}`` envelope.

    Every error kind maps to HTTP 500.
    """
    return JSONResponse(
        status_code=ERROR_STATUS_CODE,
        content=ErrorResponse(error=message).model_dump(),
    )
