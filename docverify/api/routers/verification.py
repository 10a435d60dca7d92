"""Document verification endpoints."""

import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import JSONResponse

from docverify.api.dependencies import get_bearer_token, get_verification_service
from docverify.api.models import (
    ErrorResponse,
    VerificationListResponse,
    VerificationRecord,
    VerificationSummary,
    VerifyDocumentResponse,
)
from docverify.api.response import build_error_response
from docverify.config.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from docverify.services.verification.errors import VerificationError
from docverify.services.verification.models import DocumentUpload
from docverify.services.verification.service import VerificationService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_upload(document: UploadFile | None, document_id: str | None) -> DocumentUpload | None:
    if document is None:
        return None
    content = await document.read()
    return DocumentUpload(
        filename=document.filename or "",
        content_type=document.content_type or "",
        content=content,
        document_id=document_id,
    )


@router.post(
    "/verify-document",
    response_model=VerifyDocumentResponse,
    responses={500: {"model": ErrorResponse}},
)
async def verify_document(
    document: UploadFile | None = File(None),  # noqa: B008
    document_id: str | None = Form(None),  # noqa: B008
    token: str | None = Depends(get_bearer_token),  # noqa: B008
    service: VerificationService = Depends(get_verification_service),  # noqa: B008
) -> VerifyDocumentResponse | JSONResponse:
    """
    Verify an uploaded document.

    Extracts text from the document, classifies it with the keyword
    heuristic and stores the outcome for the calling user.
    """
    try:
        upload = await _read_upload(document, document_id)
        if upload is not None:
            logger.info("Processing document: %s Size: %s", upload.filename, upload.size)
        outcome = await service.verify(token, upload)
    except VerificationError as e:
        logger.error("Error in verify-document: %s", e)
        return build_error_response(str(e))
    except Exception as e:
        logger.error("Unexpected error in verify-document: %s", e, exc_info=True)
        return build_error_response(str(e))

    return VerifyDocumentResponse(verification=VerificationSummary(**outcome.to_response()))


@router.get(
    "/verifications",
    response_model=VerificationListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_verifications(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    token: str | None = Depends(get_bearer_token),  # noqa: B008
    service: VerificationService = Depends(get_verification_service),  # noqa: B008
) -> VerificationListResponse | JSONResponse:
    """List the caller's verification records, newest first."""
    try:
        outcomes = await service.list_verifications(token, limit, offset)
    except VerificationError as e:
        logger.error("Error listing verifications: %s", e)
        return build_error_response(str(e))
    except Exception as e:
        logger.error("Unexpected error listing verifications: %s", e, exc_info=True)
        return build_error_response(str(e))

    return VerificationListResponse(
        verifications=[VerificationRecord.from_outcome(o) for o in outcomes]
    )
