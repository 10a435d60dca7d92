"""Shared database operation helpers."""

import logging
from typing import Any

from docverify.services.verification.errors import PersistenceError

logger = logging.getLogger(__name__)


def check_db_row(row: dict[str, Any], operation: str) -> None:
    """Raise PersistenceError if a write did not return a stored row."""
    if not row or row.get("id") is None:
        logger.error("Failed to %s: store returned no row", operation)
        raise PersistenceError(f"Failed to {operation}")


def audit_log(operation: str, resource: str, resource_id: str) -> None:
    """Log CRUD operations for audit trail."""
    logger.info("AUDIT %s %s id=%s", operation, resource, resource_id)
