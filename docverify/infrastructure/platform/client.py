"""Hosted platform client (auth + REST row API)."""

import logging
from typing import Any

import httpx

from docverify.config.settings import Settings

logger = logging.getLogger(__name__)


def default_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=50, max_keepalive_connections=10)


class PlatformClient:
    """
    Thin async wrapper around the hosted auth and row-store endpoints.

    Every call is made on behalf of the caller: the caller's bearer token is
    forwarded so row-level policies apply. One instance is shared per
    process; do not create one per request.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize platform client.

        Args:
            settings: Application settings containing the platform URL and anon key
            transport: Optional transport override (used by tests)
        """
        self.settings = settings
        if not settings.supabase_url:
            logger.warning("supabase_url is empty; platform calls will fail")
        self._client = httpx.AsyncClient(
            base_url=settings.supabase_url,
            headers={"apikey": settings.supabase_anon_key},
            timeout=httpx.Timeout(settings.platform_timeout),
            limits=default_limits(),
            transport=transport,
        )

    @staticmethod
    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    async def get_auth_user(self, token: str) -> dict[str, Any] | None:
        """
        Resolve the auth user behind a bearer token.

        Returns:
            The auth user payload, or None when the token is rejected or the
            auth endpoint cannot be reached
        """
        try:
            response = await self._client.get("/auth/v1/user", headers=self._auth_headers(token))
        except httpx.HTTPError as e:
            logger.warning("Auth lookup failed: %s", e)
            return None

        if response.status_code != 200:
            logger.info("Auth lookup rejected with status %s", response.status_code)
            return None

        try:
            user = response.json()
        except ValueError as e:
            logger.warning("Auth lookup returned a non-JSON body: %s", e)
            return None
        return user if isinstance(user, dict) else None

    async def select_rows(
        self,
        token: str,
        table: str,
        params: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            token: Caller bearer token
            table: Table name
            params: Query parameters in row-API filter syntax (e.g. ``{"auth_id": "eq.abc"}``)

        Raises:
            httpx.HTTPError: On transport failure or non-2xx response
            ValueError: If the response body is not JSON
        """
        response = await self._client.get(
            f"/rest/v1/{table}",
            params=params,
            headers=self._auth_headers(token),
        )
        response.raise_for_status()
        rows = response.json()
        return rows if isinstance(rows, list) else []

    async def insert_row(self, token: str, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one row and return it as stored (including generated columns).

        Returns:
            The stored row, or an empty dict if the store echoed nothing back

        Raises:
            httpx.HTTPError: On transport failure or non-2xx response
        """
        response = await self._client.post(
            f"/rest/v1/{table}",
            json=row,
            headers={
                **self._auth_headers(token),
                "Prefer": "return=representation",
            },
        )
        response.raise_for_status()
        stored = response.json()
        if isinstance(stored, list):
            return stored[0] if stored else {}
        return stored if isinstance(stored, dict) else {}

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
