"""Tests for the hosted platform client."""

import httpx
import pytest

from docverify.infrastructure.platform.client import PlatformClient

AUTH_ID = "auth-123"
VALID_TOKEN = "good-token"


@pytest.mark.asyncio
async def test_get_auth_user(platform_client, fake_platform):
    user = await platform_client.get_auth_user(VALID_TOKEN)
    assert user["id"] == AUTH_ID

    request = fake_platform.requests_to("/auth/v1/user")[0]
    assert request.headers["authorization"] == f"Bearer {VALID_TOKEN}"
    assert request.headers["apikey"] == "anon-key"


@pytest.mark.asyncio
async def test_get_auth_user_rejected_token(platform_client):
    assert await platform_client.get_auth_user("expired") is None


@pytest.mark.asyncio
async def test_get_auth_user_transport_error(settings):
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = PlatformClient(settings, transport=httpx.MockTransport(boom))
    assert await client.get_auth_user(VALID_TOKEN) is None
    await client.close()


@pytest.mark.asyncio
async def test_select_rows_sends_filters(platform_client, fake_platform):
    rows = await platform_client.select_rows(
        VALID_TOKEN, "users", {"select": "id", "auth_id": f"eq.{AUTH_ID}"}
    )
    assert rows == [{"id": "user-1"}]

    request = fake_platform.requests_to("/rest/v1/users")[0]
    assert request.url.params["auth_id"] == f"eq.{AUTH_ID}"
    assert request.url.params["select"] == "id"


@pytest.mark.asyncio
async def test_insert_row_returns_stored_row(platform_client, fake_platform):
    stored = await platform_client.insert_row(VALID_TOKEN, "verifications", {"filename": "a.pdf"})
    assert stored["id"] == "ver-1"
    assert stored["filename"] == "a.pdf"

    request = fake_platform.requests_to("/rest/v1/verifications", "POST")[0]
    assert request.headers["prefer"] == "return=representation"


@pytest.mark.asyncio
async def test_insert_row_raises_on_error_status(platform_client, fake_platform):
    fake_platform.insert_status = 409
    with pytest.raises(httpx.HTTPStatusError):
        await platform_client.insert_row(VALID_TOKEN, "verifications", {"filename": "a.pdf"})


@pytest.mark.asyncio
async def test_insert_row_empty_representation(settings):
    client = PlatformClient(
        settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(201, json=[])),
    )
    assert await client.insert_row(VALID_TOKEN, "verifications", {}) == {}
    await client.close()


def html_page(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="<html>Bad Gateway</html>", headers={"content-type": "text/html"})


@pytest.mark.asyncio
async def test_get_auth_user_non_json_body(settings):
    client = PlatformClient(settings, transport=httpx.MockTransport(html_page))
    assert await client.get_auth_user(VALID_TOKEN) is None
    await client.close()


@pytest.mark.asyncio
async def test_select_rows_non_json_body(settings):
    client = PlatformClient(settings, transport=httpx.MockTransport(html_page))
    with pytest.raises(ValueError):
        await client.select_rows(VALID_TOKEN, "users", {"select": "id"})
    await client.close()
