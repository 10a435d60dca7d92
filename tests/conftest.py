"""Pytest configuration and fixtures."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from docverify.api.dependencies import get_platform_client, get_settings_dependency
from docverify.app import app
from docverify.config.settings import Settings
from docverify.infrastructure.platform.client import PlatformClient

VALID_TOKEN = "good-token"
AUTH_ID = "auth-123"
USER_ID = "user-1"


class FakePlatform:
    """In-memory stand-in for the hosted auth and row endpoints."""

    def __init__(self) -> None:
        self.auth_user: dict | None = {"id": AUTH_ID, "email": "seeker@example.com"}
        self.users: list[dict] = [{"id": USER_ID}]
        self.insert_status = 201
        self.stored: list[dict] = []
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/auth/v1/user":
            if self.auth_user is None or request.headers.get("authorization") != f"Bearer {VALID_TOKEN}":
                return httpx.Response(401, json={"msg": "invalid JWT"})
            return httpx.Response(200, json=self.auth_user)

        if path == "/rest/v1/users":
            return httpx.Response(200, json=self.users)

        if path == "/rest/v1/verifications" and request.method == "POST":
            if self.insert_status >= 400:
                return httpx.Response(self.insert_status, json={"message": "insert failed"})
            row = {
                "id": f"ver-{len(self.stored) + 1}",
                "created_at": "2026-10-19T10:00:00+00:00",
                **json.loads(request.content),
            }
            self.stored.append(row)
            return httpx.Response(201, json=[row])

        if path == "/rest/v1/verifications" and request.method == "GET":
            return httpx.Response(200, json=list(reversed(self.stored)))

        return httpx.Response(404, json={"message": "not found"})

    def requests_to(self, path: str, method: str | None = None) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.url.path == path and (method is None or r.method == method)
        ]


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings(
        _env_file=None,
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
        google_project_id="credential-portal",
        google_location="us",
        google_processor_id="processor-1",
        google_application_credentials='{"client_email": "svc@example.com"}',
    )


@pytest.fixture
def fake_platform():
    return FakePlatform()


@pytest.fixture
def platform_client(settings, fake_platform):
    return PlatformClient(settings, transport=httpx.MockTransport(fake_platform))


@pytest.fixture
def client(settings, platform_client):
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    app.dependency_overrides[get_platform_client] = lambda: platform_client
    yield TestClient(app)
    app.dependency_overrides.clear()
