from __future__ import annotations

import json
from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from personal_api.config import Settings
from personal_api.deps import get_email_transport
from personal_api.main import create_app

ENV_KEYS = (
    "BREVO_API_KEY",
    "BREVO_SENDER_EMAIL",
    "BREVO_SENDER_NAME",
    "CONTACT_RECIPIENT_EMAIL",
    "BREVO_API_URL",
    "EMAIL_DRY_RUN",
    "CORS_ORIGINS",
    "RESUME_PATH",
)


@pytest.fixture
def make_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[..., Settings]:
    def _make(**env: str) -> Settings:
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return _make


@pytest.fixture
def brevo_env() -> dict:
    return {
        "BREVO_API_KEY": "xkeysib-test",
        "BREVO_SENDER_EMAIL": "site@michaelhenry.me",
        "BREVO_SENDER_NAME": "Portfolio Site",
    }


class ProviderStub:
    """Records outbound requests and answers with a canned response."""

    def __init__(self, status: int = 201, body: str = '{"messageId": "<abc@smtp-relay>"}'):
        self.status = status
        self.body = body
        self.requests: list[httpx.Request] = []
        self.error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def sent_json(self, i: int = -1) -> dict:
        return json.loads(self.requests[i].content)


@pytest.fixture
def provider() -> ProviderStub:
    return ProviderStub()


@pytest.fixture
def make_client(provider: ProviderStub) -> Callable[[Settings], TestClient]:
    def _make(settings: Settings) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_email_transport] = lambda: provider.transport
        return TestClient(app)

    return _make


@pytest.fixture
def valid_payload() -> dict:
    return {
        "email": "jane.doe@gmail.com",
        "firstName": "Jane",
        "lastName": "Doe",
        "phoneNumber": "+1 555 010 9999",
        "message": "Hi Michael,\nLoved the portfolio. Are you open to a chat?",
    }
