"""
Shared pytest fixtures for wholesale_inquiry tests.
"""

import pytest
from fastapi.testclient import TestClient

from wholesale_inquiry.core.models import DispatchResult, OutboundEmail
from wholesale_inquiry.main import app
from wholesale_inquiry.routers.inquiry import get_email_provider
from wholesale_inquiry.services.resend import EmailProvider


class FakeProvider(EmailProvider):
    """Records sent emails instead of calling Resend."""

    def __init__(self, result: DispatchResult | None = None):
        self.result = result or DispatchResult(success=True, status_code=200)
        self.sent: list[OutboundEmail] = []

    async def send(self, email: OutboundEmail) -> DispatchResult:
        self.sent.append(email)
        return self.result


@pytest.fixture
def valid_payload() -> dict:
    """Complete wholesale inquiry with every optional field filled in."""
    return {
        "name": "Dana Whitfield",
        "title": "Owner",
        "email": "dana@larkcafe.com",
        "phone": "555-0142",
        "contact_method": "email",
        "business_name": "Lark Cafe",
        "business_website": "https://larkcafe.com",
        "business_type": "coffee_shop",
        "address": "12 Alder St",
        "city": "Portland",
        "zip": "97205",
        "volume": "40 lbs/week",
        "coffee_program": "dedicated_roaster",
        "message": "Looking for a house espresso.\nCan we set up a tasting?",
    }


@pytest.fixture
def minimal_payload(valid_payload) -> dict:
    """Inquiry with only required fields."""
    for key in ("title", "phone", "business_website", "volume"):
        del valid_payload[key]
    return valid_payload


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def rejecting_provider() -> FakeProvider:
    return FakeProvider(
        DispatchResult(
            success=False,
            status_code=422,
            error='{"name":"validation_error","message":"Invalid `from` field"}',
        )
    )


@pytest.fixture
def make_client():
    """Build a TestClient whose email provider is replaced."""

    def _make(provider: EmailProvider) -> TestClient:
        app.dependency_overrides[get_email_provider] = lambda: provider
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, fake_provider) -> TestClient:
    return make_client(fake_provider)


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock settings for testing."""
    monkeypatch.setenv("RESEND_API_KEY", "re_test_key")
