"""
Shared fixtures: a recording fake of the form intake service and an HTTP
client bound to the ASGI application.
"""
from typing import AsyncGenerator, Callable, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.modules.contact.contact_controller import get_intake_client
from src.modules.contact.intake_client import FormIntakeClient

INTAKE_URL = "https://forms.example.com/f/intake"

ALICE = {
    "name": "Alice",
    "company": "Acme",
    "email": "alice@acme.com",
    "phone": "",
    "message": "Need a CTO",
}


class FakeIntake:
    """Records every request sent to the intake endpoint and answers with `handler`."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable = lambda request: httpx.Response(200, json={"ok": True})

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def respond_with(self, status_code: int) -> None:
        self.handler = lambda request: httpx.Response(status_code)

    def fail_with(self, exc_type=httpx.ConnectError) -> None:
        def handler(request):
            raise exc_type("connection refused", request=request)
        self.handler = handler


@pytest.fixture
def fake_intake() -> FakeIntake:
    return FakeIntake()


@pytest_asyncio.fixture
async def intake_client(fake_intake) -> AsyncGenerator[FormIntakeClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_intake)) as client:
        yield FormIntakeClient(endpoint=INTAKE_URL, client=client)


@pytest_asyncio.fixture
async def app_client(intake_client) -> AsyncGenerator[AsyncClient, None]:
    """Application client whose contact routes post to the fake intake."""
    app.dependency_overrides[get_intake_client] = lambda: intake_client
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
