"""
Root test configuration and fixtures for the results proxy.

All upstream traffic goes through an httpx.MockTransport; no test talks to
the live portal.

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Generator
from pathlib import Path
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from api.settings import Settings  # noqa: E402

PORTAL_URL = "http://portal.test"
TEMPLATE_URL = "http://templates.test/index.html"
LANDING_URL = "http://portal.test/"

Handler = Callable[[httpx.Request], httpx.Response]


class FakePortal:
    """Programmable stand-in for the results portal.

    Routes are keyed by URL path; every request seen is recorded so tests
    can assert on the form fields that were forwarded.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []

    def json(self, path: str, payload: object, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, json=payload)

    def text(self, path: str, body: str, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, text=body)

    def fail(self, path: str, message: str = "connection refused") -> None:
        def raise_connect_error(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self.routes[path] = raise_connect_error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, text="no such route")
        return handler(request)

    @property
    def last_form(self) -> dict[str, str]:
        """Form fields of the most recent request, decoded."""
        body = self.requests[-1].content.decode()
        return {key: values[0] for key, values in parse_qs(body, keep_blank_values=True).items()}

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the fake portal hosts."""
    return Settings(
        upstream_base_url=PORTAL_URL,
        template_url=TEMPLATE_URL,
        landing_page_url=LANDING_URL,
        ALLOWED_ORIGINS="*",
    )


@pytest.fixture
def fake_portal() -> FakePortal:
    return FakePortal()


@pytest.fixture
def client(test_settings: Settings, fake_portal: FakePortal) -> Generator[TestClient, None, None]:
    """TestClient for an app wired to the fake portal."""
    from api.main import create_app

    app = create_app(settings=test_settings, transport=fake_portal.transport())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_result_rows() -> list[dict[str, str]]:
    """Two subject rows as returned by the subjects-list endpoint."""
    return [
        {
            "subjectCODE": "CS101",
            "subjectName": "Algo",
            "subjectTP": "T",
            "subjectCredits": "4",
            "grade": "A",
        },
        {
            "subjectCODE": "CS102",
            "subjectName": "Data Structures Lab",
            "subjectTP": "P",
            "subjectCredits": "2",
            "grade": "O",
        },
    ]
