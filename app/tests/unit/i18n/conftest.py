"""Feature-level fixtures for translation store tests.

Provides translation bundles on disk and an httpx mock transport for loader
scenarios.
"""

import json

import httpx
import pytest
import pytest_asyncio
import yaml

from tests.factories.i18n import make_multi_locale_document


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation bundles.

    Returns a directory containing:
    - i18n.json (multi-locale document, en + fr)
    - i18n.yml (multi-locale document, de)
    - broken.json (invalid JSON)
    - list.json (top level is an array)
    """
    with open(tmp_path / "i18n.json", "w", encoding="utf-8") as f:
        json.dump(make_multi_locale_document(), f)

    with open(tmp_path / "i18n.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {"de": {"welcome": "Hallo {username}", "nested": {"key": "Wert"}}},
            f,
            allow_unicode=True,
        )

    (tmp_path / "broken.json").write_text('{"en": {"welcome": ', encoding="utf-8")
    (tmp_path / "list.json").write_text('["en", "fr"]', encoding="utf-8")

    return tmp_path


@pytest.fixture
def http_routes():
    """Routes served by the mock transport: path -> (status, body, content type)."""
    return {
        "/i18n.json": (
            200,
            json.dumps(make_multi_locale_document()),
            "application/json",
        ),
        "/i18n": (
            200,
            yaml.safe_dump({"es": {"welcome": "Hola {username}"}}),
            "application/x-yaml",
        ),
        "/broken.json": (200, "{not json", "application/json"),
        "/partial.json": (
            200,
            json.dumps({"en": {"welcome": "Hi"}, "fr": "not an object"}),
            "application/json",
        ),
        "/missing.json": (404, "not found", "text/plain"),
    }


@pytest.fixture
def requests_seen():
    """List collecting every request handled by the mock transport."""
    return []


@pytest_asyncio.fixture
async def mock_http_client(http_routes, requests_seen):
    """httpx.AsyncClient backed by a MockTransport serving http_routes.

    The client is closed after each test.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        if request.url.path == "/unreachable.json":
            raise httpx.ConnectError("connection refused", request=request)
        status, body, content_type = http_routes.get(
            request.url.path, (404, "not found", "text/plain")
        )
        return httpx.Response(
            status, text=body, headers={"content-type": content_type}
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield client
