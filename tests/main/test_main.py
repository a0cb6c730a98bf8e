from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient
from pytest import MonkeyPatch, mark
from sqlalchemy.exc import OperationalError

from bloglist.db import database
from bloglist.main import app


@mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "ok"
    assert data["version"] == app.version
    assert "timestamp" in data


@mark.asyncio
async def test_health_check_reports_unavailable_database(
    client: AsyncClient,
    monkeypatch: MonkeyPatch,
) -> None:
    """A failing database ping degrades the status instead of erroring."""
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
    session_factory = MagicMock()
    session_factory.return_value.__aenter__.return_value = session
    monkeypatch.setattr(database, "async_session_maker", session_factory)

    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "unavailable"


@mark.asyncio
async def test_request_id_header_is_set(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.headers["X-Request-ID"]


@mark.asyncio
async def test_request_id_header_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


@mark.asyncio
async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


@mark.asyncio
async def test_unknown_route_is_not_found(client: AsyncClient) -> None:
    response = await client.get("/api/unknown")

    assert response.status_code == 404


def test_bodiless_errors_document_no_content() -> None:
    """Malformed-id and not-found responses are documented without a body."""
    documented = [
        (path, status, response)
        for path, operations in app.openapi()["paths"].items()
        for operation in operations.values()
        for status, response in operation["responses"].items()
        if response["description"] in {"Malformed id", "Not found"}
    ]

    assert {(path, status) for path, status, _ in documented} >= {
        ("/api/blogs/{blog_id}", "400"),
        ("/api/blogs/{blog_id}", "404"),
        ("/api/users/{user_id}", "400"),
        ("/api/users/{user_id}", "404"),
    }
    assert all(response.get("content", {}) == {} for _, _, response in documented)
