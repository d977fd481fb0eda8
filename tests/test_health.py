"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("version")


async def test_request_id_is_generated(client: AsyncClient) -> None:
    """Responses carry a request ID even when the client sends none."""
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")


async def test_request_id_is_forwarded(client: AsyncClient) -> None:
    """A well-formed client request ID is echoed back unchanged."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "req-123_abc"}
    )
    assert response.headers.get("X-Request-ID") == "req-123_abc"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """A request ID with characters unsafe for logs is replaced."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id;drop"}
    )
    assert response.headers.get("X-Request-ID") != "bad id;drop"
