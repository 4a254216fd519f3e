"""Health endpoint test (no database required)."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_response_carries_request_id(client: AsyncClient) -> None:
    """A caller-supplied X-Request-ID is echoed back."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "req-123"}
    )
    assert response.headers["X-Request-ID"] == "req-123"
