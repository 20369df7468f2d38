import asyncio

import httpx
import pytest
from pydantic import ValidationError

from eks_landing.health import HealthStatus


def test_health_returns_ok(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"status": "ok"}
    assert resp.content == b'{"status":"ok"}'


def test_health_is_stable_across_sequential_calls(client):
    bodies = {client.get("/api/health").content for _ in range(50)}
    assert bodies == {b'{"status":"ok"}'}


def test_health_ignores_query_parameters(client):
    resp = client.get("/api/health?verbose=1")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_health_under_concurrent_polling(app):
    async def poll():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
            return await asyncio.gather(*(c.get("/api/health") for _ in range(1000)))

    responses = asyncio.run(poll())
    assert len(responses) == 1000
    assert {r.status_code for r in responses} == {200}
    assert {r.content for r in responses} == {b'{"status":"ok"}'}


def test_health_status_only_allows_ok():
    assert HealthStatus().status == "ok"
    with pytest.raises(ValidationError):
        HealthStatus(status="degraded")
