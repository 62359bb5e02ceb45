"""
tests.test_api

Smoke tests for the HTTP adapter.

Responsibilities:
- Ensure the FastAPI app boots and the feed/render endpoints round-trip through one registry.
"""

from __future__ import annotations

import httpx
import pytest

from birdseye.api.app import create_app
from birdseye.settings import Settings


def _client(settings: Settings | None = None) -> httpx.AsyncClient:
    app = create_app(settings=settings or Settings(env="test", items_per_row=2))
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    async with _client() as client:
        r = await client.get("/healthz")
        assert r.status_code == 200
        assert r.json() == {"status": "ok", "nodes": 0}
        assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_node_mutations_and_layout() -> None:
    async with _client() as client:
        for node_id in ("c", "a", "b"):
            r = await client.post(f"/v1/nodes/{node_id}")
            assert r.json() == {"created": True}
        r = await client.post("/v1/nodes/a")
        assert r.json() == {"created": False}

        r = await client.post("/v1/nodes/a/tags", json={"tag": "no_identity"})
        assert r.json() == {"applied": True}
        r = await client.post("/v1/nodes/x/tags", json={"tag": "no_identity"})
        assert r.json() == {"applied": False}

        r = await client.put("/v1/nodes/a/machine-state", json={"machine_state": "warmup"})
        assert r.json() == {"changed": True}
        r = await client.put("/v1/nodes/a/machine-state", json={"machine_state": "bogus"})
        assert r.json() == {"changed": False}

        r = await client.get("/v1/layout")
        body = r.json()
        assert body["geometry"]["rows"] == 2
        assert [(n["node_id"], n["x"], n["y"]) for n in body["nodes"]] == [
            ("a", 10, 10),
            ("b", 40, 10),
            ("c", 10, 40),
        ]
        assert body["nodes"][0]["machine_state"] == "warmup"

        r = await client.get("/v1/stats/tags")
        assert r.json() == {"macon_short_uptime": [], "no_identity": ["a"]}

        r = await client.delete("/v1/nodes/a/tags")
        assert r.json() == {"known": True}
        r = await client.get("/v1/nodes/a")
        assert r.json() == {"node_id": "a", "tags": [], "machine_state": "warmup"}

        r = await client.get("/v1/nodes/ghost")
        assert r.status_code == 404


@pytest.mark.asyncio
async def test_stats_and_items_per_row() -> None:
    async with _client() as client:
        r = await client.post(
            "/v1/ingest",
            json={
                "records": [
                    {"node_id": "n1", "tags": ["macon_short_uptime"], "machine_state": "production_100"},
                    {"node_id": "n2", "machine_state": "production_100"},
                    {"node_id": "n3"},
                ]
            },
        )
        assert r.status_code == 200
        assert [res["registered"] for res in r.json()] == [True, True, True]

        r = await client.get("/v1/stats/machine-states")
        stats = r.json()
        assert [name for name, _ in stats][0] == "not_switched_on"
        assert dict(stats)["production_100"] == 2
        assert sum(count for _, count in stats) == 2

        r = await client.put("/v1/layout/items-per-row", json={"items_per_row": 3})
        geometry = r.json()
        assert geometry["items_per_row"] == 3
        assert geometry["rows"] == 1
        assert geometry["width"] == 10 + 3 * 30

        r = await client.put("/v1/layout/items-per-row", json={"items_per_row": 0})
        assert r.status_code == 422

        r = await client.get("/v1/snapshot")
        snap = r.json()
        assert set(snap) == {"nodes", "machine_states", "tags", "geometry"}
        assert snap["tags"]["macon_short_uptime"] == ["n1"]
