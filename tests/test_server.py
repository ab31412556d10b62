from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from flowguard import __version__
from flowguard.core.engine import ValidationEngine
from flowguard.nodes import default_registry


@pytest.fixture
async def client():
    """Async test client with the engine injected directly (bypasses lifespan)."""
    from flowguard.server import app

    app.state.engine = ValidationEngine(default_registry)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    if hasattr(app.state, "engine"):
        del app.state.engine


class TestHealth:
    async def test_health_endpoint(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestKinds:
    async def test_list_kinds(self, client: AsyncClient):
        response = await client.get("/api/kinds")
        assert response.status_code == 200
        assert response.json() == {"kinds": ["start", "form", "conditional", "api", "end"]}


class TestValidateWorkflow:
    async def test_valid_workflow(self, client: AsyncClient):
        response = await client.post(
            "/api/validate/workflow",
            json={
                "nodes": [
                    {"id": "s", "type": "start", "data": {"label": "Start"}},
                    {"id": "e", "type": "end", "data": {"label": "End"}},
                ],
                "edges": [{"id": "e1", "source": "s", "target": "e"}],
            },
        )
        assert response.status_code == 200
        assert response.json() == {"errors": [], "isValid": True}

    async def test_invalid_workflow_is_still_200(self, client: AsyncClient):
        response = await client.post(
            "/api/validate/workflow",
            json={
                "nodes": [
                    {"id": "s", "type": "start"},
                    {"id": "c", "type": "conditional", "data": {"label": "Branch"}},
                    {"id": "e", "type": "end"},
                ],
                "edges": [
                    {"id": "e1", "source": "s", "target": "c"},
                    {"id": "e2", "source": "c", "target": "e", "sourceHandle": "true"},
                ],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is False
        ids = [e["id"] for e in data["errors"]]
        assert ids == ["connection-false-c", "customName", "fieldToEvaluate", "operator"]
        assert data["errors"][0]["nodeId"] == "c"
        assert data["errors"][1]["nodeId"] == "c"

    async def test_empty_body_reports_cardinality(self, client: AsyncClient):
        response = await client.post("/api/validate/workflow", json={})
        assert response.status_code == 200
        ids = [e["id"] for e in response.json()["errors"]]
        assert ids == ["workflow-start", "workflow-end"]

    async def test_malformed_graph_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/validate/workflow", json={"nodes": [{"type": "start"}], "edges": []}
        )
        assert response.status_code == 422


class TestValidateNode:
    async def test_invalid_node(self, client: AsyncClient):
        response = await client.post(
            "/api/validate/node", json={"kind": "api", "data": {"url": "ftp://x"}}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is False
        assert [e["id"] for e in data["errors"]] == ["url", "method"]
        assert data["errors"][0]["nodeId"] is None

    async def test_type_key_accepted(self, client: AsyncClient):
        response = await client.post(
            "/api/validate/node",
            json={"type": "form", "data": {"customName": "Signup", "fields": []}},
        )
        assert response.status_code == 200
        assert response.json()["isValid"] is True

    async def test_unknown_kind_valid(self, client: AsyncClient):
        response = await client.post("/api/validate/node", json={"kind": "webhook"})
        assert response.status_code == 200
        assert response.json() == {"errors": [], "isValid": True}
