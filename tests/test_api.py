# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the REST API using FastAPI's TestClient."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient  # noqa: E402

from lca_audit.api.routes import get_engine  # noqa: E402
from lca_audit.api.server import create_app  # noqa: E402
from lca_audit.data.factors import FactorTables  # noqa: E402
from lca_audit.data.samples import get_sample  # noqa: E402
from lca_audit.engine import LCAEngine  # noqa: E402


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture()
def copper_payload() -> dict:
    return {"input": get_sample("copper_concentrate").model_dump(mode="json", by_alias=True)}


class TestHealth:
    """Tests for GET /api/v1/health."""

    def test_health(self, client: TestClient):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}


class TestFactors:
    """Tests for GET /api/v1/factors."""

    def test_default_factors(self, client: TestClient):
        response = client.get("/api/v1/factors")
        assert response.status_code == 200
        body = response.json()
        assert body["energy"]["electricity"] == 0.436
        assert list(body["gwp"]) == ["co2", "ch4", "n2o", "sf6", "hfc", "pfc"]


class TestAssess:
    """Tests for POST /api/v1/assess."""

    def test_copper(self, client: TestClient, copper_payload: dict):
        response = client.post("/api/v1/assess", json=copper_payload)
        assert response.status_code == 200
        body = response.json()
        assert body["overallScore"] == 45
        assert body["sustainabilityScore"]["grade"] == "D"
        assert body["hotspots"][0]["area"] == "Energy Consumption"
        assert body["isAIPowered"] is False

    def test_ai_recommendations(self, client: TestClient, copper_payload: dict):
        copper_payload["aiRecommendations"] = ["Recover heat from the roaster"]
        body = client.post("/api/v1/assess", json=copper_payload).json()
        assert body["aiRecommendations"] == ["Recover heat from the roaster"]
        assert body["isAIPowered"] is True

    def test_empty_input_imputed(self, client: TestClient):
        body = client.post("/api/v1/assess", json={"input": {}}).json()
        assert body["projectName"] == "Unnamed LCA Project"
        assert len(body["validationWarnings"]) == 5

    def test_invalid_input_is_422(self, client: TestClient):
        payload = {"input": {"energy": [{"type": "nuclear", "amount": 10}]}}
        response = client.post("/api/v1/assess", json=payload)
        assert response.status_code == 422

    def test_engine_override(self, copper_payload: dict):
        app = create_app()
        no_water = FactorTables(water=0.0)
        app.dependency_overrides[get_engine] = lambda: LCAEngine(no_water)
        body = TestClient(app).post("/api/v1/assess", json=copper_payload).json()
        assert body["impacts"][0]["value"] == pytest.approx(19310.15 - 1720)
