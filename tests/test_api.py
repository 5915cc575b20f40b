"""Tests for the HTTP API.

Endpoints:
- GET /api/tube-benders
- GET /api/tube-benders/recommended
- GET /api/tube-benders/filter
- GET /api/tube-benders/{id}
- GET /api/tube-benders/{id}/score
- GET /api/scoring/methodology
- POST /api/finder/basic
- POST /api/finder/enhanced
- GET /health
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bender_rank.api.app import app
from bender_rank.api.dependencies import get_products


def client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestListTubeBenders:
    """Tests for GET /tube-benders."""

    @pytest.mark.asyncio
    async def test_ranked_by_score(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 12
        assert [item["id"] for item in data][:3] == [1, 12, 3]

    @pytest.mark.asyncio
    async def test_camel_case_fields(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders")

        first = response.json()[0]
        assert first["priceRange"] == "$1,895 - $2,695"
        assert first["maxCapacity"] == '2-3/8" OD'
        assert first["countryOfOrigin"] == "USA"
        assert "price_range" not in first

    @pytest.mark.asyncio
    async def test_recommended(self, api_catalog):
        async with client() as ac:
            default = await ac.get("/api/tube-benders/recommended")
            five = await ac.get("/api/tube-benders/recommended", params={"limit": 5})

        assert [item["id"] for item in default.json()] == [1, 12, 3]
        assert len(five.json()) == 5

    @pytest.mark.asyncio
    async def test_recommended_rejects_bad_limit(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders/recommended", params={"limit": 0})

        assert response.status_code == 422


class TestFilterTubeBenders:
    """Tests for GET /tube-benders/filter."""

    @pytest.mark.asyncio
    async def test_no_filters(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders/filter")

        data = response.json()
        assert data["total"] == 12
        assert data["active_filters"] == 0

    @pytest.mark.asyncio
    async def test_usa_and_price(self, api_catalog):
        async with client() as ac:
            response = await ac.get(
                "/api/tube-benders/filter",
                params={"usa_only": "true", "max_price": 1000},
            )

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["items"]] == [12, 6, 7]
        assert data["total"] == 3
        assert data["active_filters"] == 2

    @pytest.mark.asyncio
    async def test_empty_result(self, api_catalog):
        async with client() as ac:
            response = await ac.get(
                "/api/tube-benders/filter", params={"brand": "Nonexistent"}
            )

        assert response.status_code == 200
        assert response.json()["items"] == []

    @pytest.mark.asyncio
    async def test_invalid_bender_type(self, api_catalog):
        async with client() as ac:
            response = await ac.get(
                "/api/tube-benders/filter", params={"bender_type": "electric"}
            )

        assert response.status_code == 422


class TestGetTubeBender:
    """Tests for GET /tube-benders/{id} and its score."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders/6")

        assert response.status_code == 200
        assert response.json()["name"] == "JMR TBM-250R RaceLine"

    @pytest.mark.asyncio
    async def test_not_found(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Tube bender not found"

    @pytest.mark.asyncio
    async def test_score_breakdown(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders/1/score")

        assert response.status_code == 200
        data = response.json()
        assert data["product_id"] == 1
        assert data["total"] == 89
        assert data["max_total"] == 100
        assert data["degraded"] is False
        assert len(data["entries"]) == 11
        assert data["entries"][0]["criterion"] == "Value for Money"

    @pytest.mark.asyncio
    async def test_score_not_found(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/api/tube-benders/999/score")

        assert response.status_code == 404


class TestMethodology:
    @pytest.mark.asyncio
    async def test_methodology(self):
        async with client() as ac:
            response = await ac.get("/api/scoring/methodology")

        assert response.status_code == 200
        data = response.json()
        assert len(data["criteria"]) == 11
        assert sum(c["max_points"] for c in data["criteria"]) == 100
        assert "0-100 points" in data["markdown"]


class TestFinderEndpoints:
    """Tests for POST /finder/*."""

    @pytest.mark.asyncio
    async def test_enhanced(self, api_catalog):
        async with client() as ac:
            response = await ac.post(
                "/api/finder/enhanced",
                json={"budget": 5000, "max_diameter": 2, "mandrel_required": True},
            )

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["product"]["brand"] == "RogueFab"
        assert "Mandrel Available" in data[0]["matched_criteria"]
        assert data[0]["eliminated"] is False

    @pytest.mark.asyncio
    async def test_enhanced_nothing_matches(self, api_catalog):
        async with client() as ac:
            response = await ac.post("/api/finder/enhanced", json={"budget": 100})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_enhanced_rejects_bad_criteria(self, api_catalog):
        async with client() as ac:
            response = await ac.post("/api/finder/enhanced", json={"max_diameter": -1})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_basic(self, api_catalog):
        async with client() as ac:
            response = await ac.post(
                "/api/finder/basic",
                json={"budget": 2000, "max_diameter": 2.5},
            )

        assert response.status_code == 200
        data = response.json()
        assert [r["product"]["id"] for r in data] == [9, 2]
        assert [r["score"] for r in data] == [30, 20]

    @pytest.mark.asyncio
    async def test_basic_requires_diameter(self, api_catalog):
        async with client() as ac:
            response = await ac.post("/api/finder/basic", json={"budget": 2000})

        assert response.status_code == 422


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, api_catalog):
        async with client() as ac:
            response = await ac.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "catalog_size": 12,
            "criteria": 11,
            "finders": ["basic", "enhanced"],
        }

    @pytest.mark.asyncio
    async def test_health_reports_served_catalog(self, make_product):
        app.dependency_overrides[get_products] = lambda: [make_product()]
        try:
            async with client() as ac:
                response = await ac.get("/health")
        finally:
            app.dependency_overrides.clear()

        assert response.json()["catalog_size"] == 1
