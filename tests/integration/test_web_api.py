"""Integration tests for the REST API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cuttingboards.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


MAPLE = {"woodType": "Maple", "thickness": 0.75, "width": 2, "length": 24, "quantity": 5}
WALNUT = {"woodType": "Walnut", "thickness": 0.75, "width": 2, "length": 24, "quantity": 5}


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestDesignsEndpoint:
    """Tests for POST /api/v1/designs."""

    def test_generate(self, client: TestClient) -> None:
        response = client.post("/api/v1/designs", json={"stock": [MAPLE, WALNUT]})
        assert response.status_code == 200
        body = response.json()
        assert body["feasible"] is True
        kinds = [o["constructionKind"] for o in body["options"]]
        assert kinds == [
            "face-grain",
            "edge-grain",
            "end-grain-from-edge-grain",
            "end-grain-from-face-grain",
        ]
        assert body["options"][0]["dimensions"]["width"] == 20.0

    def test_custom_segment(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/designs",
            json={"stock": [MAPLE], "segmentWidth": 4, "kerfWidth": 0},
        )
        assert response.json()["options"][2]["cutCount"] == 6

    def test_untyped_stock(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/designs", json={"stock": [{**MAPLE, "woodType": ""}]}
        )
        assert response.status_code == 200
        assert response.json() == {"options": [], "feasible": False}

    def test_negative_dimension_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/designs", json={"stock": [{**MAPLE, "width": -2}]}
        )
        assert response.status_code == 422

    def test_regenerate(self, client: TestClient) -> None:
        options = client.post(
            "/api/v1/designs", json={"stock": [MAPLE, WALNUT]}
        ).json()["options"]
        response = client.post(
            "/api/v1/designs/regenerate",
            json={"option": options[2], "stock": [MAPLE, WALNUT], "seed": 11},
        )
        assert response.status_code == 200
        fresh = response.json()
        assert fresh["dimensions"] == options[2]["dimensions"]
        assert fresh["cutCount"] == options[2]["cutCount"]
        assert sorted(fresh["pattern"]) == sorted(options[2]["pattern"])


class TestDesignInputLimits:
    """Tests for request bounds and malformed saved options."""

    @pytest.mark.parametrize(
        "body",
        [
            {"stock": [MAPLE], "segmentWidth": 1e-9},
            {"stock": [{**MAPLE, "length": 1e6}]},
            {"stock": [{**MAPLE, "quantity": 10**9}]},
            {"stock": [MAPLE], "kerfWidth": 1},
        ],
    )
    def test_oversized_input_rejected(self, client: TestClient, body: dict) -> None:
        assert client.post("/api/v1/designs", json=body).status_code == 422

    def test_regenerate_malformed_accessories(self, client: TestClient) -> None:
        option = client.post("/api/v1/designs", json={"stock": [MAPLE]}).json()["options"][0]
        option["accessorySettings"] = {"juiceGroove": "yes"}
        response = client.post(
            "/api/v1/designs/regenerate", json={"option": option, "stock": [MAPLE]}
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "design_option"

    def test_regenerate_cut_count_bounded(self, client: TestClient) -> None:
        option = client.post("/api/v1/designs", json={"stock": [MAPLE]}).json()["options"][2]
        option["cutCount"] = 10**9
        response = client.post(
            "/api/v1/designs/regenerate", json={"option": option, "stock": [MAPLE]}
        )
        assert response.status_code == 422


class TestRequirementsEndpoint:
    """Tests for POST /api/v1/requirements."""

    def test_plain(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/requirements",
            json={"desired": {"width": 16, "length": 14}, "stock": [MAPLE]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["stripsNeeded"] == 7
        assert body["perWoodType"][0]["boardsNeeded"] == 7
        assert body["overallSufficient"] is False
        assert body["patternError"] is None

    def test_pattern(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/requirements",
            json={
                "desired": {"width": 20, "length": 16},
                "stock": [MAPLE, WALNUT],
                "pattern": "woven-2color-thin",
                "mainIndex": 1,
                "accentIndex": 0,
            },
        )
        body = response.json()
        assert body["patternInfo"]["totalSquares"] == 99
        assert [r["woodType"] for r in body["perWoodType"]] == ["Walnut", "Maple"]

    def test_pattern_selection_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/requirements",
            json={
                "desired": {"width": 20, "length": 16},
                "stock": [MAPLE],
                "pattern": "woven-2color",
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["patternError"] == "Woven patterns need at least 2 stock entries"
        assert body["perWoodType"] == []

    def test_unknown_pattern(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/requirements",
            json={"desired": {"width": 20, "length": 16}, "pattern": "chevron"},
        )
        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"


class TestPatternsEndpoint:
    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/patterns")
        assert response.status_code == 200
        keys = [p["key"] for p in response.json()["patterns"]]
        assert keys == ["woven-2color", "woven-2color-thin"]

    def test_get_one(self, client: TestClient) -> None:
        response = client.get("/api/v1/patterns/woven-2color-thin")
        assert response.json()["cubeSize"] == 1.75

    def test_get_unknown(self, client: TestClient) -> None:
        assert client.get("/api/v1/patterns/chevron").status_code == 404


class TestProjectsEndpoint:
    """Tests for endpoints that accept a whole project file."""

    def test_project_requirements(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.1",
            "stock": [{"wood_type": "Maple", "quantity": 5}],
            "desired_board": {"width": 16, "length": 14},
        }
        response = client.post("/api/v1/projects/requirements", json={"config": config})
        assert response.status_code == 200
        assert response.json()["totalBoardsNeeded"] == 7

    def test_project_designs(self, client: TestClient) -> None:
        config = {"schema_version": "1.0", "stock": [{"wood_type": "Oak", "quantity": 4}]}
        response = client.post("/api/v1/projects/designs", json={"config": config})
        assert response.status_code == 200
        assert response.json()["options"][0]["dimensions"]["width"] == 8.0

    def test_invalid_project(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/projects/designs", json={"config": {"schema_version": "9.0"}}
        )
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "schema_version"
