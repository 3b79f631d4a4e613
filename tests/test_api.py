# tests/test_api.py
"""
TEST: REST API
==============

Exercises the FastAPI app through its TestClient.
"""

import json

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from api.main import GraphRequest, CityIn, app, build_graph_result

client = TestClient(app)


def test_health():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_reference_graph():
    response = client.get("/api/graph/reference", params={"samples": 10})
    assert response.status_code == 200

    body = response.json()
    assert len(body["nodes"]) == 7
    assert len(body["edges"]) == 21
    assert body["samples"] == 10
    assert body["rejected"] == []

    edge = body["edges"][0]
    assert len(edge["points"]) == 10
    source = next(n for n in body["nodes"] if n["id"] == edge["source"])
    assert edge["points"][0] == pytest.approx([source["x"], source["y"], source["z"]], abs=1e-3)


def test_reference_graph_with_limit():
    body = client.get("/api/graph/reference", params={"limit": 3, "samples": 5}).json()
    assert [n["label"] for n in body["nodes"]] == ["Bordeax", "Bangkok", "Bombay"]
    assert len(body["edges"]) == 3
    assert body["rejected"] == ["Beijing", "Berlin", "Brisbane", "Santiago"]


def test_reference_graph_bad_params():
    assert client.get("/api/graph/reference", params={"samples": 1}).status_code == 422
    assert client.get("/api/graph/reference", params={"limit": -2}).status_code == 422
    assert client.get("/api/graph/reference", params={"samples": 6000}).status_code == 422


def test_post_graph():
    payload = {
        "cities": [
            {"name": "North", "lat": 90, "lng": 0},
            {"name": "Equator", "lat": 0, "lng": 0},
        ],
        "samples": 4,
        "radius": 1.0,
    }
    response = client.post("/api/graph", json=payload)
    assert response.status_code == 200

    body = response.json()
    north = body["nodes"][0]
    assert (north["x"], north["y"], north["z"]) == pytest.approx((0.0, 1.0, 0.0))
    assert len(body["edges"]) == 1
    assert len(body["edges"][0]["points"]) == 4


def test_post_graph_rejects_bad_request():
    response = client.post("/api/graph", json={"cities": [], "samples": 1})
    assert response.status_code == 422


def test_non_finite_coordinate_is_422():
    request = GraphRequest(cities=[CityIn(name="Bad", lat=float('nan'), lng=0.0)])
    with pytest.raises(HTTPException) as exc:
        build_graph_result(request)
    assert exc.value.status_code == 422


def test_coincident_cities_have_no_arc():
    request = GraphRequest(
        cities=[CityIn(name="A", lat=10, lng=10), CityIn(name="B", lat=10, lng=10)],
        samples=3,
    )
    result = build_graph_result(request)
    assert len(result.nodes) == 2
    assert result.edges == []


def test_export_json():
    payload = {"cities": [{"name": "A", "lat": 0, "lng": 0}, {"name": "B", "lat": 45, "lng": 45}], "samples": 3}
    response = client.post("/api/export/json", json=payload)

    assert response.status_code == 200
    assert "sphere_graph.json" in response.headers["content-disposition"]
    model = json.loads(response.text)
    assert model["type"] == "sphere_graph"
    assert len(model["graph"]["edges"]) == 1
