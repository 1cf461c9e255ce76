"""HTTP contract of the natal chart endpoints."""

import pytest
from fastapi.testclient import TestClient

import natal
from chart import ChartConfig
from main import app

PAYLOAD = {
    "year": 1990,
    "month": 6,
    "day": 15,
    "hour": 14,
    "minute": 30,
    "timezone": "America/New_York",
    "lat": 40.7128,
    "lon": -74.0060,
}


@pytest.fixture
def client():
    return TestClient(app)


def test_compute_chart(client):
    r = client.post("/api/natal", json=PAYLOAD)
    assert r.status_code == 200
    chart = r.json()["chart"]

    assert chart["utc"] == "1990-06-15T18:30:00+00:00"
    assert list(chart["planets"].keys()) == list(ChartConfig.BODY_ORDER)
    assert set(chart["ascendant"]) == {"longitude", "sign", "signIndex", "degreeInsideSign"}
    assert [h["house"] for h in chart["houses"]] == list(range(1, 13))
    assert chart["houses"][0]["signIndex"] == chart["ascendant"]["signIndex"]
    assert all(h["degreeInsideSign"] == 0 for h in chart["houses"])
    assert set(chart["planetHouses"]) == set(ChartConfig.BODY_ORDER)
    assert chart["houseSystem"] == "whole-sign"
    assert set(chart["interpretations"]) == {
        "corePersonality", "career", "relationships", "strengths", "challenges",
    }
    assert len(chart["interpretations"]["corePersonality"]) <= 6
    # the ascendant ruler always yields the first core sentence
    assert chart["interpretations"]["corePersonality"][0].startswith("With ")
    for aspect in chart["aspects"]:
        assert set(aspect) == {"body1", "body2", "angle", "type", "orb"}
        assert aspect["orb"] <= 6


def test_second_defaults_to_zero(client):
    with_second = client.post("/api/natal", json={**PAYLOAD, "second": 0}).json()
    without = client.post("/api/natal", json=PAYLOAD).json()
    assert with_second == without


@pytest.mark.parametrize("field", ["year", "month", "day", "hour", "minute", "timezone", "lat", "lon"])
def test_missing_field(client, field):
    body = {k: v for k, v in PAYLOAD.items() if k != field}
    r = client.post("/api/natal", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "missing required fields"}


@pytest.mark.parametrize("override", [
    {"year": "1990"},
    {"month": 6.5},
    {"lat": "40.7"},
    {"timezone": 5},
    {"timezone": ""},
])
def test_wrong_type(client, override):
    r = client.post("/api/natal", json={**PAYLOAD, **override})
    assert r.status_code == 400
    assert r.json() == {"error": "missing required fields"}


def test_non_json_body(client):
    r = client.post("/api/natal", content=b"not json", headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "missing required fields"}


def test_integer_coordinates_are_accepted(client):
    r = client.post("/api/natal", json={**PAYLOAD, "lat": 40, "lon": -74})
    assert r.status_code == 200


@pytest.mark.parametrize("override", [
    {"month": 13},
    {"day": 31, "month": 4},
    {"timezone": "Atlantis/Capital"},
])
def test_invalid_date_or_timezone(client, override):
    r = client.post("/api/natal", json={**PAYLOAD, **override})
    assert r.status_code == 400
    assert r.json() == {"error": "invalid date or timezone"}


def test_invalid_coordinates(client):
    r = client.post("/api/natal", json={**PAYLOAD, "lat": 95.0})
    assert r.status_code == 400
    assert r.json() == {"error": "invalid coordinates"}


def test_calculation_failure_is_server_error(client, monkeypatch):
    def explode(planets):
        raise RuntimeError("ephemeris exploded")

    monkeypatch.setattr(natal, "detect_aspects", explode)
    r = client.post("/api/natal", json=PAYLOAD)
    assert r.status_code == 500
    assert r.json() == {"error": "Chart calculation failed: ephemeris exploded"}


def test_personality_summary(client):
    r = client.post("/api/natal/summary", json=PAYLOAD)
    assert r.status_code == 200
    body = r.json()
    assert len(body["traits"]) == 3
    assert len(set(body["traits"])) == 3
    assert body["scores"]


def test_readings(client):
    r = client.post("/api/natal/readings", json=PAYLOAD)
    assert r.status_code == 200
    readings = r.json()["readings"]
    assert readings[0]["point"] == "sun"
    assert readings[1]["point"] == "ascendant"
    assert readings[1]["houseName"] == "FIRST HOUSE"
    assert len(readings) == 11


def test_summary_rejects_missing_fields(client):
    r = client.post("/api/natal/summary", json={"year": 1990})
    assert r.status_code == 400
    assert r.json() == {"error": "missing required fields"}


def test_config_aspects(client):
    r = client.get("/api/config/aspects")
    assert r.status_code == 200
    aspects = r.json()["aspects"]
    assert [a["name"] for a in aspects] == [
        "Conjunction", "Sextile", "Square", "Trine", "Quincunx", "Opposition",
    ]
    assert all(a["orb"] == 6 for a in aspects)
    assert [a["name"] for a in aspects if a["hard"]] == ["Square", "Opposition"]


def test_config_house_systems(client):
    r = client.get("/api/config/house-systems")
    assert r.json() == {"houseSystems": ["whole-sign"], "default": "whole-sign"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
