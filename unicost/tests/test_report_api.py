from __future__ import annotations

from datetime import date

from flask.testing import FlaskClient

from unicost.app import create_app
from unicost.core.reference import DEFAULT_CONFIG
from unicost.schemas.reference import EngineConfig


def report_payload() -> dict:
    today = date.today()
    return {
        "name": "Ada",
        "date_of_birth": date(today.year - 8, 1, 1).isoformat(),
        "location": "northWest",
        "include_allowance": True,
    }


def test_reference_lists_locations_and_rates(client: FlaskClient):
    resp = client.get("/api/reference")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["locations"]["london"]["with_allowance"] == 15180
    assert body["benchmark_rates"] == [0.03, 0.04, 0.05, 0.06, 0.07, 0.08]
    assert body["durations"]["extended"]["years"] == 4


def test_report_endpoint_returns_both_durations(client: FlaskClient):
    resp = client.post("/api/report", json=report_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    report = body["report"]
    assert body["disclaimer"]
    assert report["meta"]["subject_name"] == "Ada"
    assert report["meta"]["reference"].startswith("UNI-")
    assert report["assumptions"]["location"] == "North West England"
    assert len(report["standard"]["costs"]["years"]) == 3
    assert len(report["extended"]["costs"]["years"]) == 4
    assert len(report["standard"]["recurring"]) == 6
    assert len(report["extended"]["lump_sum"]) == 6


def test_invalid_payload_returns_400(client: FlaskClient):
    resp = client.post("/api/report", json={"name": ""})

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_unknown_location_returns_400(client: FlaskClient):
    payload = report_payload()
    payload["location"] = "scotland"

    resp = client.post("/api/report", json=payload)

    assert resp.status_code == 400
    assert "scotland" in resp.get_json()["detail"]


def test_non_json_body_returns_400(client: FlaskClient):
    resp = client.post("/api/report", data="not json", content_type="text/plain")

    assert resp.status_code == 400


def test_zero_cost_config_returns_422():
    data = DEFAULT_CONFIG.model_dump()
    data["base_tuition"] = 0
    data["locations"]["northWest"].update(with_allowance=0, without_allowance=0)
    flask_app = create_app(EngineConfig.model_validate(data))

    with flask_app.test_client() as client:
        resp = client.post("/api/report", json=report_payload())

    assert resp.status_code == 422
    assert "growth percentage" in resp.get_json()["detail"]
