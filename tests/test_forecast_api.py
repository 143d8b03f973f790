from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from lecture_demos.infrastructure.memory_store import InMemoryForecastStore
from lecture_demos.interface.app import create_app

BASE = "/api/weatherforecast"


def _forecast(summary: str | None = "Test add a weather forecast", temp: int = 31) -> dict:
    return {"date": "2026-01-20T12:00:00Z", "temperatureC": temp, "summary": summary}


def _create(client: TestClient, payload: dict) -> dict:
    resp = client.post(BASE, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_list_returns_every_forecast_with_summary() -> None:
    client = TestClient(create_app(forecast_store=InMemoryForecastStore.seeded(5)))

    resp = client.get(BASE)

    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 5
    for item in body:
        assert item["id"]
        assert item["summary"].strip()
        assert set(item) == {"id", "date", "summary", "temperatureC"}


def test_list_empty_store(client: TestClient) -> None:
    resp = client.get(BASE)

    assert resp.status_code == 200
    assert resp.json() == []


def test_create_then_get_round_trips_fields(client: TestClient) -> None:
    payload = _forecast()
    created = _create(client, payload)

    assert created["summary"] == payload["summary"]
    assert created["temperatureC"] == payload["temperatureC"]
    assert created["date"] == payload["date"]

    fetched = client.get(f"{BASE}/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == {
        "date": payload["date"],
        "summary": payload["summary"],
        "temperatureC": payload["temperatureC"],
    }


def test_create_sets_location_header_that_resolves(client: TestClient) -> None:
    payload = _forecast(summary="X" * 60)
    resp = client.post(BASE, json=payload)

    location = resp.headers["location"]
    assert location.endswith(f"{BASE}/{resp.json()['id']}")

    followed = client.get(location)
    assert followed.status_code == 200
    assert followed.json()["summary"] == payload["summary"]


@pytest.mark.parametrize("length", [1, 60])
def test_create_accepts_summary_length_bounds(client: TestClient, length: int) -> None:
    created = _create(client, _forecast(summary="X" * length))

    assert created["summary"] == "X" * length


@pytest.mark.parametrize("summary", [None, "", "   ", "X" * 61])
def test_create_rejects_invalid_summary(client: TestClient, summary: str | None) -> None:
    resp = client.post(BASE, json=_forecast(summary=summary))

    assert resp.status_code == 400
    body = resp.json()
    assert body["propertyName"] == "Summary"
    assert body["errorMessage"]
    assert client.get(BASE).json() == []


def test_create_null_summary_reports_must_not_be_null(client: TestClient) -> None:
    resp = client.post(BASE, json=_forecast(summary=None))

    assert resp.status_code == 400
    assert resp.json() == {
        "errorMessage": "Input must not be null",
        "errorNumber": 1,
        "propertyName": "Summary",
    }


def test_create_too_long_summary_reports_length_error(client: TestClient) -> None:
    resp = client.post(BASE, json=_forecast(summary="X" * 61))

    assert resp.json()["errorNumber"] == 2


def test_create_without_body_is_rejected(client: TestClient) -> None:
    resp = client.post(BASE)

    assert resp.status_code == 400
    assert resp.json()["propertyName"] == "body"


def test_create_with_malformed_field_is_rejected(client: TestClient) -> None:
    payload = _forecast()
    payload["temperatureC"] = "warm"
    resp = client.post(BASE, json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["errorNumber"] == 3
    assert body["propertyName"] == "temperatureC"


def test_create_with_truncated_json_names_body(client: TestClient) -> None:
    resp = client.post(
        BASE,
        content=b'{"date": "2026-01-20T12:00:00Z", bad',
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["errorNumber"] == 3
    assert body["propertyName"] == "body"


def test_seven_digit_fraction_is_narrowed_consistently(client: TestClient) -> None:
    payload = _forecast()
    payload["date"] = "2026-01-20T12:00:00.1234567+00:00"

    created = _create(client, payload)

    assert created["date"] == "2026-01-20T12:00:00.123456Z"
    assert client.get(f"{BASE}/{created['id']}").json()["date"] == created["date"]


def test_get_unknown_id_is_404_with_empty_body(client: TestClient) -> None:
    resp = client.get(f"{BASE}/{uuid.uuid4()}")

    assert resp.status_code == 404
    assert resp.content == b""


@pytest.mark.parametrize("forecast_id", ["BadRobot", "xxBadRobotxx", str(uuid.uuid4()) + "BadRobot"])
def test_get_fault_injection_returns_correlation_id(client: TestClient, forecast_id: str) -> None:
    resp = client.get(f"{BASE}/{forecast_id}")

    assert resp.status_code == 500
    body = resp.json()
    assert body["correlationId"]
    assert body["correlationId"] in body["message"]
    assert "Error simulation" not in resp.text


def test_fault_injection_ids_differ_per_request(client: TestClient) -> None:
    first = client.get(f"{BASE}/BadRobot").json()["correlationId"]
    second = client.get(f"{BASE}/BadRobot").json()["correlationId"]

    assert first != second


def test_patch_updates_only_supplied_fields(client: TestClient) -> None:
    created = _create(client, _forecast())

    resp = client.patch(f"{BASE}/{created['id']}", json={"summary": "Test update a weather forecast"})

    assert resp.status_code == 204
    assert resp.content == b""
    updated = client.get(f"{BASE}/{created['id']}").json()
    assert updated["summary"] == "Test update a weather forecast"
    assert updated["temperatureC"] == created["temperatureC"]
    assert updated["date"] == created["date"]


def test_patch_with_all_null_fields_leaves_record_unchanged(client: TestClient) -> None:
    created = _create(client, _forecast())

    resp = client.patch(
        f"{BASE}/{created['id']}",
        json={"date": None, "summary": None, "temperatureC": None},
    )

    assert resp.status_code == 204
    after = client.get(f"{BASE}/{created['id']}").json()
    assert after == {k: created[k] for k in ("date", "summary", "temperatureC")}


def test_patch_unknown_id_is_404(client: TestClient) -> None:
    resp = client.patch(f"{BASE}/{uuid.uuid4()}", json={"summary": "Hot"})

    assert resp.status_code == 404


def test_patch_unknown_id_with_blank_summary_is_404(client: TestClient) -> None:
    resp = client.patch(f"{BASE}/{uuid.uuid4()}", json={"summary": ""})

    assert resp.status_code == 404
    assert resp.content == b""


def test_patch_rejects_blank_summary(client: TestClient) -> None:
    created = _create(client, _forecast())

    resp = client.patch(f"{BASE}/{created['id']}", json={"summary": " "})

    assert resp.status_code == 400
    assert client.get(f"{BASE}/{created['id']}").json()["summary"] == created["summary"]


def test_put_existing_id_replaces_every_field(client: TestClient) -> None:
    created = _create(client, _forecast(summary="Initial Summary", temp=10))
    replacement = {"date": "2027-03-04T05:06:07Z", "temperatureC": -5, "summary": "Completely Updated Summary"}

    resp = client.put(f"{BASE}/{created['id']}", json=replacement)

    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"{BASE}/{created['id']}").json() == replacement


def test_put_new_id_creates_under_client_id(client: TestClient) -> None:
    client_id = str(uuid.uuid4())
    payload = _forecast(summary="Created with client-provided ID")

    resp = client.put(f"{BASE}/{client_id}", json=payload)

    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == client_id
    assert body["summary"] == payload["summary"]
    assert body["temperatureC"] == payload["temperatureC"]
    assert body["date"] == payload["date"]
    assert resp.headers["location"].endswith(f"{BASE}/{client_id}")
    assert client.get(f"{BASE}/{client_id}").json()["summary"] == payload["summary"]


@pytest.mark.parametrize("summary", [None, "", "X" * 61])
def test_put_validates_like_create(client: TestClient, summary: str | None) -> None:
    resp = client.put(f"{BASE}/{uuid.uuid4()}", json=_forecast(summary=summary))

    assert resp.status_code == 400
    assert resp.json()["propertyName"] == "Summary"


def test_delete_then_get_is_404(client: TestClient) -> None:
    created = _create(client, _forecast(summary="To be deleted"))
    assert client.get(f"{BASE}/{created['id']}").status_code == 200

    resp = client.delete(f"{BASE}/{created['id']}")

    assert resp.status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_delete_twice_second_is_404(client: TestClient) -> None:
    created = _create(client, _forecast())

    assert client.delete(f"{BASE}/{created['id']}").status_code == 204
    assert client.delete(f"{BASE}/{created['id']}").status_code == 404


def test_delete_nonexistent_is_404(client: TestClient) -> None:
    resp = client.delete(f"{BASE}/{uuid.uuid4()}")

    assert resp.status_code == 404


def test_health(client: TestClient) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
