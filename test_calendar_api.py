"""
Tests for the calendar service endpoints

Each test gets its own in-memory calendar through a dependency override,
so nothing leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

import apps.shared.auth as auth
from apps.calendar.candy import Candy
from apps.calendar.main import app
from apps.calendar.store import CalendarStore, default_candies, get_store


@pytest.fixture
def store():
    return CalendarStore([Candy(f"Candy {i}", i) for i in range(1, 7)])


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(auth, "INTERNAL_API_KEY", None)
    monkeypatch.setattr(auth, "ENVIRONMENT", "development")
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/calendar/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "calendar", "doors": 6}


def test_get_calendar_state(client):
    response = client.get("/calendar")
    assert response.status_code == 200

    state = response.json()
    assert state["day"] == 0
    assert state["max_days"] == 6
    assert state["doors"] == [False] * 6
    assert state["unopened"] == 0
    assert state["render"].startswith("[1xCandy 1]")
    assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"


def test_render_is_plain_text(client):
    response = client.get("/calendar/render")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "[6xCandy 6]" in response.text


def test_next_day_and_next_days(client):
    assert client.post("/calendar/next-day").json() == {"advanced": True, "day": 1}
    assert client.post("/calendar/next-days", json={"days": 4}).json() == {"advanced": True, "day": 5}
    assert client.post("/calendar/next-days", json={"days": 2}).json() == {"advanced": False, "day": 5}
    assert client.post("/calendar/next-days", json={"days": 0}).json() == {"advanced": False, "day": 5}


def test_next_days_requires_integer(client):
    response = client.post("/calendar/next-days", json={"days": "soon"})
    assert response.status_code == 422


def test_open_door_soft_refusal(client):
    """Too early, unknown and already opened doors are not HTTP errors"""
    client.post("/calendar/next-days", json={"days": 3})

    opened = client.post("/calendar/doors/2/open")
    assert opened.status_code == 200
    assert opened.json() == {
        "number": 2,
        "opened": True,
        "candy": {"name": "Candy 2", "quantity": 2},
    }

    for number in (2, 5, 0, 42):
        refused = client.post(f"/calendar/doors/{number}/open")
        assert refused.status_code == 200
        assert refused.json() == {"number": number, "opened": False, "candy": None}


def test_door_status(client):
    client.post("/calendar/next-day")
    client.post("/calendar/doors/1/open")

    assert client.get("/calendar/doors/1").json() == {"number": 1, "open": True}
    assert client.get("/calendar/doors/2").json() == {"number": 2, "open": False}
    assert client.get("/calendar/doors/99").json() == {"number": 99, "open": False}


def test_open_several_doors(client):
    client.post("/calendar/next-days", json={"days": 4})

    response = client.post("/calendar/doors/open", json={"numbers": [4, 6, 1, 4]})

    assert response.status_code == 200
    assert response.json() == {
        "candies": [
            {"name": "Candy 4", "quantity": 4},
            {"name": "Candy 1", "quantity": 1},
        ]
    }
    assert client.get("/calendar/doors/unopened").json() == {"day": 4, "unopened": 2}


def test_reset(client, store):
    client.post("/calendar/next-days", json={"days": 3})
    client.post("/calendar/doors/open", json={"numbers": [1, 2]})

    response = client.post("/calendar/reset")

    assert response.status_code == 200
    state = response.json()
    assert state["day"] == 0
    assert state["doors"] == [False] * 6
    assert store.calendar.get_day() == 0


def test_seed_replaces_calendar(client, store):
    response = client.post(
        "/calendar/seed",
        json={"candies": [{"name": "Nougat", "quantity": 2}, {"name": "Toffee", "quantity": 1}]},
    )

    assert response.status_code == 200
    assert response.json()["max_days"] == 2
    assert response.json()["render"] == "[2xNougat][1xToffee]"
    assert store.calendar.max_days == 2


def test_seed_empty_calendar(client):
    response = client.post("/calendar/seed", json={"candies": []})

    assert response.status_code == 200
    assert response.json()["max_days"] == 0
    assert client.post("/calendar/next-day").json() == {"advanced": False, "day": 0}


def test_seed_rejects_negative_quantity(client):
    response = client.post("/calendar/seed", json={"candies": [{"name": "Nougat", "quantity": -1}]})
    assert response.status_code == 422


def test_admin_endpoints_require_api_key(client, monkeypatch):
    monkeypatch.setattr(auth, "INTERNAL_API_KEY", "secret")

    response = client.post("/calendar/reset")
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or missing API key", "category": "security"}

    wrong = client.post("/calendar/next-day", headers={"X-API-Key": "guess"})
    assert wrong.status_code == 401

    allowed = client.post("/calendar/next-day", headers={"X-API-Key": "secret"})
    assert allowed.status_code == 200
    assert allowed.json() == {"advanced": True, "day": 1}


def test_unknown_route_uses_error_payload(client):
    response = client.get("/calendar/nowhere/at/all")
    assert response.status_code == 404
    assert response.json()["category"] == "client_error"


def test_default_candies():
    candies = default_candies(24)

    assert len(candies) == 24
    assert candies[0] == Candy("Chocolate", 1)
    assert candies[6] == Candy("Chocolate", 2)
    assert candies[23].quantity == 4
