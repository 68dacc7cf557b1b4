"""HTTP tests for the user endpoints."""

import asyncio
import sqlite3
import time

import httpx
from fastapi.testclient import TestClient

from starter_api.app.main import create_app


def test_list_users_empty(client):
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == []


def test_create_then_list(client):
    response = client.post("/api/users", json={"name": "Alice"})
    assert response.status_code == 200
    created = response.json()
    assert created["name"] == "Alice"
    assert isinstance(created["id"], int)

    users = client.get("/api/users").json()
    matching = [u for u in users if u["name"] == "Alice"]
    assert matching == [created]


def test_sequential_creates_get_increasing_ids(client):
    names = ["ann", "bob", "cid", "dee", "eve"]
    ids = [client.post("/api/users", json={"name": n}).json()["id"] for n in names]

    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)

    listed = client.get("/api/users").json()
    assert [u["name"] for u in sorted(listed, key=lambda u: u["id"])] == names


def test_trailing_slash_is_accepted(client):
    assert client.post("/api/users/", json={"name": "slash"}).status_code == 200
    assert client.get("/api/users/").json()[0]["name"] == "slash"


def test_empty_name_is_stored_as_is(client):
    response = client.post("/api/users", json={"name": ""})
    assert response.status_code == 200
    assert response.json()["name"] == ""
    assert client.get("/api/users").json() == [response.json()]


def test_missing_name_is_internal_error(client):
    response = client.post("/api/users", json={})
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert client.get("/api/users").json() == []


def test_validation_rejects_blank_names(make_client):
    client = make_client(validate_names=True)

    for body in ({"name": ""}, {"name": "   "}, {}, {"name": None}):
        response = client.post("/api/users", json=body)
        assert response.status_code == 400, body
        assert response.json() == {"detail": "name must be a non-empty string"}

    assert client.post("/api/users", json={"name": " Bob "}).json()["name"] == " Bob "
    assert len(client.get("/api/users").json()) == 1


def test_malformed_body_is_rejected_by_fastapi(client):
    response = client.post(
        "/api/users", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422


def test_store_failure_returns_generic_500(client):
    client.app.state.store.close()

    for response in (client.get("/api/users"), client.post("/api/users", json={"name": "x"})):
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}


def test_users_survive_restart(make_settings):
    settings = make_settings()

    with TestClient(create_app(settings)) as first:
        alice = first.post("/api/users", json={"name": "Alice"}).json()

    with TestClient(create_app(settings)) as second:
        assert second.get("/api/users").json() == [alice]
        bob = second.post("/api/users", json={"name": "Bob"}).json()

    assert bob["id"] > alice["id"]


def test_cors_headers_when_origins_configured(make_client):
    client = make_client(cors_origins="http://localhost:5173")
    response = client.get("/api/users", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_no_cors_headers_by_default(client):
    response = client.get("/api/users", headers={"Origin": "http://localhost:5173"})
    assert "access-control-allow-origin" not in response.headers


def test_locked_insert_does_not_stall_other_requests(make_settings):
    settings = make_settings(serve_static=True)
    app = create_app(settings)
    app.state.store.open()

    locker = sqlite3.connect(settings.database_url, isolation_level=None)
    locker.execute("BEGIN EXCLUSIVE")

    async def scenario():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
            insert = asyncio.create_task(ac.post("/api/users", json={"name": "Alice"}))
            await asyncio.sleep(0.1)

            started = time.monotonic()
            page = await ac.get("/")
            elapsed = time.monotonic() - started

            locker.execute("ROLLBACK")
            return page, elapsed, await insert

    try:
        page, elapsed, created = asyncio.run(scenario())
    finally:
        locker.close()
        app.state.store.close()

    assert page.status_code == 200
    assert elapsed < 1.0
    assert created.status_code == 200
    assert created.json()["name"] == "Alice"
