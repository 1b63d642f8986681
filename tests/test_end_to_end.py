"""Сквозной сценарий через настоящее приложение и SQLite."""

import uuid

from fastapi.testclient import TestClient

from streams_api.api.deps import get_db
from streams_api.main import create_app
from tests.fakes import UnavailableDatabase

STREAMS_URL = "/api/v1/streams"


def test_create_get_delete_roundtrip(settings):
    app = create_app(settings)

    with TestClient(app) as client:
        user_id = str(uuid.uuid4())
        created = client.post(
            STREAMS_URL,
            json={"userId": user_id, "title": "t", "description": "d"}
        )
        assert created.status_code == 201
        stream_id = created.json()["streamId"]

        fetched = client.get(f"{STREAMS_URL}/{stream_id}")
        assert fetched.status_code == 200
        body = fetched.json()
        assert body["userId"] == user_id
        assert body["title"] == "t"
        assert body["description"] == "d"

        listed = client.get(STREAMS_URL)
        assert listed.status_code == 200
        assert [s["streamId"] for s in listed.json()] == [stream_id]

        deleted = client.delete(f"{STREAMS_URL}/{stream_id}")
        assert deleted.status_code == 204

        missing = client.get(f"{STREAMS_URL}/{stream_id}")
        assert missing.status_code == 404
        assert missing.json()["error"] == "NOT_FOUND"


def test_health(settings):
    app = create_app(settings)

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_when_database_unavailable(settings):
    app = create_app(settings)
    app.dependency_overrides[get_db] = lambda: UnavailableDatabase()
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}
