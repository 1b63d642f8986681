"""Тесты HTTP-обработчиков стримов с хранилищем в памяти."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from streams_api.api.deps import get_stream_repository
from streams_api.domains.streams.entities import Stream
from tests.fakes import BrokenStreamRepository, FailingStreamRepository

STREAMS_URL = "/api/v1/streams"


def stream_payload(**overrides):
    payload = {
        "userId": str(uuid.uuid4()),
        "title": "Evening stream",
        "description": "Playing through the backlog",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def failing_client(app, client):
    app.dependency_overrides[get_stream_repository] = lambda: FailingStreamRepository()
    return client


def test_create_stream(client, stream_store):
    payload = stream_payload()

    response = client.post(STREAMS_URL, json=payload)

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"streamId", "userId", "title", "description", "createdAt"}
    assert body["userId"] == payload["userId"]
    assert body["title"] == payload["title"]
    assert body["description"] == payload["description"]
    assert uuid.UUID(body["streamId"]) in stream_store.streams
    assert datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))


def test_create_stream_generates_fresh_ids(client):
    first = client.post(STREAMS_URL, json=stream_payload()).json()
    second = client.post(STREAMS_URL, json=stream_payload()).json()

    assert first["streamId"] != second["streamId"]


def test_create_stream_ignores_client_supplied_id_and_timestamp(client):
    client_id = str(uuid.uuid4())
    payload = stream_payload(streamId=client_id, createdAt="2000-01-01T00:00:00Z")

    body = client.post(STREAMS_URL, json=payload).json()

    assert body["streamId"] != client_id
    assert not body["createdAt"].startswith("2000-01-01")


def test_create_stream_without_description(client):
    payload = stream_payload()
    del payload["description"]

    response = client.post(STREAMS_URL, json=payload)

    assert response.status_code == 201
    assert response.json()["description"] == ""


@pytest.mark.parametrize("user_id", ["not-a-uuid", "", "12345", "abcdefghijklmnop", "0123456789abcdef", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
def test_create_stream_with_invalid_user_id(client, stream_store, user_id):
    response = client.post(STREAMS_URL, json=stream_payload(userId=user_id))

    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "message": "Invalid userId format"}
    assert stream_store.streams == {}


def test_create_stream_with_malformed_json(client, stream_store):
    response = client.post(
        STREAMS_URL,
        content=b'{"userId": "broken',
        headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "message": "Invalid request body"}
    assert stream_store.streams == {}


def test_create_stream_with_non_object_body(client):
    response = client.post(STREAMS_URL, json=["userId", "title"])

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_create_stream_without_title(client):
    payload = stream_payload()
    del payload["title"]

    response = client.post(STREAMS_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "message": "title is required"}


@pytest.mark.parametrize("title", ["", "   "])
def test_create_stream_with_blank_title(client, title):
    response = client.post(STREAMS_URL, json=stream_payload(title=title))

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_create_stream_with_too_long_description(client):
    response = client.post(STREAMS_URL, json=stream_payload(description="x" * 501))

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_create_stream_repository_failure(failing_client):
    response = failing_client.post(STREAMS_URL, json=stream_payload())

    assert response.status_code == 500
    assert response.json() == {
        "error": "INTERNAL_SERVER_ERROR",
        "message": "Internal server error",
    }


def test_list_streams_returns_summaries_newest_first(client, stream_store):
    now = datetime.now(timezone.utc)
    user_id = uuid.uuid4()
    for offset, title in ((2, "oldest"), (0, "newest"), (1, "middle")):
        stream = Stream.create_stream(user_id=user_id, title=title, description="hidden")
        stream.created_at = now - timedelta(minutes=offset)
        stream_store.streams[stream.stream_id] = stream

    response = client.get(STREAMS_URL)

    assert response.status_code == 200
    body = response.json()
    assert [item["title"] for item in body] == ["newest", "middle", "oldest"]
    for item in body:
        assert set(item) == {"streamId", "userId", "title", "createdAt"}
        assert item["userId"] == str(user_id)


def test_list_streams_empty(client):
    response = client.get(STREAMS_URL)

    assert response.status_code == 200
    assert response.json() == []


def test_list_streams_repository_failure(failing_client):
    response = failing_client.get(STREAMS_URL)

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_SERVER_ERROR"
    assert "db.internal" not in response.text


def test_get_stream(client):
    created = client.post(STREAMS_URL, json=stream_payload()).json()

    response = client.get(f"{STREAMS_URL}/{created['streamId']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_stream_not_found(client):
    response = client.get(f"{STREAMS_URL}/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"error": "NOT_FOUND", "message": "Stream not found"}


def test_get_stream_with_invalid_id(client):
    response = client.get(f"{STREAMS_URL}/not-a-uuid")

    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "message": "Invalid streamId format"}


def test_get_stream_repository_failure(failing_client):
    response = failing_client.get(f"{STREAMS_URL}/{uuid.uuid4()}")

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_SERVER_ERROR"


def test_delete_stream(client, stream_store):
    created = client.post(STREAMS_URL, json=stream_payload()).json()

    response = client.delete(f"{STREAMS_URL}/{created['streamId']}")

    assert response.status_code == 204
    assert response.content == b""
    assert stream_store.streams == {}


def test_delete_missing_stream_still_succeeds(client):
    response = client.delete(f"{STREAMS_URL}/{uuid.uuid4()}")

    assert response.status_code == 204


def test_delete_stream_with_invalid_id(client):
    response = client.delete(f"{STREAMS_URL}/12345")

    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "message": "Invalid streamId format"}


def test_delete_stream_repository_failure(failing_client):
    response = failing_client.delete(f"{STREAMS_URL}/{uuid.uuid4()}")

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_SERVER_ERROR"


def test_unexpected_error_returns_internal_server_error(app):
    app.dependency_overrides[get_stream_repository] = lambda: BrokenStreamRepository()
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get(STREAMS_URL)

    assert response.status_code == 500
    assert response.json() == {
        "error": "INTERNAL_SERVER_ERROR",
        "message": "Internal server error",
    }
