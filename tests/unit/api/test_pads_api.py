"""Tests for the pad HTTP endpoints."""

import re

import pytest
from fastapi.testclient import TestClient

from padnote.core.exceptions import MalformedIdentifier
from padnote.core.memory_store import MemoryStore
from padnote.main import create_app, malformed_identifier_handler

PAD_LOCATION = re.compile(r"^/([A-Za-z0-9]{5,})$")


def _new_pad(client) -> str:
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 301
    match = PAD_LOCATION.match(response.headers["location"])
    assert match, response.headers["location"]
    return match.group(1)


class TestCreatePad:

    def test_root_redirects_to_new_pad(self, client, test_app):
        pad_id = _new_pad(client)
        assert test_app.state.encoder.decode(pad_id) == 1

    def test_each_visit_gets_a_new_pad(self, client):
        assert _new_pad(client) != _new_pad(client)

    def test_redirect_is_followed_to_empty_pad(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]


class TestGetPad:

    def test_renders_name_and_content(self, client):
        pad_id = _new_pad(client)
        client.post(f"/{pad_id}", data={"t": "hello world"})

        response = client.get(f"/{pad_id}")

        assert response.status_code == 200
        assert pad_id in response.text
        assert "hello world" in response.text

    def test_unknown_pad_renders_empty(self, client):
        response = client.get("/never-written-id")
        assert response.status_code == 200
        assert "never-written-id" in response.text

    def test_content_is_escaped(self, client):
        client.post("/abc", data={"t": "<script>alert(1)</script>"})
        response = client.get("/abc")
        assert "<script>alert(1)</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_trailing_slash_redirects(self, client):
        response = client.get("/abc/", follow_redirects=False)
        assert response.status_code in (307, 308)
        assert response.headers["location"].endswith("/abc")

    def test_no_cache_headers(self, client):
        response = client.get("/abc")
        assert "no-store" in response.headers["cache-control"]
        assert response.headers["pragma"] == "no-cache"
        assert response.headers["expires"] == "Thu, 01 Jan 1970 00:00:00 GMT"


class TestUpdatePad:

    def test_update_acknowledges(self, client):
        pad_id = _new_pad(client)
        response = client.post(f"/{pad_id}", data={"t": "draft"})
        assert response.status_code == 200
        assert response.json() == {"message": "ok", "padname": pad_id}

    def test_overwrite(self, client):
        client.post("/abc", data={"t": "a"})
        client.post("/abc", data={"t": "b"})
        assert ">b</textarea>" in client.get("/abc").text

    def test_missing_field_clears_pad(self, client):
        client.post("/abc", data={"t": "something"})
        response = client.post("/abc", data={})
        assert response.status_code == 200
        assert "something" not in client.get("/abc").text

    def test_content_too_large(self, client, test_settings):
        response = client.post("/abc", data={"t": "x" * (test_settings.max_content_length + 1)})
        assert response.status_code == 413

    def test_content_at_limit_is_accepted(self, client, test_settings):
        response = client.post("/abc", data={"t": "x" * test_settings.max_content_length})
        assert response.status_code == 200


class TestStoreFailure:

    @pytest.fixture
    def broken_client(self, test_settings, failing_store):
        app = create_app(test_settings, store=failing_store)
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c

    def test_create_returns_500(self, broken_client):
        response = broken_client.get("/", follow_redirects=False)
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "StoreUnavailable"
        assert body["message"] == "Internal Server Error"

    def test_read_returns_500_not_empty(self, broken_client):
        assert broken_client.get("/abc").status_code == 500

    def test_update_returns_500(self, broken_client):
        assert broken_client.post("/abc", data={"t": "x"}).status_code == 500


class TestHealth:

    def test_pad_named_health_round_trips(self, client):
        assert client.post("/health", data={"t": "secret"}).json() == {"message": "ok", "padname": "health"}

        response = client.get("/health")
        assert response.status_code == 200
        assert ">secret</textarea>" in response.text

    def test_health_report(self, client):
        response = client.get("/api/health/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["store"]["connected"] is True

    def test_store_health(self, client):
        response = client.get("/api/health/store")
        assert response.status_code == 200
        assert response.json()["backend"] == "memory"


def test_static_assets_served(client):
    response = client.get("/static/js/pad.js")
    assert response.status_code == 200
    assert "padname" in response.text


class TestMalformedIdentifier:

    @pytest.fixture
    def decoding_client(self, test_settings):
        app = create_app(test_settings, store=MemoryStore())

        @app.get("/api/decode/{padname}")
        async def decode(padname: str):
            return {"value": app.state.encoder.decode(padname)}

        with TestClient(app) as c:
            yield c

    def test_malformed_identifier_is_400(self, decoding_client):
        response = decoding_client.get("/api/decode/not-an-id")
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "MalformedIdentifier"
        assert body["details"] == {"identifier": "not-an-id"}
        assert "not-an-id" in body["message"]

    def test_valid_identifier_decodes(self, decoding_client):
        pad_id = decoding_client.app.state.encoder.encode(42)
        response = decoding_client.get(f"/api/decode/{pad_id}")
        assert response.status_code == 200
        assert response.json() == {"value": 42}

    @pytest.mark.asyncio
    async def test_handler_builds_error_response(self):
        response = await malformed_identifier_handler(None, MalformedIdentifier("zz"))
        assert response.status_code == 400
        assert b'"error":"MalformedIdentifier"' in response.body
