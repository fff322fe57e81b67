"""
Tests for the profile cache API.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from profile_cache.api.app import app
from profile_cache.api.dependencies import get_handler, lifespan
from profile_cache.entities import RepoRef
from profile_cache.exceptions import UnknownUpstreamError, UpstreamError
from profile_cache.handlers import LookupHandler
from profile_cache.repositories import BoundedLRUCache
from profile_cache.services import LookupService


@pytest.fixture
def api_gateway(make_gateway, octocat_raw):
    return make_gateway(
        profile=octocat_raw,
        repos=[RepoRef(name="hello-world", url="https://api.example.test/repos/octocat/hello-world")],
    )


@pytest.fixture
def client(api_gateway):
    """Create a test client backed by a fake upstream."""
    service = LookupService(cache=BoundedLRUCache(capacity=5), gateway=api_gateway)
    handler = LookupHandler(lookup_service=service, token_configured=False)
    app.dependency_overrides[get_handler] = lambda: handler
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Profile Cache API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "cache_entries": 0,
        "cache_capacity": 5,
        "token_configured": False,
    }


def test_get_user(client):
    """Test successful lookup returns the legacy payload shape."""
    response = client.get("/users/octocat")
    assert response.status_code == 200
    assert response.json() == {
        "user_name": "octocat",
        "display_name": "The Octocat",
        "avatar": "avatar",
        "geo_location": "loc",
        "email": "email",
        "url": "url",
        "created_at": "created",
        "repos": [
            {"name": "hello-world", "url": "https://api.example.test/repos/octocat/hello-world"},
        ],
    }


def test_get_user_twice_uses_cache(client, api_gateway):
    """Test second lookup is served from cache."""
    first = client.get("/users/octocat")
    second = client.get("/users/octocat")

    assert first.json() == second.json()
    assert api_gateway.profile_calls == ["octocat"]

    stats = client.get("/stats").json()
    assert stats["total_entries"] == 1
    assert stats["hits"] == 1
    assert stats["misses"] == 1


def test_invalid_username_returns_bad_request(client, api_gateway):
    """Test invalid handle is rejected with 400."""
    response = client.get("/users/invalid@name!")
    assert response.status_code == 400
    assert "Invalid username" in response.json()["detail"]
    assert api_gateway.call_count == 0


def test_upstream_not_found_returns_server_error(client, api_gateway):
    """Test upstream 404 surfaces as 500 with the status text."""
    api_gateway.profile_error = UpstreamError(404, "Not Found")

    response = client.get("/users/username-does-not-exist")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to get response from github - Not Found"


def test_unknown_error_returns_server_error(client, api_gateway):
    """Test non-status failures surface as a generic 500."""
    api_gateway.repos_error = UnknownUpstreamError("bad payload")

    response = client.get("/users/octocat")

    assert response.status_code == 500
    assert response.json()["detail"] == "unknown error"

    stats = client.get("/stats").json()
    assert stats["total_entries"] == 0


def test_lifespan_wires_and_tears_down_app_state():
    """Test the real lifespan builds the handler and closes the client on exit."""
    with TestClient(app) as live_client:
        response = live_client.get("/health")
        assert response.status_code == 200
        assert response.json()["cache_entries"] == 0
        assert isinstance(app.state.lookup_handler, LookupHandler)
        http_client = app.state.http_client

    assert http_client.is_closed
    assert not hasattr(app.state, "lookup_handler")
    assert not hasattr(app.state, "http_client")


@pytest.mark.asyncio
async def test_lifespan_closes_client_when_app_exits_with_error():
    """Test teardown still runs when the app exits with an exception."""
    test_app = FastAPI()

    with pytest.raises(RuntimeError, match="boom"):
        async with lifespan(test_app):
            http_client = test_app.state.http_client
            raise RuntimeError("boom")

    assert http_client.is_closed
    assert not hasattr(test_app.state, "lookup_handler")
    assert not hasattr(test_app.state, "http_client")
