"""Unit tests for error to HTTP response mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from loop.adapter.error import MediaUploadError
from loop.domain.error import (
    AuthenticationError,
    ConflictError,
    DepthLimitExceededError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from loop.interface.error import register_error_handlers, status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (ValidationError("bad"), 400),
            (DepthLimitExceededError("abc", 10, 10), 400),
            (AuthenticationError("Unauthorized"), 401),
            (ForbiddenError("delete", "loop", "abc", "me"), 403),
            (NotFoundError("Loop", "abc"), 404),
            (ConflictError("taken"), 409),
            (DomainError("strange"), 500),
        ],
    )
    def test_maps_domain_errors(self, error, expected):
        assert status_for(error) == expected


@pytest.fixture
def client():
    """Small app whose routes raise each kind of error."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("Loop", "abc")

    @app.get("/unmapped")
    async def unmapped():
        raise DomainError("internal detail")

    @app.get("/upload")
    async def upload():
        raise MediaUploadError("cloudinary said no")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    @app.get("/typed")
    async def typed(limit: int):
        return {"limit": limit}

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for the registered handlers."""

    def test_domain_error_keeps_message(self, client):
        response = client.get("/not-found")

        assert response.status_code == 404
        assert response.json() == {"error": "Loop not found: abc"}

    def test_unmapped_domain_error_hides_details(self, client):
        response = client.get("/unmapped")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_media_upload_error_is_bad_gateway(self, client):
        response = client.get("/upload")

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to upload file"}

    def test_unexpected_error_hides_details(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_request_validation_is_bad_request(self, client):
        response = client.get("/typed", params={"limit": "many"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("query.limit:")

    def test_unknown_route_keeps_http_status(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
