"""
Tests for the error responder endpoint.

Runs the FastAPI app against error documents in a temporary directory.
Validates status codes, streamed bodies, the not-found fallback and
debug header mirroring.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from default_backend.core.config import Settings
from default_backend.interfaces.pages.responses import MIRRORED_HEADERS, NOT_FOUND_BODY
from default_backend.main import create_app


@pytest.fixture
def errors_dir(tmp_path):
    (tmp_path / "404.html").write_bytes(b"<h1>not here</h1>")
    (tmp_path / "500.json").write_bytes(b'{"e":1}')
    (tmp_path / "503.html").write_bytes(b"<h1>down</h1>")
    return tmp_path


@pytest.fixture
def client(errors_dir) -> TestClient:
    return TestClient(create_app(Settings(debug=False, error_files_path=str(errors_dir))))


@pytest.fixture
def debug_client(errors_dir) -> TestClient:
    return TestClient(create_app(Settings(debug=True, error_files_path=str(errors_dir))))


class TestErrorResponder:
    """Tests for the catch-all error page route."""

    def test_serves_json_document_with_resolved_status(self, client: TestClient) -> None:
        response = client.get(
            "/", headers={"X-Code": "500", "X-Format": "application/json"}
        )
        assert response.status_code == 500
        assert response.content == b'{"e":1}'

    def test_defaults_to_404_html(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 404
        assert response.content == b"<h1>not here</h1>"

    def test_non_numeric_code_falls_back_to_404(self, client: TestClient) -> None:
        response = client.get("/", headers={"X-Code": "oops"})
        assert response.status_code == 404
        assert response.content == b"<h1>not here</h1>"

    def test_code_header_selects_document(self, client: TestClient) -> None:
        response = client.get("/some/page", headers={"X-Code": "503"})
        assert response.status_code == 503
        assert response.content == b"<h1>down</h1>"

    def test_unknown_format_uses_html_document(self, client: TestClient) -> None:
        response = client.get(
            "/", headers={"X-Code": "503", "X-Format": "application/x-unknown"}
        )
        assert response.status_code == 503
        assert response.content == b"<h1>down</h1>"

    def test_missing_document_keeps_status_with_not_found_body(
        self, client: TestClient
    ) -> None:
        """The status line is committed before the document lookup."""
        response = client.get("/", headers={"X-Code": "500", "X-Format": "text/html"})
        assert response.status_code == 500
        assert response.content == NOT_FOUND_BODY

    @pytest.mark.parametrize(
        "method",
        ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PROPFIND", "PURGE", "MKCOL"],
    )
    def test_any_method_is_answered(self, client: TestClient, method: str) -> None:
        response = client.request(method, "/api/thing", headers={"X-Code": "503"})
        assert response.status_code == 503
        assert response.content == b"<h1>down</h1>"

    def test_code_beyond_64_bits_serves_404_page(self, client: TestClient) -> None:
        """An integer too large to parse is a malformed code, not a status."""
        response = client.get("/", headers={"X-Code": "99999999999999999999"})
        assert response.status_code == 404
        assert response.content == b"<h1>not here</h1>"

    def test_trailing_slash_health_is_an_error_page(self, client: TestClient) -> None:
        response = client.get("/health/", headers={"X-Code": "503"})
        assert response.status_code == 503

    def test_large_document_is_streamed_whole(self, client: TestClient, errors_dir) -> None:
        payload = b"x" * (200 * 1024 + 7)
        (errors_dir / "502.html").write_bytes(payload)
        response = client.get("/", headers={"X-Code": "502"})
        assert response.status_code == 502
        assert response.content == payload


class TestHeaderMirroring:
    """Tests for debug-mode header mirroring."""

    def test_debug_mode_mirrors_request_headers(self, debug_client: TestClient) -> None:
        response = debug_client.get(
            "/",
            headers={
                "X-Code": "503",
                "X-Request-ID": "req-123",
                "X-Original-URI": "/shop/cart",
                "X-Namespace": "shop",
                "X-Service-Name": "cart",
                "X-Service-Port": "8081",
            },
        )
        assert response.status_code == 503
        assert response.headers["x-request-id"] == "req-123"
        assert response.headers["x-original-uri"] == "/shop/cart"
        assert response.headers["x-namespace"] == "shop"
        assert response.headers["x-service-name"] == "cart"
        assert response.headers["x-service-port"] == "8081"
        assert response.headers["x-code"] == "503"

    def test_debug_mode_sets_missing_headers_empty(self, debug_client: TestClient) -> None:
        response = debug_client.get("/")
        for name in MIRRORED_HEADERS:
            assert response.headers.get(name) == ""

    def test_non_debug_mode_adds_no_headers(self, client: TestClient) -> None:
        response = client.get(
            "/",
            headers={"X-Request-ID": "req-123", "X-Namespace": "shop", "X-Code": "503"},
        )
        for name in MIRRORED_HEADERS:
            assert name.lower() not in response.headers

    def test_adding_headers_is_logged_at_debug(self, debug_client: TestClient, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="default_backend.interfaces.pages.router")
        debug_client.get("/")
        records = [r for r in caplog.records if r.getMessage() == "Adding headers"]
        assert [r.levelno for r in records] == [logging.DEBUG]


class TestErrorHandlers:
    """Tests for the centralized error handlers."""

    def _app_with_failing_use_case(self, error: Exception, errors_dir):
        from default_backend.interfaces.pages.dependencies import (
            get_resolve_error_page_use_case,
        )

        class _FailingUseCase:
            def execute(self, query):
                raise error

        app = create_app(Settings(debug=False, error_files_path=str(errors_dir)))
        app.dependency_overrides[get_resolve_error_page_use_case] = _FailingUseCase
        return app

    def test_unexpected_error_maps_to_500(self, errors_dir) -> None:
        app = self._app_with_failing_use_case(RuntimeError("boom"), errors_dir)
        response = TestClient(app, raise_server_exceptions=False).get("/")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
