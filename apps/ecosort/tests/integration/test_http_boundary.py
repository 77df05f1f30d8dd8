"""Request boundary tests: origin policy, rate limit, body ceiling, headers."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from ecosort.presentation.http.middleware import SECURITY_HEADERS
from ecosort.setup.config import Settings

ALLOWED_ORIGIN = "https://ecosort.example"
TEXT_REQUEST = {"item": "glass jar", "isDirty": False}


class TestOriginPolicy:
    """Origin allow-list on classification routes."""

    def test_no_origin_accepted(self, client: TestClient) -> None:
        assert client.post("/api/classify-text", json=TEXT_REQUEST).status_code == 200

    def test_allowed_origin_gets_cors_headers(self, client: TestClient) -> None:
        response = client.post(
            "/api/classify-text", json=TEXT_REQUEST, headers={"Origin": ALLOWED_ORIGIN}
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN

    def test_same_origin_accepted(self, client: TestClient) -> None:
        response = client.post(
            "/api/classify-text", json=TEXT_REQUEST, headers={"Origin": "http://testserver"}
        )
        assert response.status_code == 200

    def test_disallowed_origin_rejected(self, client: TestClient, stub_oracle) -> None:
        response = client.post(
            "/api/classify-text", json=TEXT_REQUEST, headers={"Origin": "https://evil.example"}
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Origin not allowed"}
        assert "access-control-allow-origin" not in response.headers
        assert stub_oracle.calls == 0

    def test_preflight_allows_post_and_content_type(self, client: TestClient) -> None:
        response = client.options(
            "/api/classify-text",
            headers={
                "Origin": ALLOWED_ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_preflight_from_disallowed_origin(self, client: TestClient) -> None:
        response = client.options(
            "/api/classify-text",
            headers={
                "Origin": "https://evil.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Origin not allowed"}
        assert response.headers["content-type"].startswith("application/json")

    def test_preflight_with_disallowed_method(self, client: TestClient) -> None:
        response = client.options(
            "/api/classify-text",
            headers={
                "Origin": ALLOWED_ORIGIN,
                "Access-Control-Request-Method": "DELETE",
            },
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Disallowed CORS method"}

    def test_content_routes_not_origin_checked(self, client: TestClient) -> None:
        response = client.get("/api/categories", headers={"Origin": "https://evil.example"})
        assert response.status_code == 200


class TestRateLimit:
    """Per-client fixed-window limit (3 per minute in tests)."""

    def test_limit_exceeded(self, client: TestClient, stub_oracle) -> None:
        for _ in range(3):
            assert client.post("/api/classify-text", json=TEXT_REQUEST).status_code == 200

        response = client.post("/api/classify-text", json=TEXT_REQUEST)

        assert response.status_code == 429
        assert response.json() == {"error": "Rate limit reached. Please wait a minute."}
        assert "retry-after" in response.headers
        assert stub_oracle.calls == 3

    def test_shared_across_classification_routes(self, client: TestClient) -> None:
        for _ in range(3):
            client.post("/api/classify-text", json=TEXT_REQUEST)

        response = client.post("/api/classify-image", json={"base64": "aGk=", "mime": "image/png"})
        assert response.status_code == 429

    def test_health_not_limited(self, client: TestClient) -> None:
        for _ in range(5):
            client.post("/api/classify-text", json=TEXT_REQUEST)
        assert client.get("/api/health").status_code == 200

    def test_forwarded_for_keys_clients(self, build_app, settings: Settings) -> None:
        client = TestClient(build_app(settings.model_copy(update={"trust_forwarded_for": True})))

        for _ in range(3):
            client.post("/api/classify-text", json=TEXT_REQUEST, headers={"X-Forwarded-For": "1.1.1.1"})

        blocked = client.post(
            "/api/classify-text", json=TEXT_REQUEST, headers={"X-Forwarded-For": "1.1.1.1"}
        )
        other = client.post(
            "/api/classify-text", json=TEXT_REQUEST, headers={"X-Forwarded-For": "2.2.2.2, 10.0.0.1"}
        )

        assert blocked.status_code == 429
        assert other.status_code == 200


class TestBodyLimit:
    """Request body ceiling."""

    @pytest.fixture
    def small_client(self, build_app, settings: Settings) -> TestClient:
        return TestClient(build_app(settings.model_copy(update={"max_body_bytes": 2048})))

    def test_declared_length_too_large(self, small_client: TestClient, stub_oracle) -> None:
        response = small_client.post(
            "/api/classify-text", json={"item": "x" * 4096, "isDirty": False}
        )

        assert response.status_code == 413
        assert response.json() == {"error": "Request body too large"}
        assert stub_oracle.calls == 0

    def test_streamed_body_too_large(self, small_client: TestClient, stub_oracle) -> None:
        body = json.dumps({"item": "x" * 4096, "isDirty": False}).encode()
        chunks = iter([body[:1500], body[1500:3000], body[3000:]])

        response = small_client.post(
            "/api/classify-text",
            content=chunks,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert stub_oracle.calls == 0

    def test_within_limit(self, small_client: TestClient) -> None:
        response = small_client.post("/api/classify-text", json=TEXT_REQUEST)
        assert response.status_code == 200


class TestResponseHeaders:
    """Security and request-id headers."""

    @pytest.mark.parametrize("path", ["/api/health", "/api/categories"])
    def test_security_headers(self, client: TestClient, path: str) -> None:
        response = client.get(path)
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_errors(self, client: TestClient) -> None:
        response = client.post("/api/classify-text", json={})
        assert response.status_code == 400
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_request_id(self, client: TestClient) -> None:
        generated = client.get("/api/health")
        echoed = client.get("/api/health", headers={"X-Request-ID": "req-123"})

        assert generated.headers["X-Request-ID"]
        assert echoed.headers["X-Request-ID"] == "req-123"

    def test_csp_value(self) -> None:
        csp = SECURITY_HEADERS["Content-Security-Policy"]
        assert "default-src 'self'" in csp
        assert "img-src 'self' data: blob:" in csp
