"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body

    def test_docs_disabled_outside_debug(self) -> None:
        assert client.get("/docs").status_code == 404


class TestAppWiring:
    """Tests for the routing table registered at startup."""

    def test_person_routes_registered(self) -> None:
        routes = {
            (method, route.path)
            for route in app.routes
            for method in getattr(route, "methods", ()) or ()
        }
        assert ("GET", "/person") in routes
        assert ("PUT", "/person") in routes
        assert ("GET", "/person/{person_id}") in routes
        assert ("POST", "/person/{person_id}") in routes
        assert ("DELETE", "/person/{person_id}") in routes
