"""Tests for application-wide middleware, error handling and probes."""

from fastapi.testclient import TestClient

from storefront.api.http.app import app
from storefront.api.http.app_data import ApplicationDependencies
from storefront.core.services import MongoConnectionService, StripeClientService


class TestRequestId:
    def test_echoes_incoming_request_id(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_generates_request_id_when_absent(self, client):
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_request_id_on_error_responses(self, client):
        response = client.get("/api/products/999", headers={"X-Request-ID": "req-404"})

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "req-404"


class TestUnhandledErrors:
    def test_unexpected_exception_becomes_generic_500(self, client, mock_repository):
        mock_repository.distinct_categories.side_effect = RuntimeError("secret detail")

        response = client.get("/api/categories", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "secret detail" not in response.text
        assert response.headers["X-Request-ID"] == "req-500"


class TestSecurityHeaders:
    def test_headers_present(self, client):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers


class TestProbes:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_ready_when_database_answers(self, client, mock_database_service):
        mock_database_service.health_check.return_value = True

        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    def test_not_ready_when_database_down(self, client, mock_database_service):
        mock_database_service.health_check.return_value = False

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}


class TestLifespan:
    def test_dependencies_built_on_startup(self):
        with TestClient(app):
            deps = app.state.app_dependencies
            assert isinstance(deps, ApplicationDependencies)
            assert isinstance(deps.database_service, MongoConnectionService)
            assert isinstance(deps.payment_service, StripeClientService)
            # Connecting is deferred to the first query
            assert not deps.database_service.is_connected
