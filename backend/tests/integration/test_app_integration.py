"""
Integration tests for application wiring: health, metrics, error pages and CLI.
"""

import pytest


@pytest.mark.integration
class TestApplicationWiring:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy", "database": "connected"}

    def test_metrics_exposed(self, client):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "app_info" in response.get_data(as_text=True)

    def test_request_id_header(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    def test_unknown_route_is_404(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert "Not found" in response.get_data(as_text=True)

    def test_seed_command_is_idempotent(self, app):
        result = app.test_cli_runner().invoke(args=["seed-data"])

        assert result.exit_code == 0
        assert "already has data" in result.output
