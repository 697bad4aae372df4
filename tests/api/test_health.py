"""
tests/api/test_health.py

Smoke tests for the /health endpoint.

These verify that:
  1. The app starts without errors.
  2. The health route is reachable and returns the expected shape.
  3. The response reports the version from config and the dataset size.
"""

from fastapi.testclient import TestClient

from mime_description.core.config import settings
from mime_description.dataset import registry


class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health endpoint must respond with HTTP 200."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_shape(self, client: TestClient) -> None:
        """Response must contain 'status', 'version' and 'mime_types' fields."""
        body = client.get("/health").json()
        assert set(body) == {"status", "version", "mime_types"}

    def test_health_status_is_ok(self, client: TestClient) -> None:
        """'status' field must equal 'ok'."""
        response = client.get("/health")
        assert response.json()["status"] == "ok"

    def test_health_version_matches_settings(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.json()["version"] == settings.app_version

    def test_health_reports_dataset_size(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.json()["mime_types"] == len(registry.get_all())

    def test_health_content_type_is_json(self, client: TestClient) -> None:
        """Response Content-Type must be application/json."""
        response = client.get("/health")
        assert "application/json" in response.headers["content-type"]
