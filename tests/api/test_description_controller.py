"""
tests/api/test_description_controller.py

Tests for the /descriptions endpoints, run against the embedded dataset
through the shared TestClient.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from mime_description.core.exceptions import AppBaseException
from mime_description.dataset import registry
from mime_description.services.description_service import description_service


class TestDescribeMimeType:
    """GET /descriptions/{mime_type}"""

    def test_known_type(self, client: TestClient) -> None:
        response = client.get("/descriptions/application/pdf")

        assert response.status_code == 200
        assert response.json() == {
            "mime_type": "application/pdf",
            "description": "PDF document",
            "found": True,
        }

    def test_unknown_type_returns_404(self, client: TestClient) -> None:
        response = client.get("/descriptions/unknown/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": 'MIME type not found: "unknown/unknown"'}

    def test_lookup_is_case_sensitive(self, client: TestClient) -> None:
        response = client.get("/descriptions/APPLICATION/PDF")
        assert response.status_code == 404

    def test_structured_suffix_type(self, client: TestClient) -> None:
        response = client.get("/descriptions/image/svg%2Bxml")

        assert response.status_code == 200
        assert response.json()["description"] == "SVG image"


class TestDescribeHeader:
    """GET /descriptions/?header=..."""

    def test_known_header(self, client: TestClient) -> None:
        response = client.get("/descriptions/", params={"header": "Text/Plain; charset=utf-8"})

        assert response.status_code == 200
        assert response.json() == {
            "mime_type": "text/plain",
            "description": "Plain text document",
            "found": True,
        }

    def test_unknown_header_falls_back_to_cleaned_type(self, client: TestClient) -> None:
        response = client.get(
            "/descriptions/", params={"header": "application/x-custom; param=value"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "mime_type": "application/x-custom",
            "description": "application/x-custom",
            "found": False,
        }

    def test_unknown_header_uses_default(self, client: TestClient) -> None:
        response = client.get(
            "/descriptions/", params={"header": "fake/mime", "default": "Unknown file"}
        )

        body = response.json()
        assert body["description"] == "Unknown file"
        assert body["found"] is False

    def test_empty_header(self, client: TestClient) -> None:
        response = client.get("/descriptions/", params={"header": ""})

        assert response.status_code == 200
        assert response.json() == {"mime_type": "", "description": "", "found": False}


class TestListDescriptions:
    """GET /descriptions/ without a header."""

    def test_lists_whole_dataset(self, client: TestClient) -> None:
        response = client.get("/descriptions/")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == len(registry.get_all())
        assert body["descriptions"]["application/pdf"] == "PDF document"


class TestErrorHandling:

    def test_app_exception_becomes_500(self, client: TestClient) -> None:
        """AppBaseException escaping a controller is caught by the global handler."""
        with patch.object(
            description_service,
            "get_or_fail",
            side_effect=AppBaseException("dataset unavailable"),
        ):
            response = client.get("/descriptions/application/pdf")

        assert response.status_code == 500
        assert response.json() == {"error": "dataset unavailable"}
