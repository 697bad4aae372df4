"""
tests/test_public_api.py

End-to-end checks of the package-level functions against the embedded
dataset, including real-world email Content-Type headers.
"""

import pytest

import mime_description
from mime_description import MimeTypeNotFoundError


class TestGet:

    def test_known_types(self) -> None:
        assert mime_description.get("application/pdf") == "PDF document"
        assert mime_description.get("text/plain") == "Plain text document"
        assert mime_description.get("text/html") == "HTML document"
        assert mime_description.get("image/jpeg") == "JPEG image"
        assert mime_description.get("image/png") == "PNG image"

    def test_unknown_types(self) -> None:
        assert mime_description.get("unknown/unknown") is None
        assert mime_description.get("fake/mimetype") is None

    def test_edge_cases(self) -> None:
        assert mime_description.get("") is None
        assert mime_description.get("not-a-mime-type") is None


class TestGetFromHeader:

    def test_headers_with_charset(self) -> None:
        assert mime_description.get_from_header("text/plain; charset=utf-8") == "Plain text document"
        assert mime_description.get_from_header("text/html; charset=ISO-8859-1") == "HTML document"
        assert mime_description.get_from_header("application/json; charset=utf-8") == "JSON document"

    def test_headers_with_multiple_parameters(self) -> None:
        assert (
            mime_description.get_from_header("text/plain; charset=utf-8; format=flowed")
            == "Plain text document"
        )
        assert (
            mime_description.get_from_header(
                "multipart/mixed; boundary=----WebKitFormBoundary7MA4YWxkTrZu0gW"
            )
            == "Compound documents"
        )

    def test_uppercase_headers(self) -> None:
        assert mime_description.get_from_header("APPLICATION/PDF; name=test") == "PDF document"
        assert mime_description.get_from_header("TEXT/PLAIN") == "Plain text document"

    def test_unknown_types_with_parameters(self) -> None:
        assert mime_description.get_from_header("unknown/type; param=value") is None
        assert mime_description.get_from_header("application/x-custom; charset=utf-8") is None

    @pytest.mark.parametrize(
        "header, expected",
        [
            ('text/plain; charset="UTF-8"', "Plain text document"),
            ('text/html; charset="iso-8859-1"', "HTML document"),
            ('multipart/alternative; boundary="000000000000a1b2c3d4e5f6"', "Message in several formats"),
            ('multipart/mixed; boundary="----=_Part_123456_789.012345"', "Compound documents"),
            ('application/pdf; name="invoice.pdf"', "PDF document"),
            ('application/msword; name="document.doc"', "Word document"),
            ('image/png; name="screenshot.png"', "PNG image"),
            (
                'multipart/related; boundary="----=_NextPart_001_0026_01CA4D77.52F7D850"; type="text/html"',
                "Compound document",
            ),
        ],
    )
    def test_real_world_email_headers(self, header: str, expected: str) -> None:
        assert mime_description.get_from_header(header) == expected


class TestFallbacks:

    def test_header_fallback_to_cleaned_type(self) -> None:
        assert (
            mime_description.get_from_header_with_fallback("application/x-custom; param=value")
            == "application/x-custom"
        )
        assert mime_description.get_from_header_with_fallback("unknown/type; charset=utf-8") == "unknown/type"

    def test_header_fallback_with_custom_default(self) -> None:
        assert mime_description.get_from_header_with_fallback("fake/mime", "Custom fallback") == "Custom fallback"

    def test_header_fallback_known_type(self) -> None:
        assert mime_description.get_from_header_with_fallback("application/pdf") == "PDF document"

    def test_header_fallback_empty_input(self) -> None:
        assert mime_description.get_from_header_with_fallback("") == ""
        assert mime_description.get_from_header_with_fallback(";charset=utf-8") == ""

    def test_get_with_default(self) -> None:
        assert mime_description.get_with_default("application/pdf") == "PDF document"
        assert mime_description.get_with_default("unknown/unknown") == "Unknown file type"
        assert mime_description.get_with_default("unknown/unknown", "Custom fallback") == "Custom fallback"


class TestGetOrFail:

    def test_known_type(self) -> None:
        assert mime_description.get_or_fail("application/pdf") == "PDF document"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(MimeTypeNotFoundError, match="unknown/unknown"):
            mime_description.get_or_fail("unknown/unknown")


class TestNormalization:

    def test_extract_mime_type_is_exported(self) -> None:
        assert mime_description.extract_mime_type("  TEXT/PLAIN ; charset=utf-8 ") == "text/plain"

    @pytest.mark.parametrize("mime_type", ["application/pdf", "image/png", "x-unknown/thing"])
    def test_case_invariance_against_real_data(self, mime_type: str) -> None:
        lower = mime_description.get(mime_description.extract_mime_type(mime_type))
        upper = mime_description.get(mime_description.extract_mime_type(mime_type.upper()))
        assert lower == upper

    def test_get_all_matches_lookups(self) -> None:
        table = mime_description.get_all()
        for mime_type, description in list(table.items())[:25]:
            assert mime_description.get(mime_type) == description
