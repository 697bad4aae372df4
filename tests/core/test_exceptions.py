"""
tests/core/test_exceptions.py

Tests for the exception hierarchy.
"""

from mime_description.core.exceptions import (
    AppBaseException,
    DatasetIntegrityError,
    MimeTypeNotFoundError,
)


class TestMimeTypeNotFoundError:

    def test_message_quotes_the_input(self) -> None:
        exc = MimeTypeNotFoundError("unknown/unknown")
        assert str(exc) == 'MIME type not found: "unknown/unknown"'

    def test_keeps_the_input(self) -> None:
        assert MimeTypeNotFoundError("a/b").mime_type == "a/b"

    def test_hierarchy(self) -> None:
        exc = MimeTypeNotFoundError("a/b")
        assert isinstance(exc, AppBaseException)
        assert isinstance(exc, KeyError)


class TestDatasetIntegrityError:

    def test_is_app_exception(self) -> None:
        assert issubclass(DatasetIntegrityError, AppBaseException)
