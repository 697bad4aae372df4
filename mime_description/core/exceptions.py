"""
mime_description/core/exceptions.py

Custom exception hierarchy for the library.

A missing key is normally reported by returning ``None``; the exceptions
below cover the two cases that are not recoverable outcomes.
"""

from mime_description.core.constants import NOT_FOUND_MESSAGE


class AppBaseException(Exception):
    """Root exception — catch-all for any library-level error."""


# ── Lookup exceptions ──────────────────────────────────────────────────────────

class MimeTypeNotFoundError(AppBaseException, KeyError):
    """
    Raised by ``get_or_fail`` when the MIME type is not in the dataset.

    Also a KeyError, so callers that treat the dataset like a dict can keep
    catching ``KeyError``.

    Attributes:
        mime_type : The exact (non-normalized) string that was looked up.
    """

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(NOT_FOUND_MESSAGE.format(mime_type=mime_type))

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message and add another layer of quotes.
        return str(self.args[0])


# ── Dataset exceptions ─────────────────────────────────────────────────────────

class DatasetIntegrityError(AppBaseException):
    """Raised when the embedded description table breaks its invariants."""
