"""
mime_description — human-friendly MIME type descriptions.

The descriptions come from the freedesktop.org shared-mime-info database and
are embedded in the package; no network or file access happens at runtime.

    >>> import mime_description
    >>> mime_description.get("application/pdf")
    'PDF document'
    >>> mime_description.get("unknown/type") is None
    True
    >>> mime_description.get_from_header("text/plain; charset=utf-8")
    'Plain text document'
    >>> mime_description.get_from_header_with_fallback("application/x-custom; a=b")
    'application/x-custom'

Every function delegates to the shared ``description_service`` instance.
"""

from typing import Mapping, Optional

from mime_description.core.constants import DEFAULT_DESCRIPTION
from mime_description.core.exceptions import AppBaseException, MimeTypeNotFoundError
from mime_description.services.description_service import (
    DescriptionService,
    description_service,
)
from mime_description.services.header_parser import extract_mime_type

__version__ = "0.11.1"


def get(mime_type: str) -> Optional[str]:
    """Description for an exact MIME type, or ``None`` if unknown."""
    return description_service.get(mime_type)


def get_or_fail(mime_type: str) -> str:
    """Description for an exact MIME type; raises MimeTypeNotFoundError if unknown."""
    return description_service.get_or_fail(mime_type)


def get_with_default(mime_type: str, default: str = DEFAULT_DESCRIPTION) -> str:
    """Description for an exact MIME type, or ``default`` if unknown."""
    return description_service.get_with_default(mime_type, default)


def get_from_header(header: str) -> Optional[str]:
    """Description for the type in a Content-Type header, or ``None``."""
    return description_service.get_from_header(header)


def get_from_header_with_fallback(header: str, default: Optional[str] = None) -> str:
    """Description for a Content-Type header, else ``default``, else the cleaned type."""
    return description_service.get_from_header_with_fallback(header, default)


def get_all() -> Mapping[str, str]:
    """The full read-only description table."""
    return description_service.get_all()


__all__ = [
    "AppBaseException",
    "DEFAULT_DESCRIPTION",
    "DescriptionService",
    "MimeTypeNotFoundError",
    "description_service",
    "extract_mime_type",
    "get",
    "get_all",
    "get_from_header",
    "get_from_header_with_fallback",
    "get_or_fail",
    "get_with_default",
]
