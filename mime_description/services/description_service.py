"""
mime_description/services/description_service.py

Looks up human-friendly descriptions for MIME types:

    raw header
      └─ extract_mime_type()     → canonical key
           └─ DescriptionService.get()  → description | None
                └─ fallback policy (default / cleaned type / raise)

The description table is constructor-injected so tests can use a tiny
mapping; the module-level singleton wires in the embedded dataset.
"""

from __future__ import annotations

from typing import Mapping, Optional

from mime_description.core.constants import DEFAULT_DESCRIPTION
from mime_description.core.exceptions import MimeTypeNotFoundError
from mime_description.core.logger import get_logger
from mime_description.dataset import registry
from mime_description.services.header_parser import extract_mime_type

logger = get_logger(__name__)


class DescriptionService:
    """
    Exact lookups plus the header-aware and fallback wrappers built on them.

    Design choices:
    - **Strict lookup, lenient headers**: ``get`` matches keys byte-for-byte.
      Case and whitespace tolerance live only in ``extract_mime_type``, which
      the ``*_from_header*`` methods apply first.
    - **Misses are values**: every method except ``get_or_fail`` reports a
      miss by returning ``None`` or a fallback string; nothing is logged.
    """

    def __init__(self, descriptions: Mapping[str, str] | None = None) -> None:
        """
        Args:
            descriptions : Read-only table of canonical MIME type → description.
                           Frozen and validated before use. Defaults to the
                           embedded freedesktop.org dataset.
        """
        if descriptions is None:
            self._descriptions: Mapping[str, str] = registry.get_all()
        else:
            self._descriptions = registry.freeze(descriptions)

        logger.debug(
            "DescriptionService ready — %d MIME type(s) loaded.",
            len(self._descriptions),
        )

    # ── Exact lookup ───────────────────────────────────────────────────────────

    def get(self, mime_type: str) -> Optional[str]:
        """
        Return the description for an exact, already-canonical MIME type.

        No normalization is applied: ``"TEXT/PLAIN"`` or
        ``"text/plain; charset=utf-8"`` miss even though ``"text/plain"`` hits.

        Returns:
            The description, or ``None`` if the type is not in the table.
        """
        return self._descriptions.get(mime_type)

    def get_all(self) -> Mapping[str, str]:
        """Return the whole read-only table this service looks up against."""
        return self._descriptions

    # ── Exact-key wrappers ─────────────────────────────────────────────────────

    def get_or_fail(self, mime_type: str) -> str:
        """
        Like ``get`` but treats a miss as a programming error.

        Raises:
            MimeTypeNotFoundError: ``MIME type not found: "<mime_type>"``.
        """
        description = self.get(mime_type)
        if description is None:
            raise MimeTypeNotFoundError(mime_type)
        return description

    def get_with_default(self, mime_type: str, default: str = DEFAULT_DESCRIPTION) -> str:
        """Exact lookup; ``default`` on a miss. The input is not normalized."""
        description = self.get(mime_type)
        return default if description is None else description

    # ── Header wrappers ────────────────────────────────────────────────────────

    def get_from_header(self, header: str) -> Optional[str]:
        """Normalize a Content-Type header, then ``get`` the result."""
        return self.get(extract_mime_type(header))

    def get_from_header_with_fallback(
        self,
        header: str,
        default: Optional[str] = None,
    ) -> str:
        """
        Describe a Content-Type header, never failing.

        Returns, in order of preference:
            1. the description of the normalized type,
            2. ``default`` when one is given (``""`` counts as given),
            3. the normalized type itself, e.g. ``"application/x-custom"``.
        """
        mime_type = extract_mime_type(header)
        description = self.get(mime_type)
        if description is not None:
            return description
        if default is not None:
            return default
        return mime_type


# ── Module-level singleton ─────────────────────────────────────────────────────
# The package-level functions and the HTTP controller use this instance.
# Tests construct DescriptionService directly with their own tables.

description_service = DescriptionService()
