"""
mime_description/core/constants.py

Library-wide fixed constants.

These are part of the public lookup contract and are NOT configurable via
environment variables.
"""

# ── Fallbacks ──────────────────────────────────────────────────────────────────

#: Returned by ``get_with_default`` when no default is supplied.
DEFAULT_DESCRIPTION: str = "Unknown file type"

# ── Header parsing ─────────────────────────────────────────────────────────────

#: Separates the media type from its parameters in a Content-Type value.
PARAMETER_SEPARATOR: str = ";"

# ── Messages ───────────────────────────────────────────────────────────────────

#: Message carried by MimeTypeNotFoundError. The looked-up string is embedded
#: verbatim between double quotes.
NOT_FOUND_MESSAGE: str = 'MIME type not found: "{mime_type}"'
