"""
mime_description/dataset/registry.py

The frozen description table every lookup runs against.

The raw table from ``freedesktop.py`` is checked once at import time and then
exposed only through a read-only ``MappingProxyType`` view, so no caller can
mutate it after the first lookup.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional

from mime_description.core.exceptions import DatasetIntegrityError
from mime_description.dataset.freedesktop import DESCRIPTIONS as _RAW_DESCRIPTIONS


def validate(table: Mapping[str, str]) -> None:
    """
    Check the invariants every description table must satisfy.

    - every key is a lowercase ``"<type>/<subtype>"`` string with no whitespace
      and no parameters
    - every value is a non-empty string

    Raises:
        DatasetIntegrityError: Listing every offending key.
    """
    bad_keys: List[str] = []
    empty_values: List[str] = []

    for mime_type, description in table.items():
        type_, sep, subtype = mime_type.partition("/")
        if (
            not sep
            or not type_
            or not subtype
            or mime_type != mime_type.lower()
            or any(ch.isspace() for ch in mime_type)
            or ";" in mime_type
        ):
            bad_keys.append(mime_type)
        if not isinstance(description, str) or not description:
            empty_values.append(mime_type)

    if bad_keys:
        raise DatasetIntegrityError(f"Non-canonical MIME type keys: {bad_keys}")
    if empty_values:
        raise DatasetIntegrityError(f"MIME types with empty descriptions: {empty_values}")


def freeze(table: Mapping[str, str]) -> Mapping[str, str]:
    """Validate ``table`` and return a read-only snapshot of it."""
    validate(table)
    return MappingProxyType(dict(table))


#: The embedded dataset. Read-only for the lifetime of the process.
DESCRIPTIONS: Mapping[str, str] = freeze(_RAW_DESCRIPTIONS)


def get_all() -> Mapping[str, str]:
    """Return the whole embedded table as a read-only mapping."""
    return DESCRIPTIONS


def get(mime_type: str) -> Optional[str]:
    """Exact, case-sensitive lookup in the embedded table; ``None`` on a miss."""
    return DESCRIPTIONS.get(mime_type)
