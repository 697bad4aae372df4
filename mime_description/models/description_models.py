"""
mime_description/models/description_models.py

Pydantic DTOs for the description endpoints — responses only; requests are
plain path and query parameters.
"""

from typing import Dict

from pydantic import BaseModel


class DescriptionResponse(BaseModel):
    """
    A single lookup result.

        {
            "mime_type": "text/plain",
            "description": "Plain text document",
            "found": true
        }

    ``mime_type`` is the canonical key that was looked up. When ``found`` is
    false, ``description`` holds the fallback (a caller-supplied default or
    the canonical key itself).
    """

    mime_type: str
    description: str
    found: bool


class DescriptionListResponse(BaseModel):
    """
    The whole embedded table.

        { "count": 2, "descriptions": { "application/pdf": "PDF document", ... } }
    """

    count: int
    descriptions: Dict[str, str]
