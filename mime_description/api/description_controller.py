"""
mime_description/api/description_controller.py

Handles incoming requests to GET /descriptions/.

This layer is responsible only for HTTP concerns:
  - Reading the MIME type from the path or the raw header from the query.
  - Delegating the lookup to DescriptionService.
  - Translating a missing MIME type into a 404.

Responses:
  200  Lookup succeeded.  Body carries the canonical MIME type, its
       description and whether the dataset knew the type.  Header lookups
       always succeed; unknown types fall back to the supplied default or
       to the cleaned MIME type.
  404  An exact lookup named a MIME type that is not in the dataset.
  500  Any other application error (global handler in main.py).
"""

from typing import Optional, Union

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from mime_description.core.config import settings
from mime_description.core.exceptions import MimeTypeNotFoundError
from mime_description.core.logger import get_logger
from mime_description.models.description_models import (
    DescriptionListResponse,
    DescriptionResponse,
)
from mime_description.services.description_service import description_service
from mime_description.services.header_parser import extract_mime_type

logger = get_logger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Descriptions"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.get(
    "/",
    response_model=Union[DescriptionResponse, DescriptionListResponse],
    summary="Describe a Content-Type header, or list every known MIME type",
)
async def describe_header(
    header: Optional[str] = Query(
        default=None,
        description="Raw Content-Type value, e.g. 'text/plain; charset=utf-8'.",
    ),
    default: Optional[str] = Query(
        default=None,
        description="Returned instead of the cleaned MIME type when it is unknown.",
    ),
) -> JSONResponse:
    """
    With ``header``: normalize it and describe the MIME type it names.
    Unknown types fall back to ``default``, or to the cleaned type itself.

    Without ``header``: list the whole dataset.
    """
    if header is None:
        table = description_service.get_all()
        listing = DescriptionListResponse(count=len(table), descriptions=dict(table))
        return JSONResponse(status_code=200, content=listing.model_dump())

    mime_type = extract_mime_type(header)
    found = description_service.get(mime_type) is not None
    description = description_service.get_from_header_with_fallback(header, default)

    logger.debug("Header lookup — '%s' → '%s' (found=%s)", header[:120], mime_type, found)

    result = DescriptionResponse(mime_type=mime_type, description=description, found=found)
    return JSONResponse(status_code=200, content=result.model_dump())


@router.get(
    "/{mime_type:path}",
    response_model=DescriptionResponse,
    summary="Describe an exact MIME type",
)
async def describe_mime_type(mime_type: str) -> JSONResponse:
    """
    Exact, case-sensitive lookup of a canonical MIME type such as
    ``application/pdf``.  No header parsing is applied.
    """
    try:
        description = description_service.get_or_fail(mime_type)

    except MimeTypeNotFoundError as exc:
        logger.info("Unknown MIME type requested: '%s'", exc.mime_type[:120])
        return _err(str(exc), status=404)

    result = DescriptionResponse(mime_type=mime_type, description=description, found=True)
    return JSONResponse(status_code=200, content=result.model_dump())
