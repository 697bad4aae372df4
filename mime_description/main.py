"""
mime_description/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Register the description router
  - Add a global exception handler for uncaught AppBaseException
  - Expose a /health endpoint for liveness probes

Run with ``uvicorn mime_description.main:app``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mime_description.api.description_controller import router as description_router
from mime_description.core.config import settings
from mime_description.core.exceptions import AppBaseException
from mime_description.core.logger import configure_logging, get_logger
from mime_description.services.description_service import description_service

configure_logging()
logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Human-friendly descriptions for MIME types and Content-Type headers, "
        "served from the embedded freedesktop.org shared-mime-info dataset."
    ),
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(description_router)

# ── Global exception handler ───────────────────────────────────────────────────

@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Returns the standard error shape: { "error": "..." }
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness probe")
async def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "mime_types": len(description_service.get_all()),
    }
