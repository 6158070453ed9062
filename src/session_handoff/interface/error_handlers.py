"""Global exception handlers: translate classified errors to HTTP responses.

Each :class:`ErrorCategory` maps to a specific HTTP status code and the
``{"error": "...", "category": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from session_handoff.domain.exceptions import ClassifiedError, ErrorCategory

logger = logging.getLogger(__name__)

CATEGORY_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.BAD_INPUT: 400,
    ErrorCategory.UNAUTHORIZED: 401,
    ErrorCategory.RATE_LIMITED: 429,
    ErrorCategory.CONFIG_MISSING: 500,
    ErrorCategory.UPSTREAM_UNAVAILABLE: 500,
    ErrorCategory.UPSTREAM_EMPTY: 500,
    ErrorCategory.INTERNAL: 500,
}


def status_for(category: ErrorCategory) -> int:
    """Return the HTTP status for *category*; unknown categories are 500."""
    return CATEGORY_STATUS.get(category, 500)


def _error_json(category: ErrorCategory, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(category),
        content={"error": message, "category": category.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Classified errors ───────────────────────────────────────────────

    @app.exception_handler(ClassifiedError)
    async def classified_handler(request: Request, exc: ClassifiedError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc.user_message)
        return _error_json(exc.category, exc.user_message)

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(ErrorCategory.BAD_INPUT, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(
            ErrorCategory.INTERNAL,
            "Internal server error occurred while processing your request",
        )
