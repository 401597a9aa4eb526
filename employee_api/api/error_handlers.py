"""Global exception handlers.

- RequestValidationError -> 400 with the same field-keyed map the
  validator produces
- Exception (catch-all) -> 500 without internal details
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Undecodable payload on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=field_errors_from_exception(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )


def field_errors_from_exception(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query"):
            key = loc[0] if error.get("type") == "json_invalid" else ".".join(loc[1:]) or loc[0]
        else:
            key = ".".join(loc) or "body"
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return errors
