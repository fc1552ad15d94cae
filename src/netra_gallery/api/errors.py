"""Error responses shared by the gallery API routes.

Every error body carries a ``message``; validation failures add ``errors``.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INVALID_ID_FORMAT = "Invalid ID format"
INVALID_DATA = "Invalid data"
SERVER_ERROR = "Server error"

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")


class InvalidDataError(Exception):
    """Raised when a request body passes schema checks but is still rejected."""

    def __init__(self, errors: list[dict[str, object]]) -> None:
        super().__init__(INVALID_DATA)
        self.errors = errors


def parse_id(raw: str) -> int:
    """Parse a base-10 id path parameter or raise a 400."""
    if not _ID_PATTERN.fullmatch(raw):
        raise _invalid_id()
    try:
        return int(raw)
    except ValueError as exc:
        # digit strings past the interpreter's int conversion limit
        raise _invalid_id() from exc


def _invalid_id() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_FORMAT
    )


def field_error(
    path: Sequence[str | int], message: str, code: str
) -> dict[str, object]:
    """Build one entry of the ``errors`` list."""
    return {
        "path": list(path),
        "field": ".".join(str(part) for part in path) or "body",
        "message": message,
        "code": code,
    }


def _validation_errors(raw_errors: Sequence[Any]) -> list[dict[str, object]]:
    errors = []
    for error in raw_errors:
        location = list(error.get("loc", ()))
        if location and location[0] == "body":
            location = location[1:]
        errors.append(
            field_error(location, error.get("msg", ""), error.get("type", ""))
        )
    return errors


def invalid_data_response(errors: list[dict[str, object]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_DATA, "errors": errors},
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register handlers that render errors as ``{"message": ...}`` bodies."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return invalid_data_response(_validation_errors(exc.errors()))

    @app.exception_handler(InvalidDataError)
    async def invalid_data(_: Request, exc: InvalidDataError) -> JSONResponse:
        return invalid_data_response(exc.errors)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": SERVER_ERROR},
        )
