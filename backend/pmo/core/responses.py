"""PMO: Error payload helpers and exception handlers."""
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pmo.core.exceptions import PMOError

logger = logging.getLogger(__name__)


def error_response(code: str, message: str, field_errors: list[dict] | None = None, meta: dict | None = None) -> dict:
    return {
        "data": None,
        "error": {
            "code": code,
            "message": message,
            "field_errors": field_errors or []
        },
        "meta": meta
    }


def _field_error_list(field_errors: dict[str, str]) -> list[dict[str, Any]]:
    return [{"field": field, "message": message} for field, message in field_errors.items()]


async def pmo_error_handler(request: Request, exc: PMOError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.code, exc.message, _field_error_list(exc.field_errors)),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field_errors.append({"field": ".".join(loc) or "body", "message": err.get("msg", "")})
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response("VALIDATION_ERROR", "Request validation failed", field_errors),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PMOError, pmo_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
