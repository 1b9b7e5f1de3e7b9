# aquareuse/core/errors.py
"""
Problem+json error responses.

Every failure leaves the API as ``{"code", "message", "detail"?}`` with
media type ``application/problem+json``. Bad water-quality input never
reaches the engine: pydantic rejects it here with ``INVALID_INPUT`` (422),
whether it failed in request parsing or in a model built inside an endpoint.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

__all__ = ["register_exception_handlers"]

PROBLEM_JSON = "application/problem+json"


def problem(status_code: int, code: str, message: str, detail: Optional[Any] = None) -> JSONResponse:
    body: Dict[str, Any] = {"code": code, "message": message}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body, media_type=PROBLEM_JSON)


def _field_errors(exc: RequestValidationError | ValidationError) -> List[Dict[str, Any]]:
    # loc 예: ["body", "pH"] / ["pH"]
    return [{"loc": list(e.get("loc") or ()), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]


async def _invalid_input(request: Request, exc: RequestValidationError | ValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.info(
        "Rejected input on {} {}: {}",
        request.method,
        request.url.path,
        ", ".join(".".join(str(p) for p in err["loc"]) for err in errors),
    )
    return problem(422, "INVALID_INPUT", "Input validation failed", errors)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("{} {} -> {}", request.method, request.url.path, exc.status_code)
    return problem(exc.status_code, "HTTP_ERROR", str(exc.detail or "HTTP error"))


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    return problem(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _invalid_input)
    app.add_exception_handler(ValidationError, _invalid_input)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unexpected)
