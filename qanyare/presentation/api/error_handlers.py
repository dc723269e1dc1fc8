"""
Exception handlers and request logging middleware

Every error leaves the API as ``{"message": ...}``; validation failures add an
``errors`` list.
"""

import logging
import time
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from qanyare.infrastructure.logging.logging_config import get_structured_logger
from qanyare.infrastructure.utilities.constants import (
    ErrorMessages,
    PerformanceSettings,
)
from qanyare.infrastructure.utilities.exceptions import QanyareError

logger = logging.getLogger(__name__)
access_logger = get_structured_logger("qanyare.access")


def _validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


async def qanyare_error_handler(request: Request, exc: QanyareError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc,
            exc_info=exc,
        )
        message = ErrorMessages.INTERNAL_ERROR
    else:
        logger.info(
            "%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc
        )
        message = exc.user_message
    return JSONResponse(status_code=exc.status_code, content={"message": message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = _validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={"message": ErrorMessages.INVALID_DATA, "errors": errors},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_logging_middleware(request: Request, call_next):
    """Access log for every request; unhandled exceptions become a bare 500"""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(
            status_code=500, content={"message": ErrorMessages.INTERNAL_ERROR}
        )

    duration_ms = (time.perf_counter() - start) * 1000
    if duration_ms > PerformanceSettings.SLOW_REQUEST_THRESHOLD_MS:
        log = access_logger.warning
    else:
        log = access_logger.info
    log(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    return response


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QanyareError, qanyare_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.middleware("http")(request_logging_middleware)
