"""Translate engine failures into HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from docket.utils.errors import DocketError, InternalFault, InvalidFormat

logger = logging.getLogger(__name__)


async def docket_error_handler(request: Request, exc: DocketError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"[api] {request.method} {request.url.path} failed: {exc.detail}")
    else:
        logger.info(f"[api] {request.method} {request.url.path} rejected: {exc.category}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body type errors are validation failures (400), not 422."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        problems.append(f"{location}: {error.get('msg')}")
    return await docket_error_handler(request, InvalidFormat("; ".join(problems)))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[api] Unexpected error on {request.method} {request.url.path}: {exc}")
    fault = InternalFault("An unexpected error occurred while processing the request")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=fault.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DocketError, docket_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = ["register_exception_handlers"]
