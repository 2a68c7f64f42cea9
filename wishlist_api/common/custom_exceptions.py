from fastapi import FastAPI, Request,status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from wishlist_api.common.constants import request_id_ctx
from wishlist_api.common.logging_setup import get_logger
from wishlist_api.common.utils import build_error, json_error

logger = get_logger("wishlist_api.errors")


async def fallback_handler(request: Request, exc: Exception):

    # runs outside RequestIdMiddleware, the ctx var is already reset here
    rid = getattr(request.state, "request_id", None) or request_id_ctx.get(None)

    logger.error(
        "unexpected.exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "request_id": rid,
        },
        exc_info=exc,
    )

    # nothing about the failure leaks to the client
    payload = build_error("Internal server error")
    headers = {"X-Request-ID": rid} if rid else None
    return json_error(payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    rid = request_id_ctx.get(None)
    logger.warning(
        "request.validation_failed",
        extra={
            "errors": exc.errors(),
            "path": request.url.path,
            "request_id": rid,
        },
    )

    payload = build_error("Invalid request")
    return json_error(payload, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):

    payload = build_error(str(exc.detail))
    return json_error(payload, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def register_all_exceptions(app: FastAPI):

    app.add_exception_handler(
        Exception, # catch all unidentified/unhandled exceptions
        fallback_handler
    )

    app.add_exception_handler(
        RequestValidationError,
        validation_exception_handler
    )

    # starlette's base class so unknown routes and 405s share the error shape
    app.add_exception_handler(
        StarletteHTTPException,
        http_exception_handler
    )
