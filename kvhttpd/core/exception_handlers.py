"""
Global exception handlers for FastAPI.
"""
import logging
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from kvhttpd.core.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"AppException: {exc.message}",
        exc_info=exc.__cause__ if exc.status_code >= 500 else None,
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "detail": exc.detail,
            "status_code": exc.status_code,
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Handle routing misses (404) and wrong methods (405) with an empty body."""
    return Response(status_code=exc.status_code, headers=exc.headers)


async def unhandled_exception_middleware(request: Request, call_next) -> Response:
    """Turn any other exception into a JSON 500.

    Runs inside ServerErrorMiddleware, so the exception is logged here once
    and is not re-raised to the server.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(
            f"Unhandled exception: {exc!r}",
            exc_info=exc,
            extra={
                "path": request.url.path,
                "method": request.method,
            }
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": "An unexpected error occurred",
                "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            }
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to an application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(unhandled_exception_middleware)
