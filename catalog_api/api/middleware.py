"""HTTP middleware for the Catalog API.

Every request gets a correlation ID that is bound into the structlog
context, echoed back in ``X-Request-ID`` and attached to the access log
line. Exceptions that escape the routers are turned into the standard
``{"error": ...}`` envelope.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.api.schemas import ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"
INTERNAL_ERROR_MESSAGE = "An internal error occurred"


# ============================================================================
# Request Correlation
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to the request, its logs and its response.

    A client-supplied ``X-Request-ID`` is reused; otherwise a UUID4 is
    generated.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Bind the request ID and log the request outcome.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response carrying the request ID header.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request failed", duration_ms=_elapsed_ms(started))
            raise
        else:
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


# ============================================================================
# Unhandled Errors
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Render unhandled exceptions as a generic 500 error.

    The exception text is logged, never returned to the client.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Call the next handler and catch whatever it raises."""
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception("Unhandled exception", error=str(e))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
            )


def setup_middleware(app: FastAPI) -> None:
    """Install the catalog middleware stack.

    Starlette runs the last added middleware first, so request
    correlation wraps error handling and 500 responses still carry
    the request ID.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
