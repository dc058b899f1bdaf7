# gateway/middleware.py

import logging
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from .config import Settings

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log all requests and responses"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Request ID only correlates log lines; it is not sent to the client
        request_id = uuid.uuid4().hex[:8]

        logger.info(
            f"Request {request_id}: {request.method} {request.url.path} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"Response {request_id}: {response.status_code} "
            f"completed in {process_time:.3f}s"
        )

        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Last-resort handler so one failed request never reaches the server loop"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error: {e}", exc_info=True)
            return Response(
                content="Internal server error",
                status_code=500,
                media_type="text/plain",
            )


def setup_middleware(app, settings: Settings):
    """Configure all middleware for the application"""

    # Error handling (innermost)
    app.add_middleware(ErrorHandlingMiddleware)

    # Logging
    app.add_middleware(LoggingMiddleware)

    # CORS: a single allowed origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=False,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    logger.info(f"Middleware configured (CORS origin: {settings.cors_origin})")
