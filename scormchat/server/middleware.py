"""
FastAPI Middleware - scormchat

Request logging for the SCORM test server.
"""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..utils.logging import get_logger

middleware_logger = get_logger("server.middleware")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        line = f"{request.method} {request.url.path} {response.status_code} - {duration:.3f}s"

        if response.status_code >= 400:
            middleware_logger.warning(line)
        else:
            middleware_logger.info(line)

        return response
