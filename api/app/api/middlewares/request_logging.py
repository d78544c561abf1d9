"""
Middleware de logging de requests/responses.
"""
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Registra metodo, ruta, status y duracion de cada request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        request_logger = logger.bind(
            context="api",
            method=request.method,
            path=request.url.path,
        )
        request_logger.debug(f"--> {request.method} {request.url.path}")

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.bind(status_code=response.status_code).info(
            f"<-- {request.method} {request.url.path} {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response
