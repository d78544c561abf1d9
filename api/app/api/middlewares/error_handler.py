"""
Middleware de ultimo recurso para excepciones no controladas.

Las AppException las resuelve el handler registrado en main.py antes de
llegar aqui; este middleware solo ve errores inesperados.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger

from app.shared.exceptions.base import AppException
from app.shared.utils.datetime_utils import DateTimeUtils


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Convierte cualquier excepcion no controlada en un 500 generico."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(
                f"Error no manejado en {request.method} {request.url.path}: {exc}"
            )

            # No se expone el mensaje original al cliente
            error = AppException(
                message="Ha ocurrido un error interno del servidor",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error_code="INTERNAL_SERVER_ERROR",
                details={
                    "path": request.url.path,
                    "method": request.method,
                    "timestamp": DateTimeUtils.now_iso(),
                }
            )
            return JSONResponse(status_code=error.status_code, content=error.to_response())
