"""
Punto de entrada principal de la aplicación FastAPI.
Configura la aplicación, middlewares, rutas y eventos.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import settings, get_cors_origins
from app.core.events import lifespan
from app.api.v1.router import api_router
from app.api.v1.endpoints import health
from app.api.middlewares.error_handler import ErrorHandlerMiddleware
from app.api.middlewares.request_logging import RequestLoggingMiddleware
from app.shared.exceptions.base import AppException


def create_application() -> FastAPI:
    """
    Factory para crear y configurar la aplicación FastAPI.

    Returns:
        FastAPI: Instancia configurada de la aplicación
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Template de backend con CRUD de ejemplo y sincronizacion postgres_fdw",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Configurar CORS
    if settings.CORS_ENABLED:
        cors_origins = get_cors_origins(settings.CORS_ORIGINS)
        application.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization", "Accept"],
            expose_headers=["X-Total-Count", "X-Page-Count"],
            max_age=3600,
        )

    # Middleware personalizado para manejo de errores y logging de requests
    application.add_middleware(ErrorHandlerMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    # Incluir routers de la API
    application.include_router(api_router, prefix=settings.API_PREFIX)
    application.include_router(health.router)

    # Manejador global de excepciones personalizadas
    @application.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.error_code}: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.error_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    return application


# Crear instancia de la aplicación
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if settings.LOG_LEVEL == "SUCCESS" else settings.LOG_LEVEL.lower()
    )
