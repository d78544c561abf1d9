"""
Manejadores de eventos de inicio y cierre de la aplicacion.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable
from fastapi import FastAPI
from loguru import logger

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.application.use_cases.fdw_use_cases import FdwUseCases
from app.infrastructure.database.session import init_db, close_db
from app.infrastructure.external.fdw.fdw_service import build_from_settings


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Inicializa recursos al inicio de la aplicacion."""
        try:
            setup_logging(settings)
            logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
            logger.info(f"Entorno: {settings.ENVIRONMENT}")

            # Validar configuracion critica
            _validate_config()

            # Inicializar base de datos (crea tablas si no existen)
            await init_db()
            logger.info("Base de datos inicializada")

        except Exception as e:
            logger.error(f"Error durante startup: {e}")
            logger.exception("Detalle del error:")
            raise

        # La base ya esta lista: reconciliar el servidor FDW.
        # Un fallo aqui no detiene el arranque.
        await sync_fdw_on_startup()

        logger.success("Aplicacion iniciada correctamente")

        # Mostrar URLs disponibles
        _print_available_urls()

    return startup


async def sync_fdw_on_startup() -> None:
    """Reconciliacion FDW de arranque; registra y continua ante cualquier error."""
    if not settings.AUTR_FDW_ENABLED:
        logger.info("FDW AUTR deshabilitado (AUTR_FDW_ENABLED=false)")
        return

    try:
        use_cases = FdwUseCases(build_from_settings())
    except Exception as e:
        logger.error(f"No se pudo construir el servicio FDW: {e}")
        return
    await use_cases.sync_on_startup()


def _validate_config() -> None:
    """Valida que la configuracion critica este presente."""
    warnings = []

    if settings.AUTR_FDW_ENABLED and not settings.AUTR_DATABASE_PASSWORD:
        warnings.append("AUTR_DATABASE_PASSWORD vacia - el user mapping del FDW no tendra password")

    if settings.ENVIRONMENT == "production" and settings.DATABASE_PASSWORD == "postgres":
        warnings.append("DATABASE_PASSWORD usa el valor por defecto en produccion")

    # Mostrar advertencias
    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")


def _print_available_urls() -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    # Determinar la URL base de acceso
    if settings.HOST == "0.0.0.0":
        access_host = "localhost"
    else:
        access_host = settings.HOST

    base_url = f"http://{access_host}:{settings.PORT}"

    logger.info("=" * 80)
    logger.info("URLS DISPONIBLES:")
    logger.info("=" * 80)
    logger.info(f"  Swagger UI:  {base_url}/docs")
    logger.info(f"  ReDoc:       {base_url}/redoc")
    logger.info(f"  OpenAPI:     {base_url}/openapi.json")
    logger.info(f"  Health:      {base_url}/health")
    logger.info(f"  API:         {base_url}{settings.API_PREFIX}/v1")
    logger.info("=" * 80)


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera recursos al cerrar la aplicacion."""
        logger.info("Cerrando aplicacion...")

        # Cerrar conexiones de base de datos
        await close_db()
        logger.info("Conexiones de base de datos cerradas")

        logger.success("Aplicacion cerrada correctamente")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Ciclo de vida de la aplicacion: startup antes de atender requests,
    shutdown al terminar.
    """
    await startup_handler(app)()
    try:
        yield
    finally:
        await shutdown_handler(app)()
