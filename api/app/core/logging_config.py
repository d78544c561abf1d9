"""
Configuracion de loguru para la aplicacion.

- Consola: texto con colores en desarrollo, JSON en produccion
- Archivos (LOG_FILE_ENABLED=true): error.log (solo errores) y combined.log
"""
import sys
from pathlib import Path

from loguru import logger

from app.core.config import Settings


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(app_settings: Settings) -> None:
    """
    Reemplaza los sinks por defecto de loguru segun la configuracion.

    Args:
        app_settings: Configuracion de la aplicacion
    """
    logger.remove()

    if app_settings.ENVIRONMENT == "production":
        logger.add(sys.stderr, level=app_settings.LOG_LEVEL, serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=app_settings.LOG_LEVEL,
            format=CONSOLE_FORMAT,
            colorize=True,
        )

    if app_settings.LOG_FILE_ENABLED:
        log_dir = Path(app_settings.LOG_FILE_PATH)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_dir / "error.log"),
            level="ERROR",
            serialize=True,
            rotation="50 MB",
            retention="10 days",
        )
        logger.add(
            str(log_dir / "combined.log"),
            level=app_settings.LOG_LEVEL,
            serialize=True,
            rotation="500 MB",
            retention="10 days",
        )

    logger.debug(f"Logging configurado (nivel={app_settings.LOG_LEVEL}, archivos={app_settings.LOG_FILE_ENABLED})")
