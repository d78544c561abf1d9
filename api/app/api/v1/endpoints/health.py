"""
Endpoints de health check.
Se montan en la raiz (/health), fuera del prefijo de la API.
"""
import shutil
from typing import Any, Awaitable, Callable, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import settings
from app.infrastructure.database.session import ping_db
from app.shared.utils.datetime_utils import DateTimeUtils


router = APIRouter(prefix="/health", tags=["Health"])

DISK_PATH = "/"
DISK_THRESHOLD_PERCENT = 0.9

DbChecker = Callable[[], Awaitable[None]]


def get_db_checker() -> DbChecker:
    """Dependencia que retorna la funcion de ping a la base de datos."""
    return ping_db


async def _check_database(checker: DbChecker) -> Dict[str, Any]:
    try:
        await checker()
        return {"status": "up"}
    except Exception as e:
        logger.warning(f"Health check: base de datos no disponible: {e}")
        return {"status": "down", "message": str(e)}


def _check_storage(path: str = DISK_PATH, threshold: float = DISK_THRESHOLD_PERCENT) -> Dict[str, Any]:
    usage = shutil.disk_usage(path)
    used_ratio = usage.used / usage.total if usage.total else 0.0
    return {
        "status": "up" if used_ratio < threshold else "down",
        "used_percent": round(used_ratio * 100, 2),
        "threshold_percent": round(threshold * 100, 2),
    }


def _build_response(checks: Dict[str, Dict[str, Any]]) -> JSONResponse:
    healthy = all(check["status"] == "up" for check in checks.values())
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ok" if healthy else "error",
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "timestamp": DateTimeUtils.now_iso(),
            "details": checks,
        },
    )


@router.get("", summary="Health check completo")
async def health_check(checker: DbChecker = Depends(get_db_checker)) -> JSONResponse:
    """Base de datos y uso de disco."""
    return _build_response({
        "database": await _check_database(checker),
        "storage": _check_storage(),
    })


@router.get("/live", summary="Liveness probe")
async def liveness() -> JSONResponse:
    """La aplicacion esta corriendo."""
    return _build_response({})


@router.get("/ready", summary="Readiness probe")
async def readiness(checker: DbChecker = Depends(get_db_checker)) -> JSONResponse:
    """La aplicacion puede atender trafico (base de datos disponible)."""
    return _build_response({"database": await _check_database(checker)})
