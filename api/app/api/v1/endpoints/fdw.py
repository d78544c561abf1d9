"""
Endpoints para el servidor FDW (postgres_fdw).
Permite consultar el estado, forzar la reconciliacion e importar schemas remotos.
"""
from fastapi import APIRouter, Depends, status
from loguru import logger

from app.application.use_cases.fdw_use_cases import FdwUseCases
from app.application.dto.fdw_dto import (
    FdwImportSchemaRequestDTO,
    FdwImportSchemaResponseDTO,
    FdwStatusDTO,
    FdwSyncResultDTO,
)
from app.api.v1.dependencies.use_case_deps import get_fdw_use_cases


router = APIRouter(prefix="/fdw", tags=["FDW"])


@router.get(
    "/status",
    response_model=FdwStatusDTO,
    summary="Estado del servidor FDW"
)
async def get_fdw_status(
    use_cases: FdwUseCases = Depends(get_fdw_use_cases)
) -> FdwStatusDTO:
    """
    Consulta pg_foreign_server y pg_user_mappings para el servidor configurado.
    """
    return await use_cases.get_status()


@router.post(
    "/sync",
    response_model=FdwSyncResultDTO,
    status_code=status.HTTP_200_OK,
    summary="Sincronizar servidor FDW"
)
async def sync_fdw(
    use_cases: FdwUseCases = Depends(get_fdw_use_cases)
) -> FdwSyncResultDTO:
    """
    Ejecuta la reconciliacion:
    - Si el servidor no existe: lo crea
    - Si la configuracion cambio: lo actualiza
    - Si no cambio: no hace nada (operation=skipped)
    """
    logger.info("Sincronizacion FDW solicitada desde API")
    return await use_cases.sync()


@router.post(
    "/import-schema",
    response_model=FdwImportSchemaResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Importar schema remoto"
)
async def import_foreign_schema(
    dto: FdwImportSchemaRequestDTO,
    use_cases: FdwUseCases = Depends(get_fdw_use_cases)
) -> FdwImportSchemaResponseDTO:
    """
    Ejecuta IMPORT FOREIGN SCHEMA hacia el schema local configurado.

    Args:
        dto: Schema remoto y, opcionalmente, las tablas a importar
        use_cases: Casos de uso FDW (inyectado)
    """
    return await use_cases.import_schema(dto.remote_schema, dto.tables)
