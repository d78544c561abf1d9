"""
Casos de uso para el servidor FDW.

El servicio de reconciliacion es sincrono (psycopg); aqui se ejecuta en un
thread separado para no bloquear el event loop.
"""
import asyncio
from typing import List, Optional

from loguru import logger

from app.application.dto.fdw_dto import (
    FdwImportSchemaResponseDTO,
    FdwStatusDTO,
    FdwSyncResultDTO,
    RemoteServerOptionsDTO,
)
from app.infrastructure.external.fdw.fdw_service import FdwSyncService
from app.infrastructure.external.fdw.types import FdwTarget, ReconciliationResult
from app.shared.exceptions.fdw import FdwDisabledException, FdwOperationException


class FdwUseCases:
    """Orquesta el servicio FDW para la API y el arranque de la aplicacion."""

    def __init__(self, service: FdwSyncService):
        self.service = service

    def _enabled_target(self) -> FdwTarget:
        target = self.service.load_target()
        if not target.enabled:
            raise FdwDisabledException()
        return target

    async def get_status(self) -> FdwStatusDTO:
        """
        Estado del servidor configurado en el catalogo.

        Raises:
            FdwDisabledException: Si AUTR_FDW_ENABLED=false
        """
        target = self._enabled_target()
        server_name = target.connection.server_name

        try:
            status = await asyncio.to_thread(self.service.get_status, server_name)
        except Exception as e:
            logger.error(f"Error consultando estado FDW '{server_name}': {e}")
            raise FdwOperationException("consulta de estado", server_name, str(e)) from e

        current = None
        if status.current_config is not None:
            current = RemoteServerOptionsDTO(
                host=status.current_config.host,
                port=status.current_config.port,
                dbname=status.current_config.dbname,
            )

        return FdwStatusDTO(
            server_name=server_name,
            exists=status.exists,
            user_mapping_exists=status.user_mapping_exists,
            current_config=current,
        )

    async def sync(self) -> FdwSyncResultDTO:
        """
        Ejecuta la reconciliacion bajo demanda.

        Raises:
            FdwDisabledException: Si AUTR_FDW_ENABLED=false
            FdwOperationException: Si falla el DDL o la conexion
        """
        target = self._enabled_target()
        server_name = target.connection.server_name

        try:
            result = await asyncio.to_thread(self.service.reconcile)
        except Exception as e:
            logger.error(f"Error en sincronizacion FDW '{server_name}': {e}")
            raise FdwOperationException("sincronizacion", server_name, str(e)) from e

        logger.info(f"FDW sincronizado: {result.operation.value} - {result.message}")
        return self._to_sync_dto(result)

    async def import_schema(
        self,
        remote_schema: str = "public",
        tables: Optional[List[str]] = None
    ) -> FdwImportSchemaResponseDTO:
        """
        Importa tablas remotas al schema local configurado.

        Raises:
            FdwDisabledException: Si AUTR_FDW_ENABLED=false
            FdwOperationException: Si falla IMPORT FOREIGN SCHEMA
        """
        target = self._enabled_target()
        server_name = target.connection.server_name

        try:
            await asyncio.to_thread(self.service.import_schema, remote_schema, tables)
        except Exception as e:
            logger.error(f"Error importando schema '{remote_schema}' desde '{server_name}': {e}")
            raise FdwOperationException("importacion de schema", server_name, str(e)) from e

        return FdwImportSchemaResponseDTO(
            success=True,
            remote_schema=remote_schema,
            local_schema=target.local_schema,
            tables=tables or None,
            message=f"Schema '{remote_schema}' importado en '{target.local_schema}'",
        )

    async def sync_on_startup(self) -> Optional[FdwSyncResultDTO]:
        """
        Reconciliacion de arranque.

        Un fallo se registra y no detiene el arranque de la aplicacion.

        Returns:
            Optional[FdwSyncResultDTO]: Resultado, o None si esta deshabilitado o fallo
        """
        target = self.service.load_target()
        if not target.enabled:
            logger.info("FDW AUTR deshabilitado (AUTR_FDW_ENABLED=false)")
            return None

        try:
            result = await asyncio.to_thread(self.service.reconcile)
        except Exception as e:
            logger.error(f"Sincronizacion FDW fallida durante el arranque: {e}")
            return None

        logger.info(f"Sincronizacion FDW completada: {result.operation.value} - {result.message}")
        return self._to_sync_dto(result)

    @staticmethod
    def _to_sync_dto(result: ReconciliationResult) -> FdwSyncResultDTO:
        return FdwSyncResultDTO(
            success=result.success,
            operation=result.operation.value,
            message=result.message,
        )
