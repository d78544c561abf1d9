"""
DTOs para las operaciones FDW expuestas por la API.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class RemoteServerOptionsDTO(BaseModel):
    """Opciones actuales del servidor en pg_foreign_server."""

    host: str
    port: str
    dbname: str


class FdwStatusDTO(BaseModel):
    """Estado del servidor FDW configurado."""

    server_name: str
    exists: bool
    user_mapping_exists: bool
    current_config: Optional[RemoteServerOptionsDTO] = None


class FdwSyncResultDTO(BaseModel):
    """Resultado de una reconciliacion."""

    success: bool
    operation: Literal["created", "updated", "skipped", "error"]
    message: str


class FdwImportSchemaRequestDTO(BaseModel):
    """Parametros para IMPORT FOREIGN SCHEMA."""

    remote_schema: str = Field(default="public", min_length=1, description="Schema remoto")
    tables: Optional[List[str]] = Field(
        default=None,
        description="Tablas a importar (LIMIT TO). Si se omite, se importa todo el schema."
    )


class FdwImportSchemaResponseDTO(BaseModel):
    """Resultado de la importacion."""

    success: bool
    remote_schema: str
    local_schema: str
    tables: Optional[List[str]] = None
    message: str
