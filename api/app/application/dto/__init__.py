"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .example_dto import (
    ExampleCreateDTO,
    ExampleUpdateDTO,
    ExampleResponseDTO,
    ExampleListResponseDTO,
    PaginationMetaDTO,
)
from .fdw_dto import (
    FdwStatusDTO,
    FdwSyncResultDTO,
    FdwImportSchemaRequestDTO,
    FdwImportSchemaResponseDTO,
    RemoteServerOptionsDTO,
)

__all__ = [
    "ExampleCreateDTO",
    "ExampleUpdateDTO",
    "ExampleResponseDTO",
    "ExampleListResponseDTO",
    "PaginationMetaDTO",
    "FdwStatusDTO",
    "FdwSyncResultDTO",
    "FdwImportSchemaRequestDTO",
    "FdwImportSchemaResponseDTO",
    "RemoteServerOptionsDTO",
]
