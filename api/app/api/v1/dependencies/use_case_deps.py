"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from app.application.use_cases.example_use_cases import ExampleUseCases
from app.application.use_cases.fdw_use_cases import FdwUseCases
from app.core.config import settings
from app.domain.repositories.example_repository import IExampleRepository
from app.api.v1.dependencies.repository_deps import get_example_repository
from app.infrastructure.external.fdw.fdw_service import build_from_settings


async def get_example_use_cases(
    example_repository: IExampleRepository = Depends(get_example_repository)
) -> ExampleUseCases:
    """
    Dependencia para obtener los casos de uso de ejemplos.

    Args:
        example_repository: Repositorio de ejemplos

    Returns:
        ExampleUseCases: Instancia de casos de uso de ejemplos
    """
    return ExampleUseCases(
        example_repository,
        default_limit=settings.PAGINATION_DEFAULT_LIMIT,
        max_limit=settings.PAGINATION_MAX_LIMIT
    )


def get_fdw_use_cases() -> FdwUseCases:
    """
    Dependencia para obtener los casos de uso FDW.
    El servicio relee las variables AUTR_* en cada operacion.

    Returns:
        FdwUseCases: Instancia de casos de uso FDW
    """
    return FdwUseCases(build_from_settings())
