"""
Dependencias para inyección de repositorios.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.session import get_db
from app.infrastructure.repositories.example_repository_impl import ExampleRepositoryImpl


async def get_example_repository(
    session: AsyncSession = Depends(get_db)
) -> ExampleRepositoryImpl:
    """
    Dependencia para obtener el repositorio de ejemplos.

    Args:
        session: Sesión de base de datos

    Returns:
        ExampleRepositoryImpl: Instancia del repositorio de ejemplos
    """
    return ExampleRepositoryImpl(session)
