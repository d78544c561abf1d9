"""
Interfaz del repositorio de ejemplos.
Define el contrato que debe cumplir cualquier implementación.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.example import Example


class IExampleRepository(ABC):
    """
    Interfaz del repositorio de ejemplos.
    Las lecturas ignoran los registros eliminados logicamente.
    """

    @abstractmethod
    async def create(self, example: Example) -> Example:
        """
        Crea un nuevo ejemplo en la base de datos.

        Args:
            example: Entidad a crear

        Returns:
            Example: Ejemplo creado con ID asignado
        """
        pass

    @abstractmethod
    async def get_by_id(self, example_id: int) -> Optional[Example]:
        """
        Obtiene un ejemplo por su ID.

        Args:
            example_id: ID del ejemplo

        Returns:
            Optional[Example]: Ejemplo encontrado o None
        """
        pass

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> List[Example]:
        """
        Obtiene ejemplos con paginación (más recientes primero).

        Args:
            skip: Número de registros a saltar
            limit: Número máximo de registros a retornar

        Returns:
            List[Example]: Lista de ejemplos
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Cantidad total de ejemplos no eliminados."""
        pass

    @abstractmethod
    async def update(self, example: Example) -> Example:
        """
        Actualiza un ejemplo existente.

        Args:
            example: Entidad con datos actualizados

        Returns:
            Example: Ejemplo actualizado
        """
        pass

    @abstractmethod
    async def soft_delete(self, example_id: int) -> bool:
        """
        Marca un ejemplo como eliminado.

        Args:
            example_id: ID del ejemplo a eliminar

        Returns:
            bool: True si se eliminó, False si no existía
        """
        pass
