"""
Implementación del repositorio de ejemplos usando SQLAlchemy.
"""
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.repositories.example_repository import IExampleRepository
from app.domain.entities.example import Example
from app.infrastructure.database.models import ExampleModel
from app.shared.exceptions.domain import EntityNotFoundException


class ExampleRepositoryImpl(IExampleRepository):
    """Implementación del repositorio de ejemplos con SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """
        Inicializa el repositorio con una sesión de base de datos.

        Args:
            session: Sesión de SQLAlchemy
        """
        self.session = session

    async def create(self, example: Example) -> Example:
        """Crea un nuevo ejemplo en la base de datos."""
        db_example = ExampleModel(
            title=example.title,
            description=example.description,
            is_active=example.is_active
        )

        self.session.add(db_example)
        await self.session.flush()
        await self.session.refresh(db_example)

        return self._to_entity(db_example)

    async def get_by_id(self, example_id: int) -> Optional[Example]:
        """Obtiene un ejemplo por su ID."""
        db_example = await self._get_model(example_id)

        if db_example is None:
            return None

        return self._to_entity(db_example)

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[Example]:
        """Obtiene ejemplos con paginación."""
        result = await self.session.execute(
            select(ExampleModel)
            .where(ExampleModel.deleted_at.is_(None))
            .order_by(ExampleModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        db_examples = result.scalars().all()

        return [self._to_entity(db_example) for db_example in db_examples]

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count(ExampleModel.id)).where(ExampleModel.deleted_at.is_(None))
        )
        return int(result.scalar_one())

    async def update(self, example: Example) -> Example:
        """Actualiza un ejemplo existente."""
        db_example = await self._get_model(example.id)

        if db_example is None:
            raise EntityNotFoundException("Example", example.id)

        db_example.title = example.title
        db_example.description = example.description
        db_example.is_active = example.is_active

        await self.session.flush()
        await self.session.refresh(db_example)

        return self._to_entity(db_example)

    async def soft_delete(self, example_id: int) -> bool:
        """Marca deleted_at en lugar de borrar la fila."""
        db_example = await self._get_model(example_id)

        if db_example is None:
            return False

        db_example.deleted_at = datetime.now(timezone.utc)
        await self.session.flush()
        return True

    async def _get_model(self, example_id: int) -> Optional[ExampleModel]:
        result = await self.session.execute(
            select(ExampleModel).where(
                ExampleModel.id == example_id,
                ExampleModel.deleted_at.is_(None)
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(db_example: ExampleModel) -> Example:
        """
        Convierte un modelo de base de datos a entidad de dominio.

        Args:
            db_example: Modelo de SQLAlchemy

        Returns:
            Example: Entidad de dominio
        """
        return Example(
            id=db_example.id,
            title=db_example.title,
            description=db_example.description,
            is_active=db_example.is_active,
            created_at=db_example.created_at,
            updated_at=db_example.updated_at,
            deleted_at=db_example.deleted_at
        )
