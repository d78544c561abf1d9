"""
Casos de uso relacionados con el recurso de ejemplo.
"""
from dataclasses import replace

from app.domain.repositories.example_repository import IExampleRepository
from app.domain.entities.example import Example
from app.application.dto.example_dto import (
    ExampleCreateDTO,
    ExampleUpdateDTO,
    ExampleResponseDTO,
    ExampleListResponseDTO,
    PaginationMetaDTO,
)
from app.shared.exceptions.domain import (
    EntityNotFoundException,
    ValidationException
)
from app.shared.utils.pagination import (
    calculate_pagination,
    create_pagination_meta,
    normalize_pagination_options,
)


class ExampleUseCases:
    """
    Casos de uso para operaciones CRUD del recurso de ejemplo.
    Orquesta la lógica de aplicación entre repositorios y servicios.
    """

    def __init__(
        self,
        example_repository: IExampleRepository,
        default_limit: int = 10,
        max_limit: int = 100
    ):
        """
        Inicializa los casos de uso con sus dependencias.

        Args:
            example_repository: Repositorio de ejemplos
            default_limit: Items por pagina si no se indica
            max_limit: Maximo de items por pagina
        """
        self.example_repository = example_repository
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def create_example(self, dto: ExampleCreateDTO) -> ExampleResponseDTO:
        """
        Crea un nuevo ejemplo.

        Raises:
            ValidationException: Si los datos no cumplen las reglas de la entidad
        """
        try:
            example = Example(
                title=dto.title,
                description=dto.description,
                is_active=dto.is_active
            )
        except ValueError as e:
            raise ValidationException(str(e), field="title") from e

        created = await self.example_repository.create(example)
        return self._to_response_dto(created)

    async def get_example(self, example_id: int) -> ExampleResponseDTO:
        """
        Obtiene un ejemplo por su ID.

        Raises:
            EntityNotFoundException: Si no existe o fue eliminado
        """
        example = await self.example_repository.get_by_id(example_id)

        if example is None:
            raise EntityNotFoundException("Example", example_id)

        return self._to_response_dto(example)

    async def list_examples(self, page: int = 1, limit: int = None) -> ExampleListResponseDTO:
        """
        Lista ejemplos paginados.

        Args:
            page: Pagina (desde 1)
            limit: Items por pagina; se recorta a max_limit

        Returns:
            ExampleListResponseDTO: Datos y metadata de paginacion
        """
        options = normalize_pagination_options(
            page,
            limit if limit is not None else self.default_limit,
            self.max_limit
        )
        skip, take = calculate_pagination(options.page, options.limit)

        examples = await self.example_repository.get_all(skip, take)
        total = await self.example_repository.count()
        meta = create_pagination_meta(options.page, options.limit, total)

        return ExampleListResponseDTO(
            data=[self._to_response_dto(example) for example in examples],
            meta=PaginationMetaDTO.model_validate(meta)
        )

    async def update_example(self, example_id: int, dto: ExampleUpdateDTO) -> ExampleResponseDTO:
        """
        Actualiza parcialmente un ejemplo.

        Raises:
            EntityNotFoundException: Si no se encuentra el ejemplo
            ValidationException: Si el resultado no es valido
        """
        example = await self.example_repository.get_by_id(example_id)
        if example is None:
            raise EntityNotFoundException("Example", example_id)

        changes = dto.model_dump(exclude_unset=True)
        # title no admite null: se ignora si viene explicitamente en None
        if changes.get("title") is None:
            changes.pop("title", None)
        if changes.get("is_active") is None:
            changes.pop("is_active", None)

        try:
            updated = replace(example, **changes)
        except ValueError as e:
            raise ValidationException(str(e)) from e

        saved = await self.example_repository.update(updated)
        return self._to_response_dto(saved)

    async def delete_example(self, example_id: int) -> None:
        """
        Elimina (logicamente) un ejemplo.

        Raises:
            EntityNotFoundException: Si no se encuentra el ejemplo
        """
        deleted = await self.example_repository.soft_delete(example_id)
        if not deleted:
            raise EntityNotFoundException("Example", example_id)

    @staticmethod
    def _to_response_dto(example: Example) -> ExampleResponseDTO:
        return ExampleResponseDTO(
            id=example.id,
            title=example.title,
            description=example.description,
            is_active=example.is_active,
            created_at=example.created_at,
            updated_at=example.updated_at
        )
