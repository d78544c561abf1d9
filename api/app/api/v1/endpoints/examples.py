"""
Endpoints CRUD del recurso de ejemplo.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from app.application.use_cases.example_use_cases import ExampleUseCases
from app.application.dto.example_dto import (
    ExampleCreateDTO,
    ExampleUpdateDTO,
    ExampleResponseDTO,
    ExampleListResponseDTO
)
from app.api.v1.dependencies.use_case_deps import get_example_use_cases


router = APIRouter(prefix="/examples", tags=["Examples"])


@router.post(
    "/",
    response_model=ExampleResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Crear un ejemplo"
)
async def create_example(
    dto: ExampleCreateDTO,
    use_cases: ExampleUseCases = Depends(get_example_use_cases)
) -> ExampleResponseDTO:
    """
    Crea un nuevo ejemplo.

    Args:
        dto: Datos del ejemplo a crear
        use_cases: Casos de uso de ejemplos (inyectado)

    Returns:
        ExampleResponseDTO: Ejemplo creado
    """
    return await use_cases.create_example(dto)


@router.get(
    "/",
    response_model=ExampleListResponseDTO,
    summary="Listar ejemplos paginados"
)
async def list_examples(
    page: int = Query(default=1, description="Pagina (desde 1)"),
    limit: Optional[int] = Query(default=None, description="Items por pagina"),
    use_cases: ExampleUseCases = Depends(get_example_use_cases)
) -> ExampleListResponseDTO:
    """
    Lista ejemplos con paginacion por pagina/limite.
    Valores fuera de rango se ajustan en lugar de rechazarse.
    """
    return await use_cases.list_examples(page, limit)


@router.get(
    "/{example_id}",
    response_model=ExampleResponseDTO,
    summary="Obtener un ejemplo por ID"
)
async def get_example(
    example_id: int,
    use_cases: ExampleUseCases = Depends(get_example_use_cases)
) -> ExampleResponseDTO:
    return await use_cases.get_example(example_id)


@router.patch(
    "/{example_id}",
    response_model=ExampleResponseDTO,
    summary="Actualizar un ejemplo"
)
async def update_example(
    example_id: int,
    dto: ExampleUpdateDTO,
    use_cases: ExampleUseCases = Depends(get_example_use_cases)
) -> ExampleResponseDTO:
    """
    Actualiza parcialmente un ejemplo existente.

    Args:
        example_id: ID del ejemplo a actualizar
        dto: Campos a modificar
        use_cases: Casos de uso de ejemplos (inyectado)

    Returns:
        ExampleResponseDTO: Ejemplo actualizado
    """
    return await use_cases.update_example(example_id, dto)


@router.delete(
    "/{example_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar un ejemplo"
)
async def delete_example(
    example_id: int,
    use_cases: ExampleUseCases = Depends(get_example_use_cases)
) -> None:
    """Elimina logicamente un ejemplo."""
    await use_cases.delete_example(example_id)
