"""
DTOs relacionados con el recurso de ejemplo.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.domain.entities.example import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)


class ExampleCreateDTO(BaseModel):
    """DTO para crear un ejemplo."""

    title: str = Field(
        ...,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="Titulo",
        examples=["Titulo de ejemplo"]
    )
    description: Optional[str] = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Descripcion"
    )
    is_active: bool = Field(default=True, description="Si el ejemplo esta activo")


class ExampleUpdateDTO(BaseModel):
    """DTO para actualizar un ejemplo (todos los campos opcionales)."""

    title: Optional[str] = Field(None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    is_active: Optional[bool] = None


class ExampleResponseDTO(BaseModel):
    """DTO de respuesta para un ejemplo."""

    id: int
    title: str
    description: Optional[str]
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        """Configuración de Pydantic."""
        from_attributes = True


class PaginationMetaDTO(BaseModel):
    """Metadata de paginacion."""

    page: int
    limit: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    class Config:
        from_attributes = True


class ExampleListResponseDTO(BaseModel):
    """DTO de respuesta para lista paginada de ejemplos."""

    data: List[ExampleResponseDTO]
    meta: PaginationMetaDTO
