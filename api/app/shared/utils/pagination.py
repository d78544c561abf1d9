"""
Utilidades de paginacion basada en pagina/limite.
"""
import math
from dataclasses import dataclass
from typing import Generic, List, Tuple, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class PaginationOptions:
    """Pagina (desde 1) y cantidad de items por pagina."""
    page: int
    limit: int


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    data: List[T]
    meta: PaginationMeta


def normalize_pagination_options(
    page: int = 1,
    limit: int = 10,
    max_limit: int = 100
) -> PaginationOptions:
    """
    Ajusta pagina y limite a rangos validos.

    Args:
        page: Numero de pagina (minimo 1)
        limit: Items por pagina (entre 1 y max_limit)
        max_limit: Limite maximo permitido

    Returns:
        PaginationOptions: Opciones normalizadas
    """
    return PaginationOptions(
        page=max(1, page),
        limit=min(max(1, limit), max_limit),
    )


def calculate_pagination(page: int, limit: int) -> Tuple[int, int]:
    """
    Convierte pagina/limite a (skip, take) para la consulta.

    Returns:
        Tuple[int, int]: Registros a saltar y registros a traer
    """
    return (page - 1) * limit, limit


def create_pagination_meta(page: int, limit: int, total_items: int) -> PaginationMeta:
    """Construye la metadata de paginacion."""
    total_pages = math.ceil(total_items / limit) if limit > 0 else 0
    return PaginationMeta(
        page=page,
        limit=limit,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def create_paginated_result(
    data: List[T],
    page: int,
    limit: int,
    total_items: int
) -> PaginatedResult[T]:
    return PaginatedResult(data=data, meta=create_pagination_meta(page, limit, total_items))
