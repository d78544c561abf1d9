"""
Entidad de dominio: Example (recurso de ejemplo del template).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


@dataclass
class Example:
    """
    Entidad de dominio que representa un recurso de ejemplo.
    Sirve como plantilla para nuevos recursos CRUD.
    """

    id: Optional[int] = None
    title: str = ""
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        """Validaciones después de la inicialización."""
        if not self.title or len(self.title.strip()) < TITLE_MIN_LENGTH:
            raise ValueError(
                f"El titulo debe tener al menos {TITLE_MIN_LENGTH} caracteres"
            )
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValueError(
                f"El titulo no puede superar {TITLE_MAX_LENGTH} caracteres"
            )
        if self.description is not None and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"La descripcion no puede superar {DESCRIPTION_MAX_LENGTH} caracteres"
            )

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def is_deleted(self) -> bool:
        """
        Verifica si el recurso fue eliminado logicamente.

        Returns:
            bool: True si tiene deleted_at
        """
        return self.deleted_at is not None
