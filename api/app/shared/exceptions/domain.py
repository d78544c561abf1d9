"""
Excepciones de dominio (recursos CRUD).
"""
from typing import Any, Dict, Optional

from app.shared.exceptions.base import AppException


class DomainException(AppException):
    """Error de reglas de negocio; 400 salvo que la subclase indique otro status."""

    def __init__(
        self,
        message: str,
        error_code: str = "DOMAIN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details
        )


class EntityNotFoundException(DomainException):
    """El recurso no existe o fue eliminado logicamente."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} con ID {entity_id} no encontrado",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)},
            status_code=404
        )


class ValidationException(DomainException):
    """Datos que no cumplen las reglas de la entidad."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field} if field else None
        )
