"""
Excepciones de la capa API para operaciones FDW.
"""
from app.infrastructure.external.fdw.types import FdwOperation
from app.shared.exceptions.base import AppException


class FdwDisabledException(AppException):
    """Excepcion cuando se invoca una operacion FDW con AUTR_FDW_ENABLED=false."""

    def __init__(self):
        super().__init__(
            message="FDW deshabilitado (AUTR_FDW_ENABLED=false)",
            status_code=409,
            error_code="FDW_DISABLED"
        )


class FdwOperationException(AppException):
    """Excepcion cuando falla una operacion contra el catalogo de Postgres."""

    def __init__(self, step: str, server_name: str, reason: str):
        super().__init__(
            message=f"Error en {step} del servidor FDW '{server_name}': {reason}",
            status_code=500,
            error_code="FDW_OPERATION_FAILED",
            details={"operation": FdwOperation.ERROR.value, "step": step, "server_name": server_name}
        )
