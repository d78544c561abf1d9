"""
Casos de uso de la aplicacion.
"""
from .example_use_cases import ExampleUseCases
from .fdw_use_cases import FdwUseCases

__all__ = ["ExampleUseCases", "FdwUseCases"]
