"""
Entidades del dominio.
"""
from app.domain.entities.example import Example

__all__ = [
    "Example",
]
