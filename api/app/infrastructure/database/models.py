"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import Column, String, Integer, DateTime, Text, Boolean
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base


class ExampleModel(Base):
    """
    Modelo de base de datos para el recurso de ejemplo.
    Usa borrado logico: deleted_at marca el registro como eliminado.
    """

    __tablename__ = "examples"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Example(id={self.id}, title={self.title}, is_active={self.is_active})>"
