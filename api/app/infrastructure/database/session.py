"""
Engine async de SQLAlchemy y sesiones por request.

La misma URL (settings.effective_database_url) sirve para Postgres (asyncpg)
y para SQLite (aiosqlite) en tests; el pool solo se configura en Postgres.
"""
from typing import AsyncGenerator

from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base

from app.core.config import Settings, settings


# Base para modelos de SQLAlchemy
Base = declarative_base()


def build_engine(app_settings: Settings) -> AsyncEngine:
    """
    Crea el engine segun el dialecto de la URL.

    Args:
        app_settings: Configuracion de la aplicacion

    Returns:
        AsyncEngine: Engine sin conexiones abiertas todavia
    """
    database_url = app_settings.effective_database_url
    options = {"echo": app_settings.DEBUG}

    if database_url.startswith("postgresql"):
        options.update(
            pool_size=app_settings.DB_POOL_SIZE,
            max_overflow=app_settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )

    return create_async_engine(database_url, **options)


engine = build_engine(settings)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI: una sesion por request.
    Commit al terminar el endpoint; rollback si lanzo una excepcion.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def ping_db() -> None:
    """Ejecuta SELECT 1; propaga el error si la base no responde."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db() -> None:
    """Crea las tablas de los modelos registrados que no existan."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.debug(f"Tablas verificadas: {', '.join(sorted(Base.metadata.tables))}")


async def close_db() -> None:
    await engine.dispose()
