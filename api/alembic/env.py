"""
Configuracion de Alembic para migraciones de base de datos.

- Usa la URL de base de datos desde settings (config.py)
- Importa los modelos para autogenerate
- asyncpg se reemplaza por psycopg (v3) para correr las migraciones en modo sync
- La tabla _fdw_config_meta y los schemas de foreign tables los gestiona el
  servicio FDW, no Alembic: se excluyen del autogenerate
"""
import sys
from pathlib import Path
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

# Agregar el directorio raiz al path para imports
API_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(API_DIR))

from app.core.config import settings
from app.infrastructure.database.session import Base
from app.infrastructure.external.fdw.sql import FDW_META_TABLE

# Importar todos los modelos para que Alembic los detecte
from app.infrastructure.database.models import ExampleModel  # noqa: F401

# Alembic Config object
config = context.config

db_url = settings.effective_database_url.replace("+asyncpg", "+psycopg")
config.set_main_option("sqlalchemy.url", db_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def include_object(obj, name, type_, reflected, compare_to):
    """Ignora tablas fuera de los modelos (metadatos FDW y foreign tables importadas)."""
    if type_ == "table":
        if name == FDW_META_TABLE:
            return False
        if getattr(obj, "schema", None) == settings.AUTR_FDW_LOCAL_SCHEMA:
            return False
    return True


def run_migrations_offline() -> None:
    """
    Ejecuta migraciones en modo 'offline'.

    Genera SQL sin conectarse a la base de datos.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """
    Ejecuta migraciones en modo 'online'.

    Conecta a la base de datos y ejecuta las migraciones directamente.
    """
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            include_object=include_object,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
