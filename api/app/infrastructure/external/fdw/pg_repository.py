"""
Repositorio Postgres (psycopg) para:
- catalogo de postgres_fdw (pg_foreign_server / pg_user_mappings)
- tabla de metadatos con el hash de configuracion (_fdw_config_meta)
- DDL de creacion/actualizacion del servidor remoto

Los metodos reciben la conexion abierta: el caller controla commits/rollbacks.
"""

from __future__ import annotations

from typing import Optional, Sequence

import psycopg
from psycopg.rows import dict_row

from . import sql
from .types import ConfigFingerprint, RemoteConnectionConfig, ServerStatus


class PostgresFdwRepository:
    def __init__(self, dsn: str) -> None:
        self._dsn = dsn

    def connect(self) -> psycopg.Connection:
        """
        Abre conexión (autocommit False). El caller controla commits.
        """
        try:
            return psycopg.connect(self._dsn, row_factory=dict_row)
        except psycopg.OperationalError as e:
            raise psycopg.OperationalError(
                f"{e}\n"
                f"Sugerencia: verifica que DATABASE_URL sea accesible desde donde ejecutas la app "
                f"y que el usuario tenga permisos para CREATE EXTENSION / CREATE SERVER."
            ) from e

    def ensure_meta_table(self, conn: psycopg.Connection) -> None:
        with conn.cursor() as cur:
            cur.execute(sql.create_meta_table_sql())

    def get_server_status(self, conn: psycopg.Connection, server_name: str) -> ServerStatus:
        """
        Consulta pg_foreign_server y, si el servidor existe, el user mapping
        de CURRENT_USER en pg_user_mappings.
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                SELECT srvname, srvoptions
                FROM pg_foreign_server
                WHERE srvname = %s
                """,
                (server_name,),
            )
            server_row = cur.fetchone()
            if not server_row:
                return ServerStatus(exists=False, user_mapping_exists=False)

            options = sql.parse_server_options(server_row.get("srvoptions"))

            cur.execute(
                """
                SELECT 1 AS found
                FROM pg_user_mappings
                WHERE srvname = %s
                  AND usename = CURRENT_USER
                LIMIT 1
                """,
                (server_name,),
            )
            mapping_row = cur.fetchone()

        return ServerStatus(
            exists=True,
            user_mapping_exists=mapping_row is not None,
            current_config=options,
        )

    def get_stored_fingerprint(
        self, conn: psycopg.Connection, server_name: str
    ) -> Optional[ConfigFingerprint]:
        with conn.cursor() as cur:
            cur.execute(
                f"""
                SELECT config_hash, updated_at
                FROM {sql.escape_identifier(sql.FDW_META_TABLE)}
                WHERE server_name = %s
                """,
                (server_name,),
            )
            row = cur.fetchone()

        if not row:
            return None
        return ConfigFingerprint(
            server_name=server_name,
            config_hash=row["config_hash"],
            updated_at=row.get("updated_at"),
        )

    def save_config_hash(self, conn: psycopg.Connection, server_name: str, config_hash: str) -> None:
        """UPSERT del hash por server_name (refresca updated_at)."""
        with conn.cursor() as cur:
            cur.execute(
                f"""
                INSERT INTO {sql.escape_identifier(sql.FDW_META_TABLE)}
                    (server_name, config_hash, updated_at)
                VALUES (%s, %s, CURRENT_TIMESTAMP)
                ON CONFLICT (server_name)
                DO UPDATE SET config_hash = EXCLUDED.config_hash,
                              updated_at = CURRENT_TIMESTAMP
                """,
                (server_name, config_hash),
            )

    def create_server(
        self,
        conn: psycopg.Connection,
        *,
        config: RemoteConnectionConfig,
        local_schema: str,
    ) -> None:
        """
        Extension + SERVER + USER MAPPING + schema local, en ese orden.
        No hace commit.
        """
        with conn.cursor() as cur:
            cur.execute(sql.create_extension_sql())
            cur.execute(sql.create_server_sql(config))
            cur.execute(sql.create_user_mapping_sql(config))
            cur.execute(sql.create_schema_sql(local_schema))

    def update_server(self, conn: psycopg.Connection, *, config: RemoteConnectionConfig) -> None:
        """
        ALTER SERVER + recreacion del USER MAPPING (DROP + CREATE).
        No hace commit.
        """
        with conn.cursor() as cur:
            cur.execute(sql.alter_server_sql(config))
            cur.execute(sql.drop_user_mapping_sql(config.server_name))
            cur.execute(sql.create_user_mapping_sql(config))

    def import_foreign_schema(
        self,
        conn: psycopg.Connection,
        *,
        remote_schema: str,
        server_name: str,
        local_schema: str,
        tables: Optional[Sequence[str]] = None,
    ) -> None:
        with conn.cursor() as cur:
            cur.execute(
                sql.import_foreign_schema_sql(
                    remote_schema=remote_schema,
                    server_name=server_name,
                    local_schema=local_schema,
                    tables=tables,
                )
            )
