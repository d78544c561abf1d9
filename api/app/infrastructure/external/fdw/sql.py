"""
Construccion de sentencias DDL para postgres_fdw.

Los valores vienen de variables de entorno, asi que todo lo que se interpola
pasa por escape_identifier / escape_literal. Las consultas al catalogo usan
parametros (%s) y no necesitan estos helpers.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from .types import RemoteConnectionConfig, RemoteServerOptions


FDW_META_TABLE = "_fdw_config_meta"

_SAFE_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def escape_identifier(identifier: str) -> str:
    """
    Deja el identificador tal cual si es seguro; si no, lo entrecomilla
    duplicando las comillas dobles internas.
    """
    if _SAFE_IDENTIFIER.match(identifier):
        return identifier
    return '"' + identifier.replace('"', '""') + '"'


def escape_literal(value: object) -> str:
    """Duplica comillas simples para interpolar dentro de '...'."""
    return str(value).replace("'", "''")


def parse_server_options(options: Optional[Iterable[str]]) -> RemoteServerOptions:
    """
    Parsea srvoptions (["host=...", "port=...", ...]).

    Las claves ausentes quedan como string vacio; no se valida que esten
    las tres.
    """
    parsed: dict[str, str] = {}
    for opt in options or []:
        key, _, value = opt.partition("=")
        parsed[key] = value

    return RemoteServerOptions(
        host=parsed.get("host", ""),
        port=parsed.get("port", ""),
        dbname=parsed.get("dbname", ""),
    )


def create_meta_table_sql() -> str:
    return f"""
        CREATE TABLE IF NOT EXISTS {escape_identifier(FDW_META_TABLE)} (
            server_name VARCHAR(255) PRIMARY KEY,
            config_hash VARCHAR(64) NOT NULL,
            updated_at  TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
        )
    """


def create_extension_sql() -> str:
    return "CREATE EXTENSION IF NOT EXISTS postgres_fdw"


def create_server_sql(config: RemoteConnectionConfig) -> str:
    return (
        f"CREATE SERVER {escape_identifier(config.server_name)} "
        f"FOREIGN DATA WRAPPER postgres_fdw "
        f"OPTIONS (host '{escape_literal(config.host)}', "
        f"port '{escape_literal(config.port)}', "
        f"dbname '{escape_literal(config.dbname)}')"
    )


def alter_server_sql(config: RemoteConnectionConfig) -> str:
    return (
        f"ALTER SERVER {escape_identifier(config.server_name)} "
        f"OPTIONS (SET host '{escape_literal(config.host)}', "
        f"SET port '{escape_literal(config.port)}', "
        f"SET dbname '{escape_literal(config.dbname)}')"
    )


def create_user_mapping_sql(config: RemoteConnectionConfig) -> str:
    return (
        f"CREATE USER MAPPING FOR CURRENT_USER "
        f"SERVER {escape_identifier(config.server_name)} "
        f"OPTIONS (user '{escape_literal(config.user)}', "
        f"password '{escape_literal(config.password)}')"
    )


def drop_user_mapping_sql(server_name: str) -> str:
    return f"DROP USER MAPPING IF EXISTS FOR CURRENT_USER SERVER {escape_identifier(server_name)}"


def create_schema_sql(schema: str) -> str:
    return f"CREATE SCHEMA IF NOT EXISTS {escape_identifier(schema)}"


def import_foreign_schema_sql(
    *,
    remote_schema: str,
    server_name: str,
    local_schema: str,
    tables: Optional[Sequence[str]] = None,
) -> str:
    """
    IMPORT FOREIGN SCHEMA remoto -> local.
    LIMIT TO solo se agrega si hay tablas explicitas.
    """
    sql = f"IMPORT FOREIGN SCHEMA {escape_identifier(remote_schema)}"
    if tables:
        table_list = ", ".join(escape_identifier(t) for t in tables)
        sql += f" LIMIT TO ({table_list})"
    sql += f" FROM SERVER {escape_identifier(server_name)}"
    sql += f" INTO {escape_identifier(local_schema)}"
    return sql
