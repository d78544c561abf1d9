"""
Tipos del modulo FDW.

Este modulo no realiza I/O: solo define estructuras y el hash de configuracion.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class FdwOperation(str, Enum):
    """
    Resultado de una reconciliacion.

    ERROR no lo devuelve reconcile() (los fallos se propagan); es el valor
    con el que la API informa una operacion fallida (FdwOperationException).
    """

    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True)
class RemoteConnectionConfig:
    """
    Configuracion deseada del servidor remoto.

    Se construye desde la configuracion del proceso en cada llamada;
    no se cachea entre reconciliaciones.
    """

    server_name: str
    host: str
    port: int
    dbname: str
    user: str
    password: str = field(default="", repr=False)

    def fingerprint(self) -> str:
        """Hash de los campos que obligan a recrear la conexion."""
        return config_hash(self)


@dataclass(frozen=True)
class FdwTarget:
    """Configuracion de activacion: flag y schema local donde viven las foreign tables."""

    enabled: bool
    local_schema: str
    connection: RemoteConnectionConfig


@dataclass(frozen=True)
class RemoteServerOptions:
    """Proyeccion de srvoptions de pg_foreign_server."""

    host: str = ""
    port: str = ""
    dbname: str = ""


@dataclass(frozen=True)
class ServerStatus:
    """Estado del servidor en el catalogo al momento de la consulta."""

    exists: bool
    user_mapping_exists: bool = False
    current_config: Optional[RemoteServerOptions] = None


@dataclass(frozen=True)
class ConfigFingerprint:
    """Fila de _fdw_config_meta."""

    server_name: str
    config_hash: str
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class ReconciliationResult:
    success: bool
    operation: FdwOperation
    message: str


def config_hash(config: RemoteConnectionConfig) -> str:
    """
    SHA-256 (hex) de host, port, dbname, user y password.

    El nombre del servidor no forma parte del hash: es la clave con la que
    se guarda en _fdw_config_meta.
    """
    payload = json.dumps(
        {
            "host": config.host,
            "port": config.port,
            "dbname": config.dbname,
            "user": config.user,
            "password": config.password,
        },
        separators=(",", ":"),
        sort_keys=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
