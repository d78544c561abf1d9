"""
CLI: reconciliacion del servidor postgres_fdw fuera de la API.

Util para ejecutarlo en un deploy (antes de levantar la app) o a mano
cuando cambian las credenciales del servidor remoto.

Variables de entorno:
  - DATABASE_URL o DATABASE_* (base local, debe ser Postgres)
  - AUTR_FDW_SERVER_NAME, AUTR_FDW_LOCAL_SCHEMA
  - AUTR_DATABASE_HOST / PORT / NAME / USER / PASSWORD

Ejecución:
  python scripts/sync_fdw.py
  python scripts/sync_fdw.py --status
  python scripts/sync_fdw.py --import-schema public
  python scripts/sync_fdw.py --import-schema public --tables users,orders
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from dotenv import load_dotenv

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
# La carpeta "api" contiene el paquete raíz `app/`.
_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

load_dotenv(_API_ROOT / ".env", override=False)

from app.infrastructure.external.fdw.fdw_service import build_from_settings


def _parse_tables(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    tables = [t.strip() for t in raw.split(",") if t.strip()]
    return tables or None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sincroniza el servidor postgres_fdw configurado.")
    parser.add_argument(
        "--status",
        action="store_true",
        help="Solo muestra el estado del servidor en el catalogo (no ejecuta DDL).",
    )
    parser.add_argument(
        "--import-schema",
        metavar="REMOTE_SCHEMA",
        help="Despues de sincronizar, importa este schema remoto al schema local.",
    )
    parser.add_argument(
        "--tables",
        help="Lista separada por comas para LIMIT TO (requiere --import-schema).",
    )
    args = parser.parse_args(argv)

    if args.tables and not args.import_schema:
        parser.error("--tables requiere --import-schema")

    service = build_from_settings()
    target = service.load_target()

    if args.status:
        status = service.get_status(target.connection.server_name)
        logger.info(
            f"Servidor '{target.connection.server_name}': exists={status.exists}, "
            f"user_mapping={status.user_mapping_exists}, options={status.current_config}"
        )
        return 0

    if not target.enabled:
        logger.warning("AUTR_FDW_ENABLED=false: no se sincroniza.")
        return 0

    result = service.reconcile()
    logger.info(f"FDW {result.operation.value}: {result.message}")

    if args.import_schema:
        service.import_schema(args.import_schema, _parse_tables(args.tables))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
