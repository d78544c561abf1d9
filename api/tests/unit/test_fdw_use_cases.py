"""
Tests de los casos de uso FDW (capa async sobre el servicio sincrono).
"""
from __future__ import annotations

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from app.application.use_cases.fdw_use_cases import FdwUseCases
from app.infrastructure.external.fdw.types import (
    FdwOperation,
    FdwTarget,
    ReconciliationResult,
    RemoteConnectionConfig,
    RemoteServerOptions,
    ServerStatus,
)
from app.shared.exceptions.fdw import FdwDisabledException, FdwOperationException


TARGET = FdwTarget(
    enabled=True,
    local_schema="autr",
    connection=RemoteConnectionConfig(
        server_name="autr_server",
        host="db.remote",
        port=5432,
        dbname="autr_db",
        user="reader",
    ),
)


def _service(target: FdwTarget = TARGET) -> MagicMock:
    service = MagicMock()
    service.load_target.return_value = target
    return service


@pytest.mark.asyncio
async def test_sync_maps_result_to_dto() -> None:
    service = _service()
    service.reconcile.return_value = ReconciliationResult(
        success=True, operation=FdwOperation.CREATED, message="Servidor FDW 'autr_server' creado."
    )

    dto = await FdwUseCases(service).sync()

    assert dto.success is True
    assert dto.operation == "created"
    service.reconcile.assert_called_once_with()


@pytest.mark.asyncio
async def test_sync_wraps_failures() -> None:
    service = _service()
    service.reconcile.side_effect = RuntimeError("permission denied")

    with pytest.raises(FdwOperationException) as exc_info:
        await FdwUseCases(service).sync()

    assert exc_info.value.status_code == 500
    assert exc_info.value.details["server_name"] == "autr_server"
    assert exc_info.value.details["operation"] == FdwOperation.ERROR.value
    assert "permission denied" in exc_info.value.message


@pytest.mark.asyncio
async def test_operations_rejected_when_disabled() -> None:
    service = _service(replace(TARGET, enabled=False))
    use_cases = FdwUseCases(service)

    with pytest.raises(FdwDisabledException):
        await use_cases.sync()
    with pytest.raises(FdwDisabledException):
        await use_cases.get_status()
    with pytest.raises(FdwDisabledException):
        await use_cases.import_schema()

    service.reconcile.assert_not_called()


@pytest.mark.asyncio
async def test_get_status_includes_current_options() -> None:
    service = _service()
    service.get_status.return_value = ServerStatus(
        exists=True,
        user_mapping_exists=False,
        current_config=RemoteServerOptions(host="db.remote", port="5432", dbname="autr_db"),
    )

    dto = await FdwUseCases(service).get_status()

    assert dto.server_name == "autr_server"
    assert dto.exists is True
    assert dto.user_mapping_exists is False
    assert dto.current_config.host == "db.remote"
    service.get_status.assert_called_once_with("autr_server")


@pytest.mark.asyncio
async def test_import_schema_passes_tables() -> None:
    service = _service()

    dto = await FdwUseCases(service).import_schema("public", ["users", "orders"])

    service.import_schema.assert_called_once_with("public", ["users", "orders"])
    assert dto.local_schema == "autr"
    assert dto.tables == ["users", "orders"]


@pytest.mark.asyncio
async def test_sync_on_startup_logs_and_continues_on_error() -> None:
    service = _service()
    service.reconcile.side_effect = ConnectionError("catalogo no disponible")

    result = await FdwUseCases(service).sync_on_startup()

    assert result is None


@pytest.mark.asyncio
async def test_sync_on_startup_skips_when_disabled() -> None:
    service = _service(replace(TARGET, enabled=False))

    result = await FdwUseCases(service).sync_on_startup()

    assert result is None
    service.reconcile.assert_not_called()


@pytest.mark.asyncio
async def test_sync_on_startup_returns_result() -> None:
    service = _service()
    service.reconcile.return_value = ReconciliationResult(
        success=True, operation=FdwOperation.SKIPPED, message="sin cambios"
    )

    result = await FdwUseCases(service).sync_on_startup()

    assert result.operation == "skipped"


def test_disabled_exception_response_body() -> None:
    body = FdwDisabledException().to_response()

    assert body["error"] == "FDW_DISABLED"
    assert body["details"] == {}
