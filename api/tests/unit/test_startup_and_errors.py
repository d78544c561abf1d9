"""
Tests del arranque (reconciliacion FDW no bloqueante) y del 500 generico.
"""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.core import events
from app.infrastructure.external.fdw.fdw_service import FdwConfigError


@pytest.mark.asyncio
async def test_startup_sync_skipped_when_disabled(monkeypatch) -> None:
    monkeypatch.setattr(events.settings, "AUTR_FDW_ENABLED", False)
    builder = MagicMock()
    monkeypatch.setattr(events, "build_from_settings", builder)

    await events.sync_fdw_on_startup()

    builder.assert_not_called()


@pytest.mark.asyncio
async def test_startup_sync_survives_config_error(monkeypatch) -> None:
    monkeypatch.setattr(events.settings, "AUTR_FDW_ENABLED", True)

    def _fail():
        raise FdwConfigError("La base de datos local debe ser Postgres")

    monkeypatch.setattr(events, "build_from_settings", _fail)

    await events.sync_fdw_on_startup()


@pytest.mark.asyncio
async def test_startup_sync_delegates_to_use_cases(monkeypatch) -> None:
    monkeypatch.setattr(events.settings, "AUTR_FDW_ENABLED", True)
    monkeypatch.setattr(events, "build_from_settings", lambda: MagicMock())
    sync_on_startup = AsyncMock(return_value=None)
    monkeypatch.setattr(events.FdwUseCases, "sync_on_startup", sync_on_startup)

    await events.sync_fdw_on_startup()

    sync_on_startup.assert_awaited_once()


@pytest.mark.asyncio
async def test_unhandled_error_returns_generic_500() -> None:
    from main import create_application
    app = create_application()

    async def boom():
        raise RuntimeError("detalle interno")

    app.add_api_route("/boom", boom)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "INTERNAL_SERVER_ERROR"
    assert "detalle interno" not in body["message"]
    assert body["details"]["path"] == "/boom"
