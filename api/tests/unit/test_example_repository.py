"""
Tests del repositorio de ejemplos contra SQLite en memoria.
"""
import pytest

pytest.importorskip("aiosqlite")

from app.domain.entities.example import Example
from app.infrastructure.repositories.example_repository_impl import ExampleRepositoryImpl
from app.shared.exceptions.domain import EntityNotFoundException


@pytest.mark.asyncio
async def test_create_and_get(db_session) -> None:
    repo = ExampleRepositoryImpl(db_session)

    created = await repo.create(Example(title="Primero", description="d"))
    fetched = await repo.get_by_id(created.id)

    assert created.id is not None
    assert fetched is not None
    assert fetched.title == "Primero"
    assert fetched.created_at is not None


@pytest.mark.asyncio
async def test_get_all_orders_newest_first_and_counts(db_session) -> None:
    repo = ExampleRepositoryImpl(db_session)
    for title in ("uno", "dos", "tres"):
        await repo.create(Example(title=title))

    page = await repo.get_all(skip=0, limit=2)

    assert [e.title for e in page] == ["tres", "dos"]
    assert await repo.count() == 3


@pytest.mark.asyncio
async def test_soft_delete_hides_record(db_session) -> None:
    repo = ExampleRepositoryImpl(db_session)
    created = await repo.create(Example(title="borrar"))

    assert await repo.soft_delete(created.id) is True
    assert await repo.get_by_id(created.id) is None
    assert await repo.count() == 0
    assert await repo.soft_delete(created.id) is False


@pytest.mark.asyncio
async def test_update_changes_fields(db_session) -> None:
    repo = ExampleRepositoryImpl(db_session)
    created = await repo.create(Example(title="antes"))

    created.title = "despues"
    created.deactivate()
    updated = await repo.update(created)

    assert updated.title == "despues"
    assert updated.is_active is False


@pytest.mark.asyncio
async def test_update_missing_raises(db_session) -> None:
    repo = ExampleRepositoryImpl(db_session)

    with pytest.raises(EntityNotFoundException):
        await repo.update(Example(id=123, title="nada"))
