"""
Tests de los casos de uso del recurso de ejemplo con el repositorio mockeado.
"""
from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from app.application.dto.example_dto import ExampleCreateDTO, ExampleUpdateDTO
from app.application.use_cases.example_use_cases import ExampleUseCases
from app.domain.entities.example import Example
from app.shared.exceptions.domain import EntityNotFoundException, ValidationException


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock()


@pytest.mark.asyncio
async def test_create_example_returns_dto(repo: AsyncMock) -> None:
    repo.create.side_effect = lambda example: Example(
        id=1, title=example.title, description=example.description, is_active=example.is_active
    )

    dto = await ExampleUseCases(repo).create_example(ExampleCreateDTO(title="Nuevo"))

    assert dto.id == 1
    assert dto.title == "Nuevo"
    assert dto.is_active is True


@pytest.mark.asyncio
async def test_create_example_blank_title_is_validation_error(repo: AsyncMock) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await ExampleUseCases(repo).create_example(ExampleCreateDTO(title="  "))

    assert exc_info.value.status_code == 400
    repo.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_example_not_found(repo: AsyncMock) -> None:
    repo.get_by_id.return_value = None

    with pytest.raises(EntityNotFoundException) as exc_info:
        await ExampleUseCases(repo).get_example(99)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_list_examples_clamps_limit_and_builds_meta(repo: AsyncMock) -> None:
    repo.get_all.return_value = [Example(id=2, title="Segundo"), Example(id=1, title="Primero")]
    repo.count.return_value = 12

    result = await ExampleUseCases(repo, default_limit=10, max_limit=5).list_examples(page=2, limit=50)

    repo.get_all.assert_awaited_once_with(5, 5)
    assert [item.id for item in result.data] == [2, 1]
    assert result.meta.limit == 5
    assert result.meta.total_pages == 3
    assert result.meta.has_next_page is True


@pytest.mark.asyncio
async def test_list_examples_uses_default_limit(repo: AsyncMock) -> None:
    repo.get_all.return_value = []
    repo.count.return_value = 0

    result = await ExampleUseCases(repo, default_limit=7).list_examples()

    repo.get_all.assert_awaited_once_with(0, 7)
    assert result.meta.total_items == 0


@pytest.mark.asyncio
async def test_update_example_applies_only_sent_fields(repo: AsyncMock) -> None:
    repo.get_by_id.return_value = Example(id=1, title="Original", description="desc")
    repo.update.side_effect = lambda example: example

    dto = await ExampleUseCases(repo).update_example(1, ExampleUpdateDTO(is_active=False))

    assert dto.title == "Original"
    assert dto.description == "desc"
    assert dto.is_active is False


@pytest.mark.asyncio
async def test_update_example_not_found(repo: AsyncMock) -> None:
    repo.get_by_id.return_value = None

    with pytest.raises(EntityNotFoundException):
        await ExampleUseCases(repo).update_example(1, ExampleUpdateDTO(title="Nuevo"))


@pytest.mark.asyncio
async def test_delete_example_not_found(repo: AsyncMock) -> None:
    repo.soft_delete.return_value = False

    with pytest.raises(EntityNotFoundException):
        await ExampleUseCases(repo).delete_example(5)
