import pytest

from app.domain.entities.example import Example


def test_example_defaults_active() -> None:
    example = Example(title="Hola")

    assert example.is_active is True
    assert example.is_deleted() is False


def test_example_rejects_short_title() -> None:
    with pytest.raises(ValueError):
        Example(title=" a ")


def test_example_rejects_long_title_and_description() -> None:
    with pytest.raises(ValueError):
        Example(title="x" * 101)
    with pytest.raises(ValueError):
        Example(title="ok title", description="d" * 501)


def test_example_activate_deactivate() -> None:
    example = Example(title="Hola")

    example.deactivate()
    assert example.is_active is False
    example.activate()
    assert example.is_active is True
