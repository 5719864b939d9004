"""Tests for the process-wide configuration."""

from collections.abc import Iterator

import pytest

import pyoiter as po


@pytest.fixture(autouse=True)
def _restore() -> Iterator[None]:
    cfg = po.get_config()
    saved = (cfg.iter_repr_max_items, cfg.tee_buffer_warning)
    yield
    cfg.iter_repr_max_items, cfg.tee_buffer_warning = saved


def test_defaults() -> None:
    """Test the default values."""
    cfg = po.get_config()
    assert isinstance(cfg, po.Config)
    assert cfg.iter_repr_max_items == 20
    assert cfg.tee_buffer_warning == 10_000


def test_get_config_is_shared() -> None:
    """Test that every caller sees the same instance."""
    assert po.get_config() is po.get_config()


def test_set_config_returns_previous() -> None:
    """Test that the returned mapping restores the old state."""
    previous = po.set_config(iter_repr_max_items=3, tee_buffer_warning=None)
    assert previous == {"iter_repr_max_items": 20, "tee_buffer_warning": 10_000}
    assert po.get_config().tee_buffer_warning is None
    assert repr(po.Seq(range(5))) == "Seq(0, 1, 2, ...)"
    po.set_config(**previous)
    assert repr(po.Seq(range(5))) == "Seq(0, 1, 2, 3, 4)"


def test_repr_limit_zero() -> None:
    """Test that a zero limit hides every item."""
    po.set_config(iter_repr_max_items=0)
    assert repr(po.Seq([1])) == "Seq(...)"
    assert repr(po.Seq([])) == "Seq()"


@pytest.mark.parametrize(
    "changes",
    [
        {"unknown": 1},
        {"iter_repr_max_items": -1},
        {"iter_repr_max_items": True},
        {"iter_repr_max_items": None},
        {"iter_repr_max_items": 2.0},
        {"tee_buffer_warning": "10"},
    ],
)
def test_invalid_changes(changes: dict[str, object]) -> None:
    """Test that invalid names and values are rejected."""
    with pytest.raises(po.ConfigurationError):
        po.set_config(**changes)


def test_validation_is_atomic() -> None:
    """Test that nothing changes when one of several values is invalid."""
    with pytest.raises(po.ConfigurationError):
        po.set_config(iter_repr_max_items=5, tee_buffer_warning=-3)
    assert po.get_config().iter_repr_max_items == 20
