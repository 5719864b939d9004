from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import Any

from .._errors import ConfigurationError
from ._format import iter_repr

logger = logging.getLogger(__name__)

_OPTIONAL = frozenset({"tee_buffer_warning"})


@dataclass(slots=True)
class Config:
    """Process-wide settings of pyoiter.

    Attributes:
        iter_repr_max_items (int): Number of items shown by `Seq.__repr__` before truncating with `...`.
        tee_buffer_warning (int | None): Queue length of a single `tee` branch above which a warning is logged. `None` disables the check.
    """

    iter_repr_max_items: int = 20
    tee_buffer_warning: int | None = 10_000

    def iter_repr(self, v: Sequence[Any]) -> str:
        return iter_repr(v, self.iter_repr_max_items)


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.get_config().iter_repr_max_items
    20

    ```
    """
    return _CONFIG


def _check(name: str, value: object) -> None:
    if value is None and name in _OPTIONAL:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"config value {name!r} must be a non-negative integer, got {value!r}"
        raise ConfigurationError(msg)


def set_config(**changes: Any) -> dict[str, Any]:
    """Update the process-wide configuration.

    All names and values are validated before anything is changed.

    Args:
        **changes (Any): New values, keyed by `Config` field name.

    Returns:
        dict[str, Any]: The previous values of the changed fields, suitable to restore them with `set_config(**previous)`.

    Raises:
        ConfigurationError: If a name is unknown or a value is invalid.

    Example:
    ```python
    >>> import pyoiter as po
    >>> previous = po.set_config(iter_repr_max_items=2)
    >>> po.Seq((1, 2, 3))
    Seq(1, 2, ...)
    >>> po.set_config(**previous)
    {'iter_repr_max_items': 2}
    >>> po.Seq((1, 2, 3))
    Seq(1, 2, 3)

    ```
    """
    known = {f.name for f in fields(Config)}
    for name, value in changes.items():
        if name not in known:
            msg = f"unknown config option {name!r}"
            raise ConfigurationError(msg)
        _check(name, value)
    previous = {name: getattr(_CONFIG, name) for name in changes}
    for name, value in changes.items():
        setattr(_CONFIG, name, value)
    logger.debug("config updated: %s", changes)
    return previous
