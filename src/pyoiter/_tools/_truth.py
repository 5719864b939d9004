from __future__ import annotations

from numbers import Number


def is_falsy(value: object) -> bool:
    """Tell whether **value** counts as false for predicates and selectors.

    The falsy values are exactly `None`, `False`, numeric zero and the empty string.

    Anything else is truthy, empty containers included.

    Example:
    ```python
    >>> from pyoiter.tools import is_falsy
    >>> [is_falsy(v) for v in (None, False, 0, 0.0, "", [], "0", 1)]
    [True, True, True, True, True, False, False, False]

    ```
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number):
        return value == 0
    return False


def is_truthy(value: object) -> bool:
    return not is_falsy(value)
