from __future__ import annotations

from collections.abc import Callable, Iterable


def materialize[T, C](
    iterable: Iterable[T], factory: Callable[[Iterable[T]], C] = list
) -> C:
    """Drain **iterable** in pull order into the container built by **factory**.

    **Warning** ⚠️
        This never returns for an infinite iterator: bound it with `islice` first.

    Args:
        iterable (Iterable[T]): The source to drain.
        factory (Callable[[Iterable[T]], C]): Container type, or any callable absorbing an iterable. Defaults to `list`.

    Returns:
        C: The materialized container.

    Example:
    ```python
    >>> from pyoiter.tools import chain, count, islice, materialize
    >>> materialize(islice(count(0, 1), 5))
    [0, 1, 2, 3, 4]
    >>> materialize(chain("ab", "c"), "".join)
    'abc'

    ```
    """
    return factory(iterable)
