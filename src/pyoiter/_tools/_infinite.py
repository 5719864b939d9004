from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from numbers import Number

from .._source import adapt

logger = logging.getLogger(__name__)


def count[N: Number](start: N = 0, step: N = 1) -> Iterator[N]:
    """Unbounded arithmetic progression starting at **start**.

    **Warning** ⚠️
        This is an infinite iterator, bound it with `islice` or consume it partially.

    Example:
    ```python
    >>> from pyoiter.tools import count, islice
    >>> list(islice(count(5, 3), 4))
    [5, 8, 11, 14]
    >>> list(islice(count(0.5, 0.25), 3))
    [0.5, 0.75, 1.0]

    ```
    """

    def _count() -> Iterator[N]:
        n = start
        while True:
            yield n
            n += step

    return _count()


def cycle[T](iterable: Iterable[T]) -> Iterator[T]:
    """Yield the elements of the iterable, then replay them indefinitely.

    Elements are saved while the first pass pulls them, so the source is read only once.

    An empty source gives an empty iterator.

    **Warning** ⚠️
        This is an infinite iterator for any non-empty source.

    Example:
    ```python
    >>> from pyoiter.tools import cycle, islice
    >>> list(islice(cycle([1, 2, 3]), 7))
    [1, 2, 3, 1, 2, 3, 1]
    >>> list(cycle([]))
    []

    ```
    """

    def _cycle(it: Iterator[T]) -> Iterator[T]:
        saved: list[T] = []
        for item in it:
            yield item
            saved.append(item)
        if not saved:
            return
        logger.debug("cycle replaying %d buffered elements", len(saved))
        while True:
            yield from saved

    return _cycle(adapt(iterable))


def repeat[T](value: T, times: int | None = None) -> Iterator[T]:
    """Yield **value** forever, or exactly **times** times.

    A non-positive **times** gives an empty iterator.

    Example:
    ```python
    >>> from pyoiter.tools import repeat
    >>> list(repeat("x", 4))
    ['x', 'x', 'x', 'x']
    >>> list(repeat("x", -1))
    []

    ```
    """

    def _forever() -> Iterator[T]:
        while True:
            yield value

    def _times(n: int) -> Iterator[T]:
        for _ in range(n):
            yield value

    return _forever() if times is None else _times(times)
