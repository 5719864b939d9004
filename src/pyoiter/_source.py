from __future__ import annotations

from collections.abc import Iterable, Iterator

import cytoolz as cz


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


def adapt[T](data: Iterable[T]) -> Iterator[T]:
    """Expose any iterable through the pull protocol.

    An `Iterator` (including `Iter`) adapts to itself, so handing it over transfers drive ownership to the caller.
    """
    return iter(data)


def materialize_pool[T](data: Iterable[T]) -> tuple[T, ...]:
    """Random-access copy of **data**, as needed by the combinatorial generators."""
    return data if isinstance(data, tuple) else tuple(data)
