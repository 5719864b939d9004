"""Combinatoric iterators.

Each of them reads its pool(s) entirely when called, then lazily walks index tuples in lexicographic order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .._errors import ConfigurationError
from .._source import materialize_pool

logger = logging.getLogger(__name__)


def _check_count(func: str, name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{func} {name} must be a non-negative integer, got {value!r}"
        raise ConfigurationError(msg)
    return value


def _pick[T](pool: Sequence[T], indices: Iterable[int]) -> tuple[T, ...]:
    return tuple(pool[idx] for idx in indices)


def product(*iterables: Iterable[Any], repeat: int = 1) -> Iterator[tuple[Any, ...]]:
    """Cartesian product of the iterables, the rightmost one varying fastest.

    **repeat** repeats the whole list of iterables, so `product(a, repeat=2)` is `product(a, a)`.

    Without iterables, the product holds a single empty tuple. If any iterable is empty, the product is empty.

    Example:
    ```python
    >>> from pyoiter.tools import product
    >>> list(product([1, 2], "ab"))
    [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
    >>> list(product(range(2), repeat=2))
    [(0, 0), (0, 1), (1, 0), (1, 1)]
    >>> list(product())
    [()]

    ```
    """
    times = _check_count("product", "repeat", repeat)
    pools = [materialize_pool(iterable) for iterable in iterables] * times
    logger.debug("product over %d pools", len(pools))

    def _product() -> Iterator[tuple[Any, ...]]:
        if not all(pools):
            return
        indices = [0] * len(pools)
        yield tuple(pool[0] for pool in pools)
        while True:
            for i in reversed(range(len(pools))):
                indices[i] += 1
                if indices[i] < len(pools[i]):
                    break
                indices[i] = 0
            else:
                return
            yield tuple(pool[idx] for pool, idx in zip(pools, indices, strict=True))

    return _product()


def permutations[T](
    iterable: Iterable[T], r: int | None = None
) -> Iterator[tuple[T, ...]]:
    """Successive **r**-length permutations of the pool, in lexicographic order of positions.

    **r** defaults to the pool length. Elements are distinct by position, not by value.

    An **r** greater than the pool length gives an empty iterator.

    Example:
    ```python
    >>> from pyoiter.tools import permutations
    >>> list(permutations([1, 2, 3], 2))
    [(1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)]
    >>> list(permutations("ab"))
    [('a', 'b'), ('b', 'a')]

    ```
    """
    pool = materialize_pool(iterable)
    n = len(pool)
    size = n if r is None else _check_count("permutations", "r", r)
    logger.debug("permutations of %d out of a pool of %d", size, n)

    def _permutations() -> Iterator[tuple[T, ...]]:
        if size > n:
            return
        indices = list(range(n))
        cycles = list(range(n, n - size, -1))
        yield _pick(pool, indices[:size])
        while n:
            for i in reversed(range(size)):
                cycles[i] -= 1
                if cycles[i] == 0:
                    indices[i:] = indices[i + 1 :] + indices[i : i + 1]
                    cycles[i] = n - i
                else:
                    j = cycles[i]
                    indices[i], indices[-j] = indices[-j], indices[i]
                    yield _pick(pool, indices[:size])
                    break
            else:
                return

    return _permutations()


def combinations[T](iterable: Iterable[T], r: int) -> Iterator[tuple[T, ...]]:
    """**r**-length subsequences of the pool, as strictly increasing position tuples in lexicographic order.

    An **r** greater than the pool length gives an empty iterator.

    Example:
    ```python
    >>> from pyoiter.tools import combinations
    >>> list(combinations([1, 2, 3, 4], 2))
    [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]
    >>> list(combinations([1, 2], 3))
    []

    ```
    """
    pool = materialize_pool(iterable)
    n = len(pool)
    size = _check_count("combinations", "r", r)
    logger.debug("combinations of %d out of a pool of %d", size, n)

    def _combinations() -> Iterator[tuple[T, ...]]:
        if size > n:
            return
        indices = list(range(size))
        yield _pick(pool, indices)
        while True:
            for i in reversed(range(size)):
                if indices[i] != i + n - size:
                    break
            else:
                return
            indices[i] += 1
            for j in range(i + 1, size):
                indices[j] = indices[j - 1] + 1
            yield _pick(pool, indices)

    return _combinations()


def combinations_with_replacement[T](
    iterable: Iterable[T], r: int
) -> Iterator[tuple[T, ...]]:
    """**r**-length subsequences of the pool where elements may repeat, as non-decreasing position tuples.

    Example:
    ```python
    >>> from pyoiter.tools import combinations_with_replacement
    >>> list(combinations_with_replacement([1, 2], 3))
    [(1, 1, 1), (1, 1, 2), (1, 2, 2), (2, 2, 2)]
    >>> list(combinations_with_replacement([], 2))
    []

    ```
    """
    pool = materialize_pool(iterable)
    n = len(pool)
    size = _check_count("combinations_with_replacement", "r", r)
    logger.debug("combinations with replacement of %d out of a pool of %d", size, n)

    def _combinations_with_replacement() -> Iterator[tuple[T, ...]]:
        if not n and size:
            return
        indices = [0] * size
        yield _pick(pool, indices)
        while True:
            for i in reversed(range(size)):
                if indices[i] != n - 1:
                    break
            else:
                return
            indices[i:] = [indices[i] + 1] * (size - i)
            yield _pick(pool, indices)

    return _combinations_with_replacement()
