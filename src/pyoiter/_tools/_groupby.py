from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Final

from .._source import adapt

_MISSING: Final = object()


class _GroupCursor[T]:
    """Lookahead shared by a `GroupBy` and the groups it hands out.

    `epoch` changes every time the outer iterator advances; a group created under an older epoch is dead.
    """

    __slots__ = (
        "_key",
        "_source",
        "_stale",
        "current_key",
        "current_value",
        "epoch",
        "exhausted",
        "target_key",
    )

    def __init__(self, source: Iterator[T], key: Callable[[T], Any] | None) -> None:
        self._source = source
        self._key = key
        self._stale = True
        self.current_key: Any = _MISSING
        self.current_value: Any = _MISSING
        self.target_key: Any = _MISSING
        self.epoch = 0
        self.exhausted = False

    def peek(self) -> bool:
        """Make sure the lookahead holds the next element; `False` once the source is exhausted."""
        if self._stale and not self.exhausted:
            try:
                value = next(self._source)
            except StopIteration:
                self.exhausted = True
                self.current_key = self.current_value = _MISSING
            else:
                self.current_key = value if self._key is None else self._key(value)
                self.current_value = value
            self._stale = False
        return not self.exhausted

    def take(self) -> T:
        """Hand over the lookahead element; the next `peek` pulls a new one."""
        self._stale = True
        return self.current_value

    def in_target(self) -> bool:
        if self.target_key is _MISSING:
            return False
        # identity first, so keys unequal to themselves (nan) still match their own group
        return self.current_key is self.target_key or bool(
            self.current_key == self.target_key
        )


class Group[T](Iterator[T]):
    """Consecutive elements sharing one key, as yielded by `groupby`.

    Only valid until the outer iterator is advanced again; after that it is exhausted, whatever it did not read yet is skipped.
    """

    __slots__ = ("_cursor", "_done", "_epoch")

    def __init__(self, cursor: _GroupCursor[T]) -> None:
        self._cursor = cursor
        self._epoch = cursor.epoch
        self._done = False

    def __next__(self) -> T:
        cursor = self._cursor
        if self._done or cursor.epoch != self._epoch:
            self._done = True
            raise StopIteration
        if not cursor.peek() or not cursor.in_target():
            self._done = True
            raise StopIteration
        return cursor.take()


class GroupBy[T, K](Iterator[tuple[K, Group[T]]]):
    """Iterator of `(key, group)` pairs over runs of consecutive elements with equal keys."""

    __slots__ = ("_cursor",)

    def __init__(self, source: Iterator[T], key: Callable[[T], K] | None) -> None:
        self._cursor = _GroupCursor(source, key)

    def __next__(self) -> tuple[K, Group[T]]:
        cursor = self._cursor
        cursor.epoch += 1
        while cursor.peek() and cursor.in_target():
            cursor.take()
        if cursor.exhausted:
            raise StopIteration
        cursor.target_key = cursor.current_key
        return cursor.target_key, Group(cursor)


def groupby[T](
    iterable: Iterable[T], key: Callable[[T], Any] | None = None
) -> GroupBy[T, Any]:
    """Yield `(key, group)` pairs for each run of consecutive elements with equal keys.

    **key** computes the grouping key of an element, the identity by default.

    Only adjacent elements are grouped: sort on the same key first to get one group per distinct key.

    Groups share the source with the outer iterator: advancing the outer iterator ends the current group and skips what it did not read, so materialize groups that are needed later.

    Args:
        iterable (Iterable[T]): The source.
        key (Callable[[T], Any] | None): Key function. Defaults to None.

    Returns:
        GroupBy[T, Any]: The `(key, group)` pairs.

    Example:
    ```python
    >>> from pyoiter.tools import groupby
    >>> data = ["aaa", "aab", "bba", "bbb", "ccc"]
    >>> [(k, list(g)) for k, g in groupby(data, lambda s: s[0])]
    [('a', ['aaa', 'aab']), ('b', ['bba', 'bbb']), ('c', ['ccc'])]
    >>> [k for k, _ in groupby("AAAABBBCCDAABBB")]
    ['A', 'B', 'C', 'D', 'A', 'B']

    ```
    """
    return GroupBy(adapt(iterable), key)
