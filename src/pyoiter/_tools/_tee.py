from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from .._core import get_config
from .._errors import ConfigurationError
from .._source import adapt

logger = logging.getLogger(__name__)


class _TeeState[T]:
    """Source cursor shared by the branches of one `tee` call, with one queue per live branch."""

    __slots__ = ("_queues", "_source", "_warned", "exhausted")

    def __init__(self, source: Iterator[T], n: int) -> None:
        self._source = source
        self._queues: dict[int, deque[T]] = {idx: deque() for idx in range(n)}
        self._warned = False
        self.exhausted = False

    def pull(self, idx: int) -> T:
        queue = self._queues[idx]
        if queue:
            return queue.popleft()
        if self.exhausted:
            raise StopIteration
        try:
            value = next(self._source)
        except StopIteration:
            self.exhausted = True
            raise
        for other in self._queues.values():
            other.append(value)
        self._check_backlog()
        return queue.popleft()

    def backlog(self, idx: int) -> int:
        return len(self._queues[idx])

    def release(self, idx: int) -> None:
        self._queues.pop(idx, None)

    def _check_backlog(self) -> None:
        limit = get_config().tee_buffer_warning
        if self._warned or limit is None:
            return
        longest = max(len(q) for q in self._queues.values())
        if longest > limit:
            self._warned = True
            logger.warning(
                "tee branch lags %d elements behind the fastest one (limit %d)",
                longest,
                limit,
            )


class TeeBranch[T](Iterator[T]):
    """One of the independent iterators returned by `tee`."""

    __slots__ = ("_idx", "_state")

    def __init__(self, state: _TeeState[T], idx: int) -> None:
        self._state = state
        self._idx = idx

    def __next__(self) -> T:
        return self._state.pull(self._idx)

    def __del__(self) -> None:
        self._state.release(self._idx)

    def __repr__(self) -> str:
        return f"TeeBranch(index={self._idx}, buffered={self._state.backlog(self._idx)})"


def tee[T](iterable: Iterable[T], n: int = 2) -> tuple[TeeBranch[T], ...]:
    """Split one iterable into **n** independent iterators.

    Branches can be consumed at different rates, in any interleaving, without re-reading the source: each element is read once and queued for the branches that did not see it yet.

    Memory use grows with the distance between the fastest and the slowest branch.

    Once `tee` has been called, the source should not be used anymore.

    Args:
        iterable (Iterable[T]): The source.
        n (int): Number of branches. `0` returns no branch and leaves the source untouched.

    Returns:
        tuple[TeeBranch[T], ...]: The branches.

    Raises:
        ConfigurationError: If **n** is negative.

    Example:
    ```python
    >>> from pyoiter.tools import tee
    >>> left, right = tee(iter([1, 2, 3]))
    >>> list(left), list(right)
    ([1, 2, 3], [1, 2, 3])
    >>> tee([1, 2, 3], 0)
    ()

    ```
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        msg = f"tee expects a non-negative number of branches, got {n!r}"
        raise ConfigurationError(msg)
    if n == 0:
        return ()
    state = _TeeState(adapt(iterable), n)
    logger.debug("tee fanning out to %d branches", n)
    return tuple(TeeBranch(state, idx) for idx in range(n))
