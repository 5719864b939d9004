from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .._errors import ConfigurationError
from .._source import adapt
from ._truth import is_falsy, is_truthy


def chain[T](*iterables: Iterable[T]) -> Iterator[T]:
    """Yield every element of each iterable, in argument order.

    An iterable is only touched once the previous one is exhausted.

    Args:
        *iterables (Iterable[T]): Iterables to concatenate.

    Returns:
        Iterator[T]: The concatenated elements.

    Example:
    ```python
    >>> from pyoiter.tools import chain
    >>> list(chain([1, 2], (3,), "ab"))
    [1, 2, 3, 'a', 'b']

    ```
    """
    return chain_from_iterable(iterables)


def chain_from_iterable[T](iterables: Iterable[Iterable[T]]) -> Iterator[T]:
    """Like `chain`, but the iterables themselves are pulled lazily from **iterables**.

    Example:
    ```python
    >>> from pyoiter.tools import chain_from_iterable
    >>> list(chain_from_iterable([i] * i for i in range(4)))
    [1, 2, 2, 3, 3, 3]

    ```
    """

    def _chain(sources: Iterator[Iterable[T]]) -> Iterator[T]:
        for source in sources:
            yield from source

    return _chain(adapt(iterables))


def _check_index(name: str, value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"islice {name} must be None or an integer, got {value!r}"
        raise ConfigurationError(msg)
    if value < 0:
        msg = f"islice {name} must be non-negative, got {value}"
        raise ConfigurationError(msg)
    return value


def islice[T](iterable: Iterable[T], *args: int | None) -> Iterator[T]:
    """Lazily slice an iterable, as `islice(it, stop)` or `islice(it, start, stop[, step])`.

    The first **start** elements are discarded, then every **step**-th element is yielded until the position **stop** (exclusive) or exhaustion.

    A **stop** of `None` means unbounded: this is the way to take a window of an infinite iterator.

    Nothing at or after position **stop** is ever pulled from the source.

    Args:
        iterable (Iterable[T]): The source.
        *args (int | None): `stop`, or `start, stop[, step]`.

    Returns:
        Iterator[T]: The selected elements.

    Raises:
        ConfigurationError: On a wrong number of bounds, negative bounds, or a **step** lower than 1.

    Example:
    ```python
    >>> from pyoiter.tools import count, islice
    >>> list(islice(range(10), 2, 8, 2))
    [2, 4, 6]
    >>> list(islice(count(), 5))
    [0, 1, 2, 3, 4]
    >>> list(islice("abcde", 3, None))
    ['d', 'e']

    ```
    """
    match args:
        case (stop,):
            start, step = None, None
        case (start, stop):
            step = None
        case (start, stop, step):
            pass
        case _:
            msg = f"islice expects 1 to 3 bounds after the iterable, got {len(args)}"
            raise ConfigurationError(msg)
    first = _check_index("start", start) or 0
    last = _check_index("stop", stop)
    if step is None:
        step = 1
    elif isinstance(step, bool) or not isinstance(step, int) or step < 1:
        msg = f"islice step must be a positive integer, got {step!r}"
        raise ConfigurationError(msg)
    return _islice(adapt(iterable), first, last, step)


def _islice[T](
    it: Iterator[T], start: int, stop: int | None, step: int
) -> Iterator[T]:
    position = 0
    target = start
    try:
        while stop is None or target < stop:
            while position < target:
                next(it)
                position += 1
            value = next(it)
            position += 1
            yield value
            target += step
        while position < max(start, stop):
            next(it)
            position += 1
    except StopIteration:
        return


def compress[T](data: Iterable[T], selectors: Iterable[object]) -> Iterator[T]:
    """Yield the elements of **data** whose matching selector is truthy.

    Stops as soon as either input is exhausted.

    Example:
    ```python
    >>> from pyoiter.tools import compress
    >>> list(compress("ABCDEF", [1, 0, 1, 0, 1, 1]))
    ['A', 'C', 'E', 'F']
    >>> list(compress("ABCDEF", [True, True]))
    ['A', 'B']

    ```
    """

    def _compress(items: Iterator[T], flags: Iterator[object]) -> Iterator[T]:
        for item, flag in zip(items, flags):
            if is_truthy(flag):
                yield item

    return _compress(adapt(data), adapt(selectors))


def filterfalse[T](
    predicate: Callable[[T], object] | None, iterable: Iterable[T]
) -> Iterator[T]:
    """Yield the elements for which **predicate** is falsy.

    With a `None` predicate, the elements themselves are tested: `None`, `False`, numeric zero and `""` are kept.

    Example:
    ```python
    >>> from pyoiter.tools import filterfalse
    >>> list(filterfalse(None, [0, 1, "", "x", False, True, None, 42]))
    [0, '', False, None]
    >>> list(filterfalse(lambda x: x % 2, range(6)))
    [0, 2, 4]

    ```
    """

    def _filterfalse(it: Iterator[T]) -> Iterator[T]:
        for item in it:
            if is_falsy(item if predicate is None else predicate(item)):
                yield item

    return _filterfalse(adapt(iterable))


def takewhile[T](predicate: Callable[[T], object], iterable: Iterable[T]) -> Iterator[T]:
    """Yield elements until the first one failing **predicate**, then stop for good.

    The failing element is consumed from the source and dropped.

    Example:
    ```python
    >>> from pyoiter.tools import takewhile
    >>> list(takewhile(lambda x: x < 4, [1, 2, 3, 4, 5, 1]))
    [1, 2, 3]

    ```
    """

    def _takewhile(it: Iterator[T]) -> Iterator[T]:
        for item in it:
            if is_falsy(predicate(item)):
                return
            yield item

    return _takewhile(adapt(iterable))


def dropwhile[T](predicate: Callable[[T], object], iterable: Iterable[T]) -> Iterator[T]:
    """Drop elements while **predicate** holds, then yield everything from the first failure on.

    The predicate is not called anymore once it failed.

    Example:
    ```python
    >>> from pyoiter.tools import dropwhile
    >>> list(dropwhile(lambda x: x < 4, [1, 2, 3, 4, 5, 1]))
    [4, 5, 1]

    ```
    """

    def _dropwhile(it: Iterator[T]) -> Iterator[T]:
        for item in it:
            if is_falsy(predicate(item)):
                yield item
                yield from it
                return

    return _dropwhile(adapt(iterable))


def accumulate[T](
    iterable: Iterable[T],
    func: Callable[[T, T], T] | None = None,
    *,
    initial: T | None = None,
) -> Iterator[T]:
    """Running fold of **func** over the iterable, addition by default.

    The first output is the first input unchanged, unless **initial** is given, in which case it is yielded first and seeds the fold.

    Args:
        iterable (Iterable[T]): The source.
        func (Callable[[T, T], T] | None): Binary function, `operator.add` if `None`.
        initial (T | None): Optional starting value.

    Returns:
        Iterator[T]: The successive accumulated values.

    Example:
    ```python
    >>> from pyoiter.tools import accumulate
    >>> list(accumulate([1, 2, 3, 4, 5]))
    [1, 3, 6, 10, 15]
    >>> list(accumulate([1, 2, 3, 4], lambda a, b: a * b))
    [1, 2, 6, 24]
    >>> list(accumulate([1, 2, 3], initial=100))
    [100, 101, 103, 106]

    ```
    """
    fold: Callable[[Any, Any], Any] = operator.add if func is None else func

    def _accumulate(it: Iterator[T]) -> Iterator[T]:
        total = initial
        if total is None:
            try:
                total = next(it)
            except StopIteration:
                return
        yield total
        for item in it:
            total = fold(total, item)
            yield total

    return _accumulate(adapt(iterable))


def pairwise[T](iterable: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Yield successive overlapping pairs.

    Example:
    ```python
    >>> from pyoiter.tools import pairwise
    >>> list(pairwise([1, 2, 3, 4]))
    [(1, 2), (2, 3), (3, 4)]
    >>> list(pairwise([1]))
    []

    ```
    """

    def _pairwise(it: Iterator[T]) -> Iterator[tuple[T, T]]:
        try:
            previous = next(it)
        except StopIteration:
            return
        for item in it:
            yield previous, item
            previous = item

    return _pairwise(adapt(iterable))


def starmap[R](func: Callable[..., R], iterable: Iterable[Iterable[Any]]) -> Iterator[R]:
    """Yield `func(*args)` for each argument tuple of the iterable.

    Example:
    ```python
    >>> from pyoiter.tools import starmap
    >>> list(starmap(pow, [(2, 5), (3, 2), (10, 3)]))
    [32, 9, 1000]

    ```
    """

    def _starmap(it: Iterator[Iterable[Any]]) -> Iterator[R]:
        for args in it:
            yield func(*args)

    return _starmap(adapt(iterable))


def zip_longest(fillvalue: Any, *iterables: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Zip the iterables, padding the exhausted ones with **fillvalue** until all of them are exhausted.

    An exhausted input is never pulled again.

    Example:
    ```python
    >>> from pyoiter.tools import zip_longest
    >>> list(zip_longest("-", [1, 2, 3], ["a", "b"]))
    [(1, 'a'), (2, 'b'), (3, '-')]
    >>> list(zip_longest(None))
    []

    ```
    """

    def _zip_longest(sources: list[Iterator[Any] | None]) -> Iterator[tuple[Any, ...]]:
        remaining = len(sources)
        while remaining:
            values: list[Any] = []
            for idx, source in enumerate(sources):
                if source is None:
                    values.append(fillvalue)
                    continue
                try:
                    values.append(next(source))
                except StopIteration:
                    sources[idx] = None
                    remaining -= 1
                    if not remaining:
                        return
                    values.append(fillvalue)
            yield tuple(values)

    return _zip_longest([adapt(iterable) for iterable in iterables])
