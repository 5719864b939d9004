from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any, Concatenate

import more_itertools as mit

from . import _tools as tools
from ._core import CommonBase
from ._errors import EmptyInputError
from ._results import NONE, Option, Some
from ._source import adapt, convert_data

if TYPE_CHECKING:
    from ._eager import Seq


class IterState(Enum):
    """Lifecycle of an `Iter`."""

    FRESH = "fresh"
    """Nothing was pulled yet."""
    ACTIVE = "active"
    """At least one value was produced."""
    EXHAUSTED = "exhausted"
    """The source reported its end; no value will ever be produced again."""


class Iter[T](CommonBase[Iterator[T]], Iterator[T]):
    """A single-pass, pull-based lazy sequence, with the combinators of `pyoiter.tools` as chainable methods.

    - Nothing is computed until a value is pulled, either with `next()`, the builtin `next`, a for-loop, or a terminal method like `collect()`.
    - Once exhausted, an `Iter` stays exhausted: further pulls keep reporting the end and never repeat a value.
    - Every combinator method hands **self** over to the new `Iter`, which then drives it: keep using the returned object only.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`, and get a fresh `Iter` back with `Seq.iter()`.

    Args:
        data (Iterable[T]): An iterator or generator to wrap. Any other iterable is adapted with `iter()`.

    Example:
    ```python
    >>> import pyoiter as po
    >>> it = po.Iter.from_(1, 2)
    >>> it.state()
    <IterState.FRESH: 'fresh'>
    >>> it.next(), it.next(), it.next(), it.next()
    (Some(1), Some(2), NONE, NONE)
    >>> it.is_exhausted()
    True

    ```
    """

    __slots__ = ("_state",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = adapt(data)
        self._state = IterState.FRESH

    def __next__(self) -> T:
        if self._state is IterState.EXHAUSTED:
            raise StopIteration
        try:
            value = next(self._inner)
        except StopIteration:
            self._state = IterState.EXHAUSTED
            self._inner = iter(())
            raise
        self._state = IterState.ACTIVE
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._state.value})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterable[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        return Iter(factory(self, *args, **kwargs))

    def state(self) -> IterState:
        """Return the current `IterState`."""
        return self._state

    def is_exhausted(self) -> bool:
        return self._state is IterState.EXHAUSTED

    def next(self) -> Option[T]:
        """Pull one value.

        Returns:
            Option[T]: `Some(value)`, or `NONE` once the sequence is exhausted, for every subsequent call too.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Seq([1, 2, 3]).iter()
        >>> it.next().unwrap()
        1
        >>> it.next().unwrap()
        2

        ```
        """
        try:
            return Some(next(self))
        except StopIteration:
            return NONE

    # sources

    @staticmethod
    def new() -> Iter[Any]:
        """Create an empty `Iter`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.new().collect()
        Seq()

        ```
        """
        return Iter(())

    @staticmethod
    def once[U](value: U) -> Iter[U]:
        """Create an `Iter` yielding **value** exactly once."""
        return Iter((value,))

    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from any `Iterable`, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to adapt, or a first single value.
            *more_data (U): Additional values to include if **data** is not an `Iterable`.

        Returns:
            Iter[U]: A new `Iter` over the provided data.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_([1, 2, 3]).collect()
        Seq(1, 2, 3)
        >>> po.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iter` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.slice()` to limit the number of items taken.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_count(10, 2).take(3).into(list)
        [10, 12, 14]

        ```
        """
        return Iter(tools.count(start, step))

    @staticmethod
    def repeat[U](value: U, times: int | None = None) -> Iter[U]:
        """Create an `Iter` yielding **value** forever, or **times** times.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.repeat("x", 3).collect()
        Seq('x', 'x', 'x')

        ```
        """
        return Iter(tools.repeat(value, times))

    # finite combinators

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply **func** to each element.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_(1, 2, 3).map(lambda x: x * 10).collect()
        Seq(10, 20, 30)

        ```
        """
        return self._iter(functools.partial(map, func))

    def filter(self, predicate: Callable[[T], object]) -> Iter[T]:
        """Keep the elements for which **predicate** is truthy.

        Truthiness follows `pyoiter.tools.is_truthy`, like every other predicate in pyoiter.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(range(6)).filter(lambda x: x % 2).collect()
        Seq(1, 3, 5)

        ```
        """

        def _filter(data: Iterable[T]) -> Iterator[T]:
            return (item for item in data if tools.is_truthy(predicate(item)))

        return self._iter(_filter)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Concatenate zero or more iterables after this one.

        Each iterable is only touched once the previous one is exhausted, so an infinite one prevents the rest from being reached.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2)).chain((3, 4), [5]).collect()
        Seq(1, 2, 3, 4, 5)

        ```
        """
        return self._iter(tools.chain, *others)

    def flatten[U](self: Iter[Iterable[U]]) -> Iter[U]:
        """Concatenate the iterables this `Iter` yields.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([[1, 2], (), "ab"]).flatten().collect()
        Seq(1, 2, 'a', 'b')

        ```
        """
        return self._iter(tools.chain_from_iterable)

    def slice(
        self,
        start: int | None = None,
        stop: int | None = None,
        step: int | None = None,
    ) -> Iter[T]:
        """Return a lazy slice of the sequence.

        Args:
            start (int | None): Number of leading elements to skip. Defaults to None.
            stop (int | None): Position to stop at, exclusive. `None` means unbounded. Defaults to None.
            step (int | None): Keep every step-th element, at least 1. Defaults to None.

        Returns:
            Iter[T]: An `Iter` of the sliced items.

        Raises:
            ConfigurationError: On negative bounds or a step lower than 1.

        Example:
        ```python
        >>> import pyoiter as po
        >>> data = (1, 2, 3, 4, 5)
        >>> po.Iter(data).slice(1, 4).collect()
        Seq(2, 3, 4)
        >>> po.Iter(data).slice(step=2).collect()
        Seq(1, 3, 5)

        ```
        """
        return self._iter(tools.islice, start, stop, step)

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the sequence ends sooner.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).take(2).collect()
        Seq(1, 2)
        >>> po.Iter([1, 2, 3]).take(5).collect()
        Seq(1, 2, 3)

        ```
        """
        return self._iter(tools.islice, n)

    def skip(self, n: int) -> Iter[T]:
        """Skip the first **n** elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).skip(2).collect()
        Seq(3)

        ```
        """
        return self._iter(tools.islice, n, None)

    def compress(self, selectors: Iterable[object]) -> Iter[T]:
        """Keep the elements whose matching selector is truthy, stopping with the shortest input.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("ABCDEF").compress([1, 0, 1, 0, 1, 1]).collect()
        Seq('A', 'C', 'E', 'F')

        ```
        """
        return self._iter(tools.compress, selectors)

    def filter_false(self, predicate: Callable[[T], object] | None = None) -> Iter[T]:
        """Return elements for which **predicate** is falsy, or which are falsy themselves when no predicate is given.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).filter_false(lambda x: x > 1).collect()
        Seq(1)
        >>> po.Iter([0, "a", "", None, []]).filter_false().collect()
        Seq(0, '', None)

        ```
        """

        def _filter_false(data: Iterable[T]) -> Iterator[T]:
            return tools.filterfalse(predicate, data)

        return self._iter(_filter_false)

    def take_while(self, predicate: Callable[[T], object]) -> Iter[T]:
        """Take items while **predicate** holds, then stop for good.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        Seq(1, 2)

        ```
        """
        return self._iter(functools.partial(tools.takewhile, predicate))

    def skip_while(self, predicate: Callable[[T], object]) -> Iter[T]:
        """Drop items while **predicate** holds, then yield all the rest.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2, 0, 3)).skip_while(lambda x: x > 0).collect()
        Seq(0, 3)

        ```
        """
        return self._iter(functools.partial(tools.dropwhile, predicate))

    def accumulate(
        self, func: Callable[[T, T], T] | None = None, *, initial: T | None = None
    ) -> Iter[T]:
        """Return the running fold of **func**, addition by default.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2, 3)).accumulate().collect()
        Seq(1, 3, 6)
        >>> po.Iter((1, 2, 3)).accumulate(lambda a, b: a * b, initial=10).collect()
        Seq(10, 10, 20, 60)

        ```
        """
        return self._iter(tools.accumulate, func, initial=initial)

    def pairwise(self) -> Iter[tuple[T, T]]:
        """Return successive overlapping pairs.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("abc").pairwise().collect()
        Seq(('a', 'b'), ('b', 'c'))

        ```
        """
        return self._iter(tools.pairwise)

    def starmap[R](self: Iter[Iterable[Any]], func: Callable[..., R]) -> Iter[R]:
        """Apply **func** to each element unpacked as positional arguments.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([(1, 2), (3, 4)]).starmap(lambda a, b: a + b).collect()
        Seq(3, 7)

        ```
        """
        return self._iter(functools.partial(tools.starmap, func))

    def zip_longest(
        self, *others: Iterable[Any], fillvalue: Any = None
    ) -> Iter[tuple[Any, ...]]:
        """Zip with **others** until all of them are exhausted, padding the shorter ones with **fillvalue**.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).zip_longest("ab", fillvalue="-").collect()
        Seq((1, 'a'), (2, 'b'), (3, '-'))

        ```
        """

        def _zip_longest(data: Iterable[T]) -> Iterator[tuple[Any, ...]]:
            return tools.zip_longest(fillvalue, data, *others)

        return self._iter(_zip_longest)

    # infinite & stateful combinators

    def cycle(self) -> Iter[T]:
        """Repeat the sequence indefinitely.

        **Warning** ⚠️
            This creates an infinite iterator for any non-empty sequence.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2)).cycle().take(5).collect()
        Seq(1, 2, 1, 2, 1)

        ```
        """
        return self._iter(tools.cycle)

    def tee(self, n: int = 2) -> tuple[Iter[T], ...]:
        """Split this sequence into **n** independent ones.

        The returned `Iter`s can be consumed at any pace and in any order; this one must not be used anymore.

        Example:
        ```python
        >>> import pyoiter as po
        >>> first, second = po.Iter.from_(1, 2, 3).tee()
        >>> first.collect(), second.collect()
        (Seq(1, 2, 3), Seq(1, 2, 3))

        ```
        """
        return tuple(Iter(branch) for branch in tools.tee(self, n))

    def group_by[K](
        self, key: Callable[[T], K] | None = None
    ) -> Iter[tuple[K, Iter[T]]]:
        """Return `(key, group)` pairs for each run of consecutive elements with equal keys.

        **key** defaults to the identity. Sort on the same key first to get one group per distinct key.

        Note:
            Each group is itself a lazy `Iter` sharing the source with the outer one.
            Advancing the outer `Iter` exhausts the current group, skipping whatever it did not read.
            Materialize the groups you need before moving on (e.g with `.map()` and `.collect()`).

        Example:
        ```python
        >>> import pyoiter as po
        >>> (
        ...     po.Iter(["aaa", "aab", "bba", "bbb", "ccc"])
        ...     .group_by(lambda s: s[0])
        ...     .map(lambda kv: (kv[0], kv[1].into(list)))
        ...     .into(dict)
        ... )
        {'a': ['aaa', 'aab'], 'b': ['bba', 'bbb'], 'c': ['ccc']}

        ```
        """

        def _group_by(data: Iterable[T]) -> Iterator[tuple[Any, Iter[T]]]:
            return ((k, Iter(group)) for k, group in tools.groupby(data, key))

        return self._iter(_group_by)

    # combinatorics

    def product(self, *others: Iterable[Any], repeat: int = 1) -> Iter[tuple[Any, ...]]:
        """Cartesian product of this sequence with **others**, the rightmost varying fastest.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).product("ab").collect()
        Seq((1, 'a'), (1, 'b'), (2, 'a'), (2, 'b'))

        ```
        """

        def _product(data: Iterable[T]) -> Iterator[tuple[Any, ...]]:
            return tools.product(data, *others, repeat=repeat)

        return self._iter(_product)

    def permutations(self, r: int | None = None) -> Iter[tuple[T, ...]]:
        """Return successive **r**-length permutations of the elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).permutations(2).length()
        6

        ```
        """
        return self._iter(tools.permutations, r)

    def combinations(self, r: int) -> Iter[tuple[T, ...]]:
        """Return **r**-length subsequences of the elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("ABC").combinations(2).collect()
        Seq(('A', 'B'), ('A', 'C'), ('B', 'C'))

        ```
        """
        return self._iter(tools.combinations, r)

    def combinations_with_replacement(self, r: int) -> Iter[tuple[T, ...]]:
        """Return **r**-length subsequences of the elements, allowing individual elements to repeat.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("AB").combinations_with_replacement(2).collect()
        Seq(('A', 'A'), ('A', 'B'), ('B', 'B'))

        ```
        """
        return self._iter(tools.combinations_with_replacement, r)

    # terminals

    def collect(self) -> Seq[T]:
        """Drain the sequence into a `Seq`.

        **Warning** ⚠️
            This never returns on an infinite sequence.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter(range(3))
        >>> it.collect()
        Seq(0, 1, 2)
        >>> it.collect()
        Seq()

        ```
        """
        from ._eager import Seq

        return Seq(tools.materialize(self, tuple))

    def length(self) -> int:
        """Count the remaining elements, consuming them.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(range(5)).length()
        5

        ```
        """
        return mit.ilen(self)

    def consume(self, n: int | None = None) -> None:
        """Advance by **n** elements, or drain entirely when **n** is None, discarding them.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter(range(5))
        >>> it.consume(3)
        >>> it.collect()
        Seq(3, 4)

        ```
        """
        mit.consume(self, n)

    def first(self) -> T:
        """Return the next element.

        Raises:
            EmptyInputError: If the sequence is exhausted.
        """
        value = self.next()
        if value.is_none():
            msg = "called `first` on an empty Iter"
            raise EmptyInputError(msg)
        return value.unwrap()

    def last(self) -> T:
        """Drain the sequence and return its last element.

        Raises:
            EmptyInputError: If the sequence is exhausted.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_count().take(4).last()
        3

        ```
        """
        value = Iter(mit.tail(1, self)).next()
        if value.is_none():
            msg = "called `last` on an empty Iter"
            raise EmptyInputError(msg)
        return value.unwrap()

    def nth(self, n: int) -> Option[T]:
        """Skip **n** elements and pull the following one.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("abc").nth(1)
        Some('b')
        >>> po.Iter("abc").nth(5)
        NONE

        ```
        """
        return self.skip(n).next()

    def reduce(self, func: Callable[[T, T], T]) -> T:
        """Fold the sequence from the left with **func**, seeded with the first element.

        Raises:
            EmptyInputError: If the sequence is exhausted.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).reduce(lambda a, b: a + b)
        6

        ```
        """
        seed = self.next()
        if seed.is_none():
            msg = "called `reduce` on an empty Iter"
            raise EmptyInputError(msg)
        return functools.reduce(func, self, seed.unwrap())
