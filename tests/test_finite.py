"""Tests for the finite combinators of pyoiter.tools."""

import operator
from collections.abc import Iterator

import pytest

import pyoiter as po
from pyoiter.tools import (
    accumulate,
    chain,
    chain_from_iterable,
    compress,
    count,
    dropwhile,
    filterfalse,
    islice,
    materialize,
    pairwise,
    starmap,
    takewhile,
    zip_longest,
)


class _Tracked:
    """Iterable recording whether iter() was called on it."""

    def __init__(self, *items: object) -> None:
        self.items = items
        self.started = False

    def __iter__(self) -> Iterator[object]:
        self.started = True
        return iter(self.items)


class TestChain:
    """Tests for chain and chain_from_iterable."""

    @pytest.mark.parametrize(
        ("s1", "s2"),
        [([], []), ([1], []), ([], [2, 3]), ([1, 2], [3, 4, 5])],
    )
    def test_concatenation(self, s1: list[int], s2: list[int]) -> None:
        """Test that chain equals list concatenation."""
        assert materialize(chain(s1, s2)) == materialize(s1) + materialize(s2)

    def test_lazy_touch(self) -> None:
        """Test that later iterables are not started before the previous ones are exhausted."""
        first, second = _Tracked(1, 2), _Tracked(3)
        it = chain(first, second)
        assert not first.started
        assert next(it) == 1
        assert next(it) == 2
        assert not second.started
        assert next(it) == 3
        assert second.started

    def test_from_iterable_pulls_lazily(self) -> None:
        """Test that the outer iterable is pulled on demand."""
        produced: list[int] = []

        def sources() -> Iterator[list[int]]:
            for i in range(3):
                produced.append(i)
                yield [i, i]

        it = chain_from_iterable(sources())
        assert produced == []
        assert list(islice(it, 3)) == [0, 0, 1]
        assert produced == [0, 1]

    def test_no_arguments(self) -> None:
        """Test the empty chain."""
        assert list(chain()) == []


class TestIslice:
    """Tests for islice."""

    def test_bounds(self) -> None:
        """Test the supported call forms."""
        data = list(range(10))
        assert list(islice(data, 3)) == [0, 1, 2]
        assert list(islice(data, 2, 8, 2)) == [2, 4, 6]
        assert list(islice(data, 7, None)) == [7, 8, 9]
        assert list(islice(data, None)) == data
        assert list(islice(data, 5, 2)) == []
        assert list(islice(data, 0)) == []

    def test_bounds_infinite(self) -> None:
        """Test that islice bounds an infinite generator."""
        assert materialize(islice(count(0, 1), 5)) == [0, 1, 2, 3, 4]

    def test_does_not_pull_past_stop(self) -> None:
        """Test that the source is left right after the stop position."""
        source = iter(range(10))
        assert list(islice(source, 1, 5, 3)) == [1, 4]
        assert next(source) == 5
        source = iter(range(10))
        assert list(islice(source, 0, 4, 3)) == [0, 3]
        assert next(source) == 4

    def test_start_past_stop_discards_start(self) -> None:
        """Test that an empty window with start > stop still discards start elements."""
        source = iter(range(8))
        assert list(islice(source, 5, 2)) == []
        assert list(source) == [5, 6, 7]

    def test_short_source(self) -> None:
        """Test that exhaustion ends the slice."""
        assert list(islice([1, 2], 1, 10)) == [2]
        assert list(islice([1, 2], 5, None)) == []

    @pytest.mark.parametrize(
        "args",
        [(0, 5, 0), (0, 5, -1), (-1,), (-1, 4), (0, -2), (0, 3, 1, 1), (), ("1",), (1.5,)],
    )
    def test_invalid_configuration(self, args: tuple[object, ...]) -> None:
        """Test that invalid bounds raise at call time, not on the first pull."""
        with pytest.raises(po.ConfigurationError):
            islice([1, 2, 3], *args)

    def test_error_raised_eagerly(self) -> None:
        """Test that the source is untouched by a rejected call."""
        source = iter([1, 2])
        with pytest.raises(po.ConfigurationError):
            po.Iter(source).slice(0, 2, 0)
        assert next(source) == 1


class TestFilters:
    """Tests for compress, filterfalse, takewhile and dropwhile."""

    def test_compress_shortest_wins(self) -> None:
        """Test compress stopping with either input."""
        assert list(compress("ABCDEF", [1, 0, 1, 0, 1, 1])) == ["A", "C", "E", "F"]
        assert list(compress("ABC", [1, 1, 1, 1, 1])) == ["A", "B", "C"]
        assert list(compress("ABCDEF", [0, 1])) == ["B"]

    def test_compress_infinite_selectors(self) -> None:
        """Test compress with infinite selectors."""
        assert list(compress(range(6), po.tools.cycle([True, False]))) == [0, 2, 4]

    def test_filterfalse_default(self) -> None:
        """Test the explicit falsy set."""
        data = [0, 1, "", "x", False, True, None, 42]
        assert list(filterfalse(None, data)) == [0, "", False, None]

    def test_filterfalse_default_containers_are_truthy(self) -> None:
        """Test that empty containers and zero-like strings are truthy."""
        data = [[], {}, (), "0", 0.0, 0j]
        assert list(filterfalse(None, data)) == [0.0, 0j]

    def test_filterfalse_predicate(self) -> None:
        """Test a supplied predicate."""
        assert list(filterfalse(lambda x: x > 2, [1, 4, 2, 5])) == [1, 2]

    def test_takewhile_stops_permanently(self) -> None:
        """Test that later true elements are never reached."""
        source = iter([1, 2, 5, 1, 2])
        it = takewhile(lambda x: x < 3, source)
        assert list(it) == [1, 2]
        assert list(it) == []
        assert next(source) == 1

    def test_dropwhile_stops_testing(self) -> None:
        """Test that the predicate is not called after the first failure."""
        calls: list[int] = []

        def small(x: int) -> bool:
            calls.append(x)
            return x < 3

        assert list(dropwhile(small, [1, 2, 3, 1, 5])) == [3, 1, 5]
        assert calls == [1, 2, 3]

    def test_dropwhile_all_dropped(self) -> None:
        """Test a source where everything matches."""
        assert list(dropwhile(lambda x: True, [1, 2])) == []

    def test_predicate_error_propagates(self) -> None:
        """Test that predicate errors surface at the pull that triggered them."""
        it = takewhile(lambda x: 1 / x, [1, 0, 2])
        assert next(it) == 1
        with pytest.raises(ZeroDivisionError):
            next(it)


class TestAccumulate:
    """Tests for accumulate."""

    def test_first_output_is_first_input(self) -> None:
        """Test that the first value goes out unchanged."""
        marker = object()
        out = accumulate([marker, 1], lambda a, b: a)
        assert next(out) is marker

    def test_running_sums(self) -> None:
        """Test the default addition."""
        assert list(accumulate([1, 2, 3, 4, 5])) == [1, 3, 6, 10, 15]
        assert list(accumulate(["a", "b", "c"])) == ["a", "ab", "abc"]

    def test_custom_function(self) -> None:
        """Test a custom binary function."""
        assert list(accumulate([3, 1, 4, 1, 5], max)) == [3, 3, 4, 4, 5]
        assert list(accumulate([1, 2, 3], operator.mul)) == [1, 2, 6]

    def test_initial(self) -> None:
        """Test the initial seed."""
        assert list(accumulate([1, 2], initial=10)) == [10, 11, 13]
        assert list(accumulate([], initial=10)) == [10]

    def test_empty(self) -> None:
        """Test that an empty source gives nothing, without error."""
        assert list(accumulate([])) == []


class TestPairsAndZips:
    """Tests for pairwise, starmap and zip_longest."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_pairwise_length(self, n: int) -> None:
        """Test that pairwise yields len - 1 pairs."""
        pairs = list(pairwise(range(n)))
        assert len(pairs) == max(n - 1, 0)
        assert all(b == a + 1 for a, b in pairs)

    def test_starmap(self) -> None:
        """Test argument unpacking."""
        assert list(starmap(pow, [(2, 5), (3, 2)])) == [32, 9]
        assert list(starmap(lambda: 1, [(), ()])) == [1, 1]

    def test_zip_longest(self) -> None:
        """Test padding of the shorter inputs."""
        assert materialize(zip_longest("-", [1, 2, 3], ["a", "b"])) == [
            (1, "a"),
            (2, "b"),
            (3, "-"),
        ]
        assert list(zip_longest(0, [], [1])) == [(0, 1)]
        assert list(zip_longest(0, [], [])) == []
        assert list(zip_longest(0)) == []

    def test_zip_longest_does_not_repull_exhausted(self) -> None:
        """Test that an exhausted input is left alone."""
        pulls = 0

        class Once:
            def __iter__(self) -> "Once":
                return self

            def __next__(self) -> int:
                nonlocal pulls
                pulls += 1
                raise StopIteration

        assert list(zip_longest(None, Once(), [1, 2, 3])) == [(None, 1), (None, 2), (None, 3)]
        assert pulls == 1


class TestFluent:
    """Tests for the Iter methods delegating to the finite combinators."""

    def test_pipeline(self) -> None:
        """Test a chained pipeline."""
        result = (
            po.Iter(range(20))
            .skip_while(lambda x: x < 3)
            .filter_false(lambda x: x % 3)
            .take_while(lambda x: x < 15)
            .accumulate()
            .pairwise()
            .starmap(lambda a, b: b - a)
            .collect()
        )
        assert list(result) == [6, 9, 12]

    def test_chain_and_zip(self) -> None:
        """Test chain and zip_longest methods."""
        assert po.Iter([1]).chain([2], (3,)).zip_longest("xy", fillvalue="?").collect().eq(
            [(1, "x"), (2, "y"), (3, "?")]
        )

    def test_compress_and_slice(self) -> None:
        """Test compress and slice methods."""
        assert po.Iter("abcdef").compress([1, 1, 0, 1, 1, 1]).slice(1, None, 2).collect().eq(
            ["b", "e"]
        )
