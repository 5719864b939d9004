"""Tests for product, permutations, combinations and combinations_with_replacement."""

import itertools
import logging
import math
from collections.abc import Callable, Iterator

import more_itertools as mit
import pytest

import pyoiter as po
from pyoiter.tools import (
    combinations,
    combinations_with_replacement,
    permutations,
    product,
)

POOLS = [(), (1,), (1, 2), ("a", "b", "c"), tuple(range(5))]


@pytest.mark.parametrize("pool", POOLS)
@pytest.mark.parametrize("r", [0, 1, 2, 3, 6])
def test_permutations_order_and_count(pool: tuple[object, ...], r: int) -> None:
    """Test permutations against the reference order and nPr."""
    result = list(permutations(pool, r))
    assert result == list(itertools.permutations(pool, r))
    n = len(pool)
    assert len(result) == (math.perm(n, r) if r <= n else 0)


@pytest.mark.parametrize("pool", POOLS)
@pytest.mark.parametrize("r", [0, 1, 2, 3, 6])
def test_combinations_order_and_count(pool: tuple[object, ...], r: int) -> None:
    """Test combinations against the reference order and nCr."""
    result = list(combinations(pool, r))
    assert result == list(itertools.combinations(pool, r))
    assert len(result) == math.comb(len(pool), r)


@pytest.mark.parametrize("pool", POOLS)
@pytest.mark.parametrize("r", [0, 1, 2, 3])
def test_combinations_with_replacement_order_and_count(
    pool: tuple[object, ...], r: int
) -> None:
    """Test combinations_with_replacement against the reference order and C(n+r-1, r)."""
    result = list(combinations_with_replacement(pool, r))
    assert result == list(itertools.combinations_with_replacement(pool, r))
    n = len(pool)
    expected = math.comb(n + r - 1, r) if n else int(r == 0)
    assert len(result) == expected


def test_permutations_examples() -> None:
    """Test the documented permutations example."""
    result = list(permutations([1, 2, 3], 2))
    assert len(result) == 6
    assert result[0] == (1, 2)
    assert all(len(set(p)) == 2 for p in result)


def test_permutations_default_length() -> None:
    """Test that r defaults to the pool length."""
    assert list(permutations("abc")) == list(itertools.permutations("abc"))
    assert list(permutations([])) == [()]


def test_combinations_examples() -> None:
    """Test the documented combinations example."""
    result = list(combinations([1, 2, 3, 4], 2))
    assert len(result) == 6
    assert result[0] == (1, 2)
    assert result[-1] == (3, 4)


def test_index_invariants() -> None:
    """Test the ordering invariants of the produced index tuples."""
    pool = range(6)
    assert all(a < b < c for a, b, c in combinations(pool, 3))
    assert all(a <= b <= c for a, b, c in combinations_with_replacement(pool, 3))
    assert all(len(set(p)) == 3 for p in permutations(pool, 3))


@pytest.mark.parametrize(
    "pools",
    [(), ([1, 2],), ([1, 2], "ab"), ([1], [], [2]), (range(3), "xy", [True, False])],
)
def test_product(pools: tuple[object, ...]) -> None:
    """Test product against the reference order."""
    assert list(product(*pools)) == list(itertools.product(*pools))


def test_product_repeat() -> None:
    """Test the repeat argument."""
    assert list(product("ab", repeat=2)) == list(itertools.product("ab", repeat=2))
    assert list(product("ab", repeat=0)) == [()]
    with pytest.raises(po.ConfigurationError):
        product("ab", repeat=-1)


def test_pools_are_materialized_at_call_time() -> None:
    """Test that one-shot sources are read once, when the generator is created."""
    source = iter([1, 2, 3])
    it = combinations(source, 2)
    assert list(source) == []
    assert mit.ilen(it) == 3


def test_enumeration_is_lazy() -> None:
    """Test that a huge enumeration can be started cheaply."""
    it = permutations(range(20))
    assert next(it) == tuple(range(20))
    assert next(it)[-2:] == (19, 18)


@pytest.mark.parametrize(
    "call",
    [
        lambda: permutations([1], -1),
        lambda: combinations([1], -1),
        lambda: combinations_with_replacement([1], -1),
        lambda: combinations([1], 1.0),
    ],
)
def test_negative_r(call: Callable[[], object]) -> None:
    """Test that a negative r is rejected at call time."""
    with pytest.raises(po.ConfigurationError):
        call()


def test_fluent_combinatorics() -> None:
    """Test the Iter entry points."""
    assert po.Iter([1, 2, 3]).permutations(2).length() == 6
    assert po.Iter([1, 2, 3, 4]).combinations(2).last() == (3, 4)
    assert po.Iter("ab").combinations_with_replacement(3).length() == 4
    assert po.Iter([1, 2]).product("ab", repeat=1).first() == (1, "a")
    assert po.Iter([1, 2]).combinations(5).collect().eq([])


def _big() -> Iterator[int]:
    yield from range(3)


def test_generator_pool() -> None:
    """Test a generator used as pool."""
    assert list(product(_big(), repeat=2))[:4] == [(0, 0), (0, 1), (0, 2), (1, 0)]


def test_product_debug_log(caplog: pytest.LogCaptureFixture) -> None:
    """Test that product logs the number of pools, repeat included."""
    with caplog.at_level(logging.DEBUG, logger="pyoiter._tools._combinatorics"):
        product("ab", [1], repeat=2)
    assert "product over 4 pools" in caplog.text
