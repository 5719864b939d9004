from ._combinatorics import (
    combinations,
    combinations_with_replacement,
    permutations,
    product,
)
from ._finite import (
    accumulate,
    chain,
    chain_from_iterable,
    compress,
    dropwhile,
    filterfalse,
    islice,
    pairwise,
    starmap,
    takewhile,
    zip_longest,
)
from ._groupby import Group, GroupBy, groupby
from ._infinite import count, cycle, repeat
from ._materialize import materialize
from ._tee import TeeBranch, tee
from ._truth import is_falsy, is_truthy

__all__ = [
    "Group",
    "GroupBy",
    "TeeBranch",
    "accumulate",
    "chain",
    "chain_from_iterable",
    "combinations",
    "combinations_with_replacement",
    "compress",
    "count",
    "cycle",
    "dropwhile",
    "filterfalse",
    "groupby",
    "is_falsy",
    "is_truthy",
    "islice",
    "materialize",
    "pairwise",
    "permutations",
    "product",
    "repeat",
    "starmap",
    "takewhile",
    "tee",
    "zip_longest",
]
