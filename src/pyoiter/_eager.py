from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, overload

from ._core import CommonBase, get_config
from ._source import convert_data

if TYPE_CHECKING:
    from ._lazy import Iter


class Seq[T](CommonBase[tuple[T, ...]], Sequence[T]):
    """An immutable, ordered, in-memory collection, returned by `Iter.collect()`.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    Unlike an `Iter`, a `Seq` can be iterated as many times as needed; `Seq.iter()` starts a new lazy sequence over it.

    Args:
        data (Iterable[T]): The data to store. A `tuple` is kept as is, anything else is drained into one.
    """

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = data if isinstance(data, tuple) else tuple(data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...
    def __getitem__(self, index: int | slice) -> T | Seq[T]:
        if isinstance(index, slice):
            return Seq(self._inner[index])
        return self._inner[index]

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __contains__(self, item: object) -> bool:
        return item in self._inner

    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> po.Seq.from_("ab")
        Seq('a', 'b')

        ```
        """
        return Seq(convert_data(data, *more_data))

    def iter(self) -> Iter[T]:
        """Start a new lazy `Iter` over the stored elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> data = po.Seq((1, 2, 3))
        >>> data.iter().map(str).collect()
        Seq('1', '2', '3')
        >>> data.iter().pairwise().length()
        2

        ```
        """
        from ._lazy import Iter

        return Iter(self._inner)

    def length(self) -> int:
        return len(self._inner)

    def eq(self, other: Iterable[T]) -> bool:
        """Check if the stored elements equal those of **other**, in order.

        Note:
            This consumes **other** if it is an `Iter`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Seq((1, 2, 3)).eq([1, 2, 3])
        True
        >>> po.Seq((1, 2, 3)).eq(po.Iter.from_(1, 2))
        False

        ```
        """
        return self._inner == tuple(other)
