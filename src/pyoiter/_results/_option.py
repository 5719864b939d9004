from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The outcome of a single pull: `Some(value)` while a value was produced, `NONE` once the source is exhausted."""

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import pyoiter as po
            >>> it = po.Iter.once("x")
            >>> it.next().is_some()
            True
            >>> it.next().is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is the `NONE` value.

        Example:
            ```python
            >>> import pyoiter as po
            >>> po.Iter.new().next().is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import pyoiter as po
            >>> po.Some("car").unwrap()
            'car'
            >>> po.NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyoiter._results._option.OptionUnwrapError: called `unwrap` on a `NONE`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with the provided message.

        Args:
            msg: The message to include in the exception if the option is `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> import pyoiter as po
            >>> po.Iter.from_count(5).next().unwrap_or(0)
            5
            >>> po.Iter.new().next().unwrap_or(0)
            0

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value, leaving `NONE` untouched.

        Example:
            ```python
            >>> import pyoiter as po
            >>> po.Some("Hello, World!").map(len)
            Some(13)
            >>> po.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True, repr=False)
class Some[T](Option[T]):
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, repr=False)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `NONE`")


NONE: Option[Any] = NoneOption()
