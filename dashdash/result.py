"""
Defines the :py:class:`Result` dataclass, representing the success or failure of converting
a raw token into a typed value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Type, TypeVar

from pytypeclass import Monad, MonadPlus

from dashdash.errors import ArgumentError

A_co = TypeVar("A_co", covariant=True)
A = TypeVar("A")
B = TypeVar("B")


@dataclass
class Result(MonadPlus[A_co]):
    """
    Holds either a value or the :py:class:`ArgumentError <dashdash.errors.ArgumentError>`
    explaining why there is none.

    >>> Result(1) >= (lambda x: Result(x + 1))
    Result(get=2)
    >>> Result(ArgumentError("no")) >= (lambda x: Result(x + 1))
    Result(get=ArgumentError(usage='no'))
    >>> Result(ArgumentError("no")) | Result(3)
    Result(get=3)
    """

    get: "A_co | ArgumentError"

    def __add__(self, other: "Result[B]") -> "Result[A_co | B]":
        return self | other

    def __or__(self, other: "Result[B]") -> "Result[A_co | B]":  # type: ignore[override]
        if isinstance(self.get, ArgumentError):
            return other
        return self

    def __ge__(self, f: Callable[[A_co], Monad[B]]) -> "Result[B]":
        return self.bind(f)

    def bind(self, f: Callable[[A_co], Monad[B]]) -> "Result[B]":
        x = self.get
        if isinstance(x, ArgumentError):
            return Result(x)
        y = f(x)
        assert isinstance(y, Result), y
        return y

    @property
    def error(self) -> Optional[ArgumentError]:
        return self.get if isinstance(self.get, ArgumentError) else None

    @classmethod
    def return_(cls: Type["Result[A]"], a: A) -> "Result[A]":  # type: ignore[misc]
        return Result(a)

    @classmethod
    def zero(cls, error: Optional[ArgumentError] = None) -> "Result[A_co]":
        return Result(ArgumentError("zero") if error is None else error)
