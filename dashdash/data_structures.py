"""
Defines :py:class:`Sequence <dashdash.data_structures.Sequence>`,
a strongly-typed immutable list that implements
`MonadPlus <https://github.com/ethanabrooks/pytypeclass/blob/fe6813e69c1def160c77dea1752f4235820793df/pytypeclass/monoid.py#L24>`_,
and :py:class:`KeyValue <dashdash.data_structures.KeyValue>`.
"""
from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import (
    Callable,
    Dict,
    Generator,
    Generic,
    Iterator,
    Type,
    TypeVar,
    overload,
)

from pytypeclass import Monad, MonadPlus

A_co = TypeVar("A_co", covariant=True)
A = TypeVar("A")


@dataclass(frozen=True)
class KeyValue(Generic[A_co]):
    """
    Simple dataclass for storing key-value pairs.
    """

    key: str
    value: A_co


@dataclass
class Sequence(MonadPlus[A_co], typing.Sequence[A_co]):
    """
    This class combines the functionality of `MonadPlus <https://github.com/ethanabrooks/pytypeclass/blob/fe6813e69c1def160c77dea1752f4235820793df/pytypeclass/monoid.py#L24>`_
    and :external:py:class:`typing.Sequence`

    >>> from dashdash.data_structures import Sequence
    >>> s = Sequence(["a", "b"])
    >>> len(s)
    2
    >>> s[0]
    'a'
    >>> s[-1]
    'b'
    >>> s + s  # sequences emulate list behavior when added
    Sequence(get=['a', 'b', 'a', 'b'])
    >>> list(s) == ["a", "b"]
    True
    >>> s == ["a", "b"]
    True
    """

    get: typing.Sequence[A_co]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence):
            return list(self.get) == list(other.get)
        if isinstance(other, (list, tuple)):
            return list(self.get) == list(other)
        return NotImplemented

    @overload
    def __getitem__(self, i: int) -> "A_co":
        ...

    @overload
    def __getitem__(self, i: slice) -> "Sequence[A_co]":
        ...

    def __getitem__(self, i: "int | slice") -> "A_co | Sequence[A_co]":
        if isinstance(i, int):
            return self.get[i]
        return Sequence(self.get[i])

    def __iter__(self) -> Generator[A_co, None, None]:
        yield from self.get

    def __len__(self) -> int:
        return len(self.get)

    def __or__(self, other: "typing.Sequence[A]") -> "Sequence[A_co | A]":  # type: ignore[override]
        return Sequence([*self, *other])

    def __add__(self, other: "typing.Sequence[A]") -> "Sequence[A_co | A]":
        return self | other

    def __ge__(self, f: Callable[[A_co], Monad[A]]) -> "Sequence[A]":  # type: ignore[override]
        return self.bind(f)

    def bind(self, f: Callable[[A_co], Monad[A]]) -> "Sequence[A]":
        """
        >>> Sequence([1, 2]) >= (lambda x: Sequence([x, -x]))
        Sequence(get=[1, -1, 2, -2])
        """

        def g() -> Iterator[A]:
            for a in self:
                y = f(a)
                assert isinstance(y, Sequence), y
                yield from y

        return Sequence(list(g()))

    def filter(self, predicate: Callable[[A_co], bool]) -> "Sequence[A_co]":
        """
        >>> Sequence([1, 2, 3]).filter(lambda x: x != 2)
        Sequence(get=[1, 3])
        """
        return self >= (lambda a: Sequence([a]) if predicate(a) else Sequence.zero())

    def keys(self: "Sequence[KeyValue[A]]") -> "Sequence[str]":
        return Sequence([kv.key for kv in self])

    @staticmethod
    def return_(a: A) -> "Sequence[A]":  # type: ignore[override]
        """
        >>> Sequence.return_(1)
        Sequence(get=[1])
        """
        return Sequence([a])

    def to_dict(self: "Sequence[KeyValue[A]]") -> "Dict[str, A]":
        """
        Later keys overwrite earlier ones.

        >>> from dashdash import Sequence, KeyValue
        >>> Sequence([KeyValue("a", 1), KeyValue("b", 2), KeyValue("a", 3)]).to_dict()
        {'a': 3, 'b': 2}
        """
        return {kv.key: kv.value for kv in self}

    @classmethod
    def zero(cls: Type["Sequence[A_co]"]) -> "Sequence[A_co]":
        return Sequence([])
