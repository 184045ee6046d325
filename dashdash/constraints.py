"""
Defines :py:class:`Constraint` and the built-in constraints that validate a typed value.
"""
from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

A = TypeVar("A")


class Constraint(abc.ABC, Generic[A]):
    @abc.abstractmethod
    def is_fulfilled(self, value: A) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def error_message(self, value: A) -> str:
        raise NotImplementedError


class AllowedSetConstraint(Constraint[A]):
    """
    Accepts only values that belong to an allowed set.
    Membership uses equality, so unhashable values are fine.
    Values keep the order in which they were added.

    >>> constraint = AllowedSetConstraint(1, 3)
    >>> constraint.is_fulfilled(3), constraint.is_fulfilled(2)
    (True, False)
    >>> constraint.error_message(2)
    '"2" is not allowed. Allowed arguments are:{1, 3}'
    >>> AllowedSetConstraint("debug", "info")
    AllowedSetConstraint('debug', 'info')
    """

    def __init__(self, *values: A):
        self.allowed: List[A] = []
        for value in values:
            self.add(value)

    def add(self, value: A) -> "AllowedSetConstraint[A]":
        if value not in self.allowed:
            self.allowed.append(value)
        return self

    def is_fulfilled(self, value: A) -> bool:
        return value in self.allowed

    def error_message(self, value: A) -> str:
        return f'"{value}" is not allowed. Allowed arguments are:{self}'

    def __contains__(self, value: object) -> bool:
        return value in self.allowed

    def __len__(self) -> int:
        return len(self.allowed)

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self.allowed) + "}"

    def __repr__(self) -> str:
        return f"AllowedSetConstraint({', '.join(repr(v) for v in self.allowed)})"


@dataclass
class RangeConstraint(Constraint[A]):
    """
    Inclusive bounds. Either bound may be omitted.

    >>> RangeConstraint(minimum=1, maximum=10).is_fulfilled(11)
    False
    >>> RangeConstraint(minimum=0).error_message(-1)
    '"-1" is not allowed. Argument must be at least 0'
    >>> RangeConstraint(1, 10).error_message(0)
    '"0" is not allowed. Argument must be between 1 and 10'
    """

    minimum: Optional[A] = None
    maximum: Optional[A] = None

    def is_fulfilled(self, value: A) -> bool:
        if self.minimum is not None and value < self.minimum:  # type: ignore[operator]
            return False
        if self.maximum is not None and value > self.maximum:  # type: ignore[operator]
            return False
        return True

    def error_message(self, value: A) -> str:
        if self.minimum is None:
            bound = f"at most {self.maximum}"
        elif self.maximum is None:
            bound = f"at least {self.minimum}"
        else:
            bound = f"between {self.minimum} and {self.maximum}"
        return f'"{value}" is not allowed. Argument must be {bound}'


@dataclass
class _Predicate(Constraint[A]):
    predicate: Callable[[A], bool]
    on_fail: Callable[[A], str]

    def is_fulfilled(self, value: A) -> bool:
        return self.predicate(value)

    def error_message(self, value: A) -> str:
        return self.on_fail(value)


def sat(
    predicate: Callable[[A], bool], on_fail: "str | Callable[[A], str]"
) -> Constraint[A]:
    """
    Builds a constraint from a predicate.

    Parameters
    ----------
    predicate : Callable[[A], bool]
        The constraint is fulfilled when this returns true.
    on_fail : str | Callable[[A], str]
        The error message, or a function producing it from the rejected value.

    >>> even = sat(lambda x: x % 2 == 0, lambda x: f"{x} is odd")
    >>> even.is_fulfilled(4)
    True
    >>> even.error_message(3)
    '3 is odd'
    """
    if isinstance(on_fail, str):
        message = on_fail
        return _Predicate(predicate, lambda _: message)
    return _Predicate(predicate, on_fail)
