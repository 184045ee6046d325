"""
Defines errors produced while resolving options.

Every error is a dataclass carrying a human-readable ``usage`` message.
:py:class:`ParsingError` is the only one that is ever raised: typed parsers raise it
when a raw token cannot be converted. The others are recorded on
:py:class:`OptionState <dashdash.options.OptionState>` as diagnostics.
"""
from dataclasses import dataclass
from typing import Any


@dataclass
class ArgumentError(Exception):
    usage: str

    def __str__(self) -> str:
        return self.usage


@dataclass
class ParsingError(ArgumentError):
    """
    >>> ParsingError.make("abc", "integer")
    ParsingError(usage="Could not parse 'abc' as integer", argument='abc', type_name='integer')
    """

    argument: str
    type_name: str

    @classmethod
    def make(cls, argument: str, type_name: str) -> "ParsingError":
        return cls(
            usage=f"Could not parse {argument!r} as {type_name}",
            argument=argument,
            type_name=type_name,
        )


@dataclass
class ConstraintError(ArgumentError):
    value: Any


@dataclass
class MissingError(ArgumentError):
    missing: str


@dataclass
class ArgumentMissingError(ArgumentError):
    switch: str
