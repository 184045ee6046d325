"""
Defines :py:class:`TypedParser` and the built-in parsers that convert a raw token into a typed value.
"""
from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from dashdash.errors import ParsingError
from dashdash.result import Result

A_co = TypeVar("A_co", covariant=True)

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1

_DOUBLE = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?)"
)


class TypedParser(abc.ABC, Generic[A_co]):
    """
    Converts a raw string token into a value of type ``A_co``.

    Subclasses implement :py:meth:`parse` and raise
    :py:class:`ParsingError <dashdash.errors.ParsingError>` when the token cannot be converted.
    Any other exception is treated as a bug in the parser and propagates.
    """

    type_name: str = "value"

    @abc.abstractmethod
    def parse(self, argument: str) -> A_co:
        raise NotImplementedError

    def fail(self, argument: str) -> ParsingError:
        return ParsingError.make(argument, self.type_name)

    def try_parse(self, argument: str) -> Result[A_co]:
        """
        Like :py:meth:`parse` but returns a :py:class:`Result <dashdash.result.Result>`.

        >>> IntegerParser().try_parse("5")
        Result(get=5)
        >>> IntegerParser().try_parse("five").error
        ParsingError(usage="Could not parse 'five' as integer", argument='five', type_name='integer')
        """
        try:
            return Result(self.parse(argument))
        except ParsingError as e:
            return Result(e)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class BooleanParser(TypedParser[bool]):
    """
    ``"true"`` in any case is ``True``. Everything else is ``False``.

    >>> BooleanParser().parse("TRUE"), BooleanParser().parse("yes")
    (True, False)
    """

    type_name = "boolean"

    def parse(self, argument: str) -> bool:
        return argument.lower() == "true"


def _parse_int(argument: str, type_name: str, lo: int, hi: int) -> int:
    text = argument[1:] if argument[:1] in "+-" else argument
    if not text or not (text.isascii() and text.isdigit()):
        raise ParsingError.make(argument, type_name)
    value = int(argument)
    if not lo <= value <= hi:
        raise ParsingError.make(argument, type_name)
    return value


class IntegerParser(TypedParser[int]):
    """
    Signed 32-bit integers.

    >>> IntegerParser().parse("-42")
    -42
    >>> IntegerParser().parse("2147483648")
    Traceback (most recent call last):
    ...
    dashdash.errors.ParsingError: Could not parse '2147483648' as integer
    """

    type_name = "integer"

    def parse(self, argument: str) -> int:
        return _parse_int(argument, self.type_name, INT_MIN, INT_MAX)


class LongParser(TypedParser[int]):
    """
    Signed 64-bit integers.

    >>> LongParser().parse("2147483648")
    2147483648
    """

    type_name = "long"

    def parse(self, argument: str) -> int:
        return _parse_int(argument, self.type_name, LONG_MIN, LONG_MAX)


class DoubleParser(TypedParser[float]):
    """
    Decimal floating point numbers with an optional exponent and an optional
    ``f``/``d`` suffix. Non-finite values are spelled ``NaN`` and ``Infinity``.

    >>> DoubleParser().parse(" 1.5e3d "), DoubleParser().parse("-Infinity")
    (1500.0, -inf)
    >>> DoubleParser().try_parse("inf").error.usage
    "Could not parse 'inf' as double"
    """

    type_name = "double"

    def parse(self, argument: str) -> float:
        text = argument.strip()
        if not _DOUBLE.fullmatch(text):
            raise self.fail(argument)
        return float(text.rstrip("fFdD"))


class StringParser(TypedParser[str]):
    type_name = "string"

    def parse(self, argument: str) -> str:
        return argument


@dataclass(repr=False)
class CallableParser(TypedParser[Any]):
    """
    Wraps any ``str -> value`` callable, such as :external:py:class:`pathlib.Path`.
    ``ValueError`` and ``TypeError`` raised by the callable become parsing failures.

    >>> CallableParser(lambda s: int(s, 16), "hex").parse("ff")
    255
    >>> CallableParser(lambda s: int(s, 16), "hex").try_parse("zz").error.usage
    "Could not parse 'zz' as hex"
    """

    f: Callable[[str], Any]
    type_name: str = "value"

    def parse(self, argument: str) -> Any:
        try:
            return self.f(argument)
        except (ValueError, TypeError):
            raise self.fail(argument)

    def __repr__(self) -> str:
        return f"CallableParser({self.type_name!r})"


_BUILTINS = {
    bool: BooleanParser,
    int: IntegerParser,
    float: DoubleParser,
    str: StringParser,
}


def as_parser(type: "TypedParser[Any] | Callable[[str], Any]") -> TypedParser[Any]:
    """
    Turns the ``type`` argument of :py:func:`option <dashdash.options.option>` into a parser.

    >>> as_parser(int)
    IntegerParser()
    >>> as_parser(StringParser())
    StringParser()
    >>> from pathlib import Path
    >>> as_parser(Path)
    CallableParser('Path')
    """
    if isinstance(type, TypedParser):
        return type
    for builtin, parser in _BUILTINS.items():
        if type is builtin:
            return parser()
    return CallableParser(type, getattr(type, "__name__", "value"))
