"""
Defines :py:class:`OptionDefinition` together with the functions that build it
(:py:func:`option` and :py:func:`flag`) and the per-run :py:class:`OptionState`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Tuple

from dashdash.constraints import Constraint
from dashdash.errors import ArgumentError
from dashdash.types import TypedParser, as_parser


class ParseResult(Enum):
    UNSET = "unset"
    SUCCESS = "success"
    ARGUMENT_MISSED = "argument missed"
    PARSING_FAILED = "parsing failed"
    CONSTRAINT_FAILED = "constraint failed"
    OPTION_MISSED = "option missed"
    EXTRA = "extra"

    @property
    def failed(self) -> bool:
        return self in _FAILURES

    @property
    def missed(self) -> bool:
        return self is ParseResult.OPTION_MISSED

    @property
    def extra(self) -> bool:
        return self is ParseResult.EXTRA


_FAILURES = frozenset(
    [
        ParseResult.ARGUMENT_MISSED,
        ParseResult.PARSING_FAILED,
        ParseResult.CONSTRAINT_FAILED,
        ParseResult.OPTION_MISSED,
    ]
)


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Describes the argument that an option takes.

    Parameters
    ----------
    parser : TypedParser
        Converts the raw token into a typed value.
    mandatory : bool
        If ``True``, the option fails with ``ARGUMENT_MISSED`` when no value follows it.
    constraint : Optional[Constraint]
        Checked against the typed value after a successful parse.
    metavar : Optional[str]
        Name of the argument in usage strings.
    """

    parser: TypedParser[Any]
    mandatory: bool = True
    constraint: Optional[Constraint[Any]] = None
    metavar: Optional[str] = None


@dataclass(frozen=True, eq=False)
class OptionDefinition:
    """
    Immutable description of one recognized option.
    Switches are stored without their leading dashes.
    Two definitions are equal when they have the same switches.
    """

    short_switches: Tuple[str, ...] = ()
    long_switches: Tuple[str, ...] = ()
    mandatory: bool = False
    argument: Optional[ArgumentSpec] = None
    help: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionDefinition):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> Tuple[frozenset, frozenset]:
        return frozenset(self.short_switches), frozenset(self.long_switches)

    @property
    def has_argument(self) -> bool:
        return self.argument is not None

    @property
    def has_mandatory_argument(self) -> bool:
        return self.argument is not None and self.argument.mandatory

    @property
    def name(self) -> str:
        """
        >>> option("-c", "--count").name
        'count'
        """
        return (self.long_switches or self.short_switches)[0]

    @property
    def switches(self) -> Tuple[str, ...]:
        """
        >>> option("-c", "--count").switches
        ('--count', '-c')
        """
        return tuple(
            [f"--{s}" for s in self.long_switches]
            + [f"-{s}" for s in self.short_switches]
        )

    @property
    def usage(self) -> str:
        """
        >>> option("--count", type=int, mandatory=True).usage
        '--count COUNT'
        >>> option("--level", optional_argument=True).usage
        '[--level [LEVEL]]'
        >>> flag("-v", "--verbose").usage
        '[--verbose]'
        """
        usage = self.switches[0]
        if self.argument is not None:
            metavar = self.argument.metavar or self.name.upper().replace("-", "_")
            usage += " " + (metavar if self.argument.mandatory else f"[{metavar}]")
        return usage if self.mandatory else f"[{usage}]"


@dataclass
class OptionState:
    """
    The outcome of one resolution run for one option.
    ``error`` holds the diagnostic for the last recorded failure.
    """

    value: Any = None
    result: ParseResult = ParseResult.UNSET
    error: Optional[ArgumentError] = None


def split_switches(switches: Iterable[str]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Sorts switches into short and long ones and strips their dashes.
    Names without dashes are short if they are a single character.

    >>> split_switches(["-v", "--verbose", "q", "quiet"])
    (('v', 'q'), ('verbose', 'quiet'))
    """
    short, long = [], []
    for switch in switches:
        if switch.startswith("--"):
            long.append(switch[2:])
        elif switch.startswith("-"):
            short.append(switch[1:])
        elif len(switch) == 1:
            short.append(switch)
        else:
            long.append(switch)
    if not any(short + long):
        raise ValueError(
            f"An option needs at least one non-empty switch. Got {switches!r}"
        )
    return tuple(short), tuple(long)


def option(
    *switches: str,
    type: "TypedParser[Any] | Callable[[str], Any]" = str,
    constraint: Optional[Constraint[Any]] = None,
    mandatory: bool = False,
    optional_argument: bool = False,
    help: Optional[str] = None,
    metavar: Optional[str] = None,
) -> OptionDefinition:
    """
    Defines an option that takes an argument.

    Parameters
    ----------
    switches : str
        Spellings of the option, e.g. ``"-c"`` and ``"--count"``.
    type : TypedParser | Callable[[str], Any]
        A :py:class:`TypedParser <dashdash.types.TypedParser>` or a callable such as ``int``.
        See :py:func:`as_parser <dashdash.types.as_parser>`.
    constraint : Optional[Constraint]
        Validates the typed value.
    mandatory : bool
        Whether the option itself must appear.
    optional_argument : bool
        Whether the option may appear without a value.
    help : Optional[str]
        Help message for the option.
    metavar : Optional[str]
        Name of the argument in usage strings.

    >>> count = option("-c", "--count", type=int, mandatory=True)
    >>> count.short_switches, count.long_switches, count.has_mandatory_argument
    (('c',), ('count',), True)
    """
    short, long = split_switches(switches)
    argument = ArgumentSpec(
        parser=as_parser(type),
        mandatory=not optional_argument,
        constraint=constraint,
        metavar=metavar,
    )
    return OptionDefinition(
        short_switches=short,
        long_switches=long,
        mandatory=mandatory,
        argument=argument,
        help=help,
    )


def flag(
    *switches: str, mandatory: bool = False, help: Optional[str] = None
) -> OptionDefinition:
    """
    Defines an option that takes no argument.

    >>> flag("--verbose").has_argument
    False
    """
    short, long = split_switches(switches)
    return OptionDefinition(
        short_switches=short, long_switches=long, mandatory=mandatory, help=help
    )
