"""
Defines :py:class:`Resolver`, which matches raw command-line tokens against
:py:class:`OptionDefinition <dashdash.options.OptionDefinition>` objects.
"""
from __future__ import annotations

import logging
import os
import sys
from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional

from dashdash.data_structures import KeyValue, Sequence
from dashdash.errors import ArgumentMissingError, ConstraintError, MissingError
from dashdash.options import ArgumentSpec, OptionDefinition, OptionState, ParseResult
from dashdash.report import ParseReport
from dashdash.result import Result

TESTING = os.environ.get("DASHDASH_TESTING", False)

SEPARATOR = "--"

logger = logging.getLogger(__name__)


def is_switch(arg: str) -> bool:
    """
    >>> is_switch("--verbose"), is_switch("-5"), is_switch("--"), is_switch("x")
    (True, True, False, False)
    """
    return arg.startswith("-") and arg != SEPARATOR


class Resolver:
    """
    Resolves tokens against a fixed collection of option definitions.

    The resolver keeps no state between runs: every call to
    :py:meth:`resolve_options` returns a fresh
    :py:class:`ParseReport <dashdash.report.ParseReport>`. A report itself is not
    synchronized and should be read by one thread at a time.

    >>> from dashdash import option, flag
    >>> count = option("-c", "--count", type=int, mandatory=True)
    >>> verbose = flag("-v", "--verbose")
    >>> report = Resolver(count, verbose).resolve_options(["in.txt", "-v", "--count", "5", "--", "-x"])
    >>> report.value(count), report.result(verbose)
    (5, <ParseResult.SUCCESS: 'success'>)
    >>> report.unmatched_arguments, report.regular_arguments
    (Sequence(get=['in.txt']), Sequence(get=['-x']))
    >>> report.to_dict()
    {'count': 5, 'verbose': True}
    >>> report = Resolver(count, verbose).resolve_options(["--count", "abc"])
    >>> report.result(count), report.has_error
    (<ParseResult.OPTION_MISSED: 'option missed'>, True)
    """

    def __init__(self, *definitions: OptionDefinition):
        self.definitions: Sequence[OptionDefinition] = Sequence(
            list(dict.fromkeys(definitions))
        )
        self._long: Dict[str, OptionDefinition] = {}
        self._short: Dict[str, OptionDefinition] = {}
        for definition in self.definitions:
            for table, names in (
                (self._long, definition.long_switches),
                (self._short, definition.short_switches),
            ):
                for name in names:
                    if name in table:
                        logger.debug(
                            "Switch %r of %s is shadowed by %s",
                            name,
                            definition.usage,
                            table[name].usage,
                        )
                    else:
                        table[name] = definition

    def __repr__(self) -> str:
        return f"Resolver({', '.join(repr(d.switches) for d in self.definitions)})"

    @property
    def usage(self) -> str:
        """
        >>> from dashdash import option, flag
        >>> Resolver(option("--count", type=int, mandatory=True), flag("-v")).usage
        '--count COUNT [-v]'
        """
        return " ".join(d.usage for d in self.definitions)

    @property
    def helps(self) -> Dict[str, str]:
        return {d.name: d.help for d in self.definitions if d.help}

    def find(self, arg: str) -> Optional[OptionDefinition]:
        """
        Looks up the definition for a switch token. ``--name`` is looked up among
        long switches and ``-n`` among short switches.
        """
        if arg.startswith("--"):
            return self._long.get(arg.replace("--", "", 1))
        return self._short.get(arg.replace("-", "", 1))

    def parse_args(self, *args: str) -> ParseReport:
        """
        Resolves ``args``. If none are given, defaults to ``sys.argv[1:]``.
        """
        _args = args if args or TESTING else sys.argv[1:]
        return self.resolve_options(_args)

    def resolve_options(self, tokens: Iterable[str]) -> ParseReport:
        """
        Matches ``tokens`` against the definitions.

        Parameters
        ----------
        tokens : Iterable[str]
            The raw argument vector, without the program name.

        Returns
        -------
        A :py:class:`ParseReport <dashdash.report.ParseReport>`. Failures are recorded
        in the report, never raised.
        """
        args: Deque[str] = deque(tokens)
        states = {d: OptionState() for d in self.definitions}
        unmatched: List[str] = []
        extras: List[KeyValue[Optional[str]]] = []

        while args:
            arg = args.popleft()
            if arg == SEPARATOR:
                break
            if not arg.startswith("-"):
                unmatched.append(arg)
                continue
            definition = self.find(arg)
            value = None
            if args and not is_switch(args[0]):
                value = args.popleft()
            if definition is None:
                logger.debug("Unrecognized switch %r with value %r", arg, value)
                extras.append(KeyValue(arg, value))
            else:
                self._process(definition, states[definition], arg, value)

        regular = list(args)
        self._check_missed(states)
        return ParseReport(
            definitions=self.definitions,
            states=states,
            unmatched_arguments=Sequence(unmatched),
            regular_arguments=Sequence(regular),
            extra_options=Sequence(extras),
        )

    def _process(
        self,
        definition: OptionDefinition,
        state: OptionState,
        arg: str,
        value: Optional[str],
    ) -> None:
        if definition.has_mandatory_argument and value is None:
            state.result = ParseResult.ARGUMENT_MISSED
            state.error = ArgumentMissingError(
                usage=f"Expected an argument after {arg}", switch=arg
            )
        elif definition.argument is not None and value is not None:
            result = self._convert(definition.argument, value)
            error = result.error
            if error is None:
                state.value = result.get
                state.result = ParseResult.SUCCESS
            elif isinstance(error, ConstraintError):
                state.value = error.value
                state.result = ParseResult.CONSTRAINT_FAILED
            else:
                state.result = ParseResult.PARSING_FAILED
            state.error = error
        else:
            state.result = ParseResult.SUCCESS
            state.error = None
        logger.debug("%s %r -> %s", arg, value, state.result.name)

    @staticmethod
    def _convert(argument: ArgumentSpec, value: str) -> Result[Any]:
        def check(x: Any) -> Result[Any]:
            constraint = argument.constraint
            if constraint is None or constraint.is_fulfilled(x):
                return Result(x)
            return Result(ConstraintError(usage=constraint.error_message(x), value=x))

        return argument.parser.try_parse(value) >= check

    @staticmethod
    def _check_missed(states: Dict[OptionDefinition, OptionState]) -> None:
        """
        Marks mandatory options that did not end the run with a value as
        ``OPTION_MISSED``, overwriting whatever result they had.

        Options without an argument never hold a value. Applying the value rule to
        them would report every mandatory flag as missed, so they are checked
        differently on purpose: they count as present once matched.
        """
        for definition, state in states.items():
            if not definition.mandatory:
                continue
            if definition.has_argument:
                present = state.value is not None
            else:
                present = state.result is not ParseResult.UNSET
            if not present:
                state.result = ParseResult.OPTION_MISSED
                state.error = MissingError(
                    usage="The following arguments are required: "
                    + definition.switches[0],
                    missing=definition.name,
                )
