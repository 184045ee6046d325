"""
Defines :py:class:`ParseReport`, the read-only outcome of
:py:meth:`Resolver.resolve_options <dashdash.resolver.Resolver.resolve_options>`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from dashdash.data_structures import KeyValue, Sequence
from dashdash.errors import ArgumentError
from dashdash.options import OptionDefinition, OptionState, ParseResult

Key = Union[OptionDefinition, str]


@dataclass
class ParseReport:
    """
    Parameters
    ----------
    definitions : Sequence[OptionDefinition]
        The resolved definitions, in declaration order.
    states : Dict[OptionDefinition, OptionState]
        The outcome for each definition.
    unmatched_arguments : Sequence[str]
        Tokens before ``--`` that are neither switches nor switch values.
    regular_arguments : Sequence[str]
        Tokens after ``--``.
    extra_options : Sequence[KeyValue[Optional[str]]]
        Unrecognized switches, keyed by the raw token, with the value that followed them (if any).
    """

    definitions: Sequence[OptionDefinition]
    states: Dict[OptionDefinition, OptionState]
    unmatched_arguments: Sequence[str]
    regular_arguments: Sequence[str]
    extra_options: Sequence[KeyValue[Optional[str]]]

    def __getitem__(self, key: Key) -> OptionState:
        return self.states[self._definition(key)]

    def _definition(self, key: Key) -> OptionDefinition:
        """
        Finds the definition for ``key``. A switch with dashes must match exactly.
        A bare name is tried as a long switch first, then as a short switch.
        """
        if isinstance(key, OptionDefinition):
            if key not in self.states:
                raise KeyError(key)
            return key
        candidates = [key] if key.startswith("-") else [f"--{key}", f"-{key}"]
        for switch in candidates:
            for definition in self.definitions:
                if switch in definition.switches:
                    return definition
        raise KeyError(key)

    def _select(self, predicate) -> Sequence[OptionDefinition]:
        return self.definitions.filter(lambda d: predicate(self.states[d].result))

    def value(self, key: Key, default: Any = None) -> Any:
        value = self[key].value
        return default if value is None else value

    def result(self, key: Key) -> ParseResult:
        return self[key].result

    @property
    def failed(self) -> Sequence[OptionDefinition]:
        return self._select(lambda r: r.failed)

    @property
    def missed(self) -> Sequence[OptionDefinition]:
        return self._select(lambda r: r.missed)

    @property
    def extra(self) -> Sequence[KeyValue[str]]:
        """
        Unrecognized switches that captured a value. The others stay in
        :py:attr:`extra_options` only.
        """
        return self.extra_options.filter(lambda kv: kv.value is not None)

    @property
    def has_error(self) -> bool:
        return len(self.failed) > 0

    @property
    def errors(self) -> Sequence[ArgumentError]:
        return Sequence(
            [
                self.states[d].error
                for d in self.failed
                if self.states[d].error is not None
            ]
        )

    def messages(self) -> List[str]:
        return [
            f"{d.switches[0]}: {self.states[d].error}"
            for d in self.failed
            if self.states[d].error is not None
        ]

    def to_dict(self) -> Dict[str, Any]:
        """
        Maps option names to values for the options that succeeded, followed by the
        extra options. Options without an argument map to ``True``.
        """
        kvs = []
        for definition in self.definitions:
            state = self.states[definition]
            if state.result is ParseResult.SUCCESS:
                value = state.value if definition.has_argument else True
                kvs.append(KeyValue(definition.name, value))
        return (Sequence(kvs) + self.extra).to_dict()
