import sys
from random import Random
from typing import List, NamedTuple

from hypothesis import given, register_random, settings
from hypothesis import strategies as st

from dashdash import AllowedSetConstraint, ParseResult, Resolver, flag, option, resolver
from dashdash.options import OptionDefinition

MAX_DEFINITIONS = 4
MAX_TOKENS = 8

st_name = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=6)
st_word = st.text(min_size=1).filter(lambda s: not s.startswith("-"))


class StOutput(NamedTuple):
    definitions: List[OptionDefinition]
    inputs: List[str]
    repr: str


@st.composite
def st_definition(draw) -> OptionDefinition:
    name = draw(st_name)
    mandatory = draw(st.booleans())
    kind = draw(st.sampled_from(["flag", "str", "int", "choice"]))
    if kind == "flag":
        return flag(f"--{name}", mandatory=mandatory)
    if kind == "str":
        return option(f"--{name}", mandatory=mandatory)
    if kind == "int":
        return option(f"--{name}", type=int, mandatory=mandatory)
    return option(
        f"--{name}",
        type=int,
        mandatory=mandatory,
        constraint=AllowedSetConstraint(*draw(st.lists(st.integers(0, 9)))),
    )


@st.composite
def st_random_input(draw) -> StOutput:
    definitions = draw(st.lists(st_definition(), max_size=MAX_DEFINITIONS))
    switches = [s for d in definitions for s in d.switches] or ["--"]
    token = st.sampled_from(switches) | st.text() | st.just("--")
    inputs = draw(st.lists(token, max_size=MAX_TOKENS))
    return StOutput(
        definitions=definitions,
        inputs=inputs,
        repr=f"Resolver({', '.join(d.usage for d in definitions)}).resolve_options({inputs!r})",
    )


@settings(deadline=2000)
@given(st_random_input())
def test_every_definition_gets_one_result(output):
    definitions, inputs, _ = output
    report = Resolver(*definitions).resolve_options(inputs)
    for definition in report.definitions:
        result = report.result(definition)
        assert isinstance(result, ParseResult)
        if definition.mandatory:
            assert result is not ParseResult.UNSET
    assert report.has_error == any(
        report.result(d).failed for d in report.definitions
    )
    assert len(report.unmatched_arguments) + len(report.regular_arguments) <= len(
        inputs
    )


@given(st_random_input())
def test_mandatory_missing(output):
    definitions, inputs, _ = output
    inputs = [i for i in inputs if not i.startswith("-")]
    report = Resolver(*definitions).resolve_options(inputs)
    for definition in report.definitions:
        if definition.mandatory:
            assert report.result(definition) is ParseResult.OPTION_MISSED
        else:
            assert report.result(definition) is ParseResult.UNSET
    assert report.unmatched_arguments == inputs


@given(st.lists(st_word, max_size=MAX_TOKENS), st.lists(st.text(), max_size=MAX_TOKENS))
def test_tokens_after_separator_are_regular(head, tail):
    report = Resolver(flag("--verbose"), option("-n", type=int)).resolve_options(
        [*head, "--", *tail]
    )
    assert report.unmatched_arguments == head
    assert report.regular_arguments == tail
    assert report.result("verbose") is ParseResult.UNSET
    assert report.result("n") is ParseResult.UNSET


@given(st.integers(0, 2**31 - 1))
def test_integer_round_trip(n):
    count = option("--count", type=int, mandatory=True)
    report = Resolver(count).resolve_options(["--count", str(n)])
    assert report.result(count) is ParseResult.SUCCESS
    assert report.value(count) == n


@given(st_name, st_word)
def test_unknown_switch_is_extra(name, value):
    report = Resolver(flag("--known")).resolve_options([f"--x{name}", value])
    [kv] = report.extra
    assert (kv.key, kv.value) == (f"--x{name}", value)
    assert not report.has_error


if __name__ == "__main__":
    resolver.TESTING = True

    register_random(Random(0))

    if sys.argv[1] == "happy":
        test_integer_round_trip()
        test_tokens_after_separator_are_regular()
    elif sys.argv[1] == "sad":
        test_every_definition_gets_one_result()
        test_mandatory_missing()
