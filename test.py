#! /usr/bin/env python
import doctest
import math
import unittest
from pathlib import Path

import dashdash
from dashdash import (
    AllowedSetConstraint,
    ArgumentMissingError,
    BooleanParser,
    ConstraintError,
    DoubleParser,
    IntegerParser,
    KeyValue,
    LongParser,
    MissingError,
    ParseResult,
    ParsingError,
    RangeConstraint,
    Resolver,
    Sequence,
    StringParser,
    TypedParser,
    constraints,
    data_structures,
    errors,
    flag,
    option,
    options,
    resolver,
    result,
    sat,
    types,
)


def load_tests(_, tests, __):

    resolver.TESTING = True
    for mod in [
        data_structures,
        errors,
        result,
        types,
        constraints,
        options,
        resolver,
    ]:
        tests.addTests(doctest.DocTestSuite(mod))
    return tests


class ResolverTest(unittest.TestCase):
    def setUp(self):
        self.count = option("--count", type=int, mandatory=True)
        self.verbose = flag("-v", "--verbose")
        self.resolver = Resolver(self.count, self.verbose)

    def test_typed_value(self):
        report = self.resolver.resolve_options(["--count", "5"])
        self.assertEqual(report.result(self.count), ParseResult.SUCCESS)
        self.assertEqual(report.value(self.count), 5)
        self.assertFalse(report.has_error)

    def test_parsing_failed(self):
        report = Resolver(option("--count", type=int)).resolve_options(
            ["--count", "abc"]
        )
        self.assertEqual(report.result("count"), ParseResult.PARSING_FAILED)
        self.assertIsNone(report.value("count"))
        self.assertIsInstance(report["count"].error, ParsingError)
        self.assertTrue(report.has_error)

    def test_mandatory_parsing_failed_is_missed(self):
        report = self.resolver.resolve_options(["--count", "abc"])
        self.assertEqual(report.result(self.count), ParseResult.OPTION_MISSED)
        self.assertIsNone(report.value(self.count))

    def test_argument_missed(self):
        report = Resolver(option("--count", type=int)).resolve_options(["--count"])
        self.assertEqual(report.result("--count"), ParseResult.ARGUMENT_MISSED)
        self.assertIsInstance(report["--count"].error, ArgumentMissingError)

    def test_mandatory_argument_missed_is_overwritten(self):
        report = self.resolver.resolve_options(["--count"])
        self.assertEqual(report.result(self.count), ParseResult.OPTION_MISSED)
        self.assertEqual(list(report.missed), [self.count])

    def test_option_missed(self):
        report = self.resolver.resolve_options(["-v"])
        self.assertEqual(report.result(self.count), ParseResult.OPTION_MISSED)
        self.assertIsInstance(report[self.count].error, MissingError)
        self.assertEqual(list(report.failed), [self.count])
        self.assertEqual(list(report.missed), [self.count])

    def test_unmentioned_optional_stays_unset(self):
        report = self.resolver.resolve_options(["--count", "1"])
        self.assertEqual(report.result(self.verbose), ParseResult.UNSET)

    def test_extra_option(self):
        report = self.resolver.resolve_options(["--count", "1", "--unknown", "x"])
        self.assertEqual(list(report.extra), [KeyValue("--unknown", "x")])
        self.assertFalse(report.has_error)

    def test_extra_option_without_value(self):
        report = self.resolver.resolve_options(["--count", "1", "--unknown"])
        self.assertEqual(list(report.extra), [])
        self.assertEqual(list(report.extra_options), [KeyValue("--unknown", None)])

    def test_short_switch_is_not_long(self):
        report = self.resolver.resolve_options(["--count", "1", "--v"])
        self.assertEqual(report.result(self.verbose), ParseResult.UNSET)
        self.assertEqual(report.extra_options.keys(), ["--v"])

    def test_unmatched_then_flag(self):
        report = Resolver(flag("--flag")).resolve_options(["plain", "--flag"])
        self.assertEqual(report.unmatched_arguments, ["plain"])
        self.assertEqual(report.result("flag"), ParseResult.SUCCESS)

    def test_flag_consumes_value(self):
        report = Resolver(flag("--flag")).resolve_options(["--flag", "plain"])
        self.assertEqual(report.result("flag"), ParseResult.SUCCESS)
        self.assertEqual(report.unmatched_arguments, [])

    def test_separator(self):
        report = self.resolver.resolve_options(
            ["--count", "2", "--", "--verbose", "-x", "--"]
        )
        self.assertEqual(report.regular_arguments, ["--verbose", "-x", "--"])
        self.assertEqual(report.result(self.verbose), ParseResult.UNSET)
        self.assertEqual(list(report.extra_options), [])

    def test_separator_after_switch_is_its_value(self):
        report = Resolver(option("--name")).resolve_options(["--name", "--", "a"])
        self.assertEqual(report.value("name"), "--")
        self.assertEqual(report.unmatched_arguments, ["a"])
        self.assertEqual(report.regular_arguments, [])

    def test_negative_number_is_not_a_value(self):
        report = Resolver(option("-n", type=int), flag("-5")).resolve_options(
            ["-n", "-5"]
        )
        self.assertEqual(report.result("n"), ParseResult.ARGUMENT_MISSED)
        self.assertEqual(report.result("5"), ParseResult.SUCCESS)

    def test_last_occurrence_wins(self):
        n = option("-n", type=int)
        report = Resolver(n).resolve_options(["-n", "1", "-n", "2"])
        self.assertEqual(report.value(n), 2)
        report = Resolver(n).resolve_options(["-n", "1", "-n", "x"])
        self.assertEqual(report.result(n), ParseResult.PARSING_FAILED)
        self.assertEqual(report.value(n), 1)
        report = Resolver(n).resolve_options(["-n", "x", "-n", "1"])
        self.assertEqual(report.result(n), ParseResult.SUCCESS)
        self.assertIsNone(report[n].error)

    def test_optional_argument(self):
        level = option("--level", type=int, optional_argument=True)
        report = Resolver(level).resolve_options(["--level"])
        self.assertEqual(report.result(level), ParseResult.SUCCESS)
        self.assertIsNone(report.value(level))
        self.assertEqual(report.value(level, default=0), 0)

    def test_mandatory_optional_argument_without_value_is_missed(self):
        level = option("--level", optional_argument=True, mandatory=True)
        report = Resolver(level).resolve_options(["--level"])
        self.assertEqual(report.result(level), ParseResult.OPTION_MISSED)

    def test_mandatory_flag(self):
        strict = flag("--strict", mandatory=True)
        self.assertEqual(
            Resolver(strict).resolve_options(["--strict"]).result(strict),
            ParseResult.SUCCESS,
        )
        self.assertEqual(
            Resolver(strict).resolve_options([]).result(strict),
            ParseResult.OPTION_MISSED,
        )

    def test_constraint_failed(self):
        n = option("--n", type=int, constraint=AllowedSetConstraint(1, 3))
        report = Resolver(n).resolve_options(["--n", "2"])
        self.assertEqual(report.result(n), ParseResult.CONSTRAINT_FAILED)
        self.assertEqual(report.value(n), 2)
        error = report[n].error
        self.assertIsInstance(error, ConstraintError)
        self.assertIn("2", error.usage)
        self.assertIn("{1, 3}", error.usage)
        self.assertEqual(
            report.messages(),
            ['--n: "2" is not allowed. Allowed arguments are:{1, 3}'],
        )

    def test_constraint_fulfilled(self):
        n = option("--n", type=int, constraint=AllowedSetConstraint(1, 3))
        report = Resolver(n).resolve_options(["--n", "3"])
        self.assertEqual(report.result(n), ParseResult.SUCCESS)

    def test_first_definition_wins(self):
        first = option("--name")
        second = option("--name", "-m")
        report = Resolver(first, second).resolve_options(["--name", "a", "-m", "b"])
        self.assertEqual(report.value(first), "a")
        self.assertEqual(report.value(second), "b")

    def test_double_dash_strip_is_literal(self):
        report = Resolver(option("--x")).resolve_options(["---x", "1"])
        self.assertEqual(report.result("x"), ParseResult.UNSET)
        self.assertEqual(list(report.extra), [KeyValue("---x", "1")])

    def test_runs_are_independent(self):
        first = self.resolver.resolve_options(["--count", "1", "stray"])
        second = self.resolver.resolve_options(["--count", "2"])
        self.assertEqual(first.value(self.count), 1)
        self.assertEqual(second.value(self.count), 2)
        self.assertEqual(second.unmatched_arguments, [])

    def test_to_dict(self):
        report = self.resolver.resolve_options(["--count", "3", "-v", "--other", "x"])
        self.assertEqual(
            report.to_dict(), {"count": 3, "verbose": True, "--other": "x"}
        )

    def test_parse_args(self):
        report = self.resolver.parse_args("--count", "4")
        self.assertEqual(report.value(self.count), 4)

    def test_unknown_key(self):
        report = self.resolver.resolve_options([])
        with self.assertRaises(KeyError):
            report["nope"]
        with self.assertRaises(KeyError):
            report[option("--nope")]

    def test_bare_name_prefers_long_switch(self):
        long = option("-a", "--x")
        short = flag("-x")
        report = Resolver(short, long).resolve_options(["-x", "--x", "1"])
        self.assertIs(report._definition("x"), long)
        self.assertIs(report._definition("-x"), short)
        self.assertIs(report._definition("a"), long)
        self.assertEqual(report.value("x"), "1")
        self.assertEqual(report.result("-x"), ParseResult.SUCCESS)

    def test_parser_bugs_propagate(self):
        class Broken(TypedParser[int]):
            def parse(self, argument: str) -> int:
                raise RuntimeError("bug")

        with self.assertRaises(RuntimeError):
            Resolver(option("--n", type=Broken())).resolve_options(["--n", "1"])

    def test_usage(self):
        self.assertEqual(self.resolver.usage, "--count COUNT [--verbose]")
        self.assertEqual(
            Resolver(flag("-q", help="be quiet")).helps, {"q": "be quiet"}
        )


class ParserTest(unittest.TestCase):
    def test_boolean(self):
        self.assertTrue(BooleanParser().parse("True"))
        self.assertFalse(BooleanParser().parse("1"))

    def test_integer(self):
        self.assertEqual(IntegerParser().parse("+7"), 7)
        self.assertEqual(IntegerParser().parse("-2147483648"), -(2**31))
        for bad in ["", "-", "1.5", "0x10", "abc", "2147483648"]:
            with self.assertRaises(ParsingError):
                IntegerParser().parse(bad)

    def test_long(self):
        self.assertEqual(LongParser().parse("9223372036854775807"), 2**63 - 1)
        with self.assertRaises(ParsingError):
            LongParser().parse("9223372036854775808")

    def test_double(self):
        self.assertEqual(DoubleParser().parse("2.5"), 2.5)
        self.assertEqual(DoubleParser().parse("1e3"), 1000.0)
        self.assertEqual(DoubleParser().parse(".5"), 0.5)
        self.assertEqual(DoubleParser().parse("3."), 3.0)
        self.assertEqual(DoubleParser().parse("2.5f"), 2.5)
        self.assertEqual(DoubleParser().parse("+Infinity"), math.inf)
        self.assertEqual(DoubleParser().parse("-Infinity"), -math.inf)
        self.assertTrue(math.isnan(DoubleParser().parse("NaN")))
        for bad in [
            "two",
            "",
            ".",
            "1_000",
            "inf",
            "-inf",
            "infinity",
            "nan",
            "NAN",
            "INFINITY",
            "1e",
            "0x1p3",
        ]:
            with self.assertRaises(ParsingError):
                DoubleParser().parse(bad)

    def test_double_option(self):
        d = option("--d", type=float)
        for raw in ["1_000", "inf", "nan", "infinity"]:
            report = Resolver(d).resolve_options(["--d", raw])
            self.assertEqual(report.result(d), ParseResult.PARSING_FAILED)
            self.assertIsNone(report.value(d))
        report = Resolver(d).resolve_options(["--d", "Infinity"])
        self.assertEqual(report.value(d), math.inf)

    def test_string(self):
        self.assertEqual(StringParser().parse("-x"), "-x")

    def test_callable(self):
        report = Resolver(option("--path", type=Path)).resolve_options(
            ["--path", "a/b"]
        )
        self.assertEqual(report.value("path"), Path("a/b"))

    def test_try_parse(self):
        self.assertEqual(DoubleParser().try_parse("x").error.type_name, "double")
        self.assertIsNone(DoubleParser().try_parse("1").error)


class ConstraintTest(unittest.TestCase):
    def setUp(self):
        self.constraint = AllowedSetConstraint()
        self.constraint.add(1).add(3)

    def test_is_fulfilled(self):
        self.assertTrue(self.constraint.is_fulfilled(3))
        self.assertFalse(self.constraint.is_fulfilled(2))

    def test_error_message(self):
        self.assertEqual(
            self.constraint.error_message(2),
            '"2" is not allowed. Allowed arguments are:' + str(self.constraint),
        )

    def test_add_is_idempotent(self):
        self.constraint.add(1)
        self.assertEqual(len(self.constraint), 2)

    def test_strings(self):
        constraint = AllowedSetConstraint("debug", "info")
        self.assertIn("info", constraint)
        self.assertEqual(str(constraint), "{debug, info}")

    def test_range(self):
        report = Resolver(
            option("-p", type=int, constraint=RangeConstraint(1, 65535))
        ).resolve_options(["-p", "0"])
        self.assertEqual(report.result("p"), ParseResult.CONSTRAINT_FAILED)
        self.assertEqual(
            RangeConstraint(maximum=1.0).error_message(2.0),
            '"2.0" is not allowed. Argument must be at most 1.0',
        )

    def test_sat(self):
        even = sat(lambda x: x % 2 == 0, "must be even")
        report = Resolver(option("-n", type=int, constraint=even)).resolve_options(
            ["-n", "3"]
        )
        self.assertEqual(report.messages(), ["-n: must be even"])


class SequenceTest(unittest.TestCase):
    def test_equality(self):
        self.assertEqual(Sequence([1]), Sequence([1]))
        self.assertEqual(Sequence([1]), [1])
        self.assertNotEqual(Sequence([1]), [2])

    def test_package_exports(self):
        for name in dashdash.__all__:
            self.assertTrue(hasattr(dashdash, name), name)


class OptionTest(unittest.TestCase):
    def test_identity_is_switch_set(self):
        self.assertEqual(option("-a", "--all"), flag("--all", "-a"))
        self.assertEqual(len({option("-a"), flag("a")}), 1)

    def test_requires_switch(self):
        with self.assertRaises(ValueError):
            flag()
        with self.assertRaises(ValueError):
            flag("--")

    def test_duplicate_definitions_collapse(self):
        self.assertEqual(len(Resolver(flag("-a"), flag("-a")).definitions), 1)


if __name__ == "__main__":
    unittest.main()
