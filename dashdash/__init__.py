from dashdash.constraints import AllowedSetConstraint, Constraint, RangeConstraint, sat
from dashdash.data_structures import KeyValue, Sequence
from dashdash.errors import (
    ArgumentError,
    ArgumentMissingError,
    ConstraintError,
    MissingError,
    ParsingError,
)
from dashdash.options import (
    ArgumentSpec,
    OptionDefinition,
    OptionState,
    ParseResult,
    flag,
    option,
)
from dashdash.report import ParseReport
from dashdash.resolver import Resolver
from dashdash.result import Result
from dashdash.types import (
    BooleanParser,
    CallableParser,
    DoubleParser,
    IntegerParser,
    LongParser,
    StringParser,
    TypedParser,
)

__all__ = [
    "Resolver",
    "ParseReport",
    "OptionDefinition",
    "ArgumentSpec",
    "OptionState",
    "ParseResult",
    "option",
    "flag",
    "TypedParser",
    "BooleanParser",
    "IntegerParser",
    "LongParser",
    "DoubleParser",
    "StringParser",
    "CallableParser",
    "Constraint",
    "AllowedSetConstraint",
    "RangeConstraint",
    "sat",
    "Sequence",
    "KeyValue",
    "Result",
    "ArgumentError",
    "ArgumentMissingError",
    "ConstraintError",
    "MissingError",
    "ParsingError",
]
