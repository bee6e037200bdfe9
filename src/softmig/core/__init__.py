"""Core module — codec, variables, instance, evaluator."""

from .bits import decode_binary, decode_real, encode_binary, encode_real, from_gray, to_gray
from .errors import (
    DimensionMismatch,
    FormatError,
    LengthMismatch,
    RangeError,
    SoftmigError,
    TypeMismatch,
)
from .evaluator import (
    BinaryMigrationEvaluator,
    MigrationEvaluator,
    SubsetMigrationEvaluator,
    make_evaluator,
)
from .instance import ProblemInstance
from .parser import format_instance, load_instance, parse_instance
from .types import EvalResult, Solution
from .variables import (
    new_binary,
    new_boolean,
    new_int,
    new_permutation,
    new_real,
    new_subset,
)

__all__ = [
    "encode_binary",
    "decode_binary",
    "to_gray",
    "from_gray",
    "encode_real",
    "decode_real",
    "SoftmigError",
    "RangeError",
    "TypeMismatch",
    "LengthMismatch",
    "DimensionMismatch",
    "FormatError",
    "ProblemInstance",
    "parse_instance",
    "load_instance",
    "format_instance",
    "MigrationEvaluator",
    "BinaryMigrationEvaluator",
    "SubsetMigrationEvaluator",
    "make_evaluator",
    "EvalResult",
    "Solution",
    "new_real",
    "new_int",
    "new_boolean",
    "new_binary",
    "new_subset",
    "new_permutation",
]
