"""Typed reads and validated writes of decision variables.

Each accessor pair is valid for exactly one variable kind; calling it on
any other kind raises TypeMismatch. Writes validate fully before mutating, so
a failed write leaves the variable untouched.

Batch accessors (as_reals, set_reals, as_ints, set_ints) walk a contiguous
slice of a solution's variable list in index order and are atomic: every
element is checked before the first one is written.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from . import bits as codec
from .errors import LengthMismatch, RangeError, TypeMismatch
from .types import Solution
from .variables import (
    BinaryVariable,
    IntegerVariable,
    PermutationVariable,
    RealVariable,
    SubsetVariable,
    Variable,
)


def _kind(variable: Variable) -> str:
    return type(variable).__name__


def _require_real(variable: Variable) -> RealVariable:
    if not isinstance(variable, RealVariable):
        raise TypeMismatch(f"not a real variable: {_kind(variable)}")
    return variable


def _require_binary(variable: Variable) -> BinaryVariable:
    if not isinstance(variable, BinaryVariable):
        raise TypeMismatch(f"not a binary variable: {_kind(variable)}")
    return variable


def _require_subset(variable: Variable) -> SubsetVariable:
    if not isinstance(variable, SubsetVariable):
        raise TypeMismatch(f"not a subset: {_kind(variable)}")
    return variable


def _require_permutation(variable: Variable) -> PermutationVariable:
    if not isinstance(variable, PermutationVariable):
        raise TypeMismatch(f"not a permutation: {_kind(variable)}")
    return variable


def _check_real(variable: RealVariable, value: float) -> float:
    value = float(value)
    if math.isnan(value) or not (variable.lower <= value <= variable.upper):
        raise RangeError(f"value {value} outside bounds [{variable.lower}, {variable.upper}]")
    return value


def _check_int(variable: Variable, value: int) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise RangeError(f"not an integer value: {value}")
    if isinstance(variable, IntegerVariable):
        if not (variable.lower <= value <= variable.upper):
            raise RangeError(f"value {value} outside bounds [{variable.lower}, {variable.upper}]")
        return int(value)
    if isinstance(variable, RealVariable):
        _check_real(variable, value)
        return int(value)
    raise TypeMismatch(f"not an integer variable: {_kind(variable)}")


# --- Real / integer ---------------------------------------------------------


def as_real(variable: Variable) -> float:
    return _require_real(variable).value


def set_real(variable: Variable, value: float) -> None:
    real = _require_real(variable)
    real.value = _check_real(real, value)


def as_int(variable: Variable) -> int:
    """Read an integer.

    IntegerVariable values are returned as-is; a RealVariable is
    floor-truncated, matching integer-coded reals written by older callers.
    """
    if isinstance(variable, IntegerVariable):
        return int(variable.value)
    if isinstance(variable, RealVariable):
        return int(math.floor(variable.value))
    raise TypeMismatch(f"not an integer variable: {_kind(variable)}")


def set_int(variable: Variable, value: int) -> None:
    value = _check_int(variable, value)
    if isinstance(variable, IntegerVariable):
        variable.value = value
    else:
        set_real(variable, value)


# --- Binary -----------------------------------------------------------------


def as_binary(variable: Variable) -> np.ndarray:
    """Copy of the bits as a bool array."""
    return _require_binary(variable).bits.copy()


def set_binary(variable: Variable, values: np.ndarray | Sequence[bool]) -> None:
    binary = _require_binary(variable)
    arr = np.asarray(values, dtype=bool)
    if arr.shape != binary.bits.shape:
        raise LengthMismatch(
            f"must have same number of bits: expected {binary.length}, got {arr.size}"
        )
    binary.bits[:] = arr


def as_bitset(variable: Variable) -> frozenset[int]:
    """Indices of the set bits."""
    binary = _require_binary(variable)
    return frozenset(int(i) for i in np.flatnonzero(binary.bits))


def set_bitset(variable: Variable, indices: Iterable[int]) -> None:
    """Set exactly the bits at the given indices, clearing all others."""
    binary = _require_binary(variable)
    indices = [int(i) for i in indices]
    if any(i < 0 or i >= binary.length for i in indices):
        raise LengthMismatch(
            f"bit indices {sorted(indices)} exceed bit vector length {binary.length}"
        )
    bits = np.zeros(binary.length, dtype=bool)
    bits[indices] = True
    binary.bits[:] = bits


def as_boolean(variable: Variable) -> bool:
    binary = _require_binary(variable)
    if binary.length != 1:
        raise TypeMismatch(f"not a boolean variable: {binary.length} bits")
    return bool(binary.bits[0])


def set_boolean(variable: Variable, value: bool) -> None:
    binary = _require_binary(variable)
    if binary.length != 1:
        raise TypeMismatch(f"not a boolean variable: {binary.length} bits")
    binary.bits[0] = bool(value)


# --- Subset / permutation ---------------------------------------------------


def as_subset(variable: Variable) -> np.ndarray:
    """Members in ascending order."""
    subset = _require_subset(variable)
    return np.array(sorted(subset.members), dtype=np.int64)


def set_subset(variable: Variable, members: Iterable[int]) -> None:
    subset = _require_subset(variable)
    items = [int(m) for m in members]
    unique = frozenset(items)
    if len(unique) != len(items):
        raise LengthMismatch(f"duplicate subset members: {sorted(items)}")
    if len(unique) > subset.capacity:
        raise LengthMismatch(f"{len(unique)} members exceed capacity {subset.capacity}")
    out_of_range = sorted(m for m in unique if m < subset.lower or m >= subset.upper)
    if out_of_range:
        raise RangeError(f"members {out_of_range} outside [{subset.lower}, {subset.upper})")
    subset.members = unique


def as_permutation(variable: Variable) -> np.ndarray:
    return np.array(_require_permutation(variable).order, dtype=np.int64)


def set_permutation(variable: Variable, order: np.ndarray | Sequence[int]) -> None:
    permutation = _require_permutation(variable)
    arr = np.asarray(order, dtype=np.int64)
    if arr.shape != (permutation.length,):
        raise LengthMismatch(
            f"permutation length mismatch: expected {permutation.length}, got {arr.size}"
        )
    if not np.array_equal(np.sort(arr), np.arange(permutation.length)):
        raise RangeError(f"not a permutation of 0..{permutation.length - 1}: {arr.tolist()}")
    permutation.order = arr.copy()


# --- Real <-> binary ---------------------------------------------------------


def encode_into(real: Variable, binary: Variable, gray: bool = False) -> None:
    """Quantize a real variable's value into a binary variable's bits."""
    source = _require_real(real)
    target = _require_binary(binary)
    target.bits[:] = codec.encode_real(source.value, source.lower, source.upper, target.length, gray=gray)


def decode_into(binary: Variable, real: Variable, gray: bool = False) -> None:
    """Write the real value represented by a binary variable's bits."""
    source = _require_binary(binary)
    target = _require_real(real)
    target.value = codec.decode_real(source.bits, target.lower, target.upper, gray=gray)


# --- Batch accessors ----------------------------------------------------------


def _span(solution: Solution, start: int, end: int | None) -> range:
    end = solution.n_variables if end is None else end
    if not (0 <= start <= end <= solution.n_variables):
        raise RangeError(f"invalid variable range [{start}, {end}) for {solution.n_variables} variables")
    return range(start, end)


def _check_count(span: range, values: Sequence) -> None:
    if len(values) != len(span):
        raise LengthMismatch(f"expected {len(span)} values, got {len(values)}")


def as_reals(solution: Solution, start: int = 0, end: int | None = None) -> np.ndarray:
    span = _span(solution, start, end)
    return np.array([as_real(solution.variable(i)) for i in span], dtype=np.float64)


def set_reals(
    solution: Solution,
    values: Sequence[float],
    start: int = 0,
    end: int | None = None,
) -> None:
    span = _span(solution, start, end)
    _check_count(span, values)
    checked = [
        _check_real(_require_real(solution.variable(i)), v) for i, v in zip(span, values)
    ]
    for i, v in zip(span, checked):
        solution.variable(i).value = v


def as_ints(solution: Solution, start: int = 0, end: int | None = None) -> np.ndarray:
    span = _span(solution, start, end)
    return np.array([as_int(solution.variable(i)) for i in span], dtype=np.int64)


def set_ints(
    solution: Solution,
    values: Sequence[int],
    start: int = 0,
    end: int | None = None,
) -> None:
    span = _span(solution, start, end)
    _check_count(span, values)
    checked = [_check_int(solution.variable(i), v) for i, v in zip(span, values)]
    for i, v in zip(span, checked):
        set_int(solution.variable(i), v)
