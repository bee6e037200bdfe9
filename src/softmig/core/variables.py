"""Decision-variable kinds and their factories.

The set of kinds is closed:
    RealVariable        bounded real
    IntegerVariable     bounded integer
    BinaryVariable      fixed-length bit vector (owns one bool buffer)
    SubsetVariable      members drawn from [lower, upper), at most capacity
    PermutationVariable bijection on [0, length)

Each variable is a mutable value container owned by exactly one Solution.
Typed reads and validated writes go through softmig.core.accessors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .errors import LengthMismatch, RangeError, TypeMismatch


@dataclass
class RealVariable:
    """Bounded real. Starts at its lower bound.

    Attributes:
        lower: Lower bound (inclusive).
        upper: Upper bound (inclusive).
        value: Current value, lower <= value <= upper.
    """

    lower: float
    upper: float
    value: float = math.nan

    def __post_init__(self) -> None:
        self.lower = float(self.lower)
        self.upper = float(self.upper)
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)) or self.upper < self.lower:
            raise RangeError(f"invalid real bounds: [{self.lower}, {self.upper}]")
        if math.isnan(self.value):
            self.value = self.lower
        elif not (self.lower <= self.value <= self.upper):
            raise RangeError(f"value {self.value} outside bounds [{self.lower}, {self.upper}]")


@dataclass
class IntegerVariable:
    """Bounded integer. Starts at its lower bound."""

    lower: int
    upper: int
    value: int | None = None

    def __post_init__(self) -> None:
        if self.upper < self.lower:
            raise RangeError(f"invalid integer bounds: [{self.lower}, {self.upper}]")
        if self.value is None:
            self.value = self.lower
        elif not (self.lower <= self.value <= self.upper):
            raise RangeError(f"value {self.value} outside bounds [{self.lower}, {self.upper}]")


@dataclass
class BinaryVariable:
    """Fixed-length bit vector; bit 0 is the least significant."""

    bits: np.ndarray

    def __post_init__(self) -> None:
        self.bits = np.array(self.bits, dtype=bool)
        if self.bits.ndim != 1 or self.bits.size < 1:
            raise LengthMismatch(f"bit vector must be 1-D and non-empty, got shape {self.bits.shape}")

    @property
    def length(self) -> int:
        return int(self.bits.size)

    def __str__(self) -> str:
        return "".join("1" if b else "0" for b in self.bits)


@dataclass
class SubsetVariable:
    """Members of [lower, upper), no duplicates, at most capacity of them."""

    capacity: int
    lower: int
    upper: int
    members: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.upper < self.lower:
            raise RangeError(f"invalid selectable range: [{self.lower}, {self.upper})")
        if not (0 <= self.capacity <= self.upper - self.lower):
            raise RangeError(
                f"capacity {self.capacity} outside 0..{self.upper - self.lower} "
                f"for range [{self.lower}, {self.upper})"
            )
        self.members = frozenset(int(m) for m in self.members)
        if len(self.members) > self.capacity:
            raise LengthMismatch(f"{len(self.members)} members exceed capacity {self.capacity}")
        if any(m < self.lower or m >= self.upper for m in self.members):
            raise RangeError(f"members {sorted(self.members)} outside [{self.lower}, {self.upper})")

    @property
    def size(self) -> int:
        return len(self.members)

    def __str__(self) -> str:
        return "{" + ",".join(str(m) for m in sorted(self.members)) + "}"


@dataclass
class PermutationVariable:
    """Ordering of [0, length). Starts as the identity."""

    length: int
    order: np.ndarray | None = None

    def __post_init__(self) -> None:
        if self.length < 1:
            raise RangeError(f"permutation length must be >= 1, got {self.length}")
        if self.order is None:
            self.order = np.arange(self.length, dtype=np.int64)
            return
        order = np.array(self.order, dtype=np.int64)
        if order.shape != (self.length,):
            raise LengthMismatch(
                f"permutation length mismatch: expected {self.length}, got {order.size}"
            )
        if not np.array_equal(np.sort(order), np.arange(self.length)):
            raise RangeError(f"not a permutation of 0..{self.length - 1}: {order.tolist()}")
        self.order = order

    def __str__(self) -> str:
        return ",".join(str(int(i)) for i in self.order)


Variable = Union[RealVariable, IntegerVariable, BinaryVariable, SubsetVariable, PermutationVariable]

VARIABLE_KINDS = (RealVariable, IntegerVariable, BinaryVariable, SubsetVariable, PermutationVariable)


def new_real(lower: float, upper: float) -> RealVariable:
    return RealVariable(lower, upper)


def new_int(lower: int, upper: int) -> IntegerVariable:
    return IntegerVariable(int(lower), int(upper))


def new_boolean() -> BinaryVariable:
    return new_binary(1)


def new_binary(length: int) -> BinaryVariable:
    """Zeroed bit vector of the given length."""
    if length < 1:
        raise RangeError(f"bit vector length must be >= 1, got {length}")
    return BinaryVariable(np.zeros(length, dtype=bool))


def new_subset(capacity: int, lower: int, upper: int) -> SubsetVariable:
    """Empty subset selecting at most capacity members from [lower, upper)."""
    return SubsetVariable(capacity=capacity, lower=lower, upper=upper)


def new_permutation(length: int) -> PermutationVariable:
    return PermutationVariable(length)


def copy_variable(variable: Variable) -> Variable:
    """Deep copy: the copy shares no buffer with the original."""
    if isinstance(variable, BinaryVariable):
        return BinaryVariable(variable.bits.copy())
    if isinstance(variable, PermutationVariable):
        return PermutationVariable(variable.length, np.array(variable.order, copy=True))
    if isinstance(variable, RealVariable):
        return RealVariable(variable.lower, variable.upper, variable.value)
    if isinstance(variable, IntegerVariable):
        return IntegerVariable(variable.lower, variable.upper, variable.value)
    if isinstance(variable, SubsetVariable):
        return SubsetVariable(variable.capacity, variable.lower, variable.upper, variable.members)
    raise TypeMismatch(f"unknown variable kind: {type(variable).__name__}")
