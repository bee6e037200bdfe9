"""Immutable software migration problem instance."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import DimensionMismatch, RangeError


def _frozen_int_array(data, name: str) -> np.ndarray:
    try:
        arr = np.array(data, dtype=np.int64)
    except ValueError as e:
        raise DimensionMismatch(f"{name} is not a fully populated array: {e}") from e
    if np.any(arr < 0):
        raise RangeError(f"{name} entries must be non-negative")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class ProblemInstance:
    """Capacitated multi-version selection data.

    Attributes:
        n_versions: Number of product versions (>= 1).
        n_functionalities: Number of candidate functionalities (>= 1).
        value: Business value of functionality f in version v.
            Shape: (n_versions, n_functionalities)
        cost: Budget cost of functionality f in version v.
            Shape: (n_versions, n_functionalities)
        budget: Budget limit per version. Shape: (n_versions,)

    The arrays are copied on construction and marked read-only.
    """

    n_versions: int
    n_functionalities: int
    value: np.ndarray
    cost: np.ndarray
    budget: np.ndarray

    def __post_init__(self) -> None:
        if self.n_versions < 1:
            raise RangeError(f"n_versions must be >= 1, got {self.n_versions}")
        if self.n_functionalities < 1:
            raise RangeError(f"n_functionalities must be >= 1, got {self.n_functionalities}")

        value = _frozen_int_array(self.value, "value")
        cost = _frozen_int_array(self.cost, "cost")
        budget = _frozen_int_array(self.budget, "budget")

        matrix_shape = (self.n_versions, self.n_functionalities)
        if value.shape != matrix_shape:
            raise DimensionMismatch(f"value shape {value.shape}, expected {matrix_shape}")
        if cost.shape != matrix_shape:
            raise DimensionMismatch(f"cost shape {cost.shape}, expected {matrix_shape}")
        if budget.shape != (self.n_versions,):
            raise DimensionMismatch(f"budget shape {budget.shape}, expected ({self.n_versions},)")

        object.__setattr__(self, "value", value)
        object.__setattr__(self, "cost", cost)
        object.__setattr__(self, "budget", budget)

    @classmethod
    def from_lists(
        cls,
        value: list[list[int]],
        cost: list[list[int]],
        budget: list[int],
    ) -> ProblemInstance:
        """Build an instance, taking dimensions from the value matrix."""
        n_versions = len(value)
        n_functionalities = len(value[0]) if n_versions else 0
        return cls(n_versions, n_functionalities, value, cost, budget)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProblemInstance):
            return NotImplemented
        return (
            self.n_versions == other.n_versions
            and self.n_functionalities == other.n_functionalities
            and np.array_equal(self.value, other.value)
            and np.array_equal(self.cost, other.cost)
            and np.array_equal(self.budget, other.budget)
        )

    __hash__ = None  # type: ignore[assignment]
