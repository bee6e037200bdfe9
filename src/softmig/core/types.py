"""Core types for solutions and evaluation results.

This module defines the canonical types that form the interface
between the evaluators and the external search loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .errors import DimensionMismatch
from .variables import Variable


@dataclass
class Solution:
    """Container owned by the search loop.

    The core only reads the decision variables and overwrites objectives and
    constraints; every evaluation replaces both arrays in full.

    Attributes:
        variables: Decision variables, each owned exclusively by this solution.
        objectives: Objective values (minimize). Shape: (n_obj,)
        constraints: Constraint values. Convention: 0 is feasible, positive is
            the violation. Shape: (n_constr,)
    """

    variables: list[Variable]
    objectives: np.ndarray
    constraints: np.ndarray

    @classmethod
    def empty(cls, variables: list[Variable], n_obj: int, n_constr: int) -> Solution:
        return cls(
            variables=list(variables),
            objectives=np.zeros(n_obj, dtype=np.float64),
            constraints=np.zeros(n_constr, dtype=np.float64),
        )

    @property
    def n_variables(self) -> int:
        return len(self.variables)

    def variable(self, index: int) -> Variable:
        return self.variables[index]

    def set_objectives(self, F: np.ndarray) -> None:
        F = np.asarray(F, dtype=np.float64)
        if F.shape != self.objectives.shape:
            raise DimensionMismatch(
                f"Expected {self.objectives.shape[0]} objectives, got {F.shape}"
            )
        self.objectives = F.copy()

    def set_constraints(self, G: np.ndarray) -> None:
        G = np.asarray(G, dtype=np.float64)
        if G.shape != self.constraints.shape:
            raise DimensionMismatch(
                f"Expected {self.constraints.shape[0]} constraints, got {G.shape}"
            )
        self.constraints = G.copy()

    @property
    def is_feasible(self) -> bool:
        return bool(np.all(self.constraints <= 0))


@dataclass
class EvalResult:
    """Result from evaluating one decision variable.

    Attributes:
        F: Objective values in minimization form (negated business value).
            Shape: (n_versions,)
        G: Budget overrun per version. Convention: 0 is feasible, positive is
            the amount over budget. Shape: (n_versions,)
        diag: Diagnostics (raw cost, budget, selection, timings).
    """

    F: np.ndarray
    G: np.ndarray
    diag: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Enforce float64
        self.F = np.asarray(self.F, dtype=np.float64)
        self.G = np.asarray(self.G, dtype=np.float64)

    @property
    def objectives(self) -> np.ndarray:
        """Business value per version in its natural (maximized) form."""
        return -self.F

    @property
    def is_feasible(self) -> bool:
        """Check if every version stays within budget."""
        return bool(np.all(self.G <= 0))

    @property
    def max_violation(self) -> float:
        """Return maximum budget overrun (0 if feasible)."""
        return float(np.maximum(self.G, 0).max()) if len(self.G) > 0 else 0.0
