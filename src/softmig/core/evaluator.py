"""Software migration evaluation — THE canonical interface.

Interface:
    evaluator.evaluate(variable) -> EvalResult(F, G, diag)

Flow:
    1. Check the decision variable kind and its dimensions against the instance
    2. Collect the selected functionality columns
    3. Sum value and cost per version over the selection
    4. G = max(0, cost - budget) per version
    5. F = -value (maximization restated for minimizers)

Two encodings share the same instance and aggregation:
    BinaryMigrationEvaluator  - bit i set = functionality i migrated
    SubsetMigrationEvaluator  - members are the migrated functionalities
Both give identical results for the same selection.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

import numpy as np

from .accessors import as_binary, as_subset
from .constraints import budget_slack, describe_constraints, get_constraint_names
from .errors import DimensionMismatch, TypeMismatch
from .instance import ProblemInstance
from .types import EvalResult, Solution
from .variables import BinaryVariable, SubsetVariable, Variable, new_binary, new_subset

logger = logging.getLogger(__name__)


def aggregate_selection(
    instance: ProblemInstance, selection: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Sum value and cost per version over the selected columns.

    Args:
        instance: Problem data.
        selection: Bool mask of length n_functionalities, or an array of
            distinct functionality indices.

    Returns:
        (value, raw_cost), each of shape (n_versions,).
    """
    # float64 accumulation: no int64 wraparound
    value = instance.value[:, selection].astype(np.float64).sum(axis=1)
    raw_cost = instance.cost[:, selection].astype(np.float64).sum(axis=1)
    return value, raw_cost


class MigrationEvaluator:
    """Shared evaluation logic; subclasses fix the decision-variable encoding."""

    name = "Migration"

    def __init__(self, instance: ProblemInstance) -> None:
        self.instance = instance
        self.constraint_names = get_constraint_names(instance.n_versions)

    @property
    def n_variables(self) -> int:
        return 1

    @property
    def n_objectives(self) -> int:
        return self.instance.n_versions

    @property
    def n_constraints(self) -> int:
        return self.instance.n_versions

    def new_variable(self) -> Variable:
        raise NotImplementedError

    def selection(self, variable: Variable) -> np.ndarray:
        """Validated selection (mask or indices) for aggregate_selection."""
        raise NotImplementedError

    def selected_indices(self, variable: Variable) -> np.ndarray:
        """Selected functionality indices, ascending."""
        raise NotImplementedError

    def new_solution(self) -> Solution:
        return Solution.empty([self.new_variable()], self.n_objectives, self.n_constraints)

    def evaluate(self, variable: Variable) -> EvalResult:
        """Evaluate one decision variable.

        Returns:
            EvalResult with:
                F: Negated business value per version (minimize)
                G: Budget overrun per version (0 feasible)
                diag: Diagnostics dict
        """
        t0 = time.perf_counter()

        selection = self.selection(variable)
        value, raw_cost = aggregate_selection(self.instance, selection)
        G = budget_slack(raw_cost, self.instance.budget)
        F = -value

        t_total = time.perf_counter() - t0
        diag = {
            "selected": self.selected_indices(variable).tolist(),
            "business_value": value.tolist(),
            "raw_cost": raw_cost.tolist(),
            "budget": self.instance.budget.astype(np.float64).tolist(),
            "constraints": describe_constraints(
                raw_cost, self.instance.budget, self.constraint_names
            ),
            "timings": {"total_ms": t_total * 1000},
        }
        return EvalResult(F=F, G=G, diag=diag)

    def evaluate_solution(self, solution: Solution) -> EvalResult:
        """Evaluate a solution and overwrite its objectives and constraints."""
        if solution.n_variables != self.n_variables:
            raise DimensionMismatch(
                f"Expected {self.n_variables} decision variable, got {solution.n_variables}"
            )
        result = self.evaluate(solution.variable(0))
        solution.set_objectives(result.F)
        solution.set_constraints(result.G)
        return result

    def evaluate_batch(
        self, variables: Sequence[Variable]
    ) -> tuple[np.ndarray, np.ndarray, list[dict]]:
        """Evaluate several decision variables.

        Returns:
            F_all: (n, n_obj) objective array
            G_all: (n, n_constr) constraint array
            diags: list of diagnostics dicts
        """
        results = [self.evaluate(v) for v in variables]
        logger.debug("%s: evaluated batch of %d", self.name, len(results))
        if not results:
            return (
                np.zeros((0, self.n_objectives), dtype=np.float64),
                np.zeros((0, self.n_constraints), dtype=np.float64),
                [],
            )
        F_all = np.stack([r.F for r in results], axis=0)
        G_all = np.stack([r.G for r in results], axis=0)
        diags = [r.diag for r in results]
        return F_all, G_all, diags


class BinaryMigrationEvaluator(MigrationEvaluator):
    """Dense encoding: one bit per functionality."""

    name = "Migration"

    def new_variable(self) -> BinaryVariable:
        return new_binary(self.instance.n_functionalities)

    def selection(self, variable: Variable) -> np.ndarray:
        if not isinstance(variable, BinaryVariable):
            raise TypeMismatch(f"{self.name} expects a binary variable, got {type(variable).__name__}")
        if variable.length != self.instance.n_functionalities:
            raise DimensionMismatch(
                f"Expected {self.instance.n_functionalities} bits, got {variable.length}"
            )
        return as_binary(variable)

    def selected_indices(self, variable: Variable) -> np.ndarray:
        return np.flatnonzero(self.selection(variable))


class SubsetMigrationEvaluator(MigrationEvaluator):
    """Subset encoding: explicit list of migrated functionalities."""

    name = "MigrationSubset"

    def new_variable(self) -> SubsetVariable:
        n = self.instance.n_functionalities
        return new_subset(n, 0, n)

    def selection(self, variable: Variable) -> np.ndarray:
        if not isinstance(variable, SubsetVariable):
            raise TypeMismatch(f"{self.name} expects a subset variable, got {type(variable).__name__}")
        n = self.instance.n_functionalities
        if variable.lower != 0 or variable.upper != n or variable.capacity > n:
            raise DimensionMismatch(
                f"Expected subset over [0, {n}) with capacity <= {n}, got "
                f"[{variable.lower}, {variable.upper}) with capacity {variable.capacity}"
            )
        return as_subset(variable)

    def selected_indices(self, variable: Variable) -> np.ndarray:
        return self.selection(variable)


EVALUATORS: dict[str, type[MigrationEvaluator]] = {
    "binary": BinaryMigrationEvaluator,
    "subset": SubsetMigrationEvaluator,
}


def make_evaluator(instance: ProblemInstance, encoding: str = "binary") -> MigrationEvaluator:
    """Create the evaluator for an encoding name ("binary" or "subset")."""
    try:
        cls = EVALUATORS[encoding]
    except KeyError:
        raise ValueError(
            f"Unknown encoding {encoding!r}, expected one of {sorted(EVALUATORS)}"
        ) from None
    return cls(instance)
