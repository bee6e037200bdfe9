"""PyMoo adapter for multi-objective optimization.

This module wraps a MigrationEvaluator for use with pymoo. pymoo hands over
rows of a boolean decision matrix; each row is written into a fresh decision
variable of the evaluator's encoding before evaluation.
"""

from __future__ import annotations

import numpy as np
from pymoo.core.problem import Problem

from ..core.accessors import set_binary, set_subset
from ..core.evaluator import MigrationEvaluator, SubsetMigrationEvaluator, make_evaluator
from ..core.instance import ProblemInstance
from ..core.variables import Variable


class MigrationProblem(Problem):
    """PyMoo Problem wrapper for software migration evaluation.

    Objectives and constraints are one per version. pymoo treats G <= 0 as
    feasible, which matches the budget overrun convention (0 feasible).
    """

    def __init__(
        self,
        evaluator: MigrationEvaluator,
        **kwargs,
    ) -> None:
        """Initialize migration problem.

        Args:
            evaluator: Binary or subset evaluator bound to an instance.
            **kwargs: Additional arguments passed to pymoo Problem.
        """
        n = evaluator.instance.n_functionalities

        super().__init__(
            n_var=n,
            n_obj=evaluator.n_objectives,
            n_ieq_constr=evaluator.n_constraints,
            xl=np.zeros(n),
            xu=np.ones(n),
            vtype=bool,
            **kwargs,
        )

        self.evaluator = evaluator
        self._n_evals = 0

    def to_variable(self, x: np.ndarray) -> Variable:
        """Decision row -> decision variable of the evaluator's encoding."""
        variable = self.evaluator.new_variable()
        mask = np.asarray(x, dtype=bool)
        if isinstance(self.evaluator, SubsetMigrationEvaluator):
            set_subset(variable, np.flatnonzero(mask))
        else:
            set_binary(variable, mask)
        return variable

    def _evaluate(
        self,
        X: np.ndarray,
        out: dict,
        *args,
        **kwargs,
    ) -> None:
        """Evaluate population.

        Args:
            X: Decision matrix of shape (pop_size, n_var).
            out: Output dict for F and G.
        """
        F, G, _ = self.evaluator.evaluate_batch([self.to_variable(x) for x in X])
        self._n_evals += len(X)

        out["F"] = F
        out["G"] = G

    @property
    def n_evals(self) -> int:
        """Total number of evaluations performed."""
        return self._n_evals


def create_problem(instance: ProblemInstance, encoding: str = "binary") -> MigrationProblem:
    """Create MigrationProblem for an instance and encoding name."""
    return MigrationProblem(make_evaluator(instance, encoding))
