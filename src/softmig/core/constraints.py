"""Budget constraint assembly.

Convention: a constraint of exactly 0 is feasible; a positive value is the
amount by which a version's raw cost overruns its budget.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .errors import DimensionMismatch


def get_constraint_names(n_versions: int) -> list[str]:
    """Return ordered constraint names, one budget per version."""
    return [f"budget_v{j}" for j in range(n_versions)]


def budget_slack(raw_cost: np.ndarray, budget: np.ndarray) -> np.ndarray:
    """max(0, raw_cost - budget), per version."""
    raw_cost = np.asarray(raw_cost, dtype=np.float64)
    budget = np.asarray(budget, dtype=np.float64)
    if raw_cost.shape != budget.shape:
        raise DimensionMismatch(
            f"Cost/budget length mismatch: {raw_cost.shape} vs {budget.shape}"
        )
    return np.maximum(raw_cost - budget, 0.0)


@dataclass
class ConstraintRecord:
    name: str
    raw_cost: float
    budget: float
    overrun: float

    @property
    def feasible(self) -> bool:
        return self.overrun <= 0.0


def describe_constraints(
    raw_cost: Sequence[float],
    budget: Sequence[float],
    names: Sequence[str] | None = None,
) -> list[dict]:
    """Per-version diagnostics with raw cost, budget and overrun."""
    G = budget_slack(np.asarray(raw_cost), np.asarray(budget))
    names = list(names) if names is not None else get_constraint_names(len(G))
    if len(names) != len(G):
        raise DimensionMismatch(
            f"Constraint name/value length mismatch: {len(names)} names vs {len(G)} values"
        )

    diag_list: list[dict] = []
    for name, cost_j, budget_j, overrun in zip(names, raw_cost, budget, G):
        record = ConstraintRecord(
            name=name,
            raw_cost=float(cost_j),
            budget=float(budget_j),
            overrun=float(overrun),
        )
        diag_list.append(
            {
                "name": record.name,
                "raw_cost": record.raw_cost,
                "budget": record.budget,
                "overrun": record.overrun,
                "feasible": record.feasible,
            }
        )
    return diag_list
