"""Test constraint sign convention (0 feasible, positive = budget overrun)."""

import numpy as np
import pytest

from softmig.core.constraints import budget_slack, describe_constraints, get_constraint_names
from softmig.core.errors import DimensionMismatch


def test_budget_slack_clips_at_zero():
    G = budget_slack(np.array([10, 7, 12]), np.array([10, 8, 9]))
    np.testing.assert_array_equal(G, [0.0, 0.0, 3.0])
    assert G.dtype == np.float64


def test_budget_slack_never_negative():
    rng = np.random.default_rng(42)
    for _ in range(50):
        cost = rng.integers(0, 100, 5)
        budget = rng.integers(0, 100, 5)
        G = budget_slack(cost, budget)
        assert np.all(G >= 0)
        np.testing.assert_array_equal(G > 0, cost > budget)


def test_budget_slack_shape_mismatch():
    with pytest.raises(DimensionMismatch, match="length mismatch"):
        budget_slack(np.array([1, 2]), np.array([1, 2, 3]))


def test_constraint_names():
    assert get_constraint_names(3) == ["budget_v0", "budget_v1", "budget_v2"]


def test_describe_constraints():
    diag = describe_constraints([12, 5], [10, 8])
    assert [d["name"] for d in diag] == ["budget_v0", "budget_v1"]
    assert [d["overrun"] for d in diag] == [2.0, 0.0]
    assert [d["feasible"] for d in diag] == [False, True]

    with pytest.raises(DimensionMismatch):
        describe_constraints([12, 5], [10, 8], names=["only"])
