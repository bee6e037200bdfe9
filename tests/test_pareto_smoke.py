"""Smoke tests for the pymoo adapter."""

import numpy as np
import pytest
from pymoo.algorithms.moo.nsga2 import NSGA2
from pymoo.operators.crossover.pntx import TwoPointCrossover
from pymoo.operators.mutation.bitflip import BitflipMutation
from pymoo.operators.sampling.rnd import BinaryRandomSampling
from pymoo.optimize import minimize

from softmig.adapters.pymoo_problem import MigrationProblem, create_problem
from softmig.core.parser import load_instance
from softmig.paths import SAMPLE_INSTANCE


def test_problem_config(binary_evaluator):
    problem = MigrationProblem(binary_evaluator)
    assert problem.n_var == 3
    assert problem.n_obj == 2
    assert problem.n_ieq_constr == 2


@pytest.mark.parametrize("encoding", ["binary", "subset"])
def test_problem_evaluate_matches_evaluator(scenario_instance, encoding):
    problem = create_problem(scenario_instance, encoding)
    X = np.array([[True, True, False], [True, True, True]])
    out = problem.evaluate(X, return_as_dictionary=True)

    np.testing.assert_array_equal(out["F"], [[-30, -23], [-35, -35]])
    np.testing.assert_array_equal(out["G"], [[0, 0], [2, 4]])
    assert problem.n_evals == 2


@pytest.mark.parametrize("encoding", ["binary", "subset"])
def test_nsga2_integration_smoke(encoding):
    """Smoke test for NSGA-II on the bundled instance (few generations)."""
    problem = create_problem(load_instance(SAMPLE_INSTANCE), encoding)
    algorithm = NSGA2(
        pop_size=20,
        sampling=BinaryRandomSampling(),
        crossover=TwoPointCrossover(),
        mutation=BitflipMutation(),
        eliminate_duplicates=True,
    )

    res = minimize(problem, algorithm, termination=("n_gen", 5), seed=1, verbose=False)

    assert res.F is not None
    F = np.atleast_2d(res.F)
    assert F.shape[1] == 2
    # business values are non-negative, so minimized objectives are <= 0
    assert np.all(F <= 0)
