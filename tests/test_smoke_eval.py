"""Smoke test for evaluation on the bundled instance."""

import numpy as np
import pytest

from softmig.core.accessors import set_binary
from softmig.core.evaluator import make_evaluator
from softmig.core.parser import load_instance
from softmig.paths import SAMPLE_INSTANCE


@pytest.fixture(scope="module")
def sample_instance():
    return load_instance(SAMPLE_INSTANCE)


@pytest.mark.parametrize("encoding", ["binary", "subset"])
def test_smoke_eval_shapes(sample_instance, encoding):
    """Test that evaluate returns one objective and one constraint per version."""
    evaluator = make_evaluator(sample_instance, encoding)

    result = evaluator.evaluate(evaluator.new_variable())

    assert result.F.shape == (2,), f"Expected F shape (2,), got {result.F.shape}"
    assert result.G.shape == (2,), f"Expected G shape (2,), got {result.G.shape}"


def test_smoke_eval_finite(sample_instance):
    """Test that random selections give finite, sign-consistent values."""
    evaluator = make_evaluator(sample_instance)
    rng = np.random.default_rng(123)

    for _ in range(20):
        variable = evaluator.new_variable()
        set_binary(variable, rng.random(sample_instance.n_functionalities) < 0.5)
        result = evaluator.evaluate(variable)

        assert np.all(np.isfinite(result.F)), "F contains non-finite values"
        assert np.all(np.isfinite(result.G)), "G contains non-finite values"
        assert np.all(result.F <= 0), "Business value should be negated"
        assert np.all(result.G >= 0), "Overrun should be non-negative"


def test_selecting_everything_exceeds_budget(sample_instance):
    evaluator = make_evaluator(sample_instance)
    variable = evaluator.new_variable()
    set_binary(variable, np.ones(sample_instance.n_functionalities, dtype=bool))

    result = evaluator.evaluate(variable)

    total_cost = sample_instance.cost.sum(axis=1)
    np.testing.assert_array_equal(result.diag["raw_cost"], total_cost)
    np.testing.assert_array_equal(result.G, np.maximum(total_cost - sample_instance.budget, 0))
    np.testing.assert_array_equal(result.objectives, sample_instance.value.sum(axis=1))


def test_smoke_eval_diag(sample_instance):
    """Test that diagnostics dict is populated."""
    evaluator = make_evaluator(sample_instance)
    result = evaluator.evaluate(evaluator.new_variable())

    for key in ("selected", "business_value", "raw_cost", "budget", "constraints", "timings"):
        assert key in result.diag
    assert result.diag["timings"]["total_ms"] >= 0
