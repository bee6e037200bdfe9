"""Pytest configuration for softmig.

Provides the small two-version instance used throughout the evaluator tests:
value = [[10, 20, 5], [8, 15, 12]], cost = [[4, 6, 2], [3, 5, 4]], budget = [10, 8].
"""

from __future__ import annotations

import pytest

from softmig.core.evaluator import BinaryMigrationEvaluator, SubsetMigrationEvaluator
from softmig.core.instance import ProblemInstance
from softmig.core.parser import format_instance


@pytest.fixture
def scenario_instance() -> ProblemInstance:
    return ProblemInstance.from_lists(
        value=[[10, 20, 5], [8, 15, 12]],
        cost=[[4, 6, 2], [3, 5, 4]],
        budget=[10, 8],
    )


@pytest.fixture
def scenario_text(scenario_instance) -> str:
    return format_instance(scenario_instance, version_labels=["Demo", "Payed"])


@pytest.fixture
def binary_evaluator(scenario_instance) -> BinaryMigrationEvaluator:
    return BinaryMigrationEvaluator(scenario_instance)


@pytest.fixture
def subset_evaluator(scenario_instance) -> SubsetMigrationEvaluator:
    return SubsetMigrationEvaluator(scenario_instance)
