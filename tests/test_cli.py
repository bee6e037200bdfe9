"""Tests for the command-line drivers."""

import json

from softmig.cli import run_pareto_main, run_single_main
from softmig.core.config import SoftmigConfig, save_config
from softmig.core.parser import save_instance


def test_run_single_scenario(tmp_path, capsys, scenario_instance):
    path = tmp_path / "scenario.txt"
    save_instance(scenario_instance, path)

    assert run_single_main(["--instance", str(path), "--select", "0,1"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["evaluator"] == "Migration"
    assert out["F"] == [-30.0, -23.0]
    assert out["objectives"] == [30.0, 23.0]
    assert out["G"] == [0.0, 0.0]
    assert out["is_feasible"] is True
    assert out["variable"] == "110"


def test_run_single_subset_bits(tmp_path, capsys, scenario_instance):
    path = tmp_path / "scenario.txt"
    save_instance(scenario_instance, path)

    assert run_single_main(["--instance", str(path), "--bits", "111", "--encoding", "subset"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["evaluator"] == "MigrationSubset"
    assert out["G"] == [2.0, 4.0]
    assert out["max_violation"] == 4.0
    assert out["variable"] == "{0,1,2}"


def test_run_pareto_with_config(tmp_path, capsys):
    config_path = tmp_path / "run.yaml"
    save_config(
        SoftmigConfig.model_validate({"encoding": "subset", "optimization": {"pop_size": 12}}),
        config_path,
    )

    assert run_pareto_main(["--config", str(config_path), "--gen", "3", "--seed", "5"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["evaluator"] == "MigrationSubset"
    assert summary["pop_size"] == 12
    assert summary["n_gen"] == 3
    assert summary["n_functionalities"] == 12
    for solution in summary["solutions"]:
        assert len(solution["business_value"]) == 2
        assert all(v >= 0 for v in solution["business_value"])
