"""Tests for YAML/pydantic run configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from softmig.core.config import (
    SoftmigConfig,
    default_config,
    load_config,
    merge_config,
    save_config,
)


def test_default_config():
    config = default_config()
    assert config.encoding == "binary"
    assert config.instance is None
    assert config.optimization.pop_size == 100


def test_save_load_roundtrip(tmp_path):
    config = SoftmigConfig.model_validate(
        {"instance": "data/instance.txt", "encoding": "subset", "optimization": {"n_gen": 7}}
    )
    path = tmp_path / "cfg" / "run.yaml"
    save_config(config, path)

    loaded = load_config(path)
    assert loaded == config
    assert loaded.instance == Path("data/instance.txt")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == default_config()


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_merge_skips_none_and_merges_nested():
    merged = merge_config(
        default_config(),
        {"encoding": None, "optimization": {"pop_size": 16, "seed": None}},
    )
    assert merged.encoding == "binary"
    assert merged.optimization.pop_size == 16
    assert merged.optimization.seed == 42


def test_validation_errors():
    with pytest.raises(ValidationError):
        SoftmigConfig.model_validate({"encoding": "permutation"})
    with pytest.raises(ValidationError):
        merge_config(default_config(), {"optimization": {"pop_size": 1}})
