# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for fixture config loading and validation."""

import tempfile
from pathlib import Path

import pytest

from callbench.core.callbench import CallBench
from callbench.core.fixture_config import (
    DEFAULT_FUNCS,
    DEFAULT_OPS,
    DEFAULT_SEED,
    ConfigError,
    get_default_config_path,
    get_schema_path,
    load_fixture_config,
)


def _load(text: str):
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "fixture.yaml"
        path.write_text(text)
        return load_fixture_config(path)


def test_default_config_matches_reference_constants():
    """Shipped config: seed 0, 2048 functions, 512 calls."""
    assert get_schema_path().exists()
    config = load_fixture_config(get_default_config_path())
    assert config.seed == 0
    assert config.funcs == 2048
    assert config.ops == 512


def test_hex_strings_and_omitted_keys():
    config = _load(
        """
fixture:
  seed: "0x2a"
  funcs: "0x100"
"""
    )
    assert config.seed == 42
    assert config.funcs == 256
    assert config.ops == DEFAULT_OPS


def test_empty_fixture_section_uses_defaults():
    config = _load("fixture: {}\n")
    assert (config.seed, config.funcs, config.ops) == (DEFAULT_SEED, DEFAULT_FUNCS, DEFAULT_OPS)


def test_empty_file_rejected():
    with pytest.raises(ConfigError, match="empty"):
        _load("")


@pytest.mark.parametrize(
    "text",
    [
        "other: 1\n",
        "fixture:\n  funcs: -4\n",
        "fixture:\n  ops: 1.5\n",
        "fixture:\n  seed: abc\n",
        "fixture:\n  pages: 1\n",
    ],
)
def test_schema_violations_rejected(text):
    with pytest.raises(ConfigError, match="schema validation failed"):
        _load(text)


def test_zero_functions_rejected():
    with pytest.raises(ConfigError, match="function count"):
        _load("fixture:\n  funcs: 0\n")


def test_malformed_integer_string_rejected():
    with pytest.raises(ConfigError, match="malformed integer"):
        _load('fixture:\n  ops: "_"\n')


def test_seed_above_u64_rejected():
    with pytest.raises(ConfigError, match="seed"):
        _load('fixture:\n  seed: "0x10000000000000000"\n')


def test_cli_values_override_config():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "fixture.yaml"
        path.write_text("fixture:\n  seed: 5\n  funcs: 16\n  ops: 8\n")
        bench = CallBench(op_count=3, config=path, verbosity="error")
        assert (bench.seed, bench.func_count, bench.op_count) == (5, 16, 3)
