# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Load fixture parameters (seed, function count, call count) from YAML config."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from callbench.sequences.utils import MASK_64_BIT

DEFAULT_SEED = 0
DEFAULT_FUNCS = 2048
DEFAULT_OPS = 512


class ConfigError(ValueError):
    """Invalid fixture parameters or config file."""


@dataclass
class FixtureConfig:
    seed: int = DEFAULT_SEED
    funcs: int = DEFAULT_FUNCS
    ops: int = DEFAULT_OPS


def get_schema_path() -> Path:
    """Path to the fixture config JSON Schema."""
    return Path(__file__).resolve().parent.parent / "config" / "fixture_config_schema.json"


def get_default_config_path() -> Path:
    """Path to the default fixture config shipped with callbench."""
    return Path(__file__).resolve().parent.parent / "config" / "fixture_default.yaml"


def _parse_int(v: Any) -> int:
    if isinstance(v, bool):
        raise TypeError("Expected int or hex string, got bool")
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        return int(v, 0)
    raise TypeError(f"Expected int or hex string, got {type(v)}")


def check_fixture_params(seed: int, funcs: int, ops: int) -> None:
    """Raise ConfigError unless the parameters can produce a module."""
    if not 0 <= seed <= MASK_64_BIT:
        raise ConfigError(f"seed must be an unsigned 64-bit value, got {seed}")
    if funcs < 1:
        raise ConfigError(f"function count must be at least 1, got {funcs}")
    if ops < 0:
        raise ConfigError(f"call count must not be negative, got {ops}")


def validate_fixture_config(raw: dict[str, Any], path: Path | None = None) -> None:
    """Validate parsed YAML against the fixture config schema. Raises ConfigError on failure."""
    import jsonschema

    schema = json.loads(get_schema_path().read_text())
    try:
        jsonschema.validate(instance=raw, schema=schema)
    except jsonschema.ValidationError as e:
        loc = f" ({path})" if path else ""
        msg = getattr(e, "message", str(e))
        raise ConfigError(f"Fixture config schema validation failed{loc}: {msg}") from e


def load_fixture_config(path: Path) -> FixtureConfig:
    """Load and validate a fixture config from YAML. Omitted keys take the defaults."""
    import yaml

    raw = yaml.safe_load(Path(path).read_text())
    if not raw:
        raise ConfigError(f"Fixture config is empty: {path}")
    validate_fixture_config(raw, path)

    fixture = raw["fixture"]
    try:
        config = FixtureConfig(
            seed=_parse_int(fixture.get("seed", DEFAULT_SEED)),
            funcs=_parse_int(fixture.get("funcs", DEFAULT_FUNCS)),
            ops=_parse_int(fixture.get("ops", DEFAULT_OPS)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Fixture config has a malformed integer ({path}): {e}") from e
    check_fixture_params(config.seed, config.funcs, config.ops)
    return config
