#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Validate a callbench fixture config YAML against the schema and parameter checks.
Use this when authoring a custom fixture config to sanity-check before running callbench.
Exit 0 if valid; non-zero and message on failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root so we can import callbench
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def main() -> int:
    if len(sys.argv) != 2:
        print("Usage: check-fixture-config.py <path-to-fixture.yaml>", file=sys.stderr)
        return 2
    path = Path(sys.argv[1])
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1
    try:
        from callbench.core.fixture_config import load_fixture_config

        config = load_fixture_config(path)
        print(f"OK: {path}")
        print(f"  seed: {config.seed}")
        print(f"  funcs: {config.funcs}")
        print(f"  ops: {config.ops}")
        return 0
    except ValueError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
