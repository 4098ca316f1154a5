# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""CLI entry point for callbench."""

import sys
from pathlib import Path

from callbench.core.callbench import CallBench
from callbench.core.fixture_config import ConfigError


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(
        description="callbench - pricer call-dispatch fixture generator (WebAssembly text)"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the module to FILE. Default: standard output.",
    )
    parser.add_argument("--seed", "-s", type=int, default=None)
    parser.add_argument("--funcs", "-f", type=int, default=None, help="Number of bank functions")
    parser.add_argument("--ops", "-n", type=int, default=None, help="Number of driver calls")
    parser.add_argument(
        "--verbosity",
        "-v",
        default="info",
        choices=["debug", "info", "warning", "error"],
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="Fixture config YAML (seed, funcs, ops). Default: built-in config.",
    )
    parser.add_argument(
        "--reject-zero",
        action="store_true",
        help="Redraw zero function constants so the final division cannot trap.",
    )
    parser.add_argument(
        "--debug-yaml",
        type=Path,
        default=None,
        metavar="FILE",
        help="Optional: write debug YAML to FILE",
    )
    args = parser.parse_args()

    try:
        bench = CallBench(
            seed=args.seed,
            func_count=args.funcs,
            op_count=args.ops,
            output=args.output,
            verbosity=args.verbosity,
            config=args.config,
            reject_zero=args.reject_zero,
        )
        bench.create_fixture()
    except ConfigError as e:
        print(f"callbench: error: {e}", file=sys.stderr)
        sys.exit(2)
    bench.write_wat()
    if args.debug_yaml is not None:
        bench.write_debug_yaml(args.debug_yaml)
        bench.info(f"Wrote debug YAML to {args.debug_yaml}")


if __name__ == "__main__":
    main()
