# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Pricer call fixture synthesis: generate() and the CallBench driver class."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

from callbench.core.chacha import ChaChaRng
from callbench.core.fixture_config import (
    DEFAULT_FUNCS,
    DEFAULT_OPS,
    DEFAULT_SEED,
    ConfigError,
    check_fixture_params,
    get_default_config_path,
    load_fixture_config,
)
from callbench.core.generator_base import GeneratorBase
from callbench.sequences.utils import MASK_64_BIT
from callbench.testobj import GenLine


def _build(
    seed: int,
    func_count: int,
    op_count: int,
    reject_zero: bool,
    log: logging.Logger | None = None,
) -> tuple[GeneratorBase, list[GenLine]]:
    check_fixture_params(seed, func_count, op_count)
    if reject_zero and op_count == 0:
        raise ConfigError("call count must be at least 1 when rejecting zero check values")
    rng = ChaChaRng.seed_from_u64(seed)
    generator = GeneratorBase(rng, func_count, op_count, reject_zero=reject_zero, log=log)
    items = list(generator.gen())
    for item in items:
        assert isinstance(item.text, str), f"Sequence {item.seq} yielded a line without text"
    return generator, items


def generate(
    seed: int = DEFAULT_SEED,
    func_count: int = DEFAULT_FUNCS,
    op_count: int = DEFAULT_OPS,
    *,
    reject_zero: bool = False,
) -> list[str]:
    """
    Return the lines of the call fixture module for the given parameters.

    Function constants are drawn first (all of them), then call targets, from
    one ChaCha8 stream seeded with ``seed``. Raises ConfigError before
    producing anything when the parameters are invalid.
    """
    _, items = _build(seed, func_count, op_count, reject_zero)
    return [item.text for item in items]


class CallBench:
    """Call fixture generator main class."""

    def __init__(
        self,
        seed: int | None = None,
        func_count: int | None = None,
        op_count: int | None = None,
        output: Path | None = None,
        verbosity: str = "info",
        config: Path | None = None,
        reject_zero: bool = False,
    ) -> None:
        self.log = logging.getLogger("callbench")
        if not self.log.handlers:
            # stdout may carry the module text
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)-20s - %(levelname)s - %(message)s")
            )
            self.log.addHandler(handler)
        self.log.setLevel(getattr(logging, verbosity.upper()))
        self.debug = self.log.debug
        self.info = self.log.info
        self.warning = self.log.warning
        self.error = self.log.error

        config_path = config if config is not None else get_default_config_path()
        fixture = load_fixture_config(config_path)
        self.seed = seed if seed is not None else fixture.seed
        self.func_count = func_count if func_count is not None else fixture.funcs
        self.op_count = op_count if op_count is not None else fixture.ops
        self.reject_zero = reject_zero
        self.output = output

        check_fixture_params(self.seed, self.func_count, self.op_count)

        self.generator: GeneratorBase | None = None
        self.items: list[GenLine] = []

    @property
    def lines(self) -> list[str]:
        return [item.text for item in self.items]

    @property
    def function_values(self) -> list[int]:
        return list(self.generator.function_bank.values) if self.generator else []

    @property
    def call_targets(self) -> list[int]:
        return list(self.generator.driver.targets) if self.generator else []

    def last_check_value(self) -> int:
        """Value of $check at the division: the last called function's constant, else 0."""
        if self.generator is None:
            raise RuntimeError("No fixture generated yet; call create_fixture() first")
        targets = self.call_targets
        if not targets:
            return 0
        return self.function_values[targets[-1]]

    def trap_risk(self) -> bool:
        """True if the emitted module would trap on its final division."""
        return self.last_check_value() == 0

    def create_fixture(self) -> None:
        mode = "reject-zero" if self.reject_zero else "faithful"
        self.info(
            f"Creating fixture: seed={self.seed} funcs={self.func_count} "
            f"ops={self.op_count} mode={mode}"
        )
        start = time.time()
        self.generator, self.items = _build(
            self.seed, self.func_count, self.op_count, self.reject_zero, self.log
        )
        end = time.time()
        self.info(f"Generated {len(self.items)} lines in {(end - start):.2f} seconds")
        if self.trap_risk():
            if self.op_count == 0:
                self.warning("No calls are made; $check stays 0 and the division will trap")
            else:
                self.warning(
                    f"Last called function {self.call_targets[-1]} stores 0; "
                    "the division will trap"
                )

    def run(self) -> None:
        """Create fixture and write output."""
        self.create_fixture()
        self.write_wat()

    def write_wat(self) -> None:
        text = "\n".join(self.lines) + "\n"
        if self.output is None:
            sys.stdout.write(text)
            sys.stdout.flush()
            return
        with open(self.output, "w") as f:
            f.write(text)
        self.info(f"Wrote {self.output}")

    def write_debug_yaml(self, path: Path) -> None:
        """Write debug YAML with the draws and the trap report."""
        import yaml

        draws: dict[str, list] = {}
        for item in self.items:
            if item.value is None:
                continue
            draws.setdefault(item.seq, []).append(vars(item.export_to_fixture_item()))
        targets = self.call_targets
        out: dict = {
            "seed": self.seed,
            "func_count": self.func_count,
            "op_count": self.op_count,
            "reject_zero": self.reject_zero,
            "function_values": [hex(v & MASK_64_BIT) for v in self.function_values],
            "call_targets": targets,
            "last_target": targets[-1] if targets else None,
            "last_check_value": hex(self.last_check_value() & MASK_64_BIT),
            "trap_risk": self.trap_risk(),
            "draws": draws,
        }
        with open(path, "w") as f:
            yaml.dump(out, f, default_flow_style=False, sort_keys=False)
