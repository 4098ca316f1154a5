# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Start directive and the timed driver function."""

from __future__ import annotations

import logging
from typing import Iterator

from callbench.core.distributions import Uniform
from callbench.testobj import GenLine

from .base import SequenceBase
from .header import CHECK_GLOBAL, TIMER_FUNC
from .utils import i64_const, instr

DRIVER_FUNC = "$test"


class StartDirective(SequenceBase):
    def gen(self) -> Iterator[GenLine]:
        yield GenLine(text=f"(start {DRIVER_FUNC})", seq=self.name)


class DriverFunction(SequenceBase):
    """
    Driver: timer, ``op_count`` calls into the bank, timer, then 1 / $check.

    Call targets are drawn uniformly from [0, func_count). The division traps
    if $check is 0, which can only happen when no call is made or the last
    called function stored 0.
    """

    def __init__(
        self,
        rng: object,
        func_count: int,
        op_count: int,
        log: logging.Logger | None = None,
    ) -> None:
        super().__init__(rng, log)
        self.func_count = func_count
        self.op_count = op_count
        self.targets: list[int] = []

    def gen(self) -> Iterator[GenLine]:
        self.targets = []
        funcs = Uniform(0, self.func_count)
        yield GenLine(text=f"(func {DRIVER_FUNC}", seq=self.name)
        yield GenLine(text=instr(f"(call {TIMER_FUNC})"), seq=self.name, comment="timer on")
        for i in range(self.op_count):
            target = funcs.sample(self.rng)
            self.targets.append(target)
            yield GenLine(
                text=instr(f"(call {target})"),
                seq=self.name,
                value=target,
                comment=f"call site {i}",
            )
        yield GenLine(text=instr(f"(call {TIMER_FUNC})"), seq=self.name, comment="timer off")
        # $check holds the last called function's constant
        yield GenLine(text=instr(i64_const(1)), seq=self.name)
        yield GenLine(text=instr(f"(global.get {CHECK_GLOBAL})"), seq=self.name)
        yield GenLine(text=instr("(i64.div_u)"), seq=self.name, comment="traps if $check == 0")
        yield GenLine(text=instr("(drop)"), seq=self.name)
        yield GenLine(text=")", seq=self.name)
