# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Bank of trivial functions, each storing one random i64 into the check global."""

from __future__ import annotations

import logging
from typing import Iterator

from callbench.core.distributions import gen_i64
from callbench.testobj import GenLine

from .base import SequenceBase
from .header import CHECK_GLOBAL
from .utils import i64_const, instr


class FunctionBank(SequenceBase):
    """
    Emit ``count`` functions, one i64 draw each, in index order.

    With ``reject_zero`` a zero draw is replaced by the next draw, so the
    check global can never be set to 0 by a bank function.
    """

    def __init__(
        self,
        rng: object,
        count: int,
        reject_zero: bool = False,
        log: logging.Logger | None = None,
    ) -> None:
        super().__init__(rng, log)
        self.count = count
        self.reject_zero = reject_zero
        self.values: list[int] = []

    def _draw(self, index: int) -> int:
        value = gen_i64(self.rng)
        while self.reject_zero and value == 0:
            self.log.debug(f"Function {index} drew 0, redrawing")
            value = gen_i64(self.rng)
        return value

    def gen(self) -> Iterator[GenLine]:
        self.values = []
        for i in range(self.count):
            value = self._draw(i)
            self.values.append(value)
            yield GenLine(text="(func", seq=self.name, comment=f"func {i}")
            yield GenLine(
                text=instr(f"(global.set {CHECK_GLOBAL} {i64_const(value)})"),
                seq=self.name,
                value=value,
                comment=f"func {i} constant",
            )
            yield GenLine(text=")", seq=self.name)
