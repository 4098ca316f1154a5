# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Module header: timer hook import and the mutable check global."""

from __future__ import annotations

from typing import Iterator

from callbench.testobj import GenLine

from .base import SequenceBase
from .utils import i64_const

TIMER_MODULE = "pricer"
TIMER_FIELD = "toggle_timer"
TIMER_FUNC = "$timer"
CHECK_GLOBAL = "$check"


class ModuleHeader(SequenceBase):
    def gen(self) -> Iterator[GenLine]:
        yield GenLine(
            text=f'(import "{TIMER_MODULE}" "{TIMER_FIELD}" (func {TIMER_FUNC}))',
            seq=self.name,
            comment="timer toggle hook",
        )
        yield GenLine(
            text=f"(global {CHECK_GLOBAL} (mut i64) {i64_const(0)})",
            seq=self.name,
            comment="check value, overwritten by every bank function",
        )
