# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Fixed memory and entry-point declarations shared by pricer benchmark modules."""

from __future__ import annotations

import logging
from typing import Iterator

from callbench.testobj import GenLine

from .base import SequenceBase


def memory(pages: int) -> str:
    return f'(memory (export "memory") {pages} {pages})'


def entrypoint_stub() -> str:
    return '(func (export "user_entrypoint") (param i32) (result i32) (i32.const 0))'


class Boilerplate(SequenceBase):
    """Memory declaration followed by the entry-point stub."""

    def __init__(self, rng: object, pages: int = 0, log: logging.Logger | None = None) -> None:
        super().__init__(rng, log)
        self.pages = pages

    def gen(self) -> Iterator[GenLine]:
        yield GenLine(text=memory(self.pages), seq=self.name, comment="memory")
        yield GenLine(text=entrypoint_stub(), seq=self.name, comment="entrypoint stub")
