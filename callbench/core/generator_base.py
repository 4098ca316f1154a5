# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Base generator: header, function bank, boilerplate, start directive, driver."""

from __future__ import annotations

import logging
from typing import Iterator

from callbench.core.funnels import SimpleFunnel
from callbench.sequences.boilerplate import Boilerplate
from callbench.sequences.driver import DriverFunction, StartDirective
from callbench.sequences.function_bank import FunctionBank
from callbench.sequences.header import ModuleHeader
from callbench.testobj import GenLine


class GeneratorBase:
    def __init__(
        self,
        rng: object,
        func_count: int,
        op_count: int,
        reject_zero: bool = False,
        log: logging.Logger | None = None,
    ) -> None:
        self.rng = rng
        self.header = ModuleHeader(rng, log)
        self.function_bank = FunctionBank(rng, func_count, reject_zero=reject_zero, log=log)
        self.boilerplate = Boilerplate(rng, pages=0, log=log)
        self.start_directive = StartDirective(rng, log)
        self.driver = DriverFunction(rng, func_count, op_count, log=log)

        self.main_funnel = SimpleFunnel()
        self.main_funnel.add_sequence(self.header)
        self.main_funnel.add_sequence(self.function_bank)
        self.main_funnel.add_sequence(self.boilerplate)
        self.main_funnel.add_sequence(self.start_directive)
        self.main_funnel.add_sequence(self.driver)

    def gen(self) -> Iterator[GenLine]:
        yield from self.main_funnel.gen()
