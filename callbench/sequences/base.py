# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Base class for sequences; holds the shared stream and a child logger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from callbench.core.chacha import ChaChaRng
    from callbench.testobj import GenLine


class SequenceBase:
    """
    Minimal base for sequences: rng, name, log.

    All sequences of one module share the same ``rng`` instance. Sequences
    that draw from it must do so only inside ``gen()`` so that the funnel's
    ordering decides the draw order.
    """

    def __init__(self, rng: ChaChaRng, log: logging.Logger | None = None) -> None:
        self.rng = rng
        self.name = self.__class__.__name__
        parent = log if log is not None else logging.getLogger("callbench")
        self.log = parent.getChild(self.name)

    def gen(self) -> Iterator[GenLine]:
        raise NotImplementedError
