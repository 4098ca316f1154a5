# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Draw shapes over a shared ChaCha stream (rand 0.8 Standard and UniformInt)."""

from __future__ import annotations

from typing import Protocol

from callbench.sequences.utils import MASK_64_BIT, to_signed_64


class WordSource(Protocol):
    def next_u64(self) -> int: ...


def gen_i64(rng: WordSource) -> int:
    """Full-range signed 64-bit draw."""
    return to_signed_64(rng.next_u64())


class Uniform:
    """
    Uniform integer in [low, high), sampled with a 64-bit widening multiply.

    Draws whose low product half falls above the acceptance zone are
    rejected and redrawn, so the result is unbiased for any range size.
    """

    def __init__(self, low: int, high: int) -> None:
        if not low < high:
            raise ValueError(f"Uniform requires low < high, got [{low}, {high})")
        self.low = low
        self.range = (high - low) & MASK_64_BIT
        if self.range:
            ints_to_reject = (MASK_64_BIT - self.range + 1) % self.range
        else:
            ints_to_reject = 0
        self.zone = MASK_64_BIT - ints_to_reject

    def sample(self, rng: WordSource) -> int:
        if not self.range:
            return self.low + rng.next_u64()
        while True:
            v = rng.next_u64()
            product = v * self.range
            hi, lo = product >> 64, product & MASK_64_BIT
            if lo <= self.zone:
                return self.low + hi
