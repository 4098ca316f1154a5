# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for the i64 and uniform draw shapes."""

import pytest

from callbench.core.chacha import ChaChaRng
from callbench.core.distributions import Uniform, gen_i64


class _FixedWords:
    """Replays a fixed list of u64 words."""

    def __init__(self, words):
        self._words = list(words)
        self.consumed = 0

    def next_u64(self):
        self.consumed += 1
        return self._words.pop(0)


def test_gen_i64_reinterprets_as_signed():
    assert gen_i64(_FixedWords([0])) == 0
    assert gen_i64(_FixedWords([0x7FFF_FFFF_FFFF_FFFF])) == 2**63 - 1
    assert gen_i64(_FixedWords([0x8000_0000_0000_0000])) == -(2**63)
    assert gen_i64(_FixedWords([0xFFFF_FFFF_FFFF_FFFF])) == -1


def test_power_of_two_range_uses_top_bits():
    """For 2048 functions every draw is accepted and the index is v >> 53."""
    funcs = Uniform(0, 2048)
    v = 0xDEAD_BEEF_CAFE_F00D
    src = _FixedWords([v])
    assert funcs.sample(src) == v >> 53
    assert src.consumed == 1


def test_rejection_zone_redraws():
    """Range 3 rejects the single draw whose low product half lies above the zone."""
    dist = Uniform(0, 3)
    src = _FixedWords([0x5555_5555_5555_5555, 0])
    assert dist.sample(src) == 0
    assert src.consumed == 2


def test_low_offset():
    dist = Uniform(10, 14)
    src = _FixedWords([0xFFFF_FFFF_FFFF_FFFF])
    assert dist.sample(src) == 13


def test_samples_stay_in_range():
    rng = ChaChaRng.seed_from_u64(0)
    dist = Uniform(0, 7)
    samples = [dist.sample(rng) for _ in range(2000)]
    assert all(0 <= s < 7 for s in samples)
    assert set(samples) == set(range(7))


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        Uniform(0, 0)
