# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""ChaCha block RNG, word-compatible with rand_chacha's ChaCha{8,12,20}Rng."""

from __future__ import annotations

import struct

from callbench.sequences.utils import MASK_32_BIT, MASK_64_BIT

# "expand 32-byte k"
CHACHA_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
BLOCK_WORDS = 16
BUF_BLOCKS = 4
RESULTS_LEN = BLOCK_WORDS * BUF_BLOCKS
SEED_BYTES = 32

PCG_MUL = 6364136223846793005
PCG_INC = 11634580027462260723


def _rotl32(v: int, c: int) -> int:
    return ((v << c) & MASK_32_BIT) | (v >> (32 - c))


def _quarter_round(x: list[int], a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & MASK_32_BIT
    x[d] = _rotl32(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & MASK_32_BIT
    x[b] = _rotl32(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & MASK_32_BIT
    x[d] = _rotl32(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & MASK_32_BIT
    x[b] = _rotl32(x[b] ^ x[c], 7)


def chacha_block(key: tuple[int, ...], counter: int, stream: int, rounds: int) -> list[int]:
    """One 16-word keystream block (64-bit counter in words 12-13, stream in 14-15)."""
    state = [
        *CHACHA_CONSTANTS,
        *key,
        counter & MASK_32_BIT,
        (counter >> 32) & MASK_32_BIT,
        stream & MASK_32_BIT,
        (stream >> 32) & MASK_32_BIT,
    ]
    x = list(state)
    for _ in range(rounds // 2):
        _quarter_round(x, 0, 4, 8, 12)
        _quarter_round(x, 1, 5, 9, 13)
        _quarter_round(x, 2, 6, 10, 14)
        _quarter_round(x, 3, 7, 11, 15)
        _quarter_round(x, 0, 5, 10, 15)
        _quarter_round(x, 1, 6, 11, 12)
        _quarter_round(x, 2, 7, 8, 13)
        _quarter_round(x, 3, 4, 9, 14)
    return [(w + s) & MASK_32_BIT for w, s in zip(x, state)]


def _pcg32(state: int) -> tuple[int, bytes]:
    state = (state * PCG_MUL + PCG_INC) & MASK_64_BIT
    xorshifted = (((state >> 18) ^ state) >> 27) & MASK_32_BIT
    rot = state >> 59
    out = ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK_32_BIT
    return state, struct.pack("<I", out)


def seed_bytes_from_u64(state: int) -> bytes:
    """Expand a u64 into a 32-byte key using PCG32, as rand_core's seed_from_u64 does."""
    state &= MASK_64_BIT
    chunks = []
    for _ in range(SEED_BYTES // 4):
        state, chunk = _pcg32(state)
        chunks.append(chunk)
    return b"".join(chunks)


class ChaChaRng:
    """
    Buffered ChaCha generator.

    Holds four blocks (64 words) at a time. ``next_u64`` joins two words
    little-endian; when only the last word of the buffer is left it becomes
    the low half and the first word of the next buffer the high half.
    """

    def __init__(self, seed: bytes, rounds: int = 8, stream: int = 0) -> None:
        if len(seed) != SEED_BYTES:
            raise ValueError(f"ChaCha seed must be {SEED_BYTES} bytes, got {len(seed)}")
        if rounds <= 0 or rounds % 2:
            raise ValueError(f"ChaCha rounds must be a positive even number, got {rounds}")
        self.rounds = rounds
        self.stream = stream & MASK_64_BIT
        self._key = struct.unpack("<8I", seed)
        self._counter = 0
        self._results: list[int] = [0] * RESULTS_LEN
        self._index = RESULTS_LEN

    @classmethod
    def seed_from_u64(cls, state: int, rounds: int = 8) -> ChaChaRng:
        return cls(seed_bytes_from_u64(state), rounds=rounds)

    def _generate(self) -> None:
        results: list[int] = []
        for i in range(BUF_BLOCKS):
            counter = (self._counter + i) & MASK_64_BIT
            results.extend(chacha_block(self._key, counter, self.stream, self.rounds))
        self._counter = (self._counter + BUF_BLOCKS) & MASK_64_BIT
        self._results = results

    def next_u32(self) -> int:
        if self._index >= RESULTS_LEN:
            self._generate()
            self._index = 0
        value = self._results[self._index]
        self._index += 1
        return value

    def next_u64(self) -> int:
        index = self._index
        if index < RESULTS_LEN - 1:
            self._index += 2
            return (self._results[index + 1] << 32) | self._results[index]
        if index >= RESULTS_LEN:
            self._generate()
            self._index = 2
            return (self._results[1] << 32) | self._results[0]
        low = self._results[RESULTS_LEN - 1]
        self._generate()
        self._index = 1
        return (self._results[0] << 32) | low
