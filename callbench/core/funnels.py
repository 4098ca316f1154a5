# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Funnels for combining sequences."""

from __future__ import annotations

from typing import Any, Iterator


class FunnelBase:
    def __init__(self) -> None:
        self._seqs: list = []

    def add_sequence(self, seq: object) -> FunnelBase:
        self._seqs.append(seq)
        return self

    def gen(self) -> Iterator[Any]:
        raise NotImplementedError


class SimpleFunnel(FunnelBase):
    """Run producers in order; each starts only once the previous one is exhausted."""

    def gen(self) -> Iterator[Any]:
        for producer in self._seqs:
            yield from producer.gen()
