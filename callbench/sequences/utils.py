# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Shared masks and WAT text helpers for sequences."""

MASK_32_BIT = 0xFFFF_FFFF
MASK_64_BIT = 0xFFFF_FFFF_FFFF_FFFF

INDENT = "    "


def to_signed_64(value: int) -> int:
    """Reinterpret the low 64 bits of value as a two's complement integer."""
    value &= MASK_64_BIT
    return value - (1 << 64) if value >> 63 else value


def instr(text: str) -> str:
    """One instruction line inside a function body."""
    return f"{INDENT}{text}"


def i64_const(value: int) -> str:
    return f"(i64.const {value})"
