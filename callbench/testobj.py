# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""GenLine and FixtureItem for module text generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class GenLine:
    """One generated line of module text, tagged with the sequence that produced it."""

    def __init__(
        self,
        text: Optional[str] = None,
        seq: Optional[str] = None,
        value: Optional[int] = None,
        comment: Optional[str] = None,
    ) -> None:
        assert text is not None, "text needs to be specified"
        assert seq is not None, "seq needs to be specified"
        self.text = text
        self.seq = seq
        self.value = value
        self.comment = comment

    def __str__(self) -> str:
        return f"GenLine({self.seq}): {self.comment} || {self.text}"

    def export_to_fixture_item(self) -> "FixtureItem":
        return FixtureItem(
            text=self.text,
            seq=self.seq,
            value=self.value,
            comment=self.comment or "",
        )


@dataclass
class FixtureItem:
    """Exported line for the debug YAML."""

    text: str
    seq: str
    value: Optional[int]
    comment: str
