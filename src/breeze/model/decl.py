"""Decl: a resolved CSS property/value pair."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Decl:
    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value};"
