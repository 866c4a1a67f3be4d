"""Sizing family: width and height utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from breeze.classes.base import Family, check_arg_count, lookup, reject_negative
from breeze.model.decl import Decl
from breeze.model.outcome import NOT_MINE, Invalid, Matched, Outcome
from breeze.parser.arguments import ParsedClass
from breeze.parser.errors import ResolutionError
from breeze.tables.registry import LookupTable, TableRegistry


@dataclass(frozen=True)
class WidthVariant:
    value: str

    selector_suffix: ClassVar[str] = ""

    def to_decls(self) -> tuple[Decl, ...]:
        return (Decl("width", self.value),)


@dataclass(frozen=True)
class HeightVariant:
    value: str

    selector_suffix: ClassVar[str] = ""

    def to_decls(self) -> tuple[Decl, ...]:
        return (Decl("height", self.value),)


class _Dimension:
    prefix: ClassVar[str]
    variant: ClassVar[type]
    max_args = 1

    def __init__(self, table: LookupTable) -> None:
        self._table = table

    def attempt(self, parsed: ParsedClass) -> Outcome:
        if parsed.name != self.prefix or not parsed.args:
            return NOT_MINE
        try:
            check_arg_count(parsed, self.max_args)
            reject_negative(parsed, self._table)
            value = lookup(parsed.args[0], self._table)
        except ResolutionError as exc:
            return Invalid(exc.warning_type)
        return Matched(self.variant(value))


class Width(_Dimension):
    name = "width"
    prefix = "w"
    variant = WidthVariant


class Height(_Dimension):
    name = "height"
    prefix = "h"
    variant = HeightVariant


def sizing_family(registry: TableRegistry) -> Family:
    return Family("sizing", categories=(Width(registry["width"]), Height(registry["height"])))
