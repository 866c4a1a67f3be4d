"""Spacing family: padding, margin, and space-between utilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from breeze.classes.base import (
    Family,
    check_arg_count,
    lookup,
    negatable_keys,
    negate,
    reject_negative,
)
from breeze.model.decl import Decl
from breeze.model.diagnostic import InvalidArg, StateNotFound
from breeze.model.outcome import NOT_MINE, Invalid, Matched, Outcome
from breeze.parser.arguments import ParsedClass
from breeze.parser.errors import ResolutionError
from breeze.tables.registry import LookupTable, TableRegistry


class Side(Enum):
    ALL = "all"
    X = "x"
    Y = "y"
    TOP = "t"
    RIGHT = "r"
    BOTTOM = "b"
    LEFT = "l"
    START = "s"
    END = "e"


# Property suffixes appended to "padding" / "margin" for each side.
SIDE_SUFFIXES: dict[Side, tuple[str, ...]] = {
    Side.ALL: ("",),
    Side.X: ("-left", "-right"),
    Side.Y: ("-top", "-bottom"),
    Side.TOP: ("-top",),
    Side.RIGHT: ("-right",),
    Side.BOTTOM: ("-bottom",),
    Side.LEFT: ("-left",),
    Side.START: ("-inline-start",),
    Side.END: ("-inline-end",),
}


def _sides(prefix: str) -> dict[str, Side]:
    """Class names for a prefix: p -> ALL, px -> X, pt -> TOP, ..."""
    names = {prefix: Side.ALL}
    for side in Side:
        if side is not Side.ALL:
            names[prefix + side.value] = side
    return names


def _side_decls(prop: str, side: Side, value: str) -> tuple[Decl, ...]:
    return tuple(Decl(prop + suffix, value) for suffix in SIDE_SUFFIXES[side])


def _negated(key: str, value: str, negatable: tuple[str, ...]) -> str:
    try:
        return negate(value)
    except ValueError:
        raise ResolutionError(InvalidArg(received=key, allowed=negatable)) from None


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PaddingVariant:
    side: Side
    value: str

    selector_suffix: ClassVar[str] = ""

    def to_decls(self) -> tuple[Decl, ...]:
        return _side_decls("padding", self.side, self.value)


@dataclass(frozen=True)
class MarginVariant:
    side: Side
    key: str
    value: str
    negative: bool = False
    negatable: tuple[str, ...] = ()

    selector_suffix: ClassVar[str] = ""

    def to_decls(self) -> tuple[Decl, ...]:
        value = self.value
        if self.negative:
            value = _negated(self.key, value, self.negatable)
        return _side_decls("margin", self.side, value)


@dataclass(frozen=True)
class SpaceBetweenVariant:
    """Gap between children, expressed as margins on every child but the first.

    ``reverse`` variants only flip the direction variable; they carry no value.
    """

    axis: str  # "x" or "y"
    key: str = ""
    value: str = ""
    reverse: bool = False
    negative: bool = False
    negatable: tuple[str, ...] = ()

    selector_suffix: ClassVar[str] = " > :not([hidden]) ~ :not([hidden])"

    def to_decls(self) -> tuple[Decl, ...]:
        var = f"--tw-space-{self.axis}-reverse"
        if self.reverse:
            return (Decl(var, "1"),)
        value = self.value
        if self.negative:
            value = _negated(self.key, value, self.negatable)
        forward = f"calc({value} * calc(1 - var({var})))"
        backward = f"calc({value} * var({var}))"
        if self.axis == "x":
            return (
                Decl(var, "0"),
                Decl("margin-right", backward),
                Decl("margin-left", forward),
            )
        return (
            Decl(var, "0"),
            Decl("margin-top", forward),
            Decl("margin-bottom", backward),
        )


SpacingVariant = Union[PaddingVariant, MarginVariant, SpaceBetweenVariant]


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class Padding:
    name = "padding"
    max_args = 1
    SIDES = _sides("p")

    def __init__(self, table: LookupTable) -> None:
        self._table = table

    def attempt(self, parsed: ParsedClass) -> Outcome:
        side = self.SIDES.get(parsed.name)
        if side is None or not parsed.args:
            return NOT_MINE
        try:
            check_arg_count(parsed, self.max_args)
            reject_negative(parsed, self._table)
            value = lookup(parsed.args[0], self._table)
        except ResolutionError as exc:
            return Invalid(exc.warning_type)
        return Matched(PaddingVariant(side=side, value=value))


class Margin:
    name = "margin"
    max_args = 1
    SIDES = _sides("m")

    def __init__(self, table: LookupTable) -> None:
        self._table = table
        self._negatable = negatable_keys(table)

    def attempt(self, parsed: ParsedClass) -> Outcome:
        side = self.SIDES.get(parsed.name)
        if side is None or not parsed.args:
            return NOT_MINE
        try:
            check_arg_count(parsed, self.max_args)
            key = parsed.args[0]
            value = lookup(key, self._table)
        except ResolutionError as exc:
            return Invalid(exc.warning_type)
        return Matched(
            MarginVariant(
                side=side,
                key=key,
                value=value,
                negative=parsed.negative,
                negatable=self._negatable,
            )
        )


class SpaceBetween:
    """``space-{x|y}-{key}`` and ``space-{x|y}-reverse``."""

    name = "space_between"
    max_args = 2
    AXES = ("x", "y")

    def __init__(self, table: LookupTable) -> None:
        self._table = table
        self._negatable = negatable_keys(table)

    def attempt(self, parsed: ParsedClass) -> Outcome:
        if parsed.name != "space" or not parsed.args:
            return NOT_MINE
        axis = parsed.args[0]
        if axis not in self.AXES:
            return Invalid(StateNotFound(axis))
        arg = parsed.args[1] if len(parsed.args) > 1 else ""
        if arg == "reverse" and not parsed.negative:
            return Matched(SpaceBetweenVariant(axis=axis, reverse=True))
        try:
            check_arg_count(parsed, self.max_args)
            value = lookup(arg, self._table)
        except ResolutionError as exc:
            return Invalid(exc.warning_type)
        return Matched(
            SpaceBetweenVariant(
                axis=axis,
                key=arg,
                value=value,
                negative=parsed.negative,
                negatable=self._negatable,
            )
        )


def spacing_family(registry: TableRegistry) -> Family:
    """Padding, then margin, then space-between."""
    return Family(
        "spacing",
        categories=(
            Padding(registry["padding"]),
            Margin(registry["margin"]),
            SpaceBetween(registry["space_between"]),
        ),
    )
