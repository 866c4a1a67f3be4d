"""Shared category contract and the ordered family dispatcher."""

from __future__ import annotations

import re
from typing import Protocol, Sequence

from breeze.model.diagnostic import InvalidArg, TooManyArgs
from breeze.model.outcome import NOT_MINE, Invalid, NotMine, Outcome
from breeze.parser.arguments import ParsedClass, arbitrary_value, extract_arguments
from breeze.parser.errors import ResolutionError
from breeze.tables.registry import LookupTable


class Category(Protocol):
    """One utility category (padding, margin, ...) within a family."""

    name: str
    max_args: int

    def attempt(self, parsed: ParsedClass) -> Outcome: ...


# No utility in any family takes more arguments than this.
MAX_ARGS = 2


class Family:
    """Tries its categories in declared order; the first claim wins.

    A category returning ``Invalid`` ends the chain: a token that structurally
    belongs to one category is never offered to a later one.
    """

    def __init__(
        self, name: str, categories: Sequence[Category], max_args: int = MAX_ARGS
    ) -> None:
        self.name = name
        self.max_args = max_args
        self.categories: tuple[Category, ...] = tuple(categories)

    def resolve(self, token: str) -> Outcome:
        try:
            parsed = extract_arguments(token, self.max_args)
        except ResolutionError as exc:
            return Invalid(exc.warning_type)
        for category in self.categories:
            outcome = category.attempt(parsed)
            if not isinstance(outcome, NotMine):
                return outcome
        return NOT_MINE

    def __repr__(self) -> str:
        names = ", ".join(c.name for c in self.categories)
        return f"Family({self.name!r}, [{names}])"


def check_arg_count(parsed: ParsedClass, max_args: int) -> None:
    if len(parsed.args) > max_args:
        raise ResolutionError(TooManyArgs(received=len(parsed.args), required=max_args))


def reject_negative(parsed: ParsedClass, table: LookupTable) -> None:
    """Categories without negative values still own ``-p-4``; it is invalid."""
    if parsed.negative:
        raise ResolutionError(InvalidArg(received=f"-{parsed.args[0]}", allowed=table.keys()))


def lookup(arg: str, table: LookupTable) -> str:
    """Table value for *arg*, or the literal of an ``[arbitrary]`` argument."""
    value = table.get(arg)
    if value is not None:
        return value
    value = arbitrary_value(arg)
    if value is not None:
        return value
    raise ResolutionError(InvalidArg(received=arg, allowed=table.keys()))


_NUMERIC_RE = re.compile(r"^\.?\d")


def can_negate(value: str) -> bool:
    return bool(_NUMERIC_RE.match(value)) or "(" in value


def negate(value: str) -> str:
    """Negate a CSS length; ValueError if it isn't one (``auto``)."""
    if value in ("0", "0px"):
        return "0px"
    if _NUMERIC_RE.match(value):
        return f"-{value}"
    if "(" in value:
        return f"calc({value} * -1)"
    raise ValueError(f"Cannot negate {value!r}")


def negatable_keys(table: LookupTable) -> tuple[str, ...]:
    return tuple(k for k, v in table.entries.items() if can_negate(v))
