"""Diagnostic model: typed failure kinds and positioned warnings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class WarningKind(Enum):
    """Closed set of reasons a class token can fail to resolve."""

    STATE_NOT_FOUND = "state_not_found"
    CLASS_NOT_FOUND = "class_not_found"
    TOO_MANY_ARGS = "too_many_args"
    INVALID_ARG = "invalid_arg"


@dataclass(frozen=True)
class WarningType:
    """Base for the failure kinds. Subclasses carry the kind-specific details."""

    @property
    def kind(self) -> WarningKind:
        raise NotImplementedError

    def describe(self, class_name: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class StateNotFound(WarningType):
    """A side, axis, or state prefix that no parser recognizes."""

    state: str

    @property
    def kind(self) -> WarningKind:
        return WarningKind.STATE_NOT_FOUND

    def describe(self, class_name: str) -> str:
        return (
            f"Could not match state at class '{class_name}', "
            f"'{self.state}' is not a valid state"
        )


@dataclass(frozen=True)
class ClassNotFound(WarningType):
    """No family claimed the token."""

    @property
    def kind(self) -> WarningKind:
        return WarningKind.CLASS_NOT_FOUND

    def describe(self, class_name: str) -> str:
        return f"Could not match class '{class_name}'"


@dataclass(frozen=True)
class TooManyArgs(WarningType):
    received: int
    required: int

    @property
    def kind(self) -> WarningKind:
        return WarningKind.TOO_MANY_ARGS

    def describe(self, class_name: str) -> str:
        return (
            f"Could not match class '{class_name}', too many arguments, "
            f"got '{self.received}' but required '{self.required}'"
        )


@dataclass(frozen=True)
class InvalidArg(WarningType):
    """An argument outside the category's table.

    ``allowed`` is the complete key set of the table, in table order, so the
    rendered message lists every accepted value.
    """

    received: str
    allowed: tuple[str, ...]

    @property
    def kind(self) -> WarningKind:
        return WarningKind.INVALID_ARG

    def describe(self, class_name: str) -> str:
        return (
            f"Could not match class '{class_name}', invalid argument "
            f"'{self.received}', possible arguments: '{', '.join(self.allowed)}'"
        )


@dataclass(frozen=True, order=True)
class Position:
    """1-based line and column of a token in its source."""

    line: int
    column: int

    @classmethod
    def from_tuple(cls, pos: tuple[int, int]) -> Position:
        return cls(line=pos[0], column=pos[1])


@dataclass(frozen=True)
class ClassWarning:
    """A fully resolved diagnostic for one offending class token.

    Attributes:
        warning_type: Why the token failed to resolve.
        position: Where the token starts in its source.
        class_name: The offending token, verbatim.
        source: Name of the source the token came from, if known.
    """

    warning_type: WarningType
    position: Position
    class_name: str
    source: str = ""

    @property
    def kind(self) -> WarningKind:
        return self.warning_type.kind

    @property
    def message(self) -> str:
        return self.warning_type.describe(self.class_name)

    def __str__(self) -> str:
        return render_warning(self)


def render_warning(warning: ClassWarning) -> str:
    """Render *warning* as a single human-readable line."""
    location = f"line {warning.position.line}, column {warning.position.column}"
    if warning.source:
        location = f"{warning.source}: {location}"
    return f"Warning on {location}; {warning.message}"


def warning_to_dict(warning: ClassWarning) -> dict[str, Any]:
    """Structured form of *warning*, suitable for JSON output."""
    details: dict[str, Any] = {}
    wt = warning.warning_type
    if isinstance(wt, StateNotFound):
        details["state"] = wt.state
    elif isinstance(wt, TooManyArgs):
        details["received"] = wt.received
        details["required"] = wt.required
    elif isinstance(wt, InvalidArg):
        details["received"] = wt.received
        details["allowed"] = list(wt.allowed)
    return {
        "kind": warning.kind.value,
        "class": warning.class_name,
        "source": warning.source,
        "line": warning.position.line,
        "column": warning.position.column,
        "message": warning.message,
        "details": details,
    }
