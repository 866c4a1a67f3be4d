"""Breeze model layer -- public type re-exports."""

from breeze.model.decl import Decl
from breeze.model.diagnostic import (
    ClassNotFound,
    ClassWarning,
    InvalidArg,
    Position,
    StateNotFound,
    TooManyArgs,
    WarningKind,
    WarningType,
    render_warning,
    warning_to_dict,
)
from breeze.model.outcome import NOT_MINE, Invalid, Matched, NotMine, Outcome

__all__ = [
    # decl
    "Decl",
    # diagnostic
    "WarningKind",
    "WarningType",
    "StateNotFound",
    "ClassNotFound",
    "TooManyArgs",
    "InvalidArg",
    "Position",
    "ClassWarning",
    "render_warning",
    "warning_to_dict",
    # outcome
    "NotMine",
    "Invalid",
    "Matched",
    "Outcome",
    "NOT_MINE",
]
