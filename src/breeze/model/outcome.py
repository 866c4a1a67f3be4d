"""Outcome model: the result of one category attempting one token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from breeze.model.diagnostic import WarningType


@dataclass(frozen=True)
class NotMine:
    """The token does not belong to the category; try the next one."""


@dataclass(frozen=True)
class Invalid:
    """The token belongs to the category but cannot be resolved.

    Never retried against a later category.
    """

    reason: WarningType


@dataclass(frozen=True)
class Matched:
    """The category claimed the token and produced a typed variant."""

    variant: Any


Outcome = Union[NotMine, Invalid, Matched]

NOT_MINE = NotMine()
