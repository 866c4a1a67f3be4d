"""Declaration emitter: matched category variant to CSS declarations."""

from __future__ import annotations

from typing import Any

from breeze.model.decl import Decl


def emit(variant: Any) -> tuple[Decl, ...]:
    """Return the declarations for *variant*.

    Raises:
        ResolutionError: when the variant matched but its value cannot be
            expressed, e.g. a negative ``auto`` margin.
    """
    return variant.to_decls()


def selector_suffix(variant: Any) -> str:
    """Extra selector text a category appends after the class selector."""
    return variant.selector_suffix
