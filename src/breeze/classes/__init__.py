"""Utility class families and their categories."""

from breeze.classes.base import Category, Family
from breeze.classes.emit import emit, selector_suffix
from breeze.classes.sizing import Height, HeightVariant, Width, WidthVariant, sizing_family
from breeze.classes.spacing import (
    Margin,
    MarginVariant,
    Padding,
    PaddingVariant,
    Side,
    SpaceBetween,
    SpaceBetweenVariant,
    SpacingVariant,
    spacing_family,
)
from breeze.tables.registry import TableRegistry

__all__ = [
    "Category",
    "Family",
    "emit",
    "selector_suffix",
    "Side",
    "Padding",
    "Margin",
    "SpaceBetween",
    "PaddingVariant",
    "MarginVariant",
    "SpaceBetweenVariant",
    "SpacingVariant",
    "Width",
    "Height",
    "WidthVariant",
    "HeightVariant",
    "spacing_family",
    "sizing_family",
    "default_families",
]


def default_families(registry: TableRegistry) -> tuple[Family, ...]:
    """All families, in the order the resolver tries them."""
    return (spacing_family(registry), sizing_family(registry))
