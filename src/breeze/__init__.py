"""Breeze -- utility-class to CSS resolution engine."""

__version__ = "0.1.0"

from breeze.engine import Source, parse_to_string, resolve_sources  # noqa: E402
from breeze.model import ClassWarning, Decl, Position, WarningType  # noqa: E402
from breeze.resolver import ResolvedClass, Resolver, SourceToken  # noqa: E402
from breeze.tables import TableRegistry, default_registry  # noqa: E402

__all__ = [
    "__version__",
    "Decl",
    "Position",
    "ResolvedClass",
    "Resolver",
    "Source",
    "SourceToken",
    "TableRegistry",
    "ClassWarning",
    "WarningType",
    "default_registry",
    "parse_to_string",
    "resolve_sources",
]
