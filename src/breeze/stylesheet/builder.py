"""Build a Stylesheet from resolved classes.

Example output for ``mt-4 md:hover:px-2``:

    .mt-4 {
      margin-top: 1rem;
    }

    @media (min-width: 768px) {
      .md\\:hover\\:px-2:hover {
        padding-left: 0.5rem;
        padding-right: 0.5rem;
      }
    }
"""

from __future__ import annotations

import re
from typing import Iterable

from breeze.resolver import ResolvedClass
from breeze.stylesheet.model import Rule, Stylesheet

__all__ = ["build_stylesheet", "escape_class", "rule_for"]

# Anything outside [A-Za-z0-9_-] must be backslash-escaped in a class selector.
_ESCAPE_RE = re.compile(r"([^A-Za-z0-9_-])")


def escape_class(token: str) -> str:
    """Escape *token* for use after ``.`` in a CSS selector."""
    escaped = _ESCAPE_RE.sub(r"\\\1", token)
    if escaped[:1].isdigit():
        escaped = f"\\3{escaped[0]} {escaped[1:]}"
    return escaped


def rule_for(resolved: ResolvedClass) -> Rule:
    selector = "." + escape_class(resolved.token) + resolved.selector_suffix
    return Rule(
        selector=selector,
        decls=resolved.decls,
        media=resolved.states.media_query,
        media_rank=resolved.states.media_rank,
    )


def build_stylesheet(classes: Iterable[ResolvedClass]) -> Stylesheet:
    """One rule per distinct token, in first-seen order."""
    sheet = Stylesheet()
    seen: set[str] = set()
    for resolved in classes:
        if resolved.token in seen:
            continue
        seen.add(resolved.token)
        sheet.add(rule_for(resolved))
    return sheet
