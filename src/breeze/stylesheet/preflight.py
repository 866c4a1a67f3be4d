"""The packaged base stylesheet written ahead of generated rules."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources


@lru_cache(maxsize=1)
def preflight_css() -> str:
    """Return ``preflight.css`` from package data, ending in a single newline."""
    text = (resources.files("breeze.stylesheet") / "preflight.css").read_text(encoding="utf-8")
    return text.rstrip("\n") + "\n"


def with_preflight(css: str) -> str:
    """Prefix *css* with the preflight, separated by a blank line."""
    if not css:
        return preflight_css()
    return f"{preflight_css()}\n{css}"
