"""Expand config content patterns into source file paths."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

_BRACE_RE = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """``*.{html,jsx}`` -> ``["*.html", "*.jsx"]``. One level of braces only."""
    match = _BRACE_RE.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for alternative in match.group(1).split(","):
        expanded.extend(expand_braces(head + alternative + tail))
    return expanded


def find_content(patterns: Iterable[str], root: Path | None = None) -> list[Path]:
    """Files named by *patterns*, relative to *root*, without duplicates.

    A directory contributes its direct children that are files; anything else
    is treated as a glob pattern (``*``, ``**``, ``{a,b}``).
    """
    root = root or Path.cwd()
    found: list[Path] = []
    seen: set[Path] = set()

    def _add(path: Path) -> None:
        if path.is_file() and path not in seen:
            seen.add(path)
            found.append(path)

    for pattern in patterns:
        candidate = root / pattern
        if candidate.is_dir():
            for child in sorted(candidate.iterdir()):
                _add(child)
            continue
        matches = 0
        for expanded in expand_braces(pattern):
            path = Path(expanded)
            if path.is_absolute():
                paths = Path(path.anchor).glob(str(path.relative_to(path.anchor)))
            else:
                paths = root.glob(expanded)
            for path in sorted(paths):
                matches += 1
                _add(path)
        if not matches:
            logger.warning("Content pattern %r matched no files", pattern)
    return found
