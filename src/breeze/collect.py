"""Collect class tokens and their positions from source text."""

from __future__ import annotations

import bisect
import re
from enum import Enum
from typing import Mapping

from breeze.model.diagnostic import Position
from breeze.resolver import SourceToken


class CollectionOption(Enum):
    """How tokens are found in a source."""

    HTML = "html"  # class="..."
    JSX = "jsx"  # class="..." and className="..." / {'...'}
    STRING = "string"  # every whitespace-separated word

    @classmethod
    def for_extension(
        cls, extension: str, overrides: Mapping[str, CollectionOption] | None = None
    ) -> CollectionOption:
        ext = extension.lower().lstrip(".")
        if overrides and ext in overrides:
            return overrides[ext]
        return _EXTENSIONS.get(ext, cls.STRING)


_EXTENSIONS: dict[str, CollectionOption] = {
    "html": CollectionOption.HTML,
    "htm": CollectionOption.HTML,
    "vue": CollectionOption.HTML,
    "svelte": CollectionOption.HTML,
    "jsx": CollectionOption.JSX,
    "tsx": CollectionOption.JSX,
    "js": CollectionOption.JSX,
    "ts": CollectionOption.JSX,
}

# prefixed attributes such as data-class and :class are not class lists
_HTML_ATTR_RE = re.compile(
    r"""(?<![\w:.@-])class\s*=\s*(?P<q>["'])(?P<value>.*?)(?P=q)""", re.DOTALL
)
_JSX_ATTR_RE = re.compile(
    r"""(?<![\w:.@-])class(?:Name)?\s*=\s*\{?\s*(?P<q>["'`])(?P<value>.*?)(?P=q)""", re.DOTALL
)
_WORD_RE = re.compile(r"\S+")


class _LineIndex:
    """Maps absolute offsets in a text to 1-based (line, column)."""

    def __init__(self, text: str) -> None:
        self._starts = [0] + [m.end() for m in re.finditer(r"\n", text)]

    def position(self, offset: int) -> Position:
        line = bisect.bisect_right(self._starts, offset)
        return Position(line=line, column=offset - self._starts[line - 1] + 1)


def collect_tokens(
    text: str, option: CollectionOption, source: str = ""
) -> list[SourceToken]:
    """Return every class token in *text*, in source order."""
    index = _LineIndex(text)
    if option is CollectionOption.STRING:
        spans = [(0, text)]
    else:
        pattern = _HTML_ATTR_RE if option is CollectionOption.HTML else _JSX_ATTR_RE
        spans = [(m.start("value"), m.group("value")) for m in pattern.finditer(text)]

    tokens: list[SourceToken] = []
    for base, value in spans:
        for word in _WORD_RE.finditer(value):
            tokens.append(
                SourceToken(
                    token=word.group(),
                    position=index.position(base + word.start()),
                    source=source,
                )
            )
    return tokens
