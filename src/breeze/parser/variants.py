"""State and breakpoint prefixes (``hover:``, ``md:``)."""

from __future__ import annotations

from dataclasses import dataclass

from breeze.model.diagnostic import StateNotFound
from breeze.parser.errors import ResolutionError

PSEUDO_CLASSES: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "active": ":active",
    "visited": ":visited",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "required": ":required",
    "invalid": ":invalid",
    "first": ":first-child",
    "last": ":last-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "empty": ":empty",
    "placeholder": "::placeholder",
}

# Order matters: it is the order media blocks appear in the stylesheet.
MEDIA_QUERIES: dict[str, str] = {
    "sm": "(min-width: 640px)",
    "md": "(min-width: 768px)",
    "lg": "(min-width: 1024px)",
    "xl": "(min-width: 1280px)",
    "2xl": "(min-width: 1536px)",
    "dark": "(prefers-color-scheme: dark)",
}

_MEDIA_RANK = {name: rank for rank, name in enumerate(MEDIA_QUERIES, start=1)}


@dataclass(frozen=True)
class States:
    """Resolved variant prefixes of one token."""

    pseudo: tuple[str, ...] = ()
    media: tuple[str, ...] = ()

    @property
    def selector_suffix(self) -> str:
        return "".join(PSEUDO_CLASSES[p] for p in self.pseudo)

    @property
    def media_query(self) -> str:
        """Combined media condition, or "" when the token has none."""
        return " and ".join(MEDIA_QUERIES[m] for m in self.media)

    @property
    def media_rank(self) -> int:
        return max((_MEDIA_RANK[m] for m in self.media), default=0)


def parse_states(variants: tuple[str, ...]) -> States:
    """Validate *variants*; raises ResolutionError(StateNotFound) on unknown ones."""
    pseudo: list[str] = []
    media: list[str] = []
    for variant in variants:
        if variant in PSEUDO_CLASSES:
            pseudo.append(variant)
        elif variant in MEDIA_QUERIES:
            if variant not in media:
                media.append(variant)
        else:
            raise ResolutionError(StateNotFound(variant))
    return States(pseudo=tuple(pseudo), media=tuple(media))
