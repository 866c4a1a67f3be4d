"""Argument extraction: split a raw token into class name and arguments.

    md:hover:-mt-[calc(1rem-2px)]
    ^^^^^^^^^ variants
             ^ negative
              ^^ class name
                 ^^^^^^^^^^^^^^^^^ arguments (dashes inside [...] don't split)
"""

from __future__ import annotations

from dataclasses import dataclass

from breeze.model.diagnostic import TooManyArgs
from breeze.parser.errors import ResolutionError


@dataclass(frozen=True)
class ParsedClass:
    token: str
    variants: tuple[str, ...]
    negative: bool
    name: str
    args: tuple[str, ...]


def split_outside_brackets(value: str, sep: str) -> list[str]:
    """Split *value* on *sep*, ignoring separators inside ``[...]``."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(value):
        if ch == "[":
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        elif ch == sep and depth == 0:
            parts.append(value[start:i])
            start = i + 1
    parts.append(value[start:])
    return parts


def split_variants(token: str) -> tuple[tuple[str, ...], str]:
    """Return the colon-delimited variant prefixes and the bare utility."""
    *variants, utility = split_outside_brackets(token, ":")
    return tuple(variants), utility


def extract_arguments(token: str, max_args: int) -> ParsedClass:
    """Parse *token*, raising on more than *max_args* arguments.

    Raises:
        ResolutionError: carrying ``TooManyArgs(received, max_args)``.
    """
    variants, utility = split_variants(token)
    negative = utility.startswith("-")
    if negative:
        utility = utility[1:]
    name, *args = split_outside_brackets(utility, "-")
    if len(args) > max_args:
        raise ResolutionError(TooManyArgs(received=len(args), required=max_args))
    return ParsedClass(
        token=token,
        variants=variants,
        negative=negative,
        name=name,
        args=tuple(args),
    )


def arbitrary_value(arg: str) -> str | None:
    """Return the CSS value of an ``[arbitrary]`` argument, or None.

    Underscores stand for spaces. ``[]`` is not a value.
    """
    if len(arg) > 2 and arg.startswith("[") and arg.endswith("]"):
        return arg[1:-1].replace("_", " ")
    return None
