from breeze.parser.arguments import (
    ParsedClass,
    arbitrary_value,
    extract_arguments,
    split_outside_brackets,
    split_variants,
)
from breeze.parser.errors import ResolutionError
from breeze.parser.variants import MEDIA_QUERIES, PSEUDO_CLASSES, States, parse_states

__all__ = [
    "ParsedClass",
    "ResolutionError",
    "States",
    "MEDIA_QUERIES",
    "PSEUDO_CLASSES",
    "arbitrary_value",
    "extract_arguments",
    "parse_states",
    "split_outside_brackets",
    "split_variants",
]
