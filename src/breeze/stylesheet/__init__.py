from breeze.stylesheet.builder import build_stylesheet, escape_class, rule_for
from breeze.stylesheet.model import Rule, Stylesheet
from breeze.stylesheet.preflight import preflight_css, with_preflight

__all__ = [
    "build_stylesheet",
    "escape_class",
    "rule_for",
    "Rule",
    "Stylesheet",
    "preflight_css",
    "with_preflight",
]
