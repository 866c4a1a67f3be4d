"""Stylesheet model: Rule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from breeze.model.decl import Decl


@dataclass(frozen=True)
class Rule:
    """A selector with its declarations, optionally inside a media query."""

    selector: str
    decls: tuple[Decl, ...]
    media: str = ""  # e.g. "(min-width: 768px)"
    media_rank: int = 0  # breakpoint order; 0 for rules outside @media

    def render(self, indent: str = "") -> str:
        lines = [f"{indent}{self.selector} {{"]
        lines.extend(f"{indent}  {decl}" for decl in self.decls)
        lines.append(f"{indent}}}")
        return "\n".join(lines)


@dataclass
class Stylesheet:
    """Rules in insertion order; rendering groups media rules into blocks."""

    rules: list[Rule] = field(default_factory=list)

    def add(self, rule: Rule) -> None:
        self.rules.append(rule)

    def to_css(self) -> str:
        blocks = [rule.render() for rule in self.rules if not rule.media]

        groups: dict[str, list[Rule]] = {}
        for rule in self.rules:
            if rule.media:
                groups.setdefault(rule.media, []).append(rule)
        # dicts keep first-appearance order, so sorting by rank is stable
        ordered = sorted(groups.items(), key=lambda item: item[1][0].media_rank)
        for media, rules in ordered:
            body = "\n".join(rule.render(indent="  ") for rule in rules)
            blocks.append(f"@media {media} {{\n{body}\n}}")

        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"
