"""Top-level resolver: variant prefixes, then families in order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from breeze.classes import Family, default_families, emit, selector_suffix
from breeze.model.decl import Decl
from breeze.model.diagnostic import ClassNotFound, Position, ClassWarning
from breeze.model.outcome import Invalid, NotMine
from breeze.parser.arguments import split_variants
from breeze.parser.errors import ResolutionError
from breeze.parser.variants import States, parse_states
from breeze.tables.registry import TableRegistry, default_registry


@dataclass(frozen=True)
class SourceToken:
    """A raw class token and where it was found."""

    token: str
    position: Position
    source: str = ""


@dataclass(frozen=True)
class ResolvedClass:
    token: str
    states: States
    variant: Any
    decls: tuple[Decl, ...]

    @property
    def selector_suffix(self) -> str:
        return self.states.selector_suffix + selector_suffix(self.variant)


@dataclass
class ResolutionReport:
    """Resolved classes (first occurrence of each token) and every warning."""

    classes: list[ResolvedClass] = field(default_factory=list)
    warnings: list[ClassWarning] = field(default_factory=list)

    def extend(self, other: ResolutionReport) -> None:
        seen = {c.token for c in self.classes}
        self.classes.extend(c for c in other.classes if c.token not in seen)
        self.warnings.extend(other.warnings)


class Resolver:
    """Resolves class tokens against an ordered sequence of families.

    The first family that does not answer ``NotMine`` owns the token, whether
    it resolves it or rejects it. Tokens no family claims are ``ClassNotFound``.
    """

    def __init__(
        self,
        registry: TableRegistry | None = None,
        families: Sequence[Family] | None = None,
    ) -> None:
        if families is None:
            families = default_families(registry or default_registry())
        self.families: tuple[Family, ...] = tuple(families)

    def resolve(self, token: str) -> ResolvedClass:
        """Resolve one token.

        Raises:
            ResolutionError: carrying the WarningType explaining the failure.
        """
        variants, utility = split_variants(token)
        states = parse_states(variants)
        for family in self.families:
            outcome = family.resolve(utility)
            if isinstance(outcome, NotMine):
                continue
            if isinstance(outcome, Invalid):
                raise ResolutionError(outcome.reason)
            decls = emit(outcome.variant)
            return ResolvedClass(
                token=token, states=states, variant=outcome.variant, decls=decls
            )
        raise ResolutionError(ClassNotFound())

    def resolve_all(self, tokens: Iterable[SourceToken]) -> ResolutionReport:
        """Resolve every token, collecting one warning per failed occurrence."""
        report = ResolutionReport()
        cache: dict[str, ResolvedClass | ResolutionError] = {}
        for item in tokens:
            result = cache.get(item.token)
            if result is None:
                try:
                    result = self.resolve(item.token)
                except ResolutionError as exc:
                    result = exc
                else:
                    report.classes.append(result)
                cache[item.token] = result
            if isinstance(result, ResolutionError):
                report.warnings.append(
                    ClassWarning(
                        warning_type=result.warning_type,
                        position=item.position,
                        class_name=item.token,
                        source=item.source,
                    )
                )
        return report
