"""Run resolution over many sources and assemble the stylesheet."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from breeze.collect import CollectionOption, collect_tokens
from breeze.model.diagnostic import ClassWarning
from breeze.resolver import ResolutionReport, Resolver
from breeze.stylesheet import build_stylesheet, with_preflight
from breeze.tables.registry import TableRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Source:
    """Source text plus how to find class tokens in it."""

    text: str
    option: CollectionOption = CollectionOption.STRING
    name: str = ""

    @classmethod
    def from_path(
        cls,
        path: Path,
        overrides: Mapping[str, CollectionOption] | None = None,
    ) -> Source:
        option = CollectionOption.for_extension(path.suffix, overrides)
        return cls(text=path.read_text(encoding="utf-8"), option=option, name=str(path))


def _resolve_source(resolver: Resolver, source: Source) -> ResolutionReport:
    tokens = collect_tokens(source.text, source.option, source=source.name)
    report = resolver.resolve_all(tokens)
    logger.debug(
        "%s: %d token(s), %d class(es), %d warning(s)",
        source.name or "<string>",
        len(tokens),
        len(report.classes),
        len(report.warnings),
    )
    return report


def resolve_sources(
    sources: Sequence[Source],
    *,
    registry: TableRegistry | None = None,
    resolver: Resolver | None = None,
    max_workers: int | None = None,
) -> ResolutionReport:
    """Resolve each source in its own worker and merge in input order."""
    resolver = resolver or Resolver(registry)
    merged = ResolutionReport()
    if not sources:
        return merged
    workers = max_workers or min(len(sources), 8)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for report in pool.map(lambda s: _resolve_source(resolver, s), sources):
            merged.extend(report)
    logger.info(
        "Resolved %d class(es) from %d source(s) with %d warning(s)",
        len(merged.classes),
        len(sources),
        len(merged.warnings),
    )
    return merged


def parse_to_string(
    sources: Iterable[Source],
    warnings: list[ClassWarning],
    *,
    registry: TableRegistry | None = None,
    max_workers: int | None = None,
    include_preflight: bool = False,
) -> str:
    """Return the CSS for every class found in *sources*.

    Warnings are appended to *warnings* in source order; they never stop
    classes that did resolve from being emitted. With *include_preflight* the
    packaged base stylesheet comes first.
    """
    report = resolve_sources(list(sources), registry=registry, max_workers=max_workers)
    warnings.extend(report.warnings)
    css = build_stylesheet(report.classes).to_css()
    if include_preflight:
        return with_preflight(css)
    return css
