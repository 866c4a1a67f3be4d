"""CLI command: breeze build -- scan content files and write the stylesheet."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Mapping

import click

from breeze.collect import CollectionOption
from breeze.config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from breeze.content import find_content
from breeze.engine import Source, parse_to_string
from breeze.model.diagnostic import ClassWarning, render_warning, warning_to_dict

logger = logging.getLogger(__name__)


def _read_sources(
    paths: list[Path], overrides: Mapping[str, CollectionOption]
) -> list[Source]:
    sources: list[Source] = []
    for path in paths:
        try:
            sources.append(Source.from_path(path, overrides))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
    return sources


def _echo_warnings(warnings: list[ClassWarning], fmt: str) -> None:
    if fmt == "json":
        click.echo(json.dumps([warning_to_dict(w) for w in warnings], indent=2), err=True)
        return
    for warning in warnings:
        click.echo(render_warning(warning), err=True)


@click.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the config file",
)
@click.option("-o", "--output", default=None, help="Output CSS file (overrides config)")
@click.option("-j", "--jobs", default=None, type=int, help="Worker threads for resolution")
@click.option(
    "-p",
    "--include-preflight",
    is_flag=True,
    help="Write the preflight base styles before the generated rules",
)
@click.option(
    "--warnings-format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="How warnings are printed",
)
@click.option("--strict", is_flag=True, help="Exit with code 1 if there are warnings")
def build(
    config_path: str,
    output: str | None,
    jobs: int | None,
    include_preflight: bool,
    warnings_format: str,
    strict: bool,
) -> None:
    """Generate CSS for every utility class in the configured content files.

    Warnings are printed to stderr, one per unresolved class occurrence; they
    never stop the stylesheet from being written.
    """
    try:
        config = load_config(config_path)
        overrides = config.collection_overrides()
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    paths = find_content(config.content)
    sources = _read_sources(paths, overrides)

    warnings: list[ClassWarning] = []
    css = parse_to_string(
        sources, warnings, max_workers=jobs, include_preflight=include_preflight
    )

    out_path = Path(output or config.output)
    out_path.write_text(css, encoding="utf-8")

    _echo_warnings(warnings, warnings_format)
    click.echo(
        f"Wrote {out_path} from {len(sources)} file(s) with {len(warnings)} warning(s)"
    )
    if strict and warnings:
        sys.exit(1)
