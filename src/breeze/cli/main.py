"""Breeze CLI entry point: Click group with subcommands."""

import logging

import click

from breeze import __version__


@click.group()
@click.version_option(version=__version__, prog_name="breeze")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Breeze - generate CSS from utility classes found in your sources."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from breeze.cli.build import build  # noqa: E402
from breeze.cli.init import init  # noqa: E402

cli.add_command(build)
cli.add_command(init)
