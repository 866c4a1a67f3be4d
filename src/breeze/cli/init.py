"""CLI command: breeze init -- write a default config file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from breeze.config import DEFAULT_CONFIG_PATH, default_config_json


@click.command()
@click.option("--path", default=DEFAULT_CONFIG_PATH, show_default=True, help="Config file to create")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Generate a default config file."""
    config_path = Path(path)
    if config_path.exists() and not force:
        click.echo(f"{config_path} already exists (use --force to overwrite)", err=True)
        sys.exit(1)
    config_path.write_text(default_config_json(), encoding="utf-8")
    click.echo(f"Created {config_path}")
