"""Config file commands."""

from __future__ import annotations

import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from viewdeck.config import ViewDeckConfig
from viewdeck.constants import DEFAULT_CONFIG_PATH


@click.group()
def config() -> None:
    """Inspect or create the viewdeck config file."""


@config.command()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, help="Path to config file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(config_path: str, force: bool) -> None:
    """Write the default configuration."""
    path = Path(config_path)
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")
    ViewDeckConfig().save(path)
    click.secho(f"Wrote default config to {path}", fg="green")


@config.command()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, help="Path to config file")
def show(config_path: str) -> None:
    """Print the effective configuration as TOML."""
    try:
        loaded = ViewDeckConfig.load(Path(config_path))
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise click.ClickException(f"Invalid config {config_path}:\n{exc}") from exc
    click.echo(loaded.to_toml(), nl=False)
