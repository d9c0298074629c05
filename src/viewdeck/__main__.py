"""CLI entry point for viewdeck."""

from __future__ import annotations

import click

from viewdeck import __version__
from viewdeck.cli.commands.config import config
from viewdeck.constants import DEFAULT_CONFIG_PATH


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Lockable views and awaitable dialogs for Textual."""
    if version:
        click.echo(f"viewdeck {__version__}")
        ctx.exit(0)

    # Run TUI by default if no subcommand
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, help="Path to config file")
@click.option(
    "--locked/--unlocked",
    default=None,
    help="Start with navigation locked (overrides general.start_locked)",
)
def tui(config_path: str = DEFAULT_CONFIG_PATH, locked: bool | None = None) -> None:
    """Run the demo TUI (default command)."""
    # Import here to avoid slow startup for --help/--version
    from viewdeck.app import ViewDeckApp

    app = ViewDeckApp(config_path=config_path, start_locked=locked)
    app.run()


cli.add_command(config)


if __name__ == "__main__":
    cli()
