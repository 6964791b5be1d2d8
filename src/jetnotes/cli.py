"""CLI entry point for JetNotes.

Provides the ``jetnotes`` command with subcommands for serving the web
UI and managing configuration.

Typical usage::

    jetnotes serve --port 9000
    jetnotes theme on
    jetnotes config show
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from jetnotes import __version__
from jetnotes.config import CONFIG_PATH, Config, load_config, write_config
from jetnotes.display import format_theme, render_config_show

console = Console(stderr=True)


def _load_config_or_exit() -> Config:
    """Load configuration, exiting with a readable error if it is invalid."""
    try:
        return load_config()
    except (ValueError, OSError) as exc:
        console.print(f"[red bold]Error:[/red bold] Invalid configuration: {exc}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="jetnotes")
def main() -> None:
    """Notes app with a navigation drawer and a dark theme switch."""


@main.command()
@click.option("--port", default=None, type=int, help="Port to bind to (default: 8080).")
@click.option("--host", default=None, help="Host to bind to (default: 127.0.0.1).")
@click.option("--no-open", is_flag=True, help="Don't open browser automatically.")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def serve(port: int | None, host: str | None, no_open: bool, verbose: bool) -> None:
    """Start the web UI server."""
    from jetnotes.web.app import create_app

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    cfg = _load_config_or_exit()
    create_app(
        host=host if host is not None else cfg.host,
        port=port if port is not None else cfg.port,
        show=not no_open,
        config=cfg,
    )


@main.command()
@click.argument("state", required=False, type=click.Choice(["on", "off"], case_sensitive=False))
def theme(state: str | None) -> None:
    """Show or set the dark theme.

    With no argument, prints the current setting. With STATE, saves it to
    the configuration file.

    Args:
        state: "on" or "off", or None to print the current value.
    """
    cfg = _load_config_or_exit()

    if state is None:
        click.echo("on" if cfg.dark_theme else "off")
        return

    cfg.set_user_value("dark_theme", state.lower() == "on")
    try:
        write_config(cfg)
    except OSError as exc:
        console.print(f"[red bold]Error:[/red bold] Cannot write to {CONFIG_PATH}: {exc}")
        sys.exit(1)
    console.print(f"Dark theme: {format_theme(cfg.dark_theme)}")


@main.group()
def config() -> None:
    """Manage configuration."""


@config.command()
def path() -> None:
    """Print the configuration file path."""
    click.echo(CONFIG_PATH)


@config.command("show")
def config_show() -> None:
    """Display effective configuration."""
    cfg = _load_config_or_exit()
    render_config_show(cfg, path=CONFIG_PATH)


if __name__ == "__main__":
    main()
