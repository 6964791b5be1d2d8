"""Terminal display for JetNotes settings.

Typical usage::

    from jetnotes.display import render_config_show

    render_config_show(load_config())
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from jetnotes.config import Config

console = Console()


def format_theme(dark: bool) -> str:
    """Format the dark theme flag for terminal output.

    Args:
        dark: Dark theme flag.

    Returns:
        Rich markup string, "on" or "off".
    """
    return "[green]on[/green]" if dark else "[dim]off[/dim]"


def render_config_show(config: Config, *, path: Path | None = None) -> None:
    """Render the effective configuration as a Rich table.

    Args:
        config: Effective configuration (file plus environment).
        path: Config file location, shown in the table caption.
    """
    table = Table(show_header=True, padding=(0, 1), caption=str(path) if path else None)
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("Dark theme", format_theme(config.dark_theme))
    table.add_row("Start screen", config.start_screen.label)
    table.add_row("Host", config.host)
    table.add_row("Port", str(config.port))

    console.print()
    console.print(table)
    console.print()
