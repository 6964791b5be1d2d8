"""Configuration management for JetNotes.

Handles the persisted appearance setting (dark theme), the screen shown
on startup, and web server defaults. Configuration is loaded from a TOML
file (~/.jetnotes/config.toml) with environment variable overrides.

Typical usage::

    from jetnotes.config import load_config, write_config

    config = load_config()
    config.set_user_value("dark_theme", True)
    write_config(config)
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jetnotes.types import Screen

APP_DIR = Path.home() / ".jetnotes"
CONFIG_PATH = APP_DIR / "config.toml"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Application configuration.

    Attributes:
        dark_theme: Whether the dark palette is enabled at startup.
        start_screen: Screen shown when a client first connects.
        host: Default bind address for ``jetnotes serve``.
        port: Default port for ``jetnotes serve``.
        _file_values: Values that environment variables replaced, keyed by
            field name. ``write_config`` writes these instead of the
            overrides so a one-off variable never reaches the file.
    """

    dark_theme: bool = False
    start_screen: Screen = Screen.NOTES
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    _file_values: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def set_user_value(self, name: str, value: Any) -> None:
        """Set a field the user chose explicitly.

        The value is written by ``write_config`` even if an environment
        variable overrode the same field at load time.

        Args:
            name: Field name (e.g. "dark_theme").
            value: New value.
        """
        setattr(self, name, value)
        self._file_values.pop(name, None)

    def persisted_value(self, name: str) -> Any:
        """Return the value ``write_config`` should store for a field."""
        return self._file_values.get(name, getattr(self, name))


def parse_bool(value: str) -> bool:
    """Parse a boolean from an environment-style string.

    Args:
        value: One of 1/true/yes/on or 0/false/no/off, any case.

    Returns:
        The parsed boolean.

    Raises:
        ValueError: If the string is not a recognised boolean.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid boolean '{value}'. Use one of: "
        f"{', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}."
    )


def _apply_toml(config: Config, data: dict[str, Any]) -> None:
    """Apply parsed TOML data to a Config instance.

    Args:
        config: Config instance to populate.
        data: Parsed TOML dictionary.

    Raises:
        ValueError: If a value has the wrong type or names an unknown screen.
    """
    # --- Appearance ---
    appearance = _table(data, "appearance")
    if "dark_theme" in appearance:
        dark = appearance["dark_theme"]
        if not isinstance(dark, bool):
            raise ValueError(f"[appearance].dark_theme must be true or false, got {dark!r}.")
        config.dark_theme = dark

    # --- Navigation ---
    navigation = _table(data, "navigation")
    if "start_screen" in navigation:
        start = navigation["start_screen"]
        if not isinstance(start, str):
            raise ValueError(f"[navigation].start_screen must be a string, got {start!r}.")
        config.start_screen = Screen.parse(start)

    # --- Server ---
    server = _table(data, "server")
    if "host" in server:
        host = server["host"]
        if not isinstance(host, str):
            raise ValueError(f"[server].host must be a string, got {host!r}.")
        config.host = host
    if "port" in server:
        port = server["port"]
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError(f"[server].port must be an integer, got {port!r}.")
        config.port = port


def _table(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level TOML table, or an empty dict if it is absent.

    Raises:
        ValueError: If ``name`` is present but is not a table.
    """
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"[{name}] must be a table, got {value!r}.")
    return value


def _apply_env_overrides(config: Config) -> None:
    """Apply environment variable overrides.

    Empty variables are ignored.

    Args:
        config: Config instance to update.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    dark = os.environ.get("JETNOTES_DARK_THEME", "")
    if dark:
        config._file_values.setdefault("dark_theme", config.dark_theme)
        config.dark_theme = parse_bool(dark)

    start = os.environ.get("JETNOTES_START_SCREEN", "")
    if start:
        config._file_values.setdefault("start_screen", config.start_screen)
        config.start_screen = Screen.parse(start)


def load_config() -> Config:
    """Load configuration from file and environment.

    Resolution order for each setting:
        1. JETNOTES_* environment variable
        2. config.toml
        3. Built-in default

    Returns:
        Populated Config instance.

    Raises:
        ValueError: If the file or environment holds an invalid value.
    """
    config = Config()

    if CONFIG_PATH.exists():
        with open(CONFIG_PATH, "rb") as f:
            _apply_toml(config, tomllib.load(f))

    _apply_env_overrides(config)

    return config


def write_config(config: Config, path: Path | None = None) -> None:
    """Serialize a Config to TOML and write to disk.

    Values that came from environment variables are not written; the
    value loaded from the file (or the default) is kept instead. If the
    file already exists, its permissions are preserved after write.

    Args:
        config: Config instance to serialize.
        path: File path to write. Defaults to CONFIG_PATH.
    """
    import tomlkit

    target = path or CONFIG_PATH

    # Capture existing permissions before overwriting.
    existing_mode: int | None = None
    if target.exists():
        existing_mode = target.stat().st_mode & 0o777

    doc = tomlkit.document()

    appearance_table = tomlkit.table()
    appearance_table.add("dark_theme", config.persisted_value("dark_theme"))
    doc.add("appearance", appearance_table)

    navigation_table = tomlkit.table()
    navigation_table.add("start_screen", Screen(config.persisted_value("start_screen")).value)
    doc.add("navigation", navigation_table)

    server_table = tomlkit.table()
    server_table.add("host", config.persisted_value("host"))
    server_table.add("port", config.persisted_value("port"))
    doc.add("server", server_table)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(tomlkit.dumps(doc), encoding="utf-8")

    if existing_mode is not None:
        target.chmod(existing_mode)
