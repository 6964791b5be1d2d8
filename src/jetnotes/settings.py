"""Process-wide theme settings.

Holds the dark-theme flag shared by every connected client. Components
read it with ``get()``, change it with ``set()``, and re-render through
``subscribe()`` instead of touching a shared variable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from jetnotes.config import Config, write_config

logger = logging.getLogger(__name__)

ThemeListener = Callable[[bool], None]


class ThemeSettings:
    """Observable dark-theme flag.

    Listeners are called synchronously, in subscription order, after the
    flag changes. Writing the current value again does not notify.
    """

    def __init__(self, dark: bool = False) -> None:
        if not isinstance(dark, bool):
            raise TypeError(f"dark must be a bool, got {type(dark).__name__}")
        self._dark = dark
        self._listeners: list[ThemeListener] = []

    @classmethod
    def persisting(cls, config: Config, path: Path | None = None) -> ThemeSettings:
        """Create settings seeded from ``config`` that save every change.

        Args:
            config: Loaded configuration. Its ``dark_theme`` field is kept
                in sync with the flag. Values that came from environment
                variables are not written to the file.
            path: Config file to write. Defaults to CONFIG_PATH.

        Returns:
            A ThemeSettings instance with a persistence listener attached.
        """
        settings = cls(config.dark_theme)

        def persist(value: bool) -> None:
            config.set_user_value("dark_theme", value)
            write_config(config, path)
            logger.info("Saved dark theme setting: %s", value)

        settings.subscribe(persist)
        return settings

    @property
    def is_dark_theme_enabled(self) -> bool:
        """Whether the dark palette is active."""
        return self._dark

    @is_dark_theme_enabled.setter
    def is_dark_theme_enabled(self, value: bool) -> None:
        self.set(value)

    def get(self) -> bool:
        """Return the current dark-theme flag."""
        return self._dark

    def set(self, value: bool) -> None:
        """Set the dark-theme flag and notify listeners if it changed.

        Args:
            value: New flag value.

        Raises:
            TypeError: If ``value`` is not a bool.
        """
        if not isinstance(value, bool):
            raise TypeError(f"value must be a bool, got {type(value).__name__}")
        if value == self._dark:
            return
        logger.debug("Dark theme %s", "enabled" if value else "disabled")
        self._dark = value
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Theme listener failed")

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a listener for flag changes.

        Args:
            listener: Called with the new value after each change.

        Returns:
            A callable that removes the listener. Calling it twice is a no-op.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
