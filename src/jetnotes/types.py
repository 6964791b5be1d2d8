"""Core navigation types.

Defines the set of screens the app can show. These types are imported by
config, the router, and the web layer.
"""

from __future__ import annotations

from enum import StrEnum


class Screen(StrEnum):
    """Top-level screens reachable from the navigation drawer.

    Values are lowercase strings used in ``config.toml`` and the
    ``JETNOTES_START_SCREEN`` environment variable.
    """

    NOTES = "notes"
    TRASH = "trash"

    @property
    def label(self) -> str:
        """Human-readable label shown in the drawer and the top bar."""
        return _SCREEN_LABELS[self]

    @property
    def icon(self) -> str:
        """Material icon name for the drawer button."""
        return _SCREEN_ICONS[self]

    @classmethod
    def parse(cls, value: str) -> Screen:
        """Parse a screen from its value or name, case-insensitively.

        Args:
            value: Screen value or name (e.g. "notes", "TRASH").

        Returns:
            The matching Screen.

        Raises:
            ValueError: If no screen matches.
        """
        normalized = value.strip().lower()
        for screen in cls:
            if normalized in (screen.value, screen.name.lower()):
                return screen
        raise ValueError(
            f"Unknown screen '{value}'. Known screens: {', '.join(s.value for s in cls)}."
        )


_SCREEN_LABELS: dict[Screen, str] = {
    Screen.NOTES: "Notes",
    Screen.TRASH: "Trash",
}

_SCREEN_ICONS: dict[Screen, str] = {
    Screen.NOTES: "home",
    Screen.TRASH: "delete",
}

HEADER_ICON = "menu"
