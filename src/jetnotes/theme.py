"""Theme palettes for the web UI.

Defines the light and dark colour sets the drawer is drawn with, plus a
helper that turns a hex colour and an alpha into a CSS ``rgba()`` value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{6})$")

# Brand green, shared by both palettes.
JETNOTES_GREEN = "#006837"


@dataclass(frozen=True)
class Palette:
    """Colours used by the drawer.

    Attributes:
        primary: Accent colour for the selected item.
        surface: Background of drawer items.
        on_surface: Foreground drawn on top of ``surface``.
    """

    primary: str
    surface: str
    on_surface: str


LIGHT_PALETTE = Palette(primary=JETNOTES_GREEN, surface="#FFFFFF", on_surface="#000000")
DARK_PALETTE = Palette(primary=JETNOTES_GREEN, surface="#121212", on_surface="#FFFFFF")


def palette_for(dark: bool) -> Palette:
    """Select the palette for a dark-theme flag."""
    return DARK_PALETTE if dark else LIGHT_PALETTE


def with_alpha(color: str, alpha: float) -> str:
    """Convert a hex colour plus opacity into a CSS ``rgba()`` string.

    Args:
        color: Colour in ``#RRGGBB`` form.
        alpha: Opacity between 0.0 and 1.0.

    Returns:
        String like ``"rgba(0, 104, 55, 0.12)"``.

    Raises:
        ValueError: If the colour is malformed or alpha is out of range.
    """
    match = _HEX_COLOR.match(color)
    if match is None:
        raise ValueError(f"Invalid colour '{color}'. Expected #RRGGBB.")
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha must be between 0 and 1, got {alpha}.")
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha:g})"
