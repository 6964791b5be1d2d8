"""Tests for theme palettes and colour helpers."""

from __future__ import annotations

import pytest

from jetnotes.theme import DARK_PALETTE, JETNOTES_GREEN, LIGHT_PALETTE, palette_for, with_alpha


class TestPalettes:
    """Light and dark palettes share the brand primary."""

    def test_palette_for_light(self) -> None:
        """palette_for(False) is the light palette."""
        assert palette_for(False) is LIGHT_PALETTE

    def test_palette_for_dark(self) -> None:
        """palette_for(True) is the dark palette."""
        assert palette_for(True) is DARK_PALETTE

    def test_primary_is_brand_green(self) -> None:
        """Both palettes use the JetNotes green."""
        assert LIGHT_PALETTE.primary == JETNOTES_GREEN
        assert DARK_PALETTE.primary == JETNOTES_GREEN

    def test_dark_surface_is_dark(self) -> None:
        """Dark surface is #121212 with white text."""
        assert DARK_PALETTE.surface == "#121212"
        assert DARK_PALETTE.on_surface == "#FFFFFF"

    def test_light_surface_is_white(self) -> None:
        """Light surface is white with black text."""
        assert LIGHT_PALETTE.surface == "#FFFFFF"
        assert LIGHT_PALETTE.on_surface == "#000000"


class TestWithAlpha:
    """with_alpha() converts hex colours to CSS rgba()."""

    def test_primary_at_twelve_percent(self) -> None:
        """The selected background colour converts exactly."""
        assert with_alpha("#006837", 0.12) == "rgba(0, 104, 55, 0.12)"

    def test_white_at_sixty_percent(self) -> None:
        """Dark onSurface at 60% opacity."""
        assert with_alpha("#FFFFFF", 0.6) == "rgba(255, 255, 255, 0.6)"

    def test_lowercase_hex(self) -> None:
        """Lowercase hex digits are accepted."""
        assert with_alpha("#ffffff", 1.0) == "rgba(255, 255, 255, 1)"

    def test_malformed_colour_raises(self) -> None:
        """Anything but #RRGGBB is a ValueError."""
        with pytest.raises(ValueError, match="Invalid colour"):
            with_alpha("green", 0.5)

    def test_alpha_out_of_range_raises(self) -> None:
        """Alpha outside [0, 1] is a ValueError."""
        with pytest.raises(ValueError, match="Alpha"):
            with_alpha("#000000", 1.5)
