"""Navigation drawer: header, screen buttons, and the dark theme switch.

Provides pure-Python helpers that decide what the drawer shows (which
entry is selected, how each entry is coloured, what a click does) and
NiceGUI rendering functions that draw it. The drawer is re-rendered by
its host whenever the router or the theme settings change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from nicegui import ui

from jetnotes.routing import Router
from jetnotes.settings import ThemeSettings
from jetnotes.theme import Palette, palette_for, with_alpha
from jetnotes.types import HEADER_ICON, Screen

logger = logging.getLogger(__name__)

HEADER_TITLE = "JetNotes"
THEME_ITEM_LABEL = "Turn on dark theme"

SELECTED_ICON_OPACITY = 1.0
UNSELECTED_ICON_OPACITY = 0.6
UNSELECTED_TEXT_ALPHA = 0.6
SELECTED_BACKGROUND_ALPHA = 0.12
DIVIDER_ALPHA = 0.2


@dataclass(frozen=True)
class NavigationButtonStyle:
    """Resolved colours for one drawer button.

    Attributes:
        icon_opacity: Opacity applied to the icon.
        text_color: CSS colour for the label and the icon tint.
        background_color: CSS colour for the row background.
    """

    icon_opacity: float
    text_color: str
    background_color: str


@dataclass(frozen=True)
class DrawerEntry:
    """One navigation button in the drawer."""

    screen: Screen
    label: str
    icon: str
    is_selected: bool


def navigation_button_style(is_selected: bool, palette: Palette) -> NavigationButtonStyle:
    """Compute the colours for a drawer button.

    Args:
        is_selected: Whether the button's screen is the current screen.
        palette: Active theme palette.

    Returns:
        NavigationButtonStyle for the given state.
    """
    if is_selected:
        return NavigationButtonStyle(
            icon_opacity=SELECTED_ICON_OPACITY,
            text_color=palette.primary,
            background_color=with_alpha(palette.primary, SELECTED_BACKGROUND_ALPHA),
        )
    return NavigationButtonStyle(
        icon_opacity=UNSELECTED_ICON_OPACITY,
        text_color=with_alpha(palette.on_surface, UNSELECTED_TEXT_ALPHA),
        background_color=palette.surface,
    )


def drawer_entries(current_screen: Screen) -> list[DrawerEntry]:
    """List the drawer buttons in display order.

    Args:
        current_screen: The screen currently displayed.

    Returns:
        One entry per screen, with exactly the current one selected.
    """
    return [
        DrawerEntry(
            screen=screen,
            label=screen.label,
            icon=screen.icon,
            is_selected=screen == current_screen,
        )
        for screen in (Screen.NOTES, Screen.TRASH)
    ]


def navigate_and_close(
    router: Router,
    screen: Screen,
    close_drawer_action: Callable[[], None],
) -> Callable[[], None]:
    """Build the click handler for a drawer button.

    The handler navigates first and closes the drawer second. It fires
    even when ``screen`` is already current.

    Args:
        router: Router for the current client.
        screen: Screen the button leads to.
        close_drawer_action: Closes the hosting drawer.

    Returns:
        Zero-argument click handler.
    """

    def on_click() -> None:
        router.navigate_to(screen)
        close_drawer_action()

    return on_click


def render_app_drawer_header(*, palette: Palette) -> None:
    """Render the static branding row: menu icon and app title."""
    with ui.row().classes("w-full items-center no-wrap gap-0"):
        ui.icon(HEADER_ICON, size="24px", color=palette.on_surface).classes("m-4")
        ui.label(HEADER_TITLE).classes("text-base").style(f"color: {palette.on_surface}")


def render_screen_navigation_button(
    icon: str,
    label: str,
    is_selected: bool,
    on_click: Callable[[], None],
    *,
    palette: Palette,
) -> Any:
    """Render one clickable drawer row.

    The whole row is the click target.

    Args:
        icon: Material icon name.
        label: Button text.
        is_selected: Whether to draw the selected variant.
        on_click: Handler invoked when the row is clicked.
        palette: Active theme palette.

    Returns:
        The clickable row element.
    """
    style = navigation_button_style(is_selected, palette)

    with ui.element("div").classes("w-full px-2 pt-2"):
        with (
            ui.row()
            .classes("w-full items-center no-wrap gap-4 p-1 rounded cursor-pointer")
            .style(f"background-color: {style.background_color}") as row
        ):
            ui.icon(icon, size="24px").style(
                f"color: {style.text_color}; opacity: {style.icon_opacity}"
            )
            ui.label(label).classes("text-sm w-full").style(f"color: {style.text_color}")
        row.on("click", on_click)

    return row


def render_light_dark_theme_item(settings: ThemeSettings, *, palette: Palette) -> Any:
    """Render the dark theme label and switch.

    The switch reflects ``settings`` and writes every toggle straight back
    to it.

    Args:
        settings: Shared theme settings store.
        palette: Active theme palette.

    Returns:
        The switch element.
    """

    def on_change(e: Any) -> None:
        settings.set(bool(e.value))

    with ui.row().classes("w-full items-center no-wrap p-2"):
        ui.label(THEME_ITEM_LABEL).classes("text-sm flex-grow p-2").style(
            f"color: {with_alpha(palette.on_surface, UNSELECTED_TEXT_ALPHA)}"
        )
        switch = ui.switch(value=settings.get(), on_change=on_change).classes("px-2")

    return switch


def render_app_drawer(
    current_screen: Screen,
    close_drawer_action: Callable[[], None],
    *,
    router: Router,
    settings: ThemeSettings,
) -> None:
    """Render the full drawer panel.

    Draws, top to bottom: header, divider, one button per screen, and
    the theme switch. Each button navigates and then closes the drawer.

    Args:
        current_screen: The screen currently displayed.
        close_drawer_action: Closes the hosting drawer. Required.
        router: Router for the current client.
        settings: Shared theme settings store.

    Raises:
        TypeError: If ``close_drawer_action`` is missing or not callable.
    """
    if close_drawer_action is None or not callable(close_drawer_action):
        raise TypeError("close_drawer_action must be a callable")

    palette = palette_for(settings.get())
    logger.debug("Rendering drawer for %s", current_screen.value)

    with ui.column().classes("w-full h-full gap-0"):
        render_app_drawer_header(palette=palette)
        ui.separator().style(
            f"background-color: {with_alpha(palette.on_surface, DIVIDER_ALPHA)}"
        )
        for entry in drawer_entries(current_screen):
            render_screen_navigation_button(
                entry.icon,
                entry.label,
                entry.is_selected,
                navigate_and_close(router, entry.screen, close_drawer_action),
                palette=palette,
            )
        render_light_dark_theme_item(settings, palette=palette)
