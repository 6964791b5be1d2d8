"""Shared layout for the JetNotes web interface.

Provides the navigation shell (top bar + left drawer) used by every page.
The drawer and the top bar title re-render whenever the client's router
or the shared theme settings change; the page's dark mode follows the
theme settings.
"""

from __future__ import annotations

import logging

from nicegui import ui

from jetnotes.routing import Router
from jetnotes.settings import ThemeSettings
from jetnotes.theme import palette_for
from jetnotes.types import Screen
from jetnotes.web.components.app_drawer import HEADER_TITLE, render_app_drawer

logger = logging.getLogger(__name__)


def create_layout(router: Router, settings: ThemeSettings) -> None:
    """Create the navigation shell for one client.

    Adds a top bar with a menu button and the current screen title, and a
    left drawer hosting the app drawer. Subscriptions to ``router`` and
    ``settings`` are removed when the client is deleted. A reconnect keeps them.

    Args:
        router: Router for this client.
        settings: Process-wide theme settings.
    """
    dark = ui.dark_mode(settings.get())

    with ui.left_drawer(value=False).props("width=280") as drawer:

        @ui.refreshable
        def drawer_content() -> None:
            drawer.style(f"background-color: {palette_for(settings.get()).surface}")
            render_app_drawer(router.current(), drawer.hide, router=router, settings=settings)

        drawer_content()

    with ui.header().classes("items-center gap-2 px-2"):
        ui.button(icon="menu", on_click=drawer.toggle).props("flat round color=white")

        @ui.refreshable
        def title() -> None:
            ui.label(f"{HEADER_TITLE} · {router.current().label}").classes("text-lg")

        title()

    def on_screen_change(screen: Screen) -> None:
        drawer_content.refresh()
        title.refresh()

    def on_theme_change(value: bool) -> None:
        dark.set_value(value)
        drawer_content.refresh()

    unsubscribers = [
        router.subscribe(on_screen_change),
        settings.subscribe(on_theme_change),
    ]

    def on_delete() -> None:
        logger.debug("Client deleted, dropping %d subscriptions", len(unsubscribers))
        for unsubscribe in unsubscribers:
            unsubscribe()

    ui.context.client.on_delete(on_delete)
