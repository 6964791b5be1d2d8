"""Tests for the navigation shell and screen content.

Covers: re-render on navigation and theme changes, dark mode binding,
subscription cleanup when a client is deleted, and screen empty states.
NiceGUI's ``ui`` module is mocked, so ``ui.refreshable`` returns a mock
whose ``refresh`` calls are counted.
"""

from __future__ import annotations

from unittest.mock import patch

from jetnotes.routing import Router
from jetnotes.settings import ThemeSettings
from jetnotes.types import Screen
from jetnotes.web.layout import create_layout
from jetnotes.web.pages import screens

LAYOUT_UI = "jetnotes.web.layout.ui"
SCREENS_UI = "jetnotes.web.pages.screens.ui"


class TestCreateLayout:
    """create_layout() re-renders the drawer when state changes."""

    def test_dark_mode_follows_initial_setting(self) -> None:
        """ui.dark_mode starts with the current theme flag."""
        with patch(LAYOUT_UI) as mock_ui:
            create_layout(Router(), ThemeSettings(True))
        mock_ui.dark_mode.assert_called_once_with(True)

    def test_drawer_starts_closed(self) -> None:
        """The left drawer is hidden until the menu button opens it."""
        with patch(LAYOUT_UI) as mock_ui:
            create_layout(Router(), ThemeSettings())
        mock_ui.left_drawer.assert_called_once_with(value=False)

    def test_navigation_refreshes_drawer_and_title(self) -> None:
        """Navigating refreshes both the drawer and the top bar title."""
        router = Router()
        with patch(LAYOUT_UI) as mock_ui:
            create_layout(router, ThemeSettings())
            refresh = mock_ui.refreshable.return_value.refresh

            router.navigate_to(Screen.TRASH)

        assert refresh.call_count == 2

    def test_theme_change_updates_dark_mode_and_drawer(self) -> None:
        """A theme change sets dark mode and refreshes the drawer once."""
        settings = ThemeSettings()
        with patch(LAYOUT_UI) as mock_ui:
            create_layout(Router(), settings)
            refresh = mock_ui.refreshable.return_value.refresh

            settings.set(True)

        mock_ui.dark_mode.return_value.set_value.assert_called_once_with(True)
        assert refresh.call_count == 1

    def test_client_delete_drops_subscriptions(self) -> None:
        """After the client is deleted, neither store refreshes the page."""
        router = Router()
        settings = ThemeSettings()
        with patch(LAYOUT_UI) as mock_ui:
            create_layout(router, settings)
            on_delete = mock_ui.context.client.on_delete.call_args.args[0]
            refresh = mock_ui.refreshable.return_value.refresh

            on_delete()
            router.navigate_to(Screen.TRASH)
            settings.set(True)

        refresh.assert_not_called()
        mock_ui.dark_mode.return_value.set_value.assert_not_called()

    def test_reconnect_keeps_subscriptions(self) -> None:
        """Cleanup is not tied to disconnect, so a reconnecting page still updates."""
        router = Router()
        with patch(LAYOUT_UI) as mock_ui:
            create_layout(router, ThemeSettings())
            refresh = mock_ui.refreshable.return_value.refresh

            router.navigate_to(Screen.TRASH)

        mock_ui.context.client.on_disconnect.assert_not_called()
        assert refresh.call_count == 2


class TestScreens:
    """Screen content follows the router."""

    def test_empty_state_text(self) -> None:
        """Each screen has its own empty-state message."""
        assert screens.empty_state_text(Screen.NOTES) == "No notes yet."
        assert screens.empty_state_text(Screen.TRASH) == "Trash is empty."

    def test_navigation_refreshes_content(self) -> None:
        """Navigating refreshes the screen body once."""
        router = Router()
        with patch(SCREENS_UI) as mock_ui:
            screens.render(router)
            refresh = mock_ui.refreshable.return_value.refresh

            router.navigate_to(Screen.TRASH)

        refresh.assert_called_once()

    def test_client_delete_unsubscribes(self) -> None:
        """Deleting the client stops content refreshes; disconnect is not hooked."""
        router = Router()
        with patch(SCREENS_UI) as mock_ui:
            screens.render(router)
            on_delete = mock_ui.context.client.on_delete.call_args.args[0]
            refresh = mock_ui.refreshable.return_value.refresh

            on_delete()
            router.navigate_to(Screen.TRASH)

        refresh.assert_not_called()
        mock_ui.context.client.on_disconnect.assert_not_called()
