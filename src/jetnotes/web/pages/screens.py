"""Screen content for the JetNotes web interface.

Renders the body of whichever screen the client's router points at.
Notes storage is not wired in, so each screen shows its empty state.
"""

from __future__ import annotations

from nicegui import ui

from jetnotes.routing import Router
from jetnotes.types import Screen

EMPTY_STATE_TEXT: dict[Screen, str] = {
    Screen.NOTES: "No notes yet.",
    Screen.TRASH: "Trash is empty.",
}


def empty_state_text(screen: Screen) -> str:
    """Return the placeholder text shown on an empty screen."""
    return EMPTY_STATE_TEXT[screen]


def render(router: Router) -> None:
    """Render the current screen and follow navigation.

    Args:
        router: Router for this client.
    """

    @ui.refreshable
    def content() -> None:
        screen = router.current()
        with ui.column().classes("w-full items-center p-8 gap-2"):
            ui.icon(screen.icon, size="48px").classes("text-gray-400")
            ui.label(empty_state_text(screen)).classes("text-gray-500")

    content()

    unsubscribe = router.subscribe(lambda _screen: content.refresh())
    ui.context.client.on_delete(unsubscribe)
