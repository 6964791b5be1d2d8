"""Navigation state for a single client.

The router owns "which screen is currently displayed". It is created per
browser client and passed explicitly to the components that read or change
it, so tests can substitute their own instance.

Typical usage::

    from jetnotes.routing import Router
    from jetnotes.types import Screen

    router = Router()
    unsubscribe = router.subscribe(lambda screen: print(screen.label))
    router.navigate_to(Screen.TRASH)
    unsubscribe()
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from jetnotes.types import Screen

logger = logging.getLogger(__name__)

ScreenListener = Callable[[Screen], None]


class Router:
    """Observable holder of the current screen.

    Listeners are called synchronously, in subscription order, on every
    ``navigate_to`` call, including navigation to the screen that is
    already current.
    """

    def __init__(self, initial: Screen = Screen.NOTES) -> None:
        if not isinstance(initial, Screen):
            raise TypeError(f"initial must be a Screen, got {type(initial).__name__}")
        self._current = initial
        self._listeners: list[ScreenListener] = []

    @property
    def current_screen(self) -> Screen:
        """The screen currently displayed."""
        return self._current

    def current(self) -> Screen:
        """Return the screen currently displayed."""
        return self._current

    def navigate_to(self, screen: Screen) -> None:
        """Make ``screen`` current and notify listeners.

        Args:
            screen: Target screen.

        Raises:
            TypeError: If ``screen`` is not a Screen.
        """
        if not isinstance(screen, Screen):
            raise TypeError(f"screen must be a Screen, got {type(screen).__name__}")
        logger.debug("Navigating %s -> %s", self._current.value, screen.value)
        self._current = screen
        for listener in list(self._listeners):
            try:
                listener(screen)
            except Exception:
                logger.exception("Navigation listener failed for %s", screen.value)

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        """Register a listener for navigation events.

        Args:
            listener: Called with the new screen after each navigation.

        Returns:
            A callable that removes the listener. Calling it twice is a no-op.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
