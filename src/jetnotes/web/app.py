"""NiceGUI web application for JetNotes.

Defines page routing and server configuration. Started via the
``jetnotes serve`` CLI command.
"""

from __future__ import annotations

import logging

from nicegui import ui

from jetnotes.config import Config, load_config
from jetnotes.routing import Router
from jetnotes.settings import ThemeSettings
from jetnotes.web.layout import create_layout
from jetnotes.web.pages import screens

logger = logging.getLogger(__name__)


def create_app(
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
    show: bool = True,
    config: Config | None = None,
) -> None:
    """Configure and run the NiceGUI application.

    Creates one theme settings store for the whole process and one router
    per connected client, registers page routes, and starts the NiceGUI
    server. This function blocks until the server is stopped.

    Args:
        host: Bind address. Defaults to localhost.
        port: Port number. Defaults to 8080.
        show: Open browser automatically. Defaults to True.
        config: Loaded configuration. Loaded from disk when omitted.
    """
    cfg = config or load_config()
    settings = ThemeSettings.persisting(cfg)

    @ui.page("/")
    def index() -> None:
        router = Router(cfg.start_screen)
        create_layout(router, settings)
        screens.render(router)

    logger.info("Starting JetNotes on %s:%d", host, port)
    ui.run(
        host=host,
        port=port,
        title="JetNotes",
        dark=settings.get(),
        show=show,
        reload=False,
    )
