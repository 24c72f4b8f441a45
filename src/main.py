"""Run the todo NiceGUI app.

Arguments are treated as deep links delivered at launch, e.g.
``python src/main.py demo://open-todo-view``.
"""

import logging
import sys

from nicegui import app, ui

from composition_root import AppContainer, create_app_container
from infrastructure.config.env import load_env
from infrastructure.config.settings import Settings
from infrastructure.logging_setup import setup_logging
from presentation.api.deep_links import build_deep_link_router
from presentation.ui.pages.index import register_pages

logger = logging.getLogger(__name__)


def create_app(launch_uris: list[str] | None = None) -> AppContainer:
    load_env()
    settings = Settings.from_env()
    setup_logging(settings)

    container = create_app_container(settings)
    for uri in launch_uris or []:
        container.uri_handler.on_new_uri(uri)

    app.include_router(build_deep_link_router(container.uri_handler))
    register_pages(container)
    return container


def run() -> None:
    container = create_app(sys.argv[1:])
    settings = container.settings
    logger.info("Starting %s on %s:%s", settings.title, settings.host, settings.port)
    ui.run(
        title=settings.title,
        host=settings.host,
        port=settings.port,
        favicon="✅",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
