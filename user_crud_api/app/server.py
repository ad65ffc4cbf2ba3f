"""
Process entry point.

``main`` starts a uvicorn server for the application unless the
runtime mode is ``test`` (``APP_ENV=test``), in which case it returns
without opening a socket.  Host and port come from ``Settings``.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_server(app: Optional[FastAPI] = None, settings: Settings = default_settings) -> None:
    """Serve ``app`` (the module-level app by default) with uvicorn.

    Uvicorn's loggers propagate to the root logger configured by
    ``setup_logging``; ``log_config=None`` keeps uvicorn from
    installing its own handlers over them.
    """
    if app is None:
        from .main import app
    setup_logging(settings.log_level, settings.log_file or None)
    logger.info("Server running at http://localhost:%s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


def main(settings: Settings = default_settings) -> None:
    if not settings.autostart:
        logger.info("APP_ENV=%s, not starting the HTTP listener", settings.app_env)
        return
    run_server(settings=settings)
