"""
Logging configuration for the application and its uvicorn server.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once per process.  Uvicorn's own loggers
are stripped of their handlers and made to propagate, so server and
access lines share the application's format and destinations.
``server.run_server`` starts uvicorn with ``log_config=None`` so that
uvicorn does not reinstall its defaults.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def route_uvicorn_logs(level: int) -> None:
    """Send uvicorn's records to the root logger at ``level``."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and route uvicorn through it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    route_uvicorn_logs(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        # create_app may run many times in one process (tests).
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
