"""
Logging configuration for the service.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger and routes uvicorn's own
loggers through them, so server and application messages share one
format and one level.  ``run.py`` starts uvicorn with
``log_config=None`` so uvicorn leaves this setup alone.

Calling ``setup_logging`` again, as every ``create_app`` does, only
updates the level; handlers are attached once per process.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names given to the handlers installed here, used to find them again.
CONSOLE_HANDLER = "products_api.console"
FILE_HANDLER = "products_api.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(settings: Settings) -> int:
    """``DEBUG`` when debugging is on, else the configured level name."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    level = resolve_level(settings)
    root.setLevel(level)

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if settings.log_file and FILE_HANDLER not in installed:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)
