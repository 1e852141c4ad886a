"""
Logging configuration for the KMCA API.

``setup_logging`` configures the root logger from ``Settings`` and
routes uvicorn's own loggers through it, so the server's startup and
access lines share one format with the application's ``kmca_api.*``
loggers.  ``run.py`` starts uvicorn with ``log_config=None`` for this
reason; otherwise uvicorn would install its own handlers on top.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers uvicorn writes to; they propagate to the root handlers.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Application logger namespace.
APP_LOGGER = "kmca_api"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure logging for the application and return its logger.

    Root handlers (console, plus a UTF-8 file handler when
    ``settings.log_file`` is set) are attached only once per process;
    a second ``create_app`` call, or a test runner that already owns
    the root logger, leaves them alone.  The level and the uvicorn
    routing are applied every time.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(level)

    root = logging.getLogger()
    if root.handlers:
        return app_logger
    root.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return app_logger
