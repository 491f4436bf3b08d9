"""
Logging configuration for the Coaster API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and aligns uvicorn's loggers with the
application level.  Handlers are tagged by name so that repeated
calls, for instance one per ``create_app`` in tests, never stack up
duplicates while leaving foreign handlers alone.
"""

import logging
from pathlib import Path
from typing import Optional


CONSOLE_HANDLER_NAME = "coaster_api.console"
FILE_HANDLER_NAME = "coaster_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if they were
        already present from an earlier call.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(numeric_level)

    installed = {h.name for h in root.handlers}
    if CONSOLE_HANDLER_NAME in installed:
        return False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile and FILE_HANDLER_NAME not in installed:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return True
