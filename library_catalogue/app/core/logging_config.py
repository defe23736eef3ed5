"""
Logging setup for the catalogue.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records go to the console and, when a
log file is configured, to that file as well.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the catalogue's handlers to the root logger.

    Does nothing if the root logger already has handlers, so repeated
    calls (one per ``create_app``) keep a single set.  Unknown level
    names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(_resolve_level(level))
