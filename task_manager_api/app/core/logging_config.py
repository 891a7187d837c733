"""
Logging setup for the service and its MongoDB driver.

pymongo emits per-command, connection-pool and topology events through
the ``pymongo.*`` loggers.  Left at the root level they drown request
logs, so ``setup_logging`` caps them at ``WARNING`` unless the service
itself runs at ``DEBUG``.  Everything else goes to one console handler
(and an optional file from ``LOG_FILE``) with a timestamped format.

The function only configures a bare root logger; when handlers are
already attached (uvicorn reload, tests building several apps) it
leaves them alone.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

# Driver loggers that flood the console with per-command and topology
# events when left at the root level.
QUIET_LOGGERS = ("pymongo", "pymongo.command", "pymongo.topology", "pymongo.connection")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, only
        the console handler is attached.
    quiet : Iterable[str]
        Logger names capped at ``WARNING`` unless ``level`` is
        ``DEBUG``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
