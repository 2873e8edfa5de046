import logging
from logging.handlers import RotatingFileHandler
import os
import sys

# Chatty below WARNING while talking to the bucket
_QUIET_LOGGERS = ("urllib3", "minio")


def configure_logging(level: str = "INFO", logfile: str | None = None):
    """
    Route every arclead logger to stdout, and to a rotating file when one is set.

    Called once when the server package is imported, before the app and its
    routers exist, so handler modules only ever need ``get_logger``. The Minio
    client and its urllib3 pool stay at WARNING or above even in DEBUG, since
    every bucket call would otherwise log the raw request.

    Parameters
    ----------
    level : str
        Name of a ``logging`` level, case-insensitive. ``warn`` is accepted.
        Unknown names fall back to INFO.
    logfile : str | None
        Path of the log file, rotated at 10MB with ten backups. Its directory
        is created when missing.
    """

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logfile:
        directory = os.path.dirname(logfile)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                logfile, maxBytes=10 * 1024 * 1024, backupCount=10, encoding="utf-8"
            )
        )

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.root.handlers.clear()
    logging.root.setLevel(numeric_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        logging.root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
