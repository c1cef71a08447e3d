"""Logging setup shared by the access log and the refund service."""
import logging

from app.config import LOG_LEVEL

_LOGGER_NAMES = ("access", "refunds")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Attach one stream handler per application logger. Safe to call repeatedly."""
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if logger.handlers:
            continue
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
