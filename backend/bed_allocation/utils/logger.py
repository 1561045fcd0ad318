"""
Logging setup for the allocation service.

Every module logs under the ``bed_allocation`` logger tree: services ask
for a child with ``get_logger("beds")`` and ``configure_logging`` installs
the single console handler on the root of that tree.
"""
import logging
from typing import Optional

from bed_allocation.config import settings

ROOT_LOGGER = "bed_allocation"

# Third-party loggers that are too chatty at INFO outside debug mode
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configures and returns the root logger of the service.

    Safe to call more than once: the level is updated but the handler is
    only installed the first time.

    Args:
        level: Logging level name, defaults to ``settings.LOG_LEVEL``

    Returns:
        The ``bed_allocation`` logger
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    if not settings.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Returns the logger of one area of the service.

    Args:
        name: Area name ("beds", "search", ...) or an already qualified
            ``bed_allocation.*`` name
    """
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
