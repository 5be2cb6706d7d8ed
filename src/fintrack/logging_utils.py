"""Application-wide logging helpers.

Modules call ``get_logger(__name__)``; the CLI calls ``configure_logging``
once per invocation. Each call swaps in a fresh handler on the current
``sys.stderr`` so repeated invocations in one process never stack handlers.
"""

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DEFAULT_LEVEL = logging.WARNING
PACKAGE_LOGGER = "fintrack"

_handler: Optional[logging.Handler] = None


def configure_logging(level: int | str = DEFAULT_LEVEL) -> None:
    """Install the stderr handler on the root logger and set the package level.

    Only the ``fintrack`` logger is tuned so library loggers (SQLAlchemy)
    stay at their own defaults.
    """
    global _handler
    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(_handler)

    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""
    return logging.getLogger(name)
