import logging
import os
from typing import Optional

from rich.logging import RichHandler

LOG_LEVEL_ENV = "INFLECTEDIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger("inflectedit")


def setup_logging(level: Optional[str | int] = None) -> logging.Logger:
    """
    Send the package's log records to a rich console handler.

    :param level: The level to log at. Defaults to ``$INFLECTEDIT_LOG_LEVEL``, or WARNING when unset.
    :return: The package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, markup=False))
    return logger
