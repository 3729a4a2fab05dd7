"""Logging setup for snoo, built on loguru."""

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with a stderr sink and turn on snoo's logs.

    The package disables its own logger on import, so nothing is emitted
    until this is called.
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=(level or "WARNING").upper())
    logger.enable("snoo")
