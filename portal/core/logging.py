# File: portal/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Set up root logging for the API process.

    DEBUG forces the DEBUG level regardless of LOG_LEVEL.
    """
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
