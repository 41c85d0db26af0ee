"""Logging configuration for the owner records app."""

import logging

from .core import get_settings


def setup_logging() -> None:
    """Configure the ``app`` logger namespace with a stream handler.

    The level comes from ``Settings.LOG_LEVEL``. Calling this more than
    once leaves the existing handler in place.
    """
    logger = logging.getLogger("app")
    logger.setLevel(get_settings().LOG_LEVEL.upper())

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    logger.debug("Logging initialized")
