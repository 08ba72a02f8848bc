"""Logging configuration helpers."""

import logging

APP_LOGGER = "memorial_tributes"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the application logger and set its level.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
