from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


# PUBLIC_INTERFACE
def setup_logger(name: str = "todo_app", level: int = logging.INFO) -> logging.Logger:
    """
    Return the named application logger writing one line per record to stderr.

    Args:
        name: Logger name.
        level: Minimum level to emit.

    Returns:
        The configured logger. Calling this again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
