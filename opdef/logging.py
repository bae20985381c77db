"""Logging setup for the opdef package."""

import logging
from typing import Optional, Union

from opdef.env import get_log_level

_ROOT_LOGGER_NAME = "opdef"
_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``opdef`` namespace.

    Parameters
    ----------
    name : Optional[str]
        Child logger name. Names already prefixed with ``opdef`` are used as-is.

    Returns
    -------
    logging.Logger
        The requested logger.
    """
    if not name or name == _ROOT_LOGGER_NAME:
        return logging.getLogger(_ROOT_LOGGER_NAME)
    if name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the ``opdef`` logger and set its level.

    Calling this more than once only updates the level.

    Parameters
    ----------
    level : Optional[Union[int, str]]
        Level to use. Defaults to ``OPDEF_LOG_LEVEL`` from the environment.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(getattr(h, "_opdef_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._opdef_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
