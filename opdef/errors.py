"""Unrecoverable error conditions raised by opdef."""

import logging
from typing import NoReturn, Optional, Type

logger = logging.getLogger("opdef")


class FatalError(RuntimeError):
    """Base class for conditions the caller is not expected to recover from locally.

    Fatal errors are distinct from the boolean failures reported by the read functions:
    a missing input file is a normal outcome, while asking for an argument that does not
    exist or writing to an unwritable path means the caller's configuration is broken.
    """


class ArgumentNotFoundError(FatalError):
    """Raised when a required argument is not present in an operator definition."""


class TextFormatUnsupportedError(FatalError):
    """Raised when the text encoding is requested for a lite message."""


class ProtoWriteError(FatalError):
    """Raised when a message cannot be written to its output file."""


def raise_fatal(
    error_cls: Type[FatalError], message: str, cause: Optional[BaseException] = None
) -> NoReturn:
    """Log ``message`` at CRITICAL level and raise ``error_cls``.

    Parameters
    ----------
    error_cls : Type[FatalError]
        The fatal error type to raise.
    message : str
        Human-readable description, used for both the log record and the exception.
    cause : Optional[BaseException]
        The underlying exception, chained as ``__cause__`` when given.

    Raises
    ------
    FatalError
        Always.
    """
    logger.critical(message)
    raise error_cls(message) from cause
