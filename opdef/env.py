"""Environment-variable configuration for opdef."""

import os

DEFAULT_PROTO_BYTES_LIMIT = 1 << 30
"""Largest binary message file that will be read (1 GiB)."""
DEFAULT_PROTO_BYTES_WARNING = 512 << 20
"""Binary message files above this size log a warning (512 MiB)."""
DEFAULT_TEXT_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"


def _get_int(var_name: str, default: int) -> int:
    raw = os.getenv(var_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {var_name} must be an integer, got '{raw}'") from e


def get_proto_bytes_limit() -> int:
    """Get the maximum size in bytes of a binary message file.

    Read from ``OPDEF_PROTO_BYTES_LIMIT``, defaulting to 1 GiB.

    Returns
    -------
    int
        The byte limit.
    """
    return _get_int("OPDEF_PROTO_BYTES_LIMIT", DEFAULT_PROTO_BYTES_LIMIT)


def get_proto_bytes_warning_threshold() -> int:
    """Get the binary file size above which reads log a warning.

    Read from ``OPDEF_PROTO_BYTES_WARNING``, defaulting to 512 MiB.
    """
    return _get_int("OPDEF_PROTO_BYTES_WARNING", DEFAULT_PROTO_BYTES_WARNING)


def get_text_indent() -> int:
    """Get the indentation used by the text encoding (``OPDEF_TEXT_INDENT``, default 2)."""
    indent = _get_int("OPDEF_TEXT_INDENT", DEFAULT_TEXT_INDENT)
    if indent < 0:
        raise ValueError(f"OPDEF_TEXT_INDENT must be >= 0, got {indent}")
    return indent


def get_log_level() -> str:
    """Get the log level name from ``OPDEF_LOG_LEVEL`` (default ``WARNING``)."""
    return os.getenv("OPDEF_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
