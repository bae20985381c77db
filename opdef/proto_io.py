"""Reading and writing messages from and to files in the binary or the text encoding.

Read functions report a missing or undecodable file by returning False and leave the target
message untouched. Write functions treat an unwritable path as fatal and raise
:class:`opdef.errors.ProtoWriteError`. Text functions called with a lite message raise
:class:`opdef.errors.TextFormatUnsupportedError`.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from opdef.codec import DecodeError, get_codec
from opdef.data import MessageLite
from opdef.env import get_proto_bytes_limit, get_proto_bytes_warning_threshold
from opdef.errors import ProtoWriteError, raise_fatal

logger = logging.getLogger(__name__)


def read_proto_from_text_file(path: Union[str, Path], proto: MessageLite) -> bool:
    """Parse a text-encoded file into ``proto``.

    Parameters
    ----------
    path : Union[str, Path]
        The file to read.
    proto : MessageLite
        The message to populate. On success every field is replaced; on failure it is left
        unchanged.

    Returns
    -------
    bool
        True if the file was read and decoded, False otherwise.

    Raises
    ------
    TextFormatUnsupportedError
        If ``proto`` is a lite message.
    """
    codec = get_codec(proto)
    codec.ensure_text_supported(type(proto))
    data = _read_bytes(path)
    if data is None:
        return False
    try:
        parsed = codec.parse_text(type(proto), data)
    except DecodeError as e:
        logger.debug(f"Cannot parse {path} as text {type(proto).__name__}: {e}")
        return False
    proto.copy_from(parsed)
    return True


def write_proto_to_text_file(proto: MessageLite, path: Union[str, Path]) -> None:
    """Write ``proto`` to ``path`` in the text encoding, replacing any existing content.

    Parent directories are created if they don't exist.

    Raises
    ------
    TextFormatUnsupportedError
        If ``proto`` is a lite message.
    ProtoWriteError
        If the file cannot be written.
    """
    codec = get_codec(proto)
    codec.ensure_text_supported(type(proto))
    _write_bytes(codec.serialize_text(proto).encode("utf-8"), path)


def read_proto_from_binary_file(path: Union[str, Path], proto: MessageLite) -> bool:
    """Parse a binary-encoded file into ``proto``.

    Files larger than ``OPDEF_PROTO_BYTES_LIMIT`` bytes are rejected, and files larger than
    ``OPDEF_PROTO_BYTES_WARNING`` bytes log a warning.

    Parameters
    ----------
    path : Union[str, Path]
        The file to read.
    proto : MessageLite
        The message to populate. On failure it is left unchanged.

    Returns
    -------
    bool
        True if the file was read and decoded, False otherwise.
    """
    limit = get_proto_bytes_limit()
    data = _read_bytes(path, max_size=limit)
    if data is None:
        return False
    if len(data) > limit:
        logger.error(
            f"{path} exceeds the binary message size limit of {limit} bytes, "
            "set OPDEF_PROTO_BYTES_LIMIT to read it"
        )
        return False
    if len(data) > get_proto_bytes_warning_threshold():
        logger.warning(f"Reading a large binary message from {path} ({len(data)} bytes)")

    try:
        parsed = get_codec(proto).parse_binary(type(proto), data)
    except DecodeError as e:
        logger.debug(f"Cannot parse {path} as binary {type(proto).__name__}: {e}")
        return False
    proto.copy_from(parsed)
    return True


def write_proto_to_binary_file(proto: MessageLite, path: Union[str, Path]) -> None:
    """Write ``proto`` to ``path`` in the binary encoding, replacing any existing content.

    Parent directories are created if they don't exist.

    Raises
    ------
    ProtoWriteError
        If the file cannot be written.
    """
    _write_bytes(get_codec(proto).serialize_binary(proto), path)


def read_proto_from_file(path: Union[str, Path], proto: MessageLite) -> bool:
    """Read ``proto`` from a file in either encoding.

    The binary encoding is tried first, then the text encoding. For lite messages the text
    attempt raises :class:`opdef.errors.TextFormatUnsupportedError`, so only binary files can
    be read.

    Returns
    -------
    bool
        True if either encoding succeeded, False if both failed.
    """
    return read_proto_from_binary_file(path, proto) or read_proto_from_text_file(path, proto)


def _read_bytes(path: Union[str, Path], max_size: Optional[int] = None) -> Optional[bytes]:
    """Read at most ``max_size + 1`` bytes of ``path``, or None if it cannot be read."""
    try:
        with open(Path(path), "rb") as f:
            return f.read() if max_size is None else f.read(max_size + 1)
    except OSError as e:
        logger.debug(f"Cannot open {path} for reading: {e}")
        return None


def _write_bytes(data: bytes, path: Union[str, Path]) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise_fatal(ProtoWriteError, f"Cannot write message to {path}: {e}", cause=e)
