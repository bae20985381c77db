"""Binary and text encodings for opdef messages.

Two encodings are supported:

- the binary encoding is the MessagePack dump of the message's fields, and is available for
  every message;
- the text encoding is indented JSON, and is only available for full (non-lite) messages.

Which encodings a message supports is decided by the codec bound to its class, see
:func:`get_codec`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NoReturn, Type, TypeVar, Union

import msgpack
from pydantic import BaseModel, ValidationError

from opdef.env import get_text_indent
from opdef.errors import TextFormatUnsupportedError, raise_fatal

M = TypeVar("M", bound=BaseModel)


class DecodeError(ValueError):
    """Raised when bytes or text cannot be decoded into the requested message type."""


class MessageCodec(ABC):
    """Encoding capability of a message class.

    Subclasses must implement the binary encoding. The text encoding is optional and is
    advertised through :attr:`supports_text`.
    """

    supports_text: bool = False
    """Whether the text encoding is functional for messages bound to this codec."""

    def serialize_binary(self, message: BaseModel) -> bytes:
        """Serialize a message to the binary encoding.

        Unset optional fields are omitted from the output.

        Parameters
        ----------
        message : BaseModel
            The message to serialize.

        Returns
        -------
        bytes
            The MessagePack payload.
        """
        return msgpack.packb(message.model_dump(exclude_none=True), use_bin_type=True)

    def parse_binary(self, cls: Type[M], data: bytes) -> M:
        """Parse the binary encoding into a new instance of ``cls``.

        Empty input decodes to a message with every field at its default.

        Parameters
        ----------
        cls : Type[M]
            The message class to instantiate.
        data : bytes
            The MessagePack payload.

        Returns
        -------
        M
            The decoded message.

        Raises
        ------
        DecodeError
            If the payload is malformed, has trailing data, is not a mapping, or does not
            validate against ``cls``.
        """
        if not data:
            return cls()
        try:
            payload = msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (
            TypeError,
            ValueError,
            msgpack.ExtraData,
            msgpack.FormatError,
            msgpack.StackError,
            msgpack.UnpackException,
        ) as e:
            raise DecodeError(f"msgpack decode failed: {e}") from e
        if not isinstance(payload, dict):
            raise DecodeError(
                f"msgpack payload is a {type(payload).__name__}, expected a mapping"
            )
        return _validate(cls, payload)

    def ensure_text_supported(self, cls: Type[BaseModel]) -> None:
        """Raise a fatal error unless the text encoding is functional for ``cls``.

        Raises
        ------
        TextFormatUnsupportedError
            If this codec does not support the text encoding.
        """
        if not self.supports_text:
            _text_unsupported(cls)

    @abstractmethod
    def serialize_text(self, message: BaseModel) -> str:
        """Serialize a message to the text encoding."""
        ...

    @abstractmethod
    def parse_text(self, cls: Type[M], data: Union[str, bytes]) -> M:
        """Parse the text encoding into a new instance of ``cls``."""
        ...


class BinaryTextCodec(MessageCodec):
    """Codec of full messages: binary and text encodings."""

    supports_text = True

    def serialize_text(self, message: BaseModel) -> str:
        return message.model_dump_json(indent=get_text_indent(), exclude_none=True) + "\n"

    def parse_text(self, cls: Type[M], data: Union[str, bytes]) -> M:
        """Parse indented JSON into a new instance of ``cls``.

        Blank input decodes to a message with every field at its default.

        Raises
        ------
        DecodeError
            If the text is not valid UTF-8 or JSON, or does not validate against ``cls``.
        """
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"text payload is not valid UTF-8: {e}") from e
        if not data.strip():
            return cls()
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise DecodeError(f"text decode failed: {e}") from e


class BinaryOnlyCodec(MessageCodec):
    """Codec of lite messages: binary encoding only.

    The text methods exist so that code written against :class:`MessageCodec` works with
    either message variant, but calling them is a fatal error.
    """

    supports_text = False

    def serialize_text(self, message: BaseModel) -> str:
        _text_unsupported(type(message))

    def parse_text(self, cls: Type[M], data: Union[str, bytes]) -> M:
        _text_unsupported(cls)


def get_codec(message: Union[BaseModel, Type[BaseModel]]) -> MessageCodec:
    """Get the codec bound to a message instance or class.

    Parameters
    ----------
    message : Union[BaseModel, Type[BaseModel]]
        A message instance or message class.

    Returns
    -------
    MessageCodec
        The codec declared by the message class.

    Raises
    ------
    TypeError
        If the class does not declare a codec.
    """
    cls = message if isinstance(message, type) else type(message)
    codec = getattr(cls, "message_codec", None)
    if not isinstance(codec, MessageCodec):
        raise TypeError(f"{cls.__name__} is not an opdef message type")
    return codec


def _validate(cls: Type[M], payload: Any) -> M:
    try:
        return cls.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"payload does not match {cls.__name__}: {e}") from e


def _text_unsupported(cls: Type[BaseModel]) -> NoReturn:
    raise_fatal(
        TextFormatUnsupportedError,
        f"{cls.__name__} is a lite message; the text format is not supported for lite "
        "messages, use the binary format instead.",
    )
