"""Message base classes binding each schema class to its encodings."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from opdef.codec import BinaryOnlyCodec, BinaryTextCodec, MessageCodec


class MessageLite(BaseModel):
    """Base of all opdef messages. Lite messages only support the binary encoding."""

    model_config = ConfigDict(
        use_attribute_docstrings=True, extra="forbid", ser_json_inf_nan="constants"
    )

    message_codec: ClassVar[MessageCodec] = BinaryOnlyCodec()
    """Encodings available for this message class."""

    def copy_from(self, other: "MessageLite") -> None:
        """Replace every field of this message with a deep copy of the same field of ``other``.

        Parameters
        ----------
        other : MessageLite
            Source message. Must be an instance of this message's class.

        Raises
        ------
        TypeError
            If ``other`` is not an instance of this message's class.
        """
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot copy a {type(other).__name__} into a {type(self).__name__}"
            )
        source = other.model_copy(deep=True)
        for field_name in type(self).model_fields:
            setattr(self, field_name, getattr(source, field_name))


class Message(MessageLite):
    """Base of full messages, which support both the binary and the text encoding."""

    message_codec: ClassVar[MessageCodec] = BinaryTextCodec()
