from opdef.arguments import (
    ArgumentHelper,
    get_argument,
    get_argument_value,
    get_mutable_argument,
    has_argument,
)
from opdef.builder import add_argument, create_operator_def, make_argument
from opdef.codec import BinaryOnlyCodec, BinaryTextCodec, DecodeError, MessageCodec, get_codec
from opdef.data import (
    Argument,
    DeviceOption,
    DeviceType,
    Message,
    MessageLite,
    NetDef,
    NetDefLite,
    OperatorDef,
    OperatorDefLite,
)
from opdef.errors import (
    ArgumentNotFoundError,
    FatalError,
    ProtoWriteError,
    TextFormatUnsupportedError,
)
from opdef.logging import configure_logging, get_logger
from opdef.proto_io import (
    read_proto_from_binary_file,
    read_proto_from_file,
    read_proto_from_text_file,
    write_proto_to_binary_file,
    write_proto_to_text_file,
)

__all__ = [
    # Messages
    "Message",
    "MessageLite",
    "Argument",
    "DeviceOption",
    "DeviceType",
    "NetDef",
    "OperatorDef",
    "NetDefLite",
    "OperatorDefLite",
    # Builder
    "create_operator_def",
    "make_argument",
    "add_argument",
    # Argument store
    "has_argument",
    "get_argument",
    "get_mutable_argument",
    "get_argument_value",
    "ArgumentHelper",
    # Codecs
    "MessageCodec",
    "BinaryTextCodec",
    "BinaryOnlyCodec",
    "DecodeError",
    "get_codec",
    # Persistence
    "read_proto_from_text_file",
    "write_proto_to_text_file",
    "read_proto_from_binary_file",
    "write_proto_to_binary_file",
    "read_proto_from_file",
    # Errors
    "FatalError",
    "ArgumentNotFoundError",
    "TextFormatUnsupportedError",
    "ProtoWriteError",
    "configure_logging",
    "get_logger",
]
