"""Data layer with strongly-typed message models for opdef."""

from .message import Message, MessageLite
from .operator_def import (
    Argument,
    DeviceOption,
    DeviceType,
    NetDef,
    NetDefLite,
    OperatorDef,
    OperatorDefLite,
)

__all__ = [
    # Message bases
    "Message",
    "MessageLite",
    # Schema types
    "Argument",
    "DeviceOption",
    "DeviceType",
    "NetDef",
    "OperatorDef",
    # Lite variants
    "NetDefLite",
    "OperatorDefLite",
]
