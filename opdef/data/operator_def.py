"""Schema of operator definitions and the messages they reference."""

from enum import IntEnum
from typing import ClassVar, List, Optional

from pydantic import Field, field_validator, model_validator

from opdef.codec import BinaryOnlyCodec, MessageCodec

from .message import Message


class DeviceType(IntEnum):
    """Well-known values of :attr:`DeviceOption.device_type`."""

    CPU = 0
    """Host CPU. This is also the device used when no device type is set."""
    CUDA = 1
    """NVIDIA GPU through CUDA."""


class DeviceOption(Message):
    """Execution target of an operator or a net.

    An unset device type and a device type explicitly set to CPU are different states;
    only the latter makes :meth:`has_device_type` return True.
    """

    device_type: Optional[int] = None
    """The device kind, usually a :class:`DeviceType` value. None if not set."""
    cuda_gpu_id: Optional[int] = None
    """Index of the GPU when the device type is CUDA."""
    random_seed: Optional[int] = Field(default=None, ge=0)
    """Seed of the random generator used by operators running on this device."""

    @field_validator("device_type")
    @classmethod
    def _plain_device_type(cls, v: Optional[int]) -> Optional[int]:
        # Store DeviceType members as plain ints so both encodings see the same value
        return None if v is None else int(v)

    def has_device_type(self) -> bool:
        """Whether the device type was explicitly set."""
        return self.device_type is not None


class Argument(Message):
    """A named value attached to an operator definition.

    At most one of the value fields is populated. An argument without any value is legal;
    this is what :func:`opdef.arguments.get_mutable_argument` creates for a missing name.
    """

    name: str = ""
    """The argument name. Names are not required to be unique within a definition."""
    f: Optional[float] = None
    """Single float value."""
    i: Optional[int] = None
    """Single integer value."""
    s: Optional[str] = None
    """Single string value."""
    n: Optional["NetDef"] = None
    """Single nested net value."""
    floats: List[float] = Field(default_factory=list)
    """Repeated float value."""
    ints: List[int] = Field(default_factory=list)
    """Repeated integer value."""
    strings: List[str] = Field(default_factory=list)
    """Repeated string value."""
    nets: List["NetDef"] = Field(default_factory=list)
    """Repeated nested net value."""

    @model_validator(mode="after")
    def _validate_single_value(self) -> "Argument":
        """Validate that at most one value field is populated.

        Raises
        ------
        ValueError
            If more than one value field is populated.
        """
        populated = [
            field_name
            for field_name in _SCALAR_VALUE_FIELDS
            if getattr(self, field_name) is not None
        ] + [field_name for field_name in _REPEATED_VALUE_FIELDS if getattr(self, field_name)]
        if len(populated) > 1:
            raise ValueError(
                f'Argument "{self.name}" has more than one value populated: {populated}'
            )
        return self


_SCALAR_VALUE_FIELDS = ("f", "i", "s", "n")
_REPEATED_VALUE_FIELDS = ("floats", "ints", "strings", "nets")


class OperatorDef(Message):
    """Declarative definition of one computation step."""

    input: List[str] = Field(default_factory=list)
    """Input blob names. Order is significant (positional binding)."""
    output: List[str] = Field(default_factory=list)
    """Output blob names. Order is significant."""
    name: str = ""
    """Instance name of the operator."""
    type: str = ""
    """Operator kind, e.g. 'Conv' or 'Relu'."""
    arg: List[Argument] = Field(default_factory=list)
    """Arguments in insertion order. Lookups resolve to the first argument with a given name."""
    device_option: Optional[DeviceOption] = None
    """Execution target. None if not set."""
    engine: Optional[str] = None
    """Preferred implementation engine. None if not set."""


class NetDef(Message):
    """A net of operators. Carried by arguments that hold nested nets."""

    name: str = ""
    """The net name."""
    op: List[OperatorDef] = Field(default_factory=list)
    """Operators in execution order."""
    type: Optional[str] = None
    """The net kind used to run the operators. None if not set."""
    num_workers: Optional[int] = Field(default=None, ge=0)
    """Number of workers for nets that run operators concurrently."""
    device_option: Optional[DeviceOption] = None
    """Default execution target of the operators in this net."""
    arg: List[Argument] = Field(default_factory=list)
    """Net-level arguments."""
    external_input: List[str] = Field(default_factory=list)
    """Blobs read by the net that it does not produce."""
    external_output: List[str] = Field(default_factory=list)
    """Blobs produced by the net for consumers outside of it."""


Argument.model_rebuild()
OperatorDef.model_rebuild()
NetDef.model_rebuild()


class OperatorDefLite(OperatorDef):
    """:class:`OperatorDef` restricted to the binary encoding."""

    message_codec: ClassVar[MessageCodec] = BinaryOnlyCodec()


class NetDefLite(NetDef):
    """:class:`NetDef` restricted to the binary encoding."""

    message_codec: ClassVar[MessageCodec] = BinaryOnlyCodec()
