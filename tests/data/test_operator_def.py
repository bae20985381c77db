import sys

import pytest
from pydantic import ValidationError

from opdef.codec import BinaryOnlyCodec, BinaryTextCodec, get_codec
from opdef.data import (
    Argument,
    DeviceOption,
    DeviceType,
    Message,
    NetDef,
    NetDefLite,
    OperatorDef,
    OperatorDefLite,
)


def test_operator_def_defaults():
    op = OperatorDef()
    assert op.type == ""
    assert op.name == ""
    assert op.input == []
    assert op.output == []
    assert op.arg == []
    assert op.device_option is None
    assert op.engine is None


def test_device_option_has_device_type():
    assert not DeviceOption().has_device_type()
    # CPU is the default device but setting it explicitly is a distinct state
    assert DeviceOption(device_type=DeviceType.CPU).has_device_type()
    assert DeviceOption(device_type=1).has_device_type()
    with pytest.raises(ValidationError):
        DeviceOption(random_seed=-1)


def test_argument_single_value():
    Argument(name="empty")
    Argument(name="x", i=1)
    Argument(name="x", ints=[])
    with pytest.raises(ValueError):
        Argument(name="x", i=1, f=1.0)
    with pytest.raises(ValueError):
        Argument(name="x", s="a", strings=["b"])


def test_argument_nested_net():
    arg = Argument(name="body", n=NetDef(name="inner", op=[OperatorDef(type="Relu")]))
    assert arg.n.op[0].type == "Relu"
    arg2 = Argument(name="bodies", nets=[{"name": "a"}, {"name": "b"}])
    assert [net.name for net in arg2.nets] == ["a", "b"]


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        OperatorDef(type="Relu", kind="oops")


def test_copy_from_replaces_all_fields(sample_operator_def):
    target = OperatorDef(type="Old", name="old", input=["z"], engine="X")
    target.copy_from(sample_operator_def)
    assert target == sample_operator_def
    # Deep copy: the target does not share nested objects with the source
    target.arg[0].i = 100
    assert sample_operator_def.arg[0].i == 3

    with pytest.raises(TypeError):
        target.copy_from(NetDef())


def test_message_variants_bind_codecs():
    assert isinstance(get_codec(OperatorDef), BinaryTextCodec)
    assert isinstance(get_codec(NetDef()), BinaryTextCodec)
    assert isinstance(get_codec(OperatorDefLite), BinaryOnlyCodec)
    assert isinstance(get_codec(NetDefLite()), BinaryOnlyCodec)
    # The lite variants share the full schema
    assert set(OperatorDefLite.model_fields) == set(OperatorDef.model_fields)
    assert issubclass(OperatorDef, Message)


if __name__ == "__main__":
    pytest.main(sys.argv)
