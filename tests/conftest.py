import pytest

from opdef.data import Argument, DeviceOption, DeviceType, NetDef, OperatorDef


@pytest.fixture(autouse=True)
def clean_opdef_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove OPDEF_* variables so every test starts from the default configuration."""
    for var in (
        "OPDEF_PROTO_BYTES_LIMIT",
        "OPDEF_PROTO_BYTES_WARNING",
        "OPDEF_TEXT_INDENT",
        "OPDEF_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_operator_def() -> OperatorDef:
    """A definition exercising every field, including a nested net argument."""
    inner = NetDef(
        name="body",
        op=[OperatorDef(type="Relu", name="relu", input=["x"], output=["y"])],
        external_input=["x"],
        external_output=["y"],
    )
    return OperatorDef(
        type="Conv",
        name="conv1",
        input=["data", "w", "b"],
        output=["conv1_out"],
        arg=[
            Argument(name="kernel", i=3),
            Argument(name="alpha", f=0.25),
            Argument(name="order", s="NCHW"),
            Argument(name="pads", ints=[1, 1, 1, 1]),
            Argument(name="scales", floats=[0.5, 2.0]),
            Argument(name="labels", strings=["a", "b"]),
            Argument(name="body", n=inner),
        ],
        device_option=DeviceOption(device_type=DeviceType.CUDA, cuda_gpu_id=1),
        engine="CUDNN",
    )
