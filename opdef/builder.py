"""Construction of operator definitions and arguments."""

from typing import Any, Iterable, Optional

from opdef.data import Argument, DeviceOption, NetDef, OperatorDef


def create_operator_def(
    op_type: str,
    name: str,
    inputs: Iterable[str],
    outputs: Iterable[str],
    args: Iterable[Argument] = (),
    device_option: Optional[DeviceOption] = None,
    engine: str = "",
) -> OperatorDef:
    """Create an operator definition from its parts.

    The short forms ``create_operator_def(op_type, name, inputs, outputs)`` and
    ``create_operator_def(op_type, name, inputs, outputs, args)`` are equivalent to passing
    no arguments, an unset device option and an empty engine.

    Parameters
    ----------
    op_type : str
        The operator kind, stored verbatim.
    name : str
        The operator instance name, stored verbatim.
    inputs : Iterable[str]
        Input blob names, appended in iteration order.
    outputs : Iterable[str]
        Output blob names, appended in iteration order.
    args : Iterable[Argument]
        Arguments to attach. Each one is deep-copied, so later changes to the caller's
        arguments do not affect the definition.
    device_option : Optional[DeviceOption]
        Execution target. Only attached (as a copy) when its device type is set.
    engine : str
        Preferred engine. Only attached when non-empty.

    Returns
    -------
    OperatorDef
        The new operator definition.
    """
    definition = OperatorDef(type=op_type, name=name)
    definition.input.extend(inputs)
    definition.output.extend(outputs)
    for arg in args:
        definition.arg.append(arg.model_copy(deep=True))
    if device_option is not None and device_option.has_device_type():
        definition.device_option = device_option.model_copy(deep=True)
    if engine:
        definition.engine = engine
    return definition


def make_argument(name: str, value: Any) -> Argument:
    """Create an argument holding ``value``.

    The value field is chosen from the Python type of ``value``: ``bool`` and ``int`` go to
    ``i``, ``float`` to ``f``, ``str`` to ``s`` and :class:`NetDef` to ``n``. Lists and tuples
    go to the matching repeated field; an empty sequence is stored as ``floats``.

    Raises
    ------
    ValueError
        If the value type is not supported or a sequence mixes element types.
    """
    if isinstance(value, bool):
        return Argument(name=name, i=int(value))
    if isinstance(value, int):
        return Argument(name=name, i=value)
    if isinstance(value, float):
        return Argument(name=name, f=value)
    if isinstance(value, str):
        return Argument(name=name, s=value)
    if isinstance(value, NetDef):
        return Argument(name=name, n=value.model_copy(deep=True))
    if isinstance(value, (list, tuple)):
        if all(isinstance(v, float) for v in value):
            return Argument(name=name, floats=list(value))
        if all(isinstance(v, int) and not isinstance(v, bool) for v in value):
            return Argument(name=name, ints=list(value))
        if all(isinstance(v, str) for v in value):
            return Argument(name=name, strings=list(value))
        if all(isinstance(v, NetDef) for v in value):
            return Argument(name=name, nets=[v.model_copy(deep=True) for v in value])
        raise ValueError(
            f'Argument "{name}" has a sequence value with mixed or unsupported element types'
        )
    raise ValueError(f'Argument "{name}" has unsupported value type {type(value).__name__}')


def add_argument(name: str, value: Any, definition: OperatorDef) -> Argument:
    """Append a new argument holding ``value`` to ``definition``.

    Existing arguments with the same name are left untouched.

    Returns
    -------
    Argument
        The argument as stored in the definition.
    """
    definition.arg.append(make_argument(name, value))
    return definition.arg[-1]
