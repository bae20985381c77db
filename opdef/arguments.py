"""Lookup and update of named arguments inside an operator definition.

All lookups compare names by exact equality and scan the arguments in order, so when several
arguments share a name the first one wins.
"""

from typing import Any, List, Optional

from opdef.data import Argument, OperatorDef
from opdef.errors import ArgumentNotFoundError, raise_fatal


def has_argument(definition: OperatorDef, name: str) -> bool:
    """Check whether ``definition`` has at least one argument called ``name``."""
    return any(arg.name == name for arg in definition.arg)


def get_argument(definition: OperatorDef, name: str) -> Argument:
    """Get the first argument called ``name``.

    Parameters
    ----------
    definition : OperatorDef
        The definition to search.
    name : str
        The argument name.

    Returns
    -------
    Argument
        The stored argument. Treat it as read-only; use :func:`get_mutable_argument` to
        update arguments.

    Raises
    ------
    ArgumentNotFoundError
        If no argument is called ``name``. This is a fatal error: the caller asked for an
        argument the definition was required to carry.
    """
    for arg in definition.arg:
        if arg.name == name:
            return arg
    raise_fatal(
        ArgumentNotFoundError,
        f'Argument named "{name}" does not exist in operator "{definition.name}" '
        f'of type "{definition.type}".',
    )


def get_mutable_argument(
    name: str, create_if_missing: bool, definition: OperatorDef
) -> Optional[Argument]:
    """Get the first argument called ``name`` for in-place modification.

    Parameters
    ----------
    name : str
        The argument name.
    create_if_missing : bool
        If True and no argument is called ``name``, append an empty argument with that name
        and return it.
    definition : OperatorDef
        The definition to search and, possibly, extend.

    Returns
    -------
    Optional[Argument]
        The stored argument itself, so changes are visible in ``definition``. None if the
        argument is missing and ``create_if_missing`` is False.
    """
    for arg in definition.arg:
        if arg.name == name:
            return arg
    if not create_if_missing:
        return None
    definition.arg.append(Argument(name=name))
    return definition.arg[-1]


def get_argument_value(arg: Argument) -> Any:
    """Get the populated value of an argument, or None if it carries no value."""
    for field_name in ("f", "i", "s", "n"):
        value = getattr(arg, field_name)
        if value is not None:
            return value
    for field_name in ("floats", "ints", "strings", "nets"):
        value = getattr(arg, field_name)
        if value:
            return value
    return None


class ArgumentHelper:
    """Read-only typed access to the arguments of an operator definition.

    Lookups follow the same first-match rule as :func:`get_argument`, but missing arguments
    produce the caller's default instead of an error.
    """

    def __init__(self, definition: OperatorDef) -> None:
        self._definition = definition

    def has_argument(self, name: str) -> bool:
        return has_argument(self._definition, name)

    def get_single_argument(self, name: str, default: Any = None) -> Any:
        """Get the scalar value (``f``, ``i``, ``s`` or ``n``) of argument ``name``.

        Parameters
        ----------
        name : str
            The argument name.
        default : Any
            Returned when the argument is missing or carries no scalar value.

        Returns
        -------
        Any
            The scalar value, or ``default``.
        """
        if not self.has_argument(name):
            return default
        value = get_argument_value(get_argument(self._definition, name))
        if value is None or isinstance(value, list):
            return default
        return value

    def get_repeated_argument(self, name: str, default: Optional[List[Any]] = None) -> List[Any]:
        """Get a copy of the repeated value of argument ``name``.

        Returns ``default`` (an empty list if not given) when the argument is missing or
        carries no repeated value.
        """
        if default is None:
            default = []
        if not self.has_argument(name):
            return default
        value = get_argument_value(get_argument(self._definition, name))
        if not isinstance(value, list):
            return default
        return list(value)

    def has_single_argument_of_type(self, name: str, value_type: type) -> bool:
        """Check whether argument ``name`` carries a scalar value of type ``value_type``."""
        if not self.has_argument(name):
            return False
        value = get_argument_value(get_argument(self._definition, name))
        if value is None or isinstance(value, list):
            return False
        return isinstance(value, value_type)
