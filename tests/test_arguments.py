import logging
import sys

import pytest

from opdef.arguments import (
    ArgumentHelper,
    get_argument,
    get_argument_value,
    get_mutable_argument,
    has_argument,
)
from opdef.data import Argument, NetDef, OperatorDef
from opdef.errors import ArgumentNotFoundError, FatalError


def make_op(*args: Argument) -> OperatorDef:
    return OperatorDef(type="Op", name="op", arg=list(args))


def test_has_argument():
    op = make_op(Argument(name="a", i=1), Argument(name="b", f=2.0))
    assert has_argument(op, "a")
    assert has_argument(op, "b")
    assert not has_argument(op, "c")
    assert not has_argument(op, "A")
    assert not has_argument(OperatorDef(), "a")


def test_get_argument_first_match_wins():
    op = make_op(Argument(name="x", i=1), Argument(name="y", i=2), Argument(name="x", i=3))
    arg = get_argument(op, "x")
    assert arg.i == 1
    assert arg is op.arg[0]


def test_get_argument_missing_is_fatal(caplog):
    with caplog.at_level(logging.CRITICAL, logger="opdef"):
        with pytest.raises(ArgumentNotFoundError, match="missing"):
            get_argument(OperatorDef(type="Op"), "missing")
    assert any("missing" in r.getMessage() for r in caplog.records)

    with pytest.raises(FatalError):
        get_argument(make_op(Argument(name="other", i=1)), "missing")


def test_get_mutable_argument_returns_stored_entry():
    op = make_op(Argument(name="x", i=1), Argument(name="x", i=2))
    arg = get_mutable_argument("x", False, op)
    assert arg is op.arg[0]
    arg.i = 10
    assert op.arg[0].i == 10
    assert op.arg[1].i == 2


def test_get_mutable_argument_absent_without_create():
    op = make_op(Argument(name="x", i=1))
    assert get_mutable_argument("y", False, op) is None
    assert len(op.arg) == 1


def test_get_mutable_argument_creates_once():
    op = make_op(Argument(name="b", i=1), Argument(name="a", i=2))
    created = get_mutable_argument("c", True, op)
    assert created == Argument(name="c")
    assert [a.name for a in op.arg] == ["b", "a", "c"]

    again = get_mutable_argument("c", True, op)
    assert again is created
    assert len(op.arg) == 3

    again.strings = ["v"]
    assert get_argument(op, "c").strings == ["v"]


def test_has_argument_agrees_with_get_mutable_argument():
    op = make_op(Argument(name="a"), Argument(name="b", s="x"))
    for name in ("a", "b", "c", ""):
        assert has_argument(op, name) == (get_mutable_argument(name, False, op) is not None)


def test_get_argument_value():
    assert get_argument_value(Argument(name="x")) is None
    assert get_argument_value(Argument(name="x", i=0)) == 0
    assert get_argument_value(Argument(name="x", s="")) == ""
    assert get_argument_value(Argument(name="x", floats=[1.5])) == [1.5]
    assert get_argument_value(Argument(name="x", n=NetDef(name="n"))).name == "n"


def test_argument_helper():
    op = make_op(
        Argument(name="k", i=3),
        Argument(name="alpha", f=0.5),
        Argument(name="pads", ints=[1, 2]),
        Argument(name="k", i=9),
        Argument(name="empty"),
    )
    helper = ArgumentHelper(op)
    assert helper.has_argument("k")
    assert not helper.has_argument("nope")

    assert helper.get_single_argument("k", 0) == 3
    assert helper.get_single_argument("alpha", 1.0) == 0.5
    assert helper.get_single_argument("nope", 7) == 7
    assert helper.get_single_argument("empty", "d") == "d"
    assert helper.get_single_argument("pads", None) is None

    pads = helper.get_repeated_argument("pads")
    assert pads == [1, 2]
    pads.append(3)
    assert op.arg[2].ints == [1, 2]
    assert helper.get_repeated_argument("nope") == []
    assert helper.get_repeated_argument("k", [4]) == [4]

    assert helper.has_single_argument_of_type("k", int)
    assert not helper.has_single_argument_of_type("k", float)
    assert helper.has_single_argument_of_type("alpha", float)
    assert not helper.has_single_argument_of_type("pads", list)
    assert not helper.has_single_argument_of_type("nope", int)


if __name__ == "__main__":
    pytest.main(sys.argv)
