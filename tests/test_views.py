import pytest

from argsparse.defs import Flag, LongName, Option, Positional, ShortName
from argsparse.views import FlagArg, OptionArg, PositionalArg


def test_positional_view_of_positional():
    assert PositionalArg.from_argument(Positional("input.txt")) == PositionalArg("input.txt")


def test_flag_view_of_flag():
    assert FlagArg.from_argument(Flag(ShortName("v"))) == FlagArg(ShortName("v"))


def test_option_view_of_option():
    view = OptionArg.from_argument(Option(LongName("foo"), "bar"))
    assert view == OptionArg(LongName("foo"), "bar")
    assert view.value == "bar"


@pytest.mark.parametrize(
    "kind, argument",
    [
        (PositionalArg, Flag(LongName("x"))),
        (PositionalArg, Option(LongName("x"), "y")),
        (FlagArg, Positional("x")),
        (FlagArg, Option(ShortName("x"), "y")),
        (OptionArg, Positional("x")),
        (OptionArg, Flag(ShortName("x"))),
    ],
)
def test_view_of_other_kind_is_none(kind, argument):
    assert kind.from_argument(argument) is None