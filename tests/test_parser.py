import pytest

from argsparse.defs import Flag, LongName, Option, ParseArgError, Positional, ShortName
from argsparse.parser import parse_arguments


def test_empty_input():
    assert parse_arguments([]) == []


def test_plain_positionals():
    assert parse_arguments(["a", "b"]) == [Positional("a"), Positional("b")]


def test_long_option_takes_next_value():
    assert parse_arguments(["--foo", "bar"]) == [Option(LongName("foo"), "bar")]


def test_long_flag_at_end():
    assert parse_arguments(["--debug"]) == [Flag(LongName("debug"))]


def test_long_flag_before_dash():
    assert parse_arguments(["--debug", "-v"]) == [Flag(LongName("debug")), Flag(ShortName("v"))]


def test_long_with_equals_keeps_dashes_in_name():
    assert parse_arguments(["--foo=bar"]) == [Option(LongName("--foo"), "bar")]


def test_short_option_takes_next_value():
    assert parse_arguments(["-o", "value"]) == [Option(ShortName("o"), "value")]


def test_grouped_shorts_become_flags():
    assert parse_arguments(["-ab"]) == [Flag(ShortName("a")), Flag(ShortName("b"))]


def test_grouped_shorts_share_value():
    assert parse_arguments(["-ab", "x"]) == [Option(ShortName("a"), "x"), Option(ShortName("b"), "x")]


def test_short_with_equals():
    assert parse_arguments(["-ab=x"]) == [Option(ShortName("a"), "x"), Option(ShortName("b"), "x")]


def test_double_dash_makes_rest_positional():
    result = parse_arguments(["testing", "--some", "args", "-here", "--", "--end"])
    assert result == [
        Positional("testing"),
        Option(LongName("some"), "args"),
        Flag(ShortName("h")),
        Flag(ShortName("e")),
        Flag(ShortName("r")),
        Flag(ShortName("e")),
        Positional("--end"),
    ]


def test_lone_dash_is_error_with_position():
    with pytest.raises(ParseArgError) as info:
        parse_arguments(["a", "-"])
    assert info.value.position == 1


def test_lone_dash_after_double_dash_is_positional():
    assert parse_arguments(["--", "-"]) == [Positional("-")]


def test_consumed_value_is_not_positional():
    result = parse_arguments(["--help", "-v", "input.txt"])
    assert result == [Flag(LongName("help")), Option(ShortName("v"), "input.txt")]
    assert not any(isinstance(arg, Positional) for arg in result)