"""Turns a list of raw command-line strings into parsed arguments."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from argsparse.defs import Argument, Flag, LongName, Option, ParseArgError, Positional, ShortName

_Pending = deque  # of (position, text) pairs


def parse_arguments(argv: Iterable[str]) -> list[Argument]:
    """Parse ``argv`` into positionals, flags and options, in order.

    Everything after a lone ``--`` is positional. A name takes the following
    string as its value unless that string starts with ``-``.
    """
    pending: _Pending = deque(enumerate(argv))
    result: list[Argument] = []

    while pending:
        position, arg = pending.popleft()
        if arg == "--":
            result.extend(Positional(value) for _, value in pending)
            break
        if arg.startswith("--"):
            result.append(_parse_long(arg, pending))
        elif arg.startswith("-"):
            result.extend(_parse_short(arg, position, pending))
        else:
            result.append(Positional(arg))

    return result


def _take_value(pending: _Pending) -> str | None:
    if pending and not pending[0][1].startswith("-"):
        return pending.popleft()[1]
    return None


def _parse_long(arg: str, pending: _Pending) -> Argument:
    if "=" in arg:
        # The name keeps its leading dashes in the "name=value" form.
        name, _, value = arg.partition("=")
        return Option(LongName(name), value)

    name = LongName(arg[2:])
    value = _take_value(pending)
    if value is None:
        return Flag(name)
    return Option(name, value)


def _parse_short(arg: str, position: int, pending: _Pending) -> list[Argument]:
    if len(arg) < 2:
        raise ParseArgError(position)

    if "=" in arg:
        names, _, value = arg.partition("=")
        return [Option(ShortName(char), value) for char in names[1:]]

    chars = arg[1:]
    value = _take_value(pending)
    if value is None:
        return [Flag(ShortName(char)) for char in chars]
    return [Option(ShortName(char), value) for char in chars]