"""Typed views that pick one kind of argument out of a parsed list."""

from __future__ import annotations

from dataclasses import dataclass

from argsparse.defs import ArgName, Argument, Flag, Option, Positional


@dataclass(frozen=True)
class PositionalArg:
    """View of a positional argument."""

    value: str

    @classmethod
    def from_argument(cls, argument: Argument) -> PositionalArg | None:
        """Return a view of ``argument`` if it is positional, else None."""
        if isinstance(argument, Positional):
            return cls(argument.value)
        return None


@dataclass(frozen=True)
class FlagArg:
    """View of a flag argument."""

    name: ArgName

    @classmethod
    def from_argument(cls, argument: Argument) -> FlagArg | None:
        """Return a view of ``argument`` if it is a flag, else None."""
        if isinstance(argument, Flag):
            return cls(argument.name)
        return None


@dataclass(frozen=True)
class OptionArg:
    """View of an option argument with its value."""

    name: ArgName
    value: str

    @classmethod
    def from_argument(cls, argument: Argument) -> OptionArg | None:
        """Return a view of ``argument`` if it is an option, else None."""
        if isinstance(argument, Option):
            return cls(argument.name, argument.value)
        return None