"""Core data types: argument names, parsed arguments and definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ShortName:
    """A single-character name, as in ``-v``."""

    char: str


@dataclass(frozen=True)
class LongName:
    """A multi-character name, as in ``--verbose``."""

    name: str


ArgName = Union[ShortName, LongName]


@dataclass(frozen=True)
class Positional:
    """A bare value that is not attached to any name."""

    value: str


@dataclass(frozen=True)
class Flag:
    """A named argument without a value."""

    name: ArgName


@dataclass(frozen=True)
class Option:
    """A named argument carrying a value."""

    name: ArgName
    value: str


Argument = Union[Positional, Flag, Option]


@dataclass(frozen=True)
class ArgDef:
    """Describes an argument by its short name, long name, or both."""

    short: str | None = None
    long: str | None = None

    def __post_init__(self) -> None:
        if self.short is None and self.long is None:
            raise ValueError("an argument definition needs a short or a long name")
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short name must be a single character, got {self.short!r}")

    def matches(self, name: ArgName) -> bool:
        """Return True if ``name`` refers to the argument this definition describes."""
        if isinstance(name, ShortName):
            return self.short is not None and self.short == name.char
        if isinstance(name, LongName):
            return self.long is not None and self.long == name.name
        return False


class ParseArgError(ValueError):
    """Raised when a command-line argument cannot be parsed."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Malformed argument at position {position}")
        self.position = position