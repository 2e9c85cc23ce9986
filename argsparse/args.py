"""A parsed argument list with lookup helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol, TypeVar, overload

from argsparse.defs import ArgDef, Argument, Flag, Option
from argsparse.parser import parse_arguments

T = TypeVar("T", covariant=True)


class _View(Protocol[T]):
    def from_argument(self, argument: Argument) -> T | None: ...


class Args(Sequence):
    """An ordered list of parsed arguments."""

    def __init__(self, arguments: Iterable[Argument] = ()) -> None:
        self._arguments = list(arguments)

    @classmethod
    def parse(cls, argv: Iterable[str]) -> Args:
        """Parse raw strings into an Args; raises ParseArgError when malformed."""
        return cls(parse_arguments(argv))

    def iter_all(self, kind: _View[T]) -> Iterator[T]:
        """Yield every argument that ``kind`` can view."""
        for argument in self._arguments:
            view = kind.from_argument(argument)
            if view is not None:
                yield view

    def find_all(self, kind: _View[T]) -> list[T]:
        """Return every argument that ``kind`` can view."""
        return list(self.iter_all(kind))

    def find(self, kind: _View[T], definition: ArgDef) -> T | None:
        """View the first flag or option matching ``definition`` as ``kind``.

        Returns None if nothing matches or the first match is of another kind.
        """
        match = next(
            (arg for arg in self._arguments if _named_match(arg, definition)),
            None,
        )
        return None if match is None else kind.from_argument(match)

    def has(self, definition: ArgDef) -> bool:
        """Return True if any flag or option matches ``definition``."""
        return any(_named_match(arg, definition) for arg in self._arguments)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    @overload
    def __getitem__(self, index: int) -> Argument: ...

    @overload
    def __getitem__(self, index: slice) -> list[Argument]: ...

    def __getitem__(self, index):
        return self._arguments[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Args):
            return self._arguments == other._arguments
        return NotImplemented

    def __repr__(self) -> str:
        return f"Args({self._arguments!r})"


def _named_match(argument: Argument, definition: ArgDef) -> bool:
    return isinstance(argument, (Flag, Option)) and definition.matches(argument.name)