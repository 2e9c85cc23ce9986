# argsparse

A small, schema-free command-line argument parser. It turns a list of
strings into a sequence of positionals, flags and options, which you can
then query. You do not declare arguments up front. The parser decides what
each item is from its shape alone.

## Installation

```
pip install argsparse
```

The package has no runtime dependencies. It requires Python 3.10 or later.

## Parsing

```python
from argsparse.args import Args

args = Args.parse(["input.txt", "--verbose", "-o", "out.txt", "--", "--literal"])
```

`Args.parse` accepts any iterable of strings. It is a thin wrapper around
`argsparse.parser.parse_arguments`, which returns a plain `list` of parsed
arguments.

The parser applies these rules:

- After a lone `--`, every remaining item is a `Positional`.
- An item that does not start with `-` is a `Positional`.
- `--name value` gives `Option(LongName("name"), "value")` when the next item
  does not start with `-`. Otherwise `--name` gives `Flag(LongName("name"))`
  and the next item is not consumed.
- `--name=value` gives an `Option` that is split at the first `=`. In this
  form the name keeps its leading dashes: `--name=value` gives
  `Option(LongName("--name"), "value")`.
- `-abc value` gives one `Option` for each letter when the next item does not
  start with `-`. Each letter gets the same value. Otherwise each letter gives
  a `Flag` with a `ShortName`.
- `-abc=value` gives one `Option` for each letter before the `=`. Each of
  these options has the value `value`.
- A lone `-` is malformed and raises `argsparse.defs.ParseArgError`. This
  exception is a `ValueError`. Its message reads
  `Malformed argument at position N`, and its `position` attribute holds the
  zero-based index of the item.

## Data types

The types below are in `argsparse.defs`. All of them are frozen dataclasses.

- `ShortName(char)` and `LongName(name)` are the two kinds of argument name.
- `Positional(value)`, `Flag(name)` and `Option(name, value)` are the parsed
  arguments.
- `ArgDef(short=None, long=None)` describes an argument by a short name, a
  long name, or both. It raises `ValueError` if you give neither name, or if
  `short` is not a single character. `ArgDef.matches(name)` returns `True`
  when a `ShortName` equals `short` or a `LongName` equals `long`.

## Querying

`Args` is a read-only `Sequence` of parsed arguments. It supports `len()`,
indexing, slicing, iteration and equality with another `Args`.

The typed views in `argsparse.views` pick out one kind of argument:

- `PositionalArg` has a `value` field.
- `FlagArg` has a `name` field.
- `OptionArg` has `name` and `value` fields.

Each view has a `from_argument` classmethod. It returns a view of the
argument, or `None` when the argument is of another kind.

```python
from argsparse.args import Args
from argsparse.defs import ArgDef, LongName
from argsparse.views import FlagArg, OptionArg, PositionalArg

args = Args.parse(["build", "--release", "-j", "4", "--target=x86"])

args.has(ArgDef(long="release"))           # True
args.find(OptionArg, ArgDef(short="j"))    # OptionArg(name=ShortName(char='j'), value='4')
args.find(OptionArg, ArgDef(long="--target"))
# OptionArg(name=LongName(name='--target'), value='x86')
args.find_all(PositionalArg)               # [PositionalArg(value='build')]
for flag in args.iter_all(FlagArg):
    print(flag.name)                       # LongName(name='release')
```

The query methods work as follows:

- `has(definition)` reports whether any flag or option matches the
  definition.
- `find(kind, definition)` takes the first flag or option whose name matches
  the definition and views it as `kind`. It returns `None` when nothing
  matches, or when the first match is of a different kind.
- `iter_all(kind)` yields every argument that `kind` can view.
- `find_all(kind)` returns the same arguments as `iter_all(kind)`, as a list.

## Limitations

`argsparse` does not validate arguments against a schema. It does not
generate help or usage text, and it does not convert values to other types.
Every value stays a string.