# cliparts

Small building blocks for writing command-line argument parsers in Python.
They use only the standard library.

## What is inside

- `cliparts.errors`: a hierarchy of exceptions rooted at `Error`. Each one
  has a `message`, an `exit_code` (see `ExitCodes`) and a `name`.
  Parse-time problems derive from `ParseError`. Examples are
  `ConversionError`, `ValidationError`, `ArgumentMismatch`, `RequiredError`,
  `RequiresError`, `ExcludesError`, `ExtrasError`, `ConfigError`,
  `FileError`, `InvalidError` and `HorribleError`. Construction problems
  derive from `ConstructionError`: `BadNameString`, `IncorrectConstruction`
  and `OptionAlreadyAdded`. `OptionNotFound` derives directly from `Error`.
  Three exceptions carry exit code 0 and signal a clean early exit:
  `Success`, `CallForHelp` and `CallForAllHelp`. `CLIRuntimeError` exits
  with a chosen code. Most classes also offer classmethods that build the
  standard messages, for example `ArgumentMismatch.at_least(name, num)` or
  `RequiredError.option(min, max, used, option_list)`.
- `cliparts.split`: helpers that take command-line tokens apart.
  - `split_short("-xrest")` gives `("x", "rest")`.
  - `split_long("--name=value")` gives `("name", "value")`.
  - `split_windows_style("/name:value")` gives `("name", "value")`.
  - The three functions above return `None` when the token is not of their
    form.
  - `split_names` splits a comma-separated name list.
  - `get_default_flag_values` extracts `name{value}` and `!name` defaults.
  - `get_names` sorts names into short names, long names and a positional
    name. It raises `BadNameString` on bad input.
- `cliparts.typetools`: value conversion.
  - `lexical_cast(text, kind)` converts to a `ValueKind`: `SIGNED_INT`,
    `UNSIGNED_INT`, `BOOL`, `FLOAT`, `ENUM` or `TEXT`. It raises
    `ValueError` when the text does not fit.
  - `to_flag_value` reads flag spellings such as `on`, `no`, `t` or `7`.
  - `sum_flag_vector` adds up repeated flags.
  - `type_name` gives the placeholder shown in help text.
- `cliparts.timer`: `Timer` and its context-manager subclass `AutoTimer`,
  for quick timing with readable output in ns, us, ms or s.
- `cliparts.version`: `VERSION` and its major, minor and patch parts.

## What it does not do

There is no parser object here. Nothing defines options, subcommands,
validators or help output, and nothing reads configuration files. The
modules above are the pieces such a parser would be built from.

## Installation

```
pip install cliparts
```

## Examples

Taking option names apart:

```python
from cliparts.split import get_names, split_long

shorts, longs, positional = get_names(["-c", "--count"])
# (["c"], ["count"], "")

split_long("--file=out.txt")
# ("file", "out.txt")
```

Converting values:

```python
from cliparts.typetools import ValueKind, lexical_cast, to_flag_value

lexical_cast("0x1F", ValueKind.SIGNED_INT)   # 31
lexical_cast("on", ValueKind.BOOL)           # True
to_flag_value("off")                         # -1
```

Reporting errors:

```python
from cliparts.errors import ArgumentMismatch, ParseError

try:
    raise ArgumentMismatch.at_least("--vals", 2)
except ParseError as err:
    print(err, err.exit_code)   # --vals: At least 2 required 114
```

Timing code:

```python
from cliparts.timer import AutoTimer, Timer

timer = Timer("Load")
# ... work ...
print(timer)            # Load: 12.345 ms

with AutoTimer("Step"):
    ...                 # the elapsed time is printed on exit

print(Timer().time_it(lambda: sum(range(1000)), 0.1))
```

## Running the tests

```
pip install -e ".[test]"
pytest
```