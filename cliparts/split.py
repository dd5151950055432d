"""Splitting of command-line arguments and option name strings."""

from __future__ import annotations

from cliparts.errors import BadNameString

_WHITESPACE = " \t\n\r\f\v"


def _valid_first_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "_?@"


def _valid_later_char(char: str) -> bool:
    return _valid_first_char(char) or char in ".-"


def _valid_name_string(name: str) -> bool:
    if not name or not _valid_first_char(name[0]):
        return False
    return all(_valid_later_char(char) for char in name[1:])


def split_short(current: str) -> tuple[str, str] | None:
    """Split ``-xrest`` into ``("x", "rest")``; None if not a short option."""
    if len(current) > 1 and current[0] == "-" and _valid_first_char(current[1]):
        return current[1], current[2:]
    return None


def split_long(current: str) -> tuple[str, str] | None:
    """Split ``--name=value`` into ``("name", "value")``; None if not a long option."""
    if len(current) > 2 and current.startswith("--") and _valid_first_char(current[2]):
        name, _, value = current[2:].partition("=")
        return name, value
    return None


def split_windows_style(current: str) -> tuple[str, str] | None:
    """Split ``/name:value`` into ``("name", "value")``; None if not that style."""
    if len(current) > 1 and current[0] == "/" and _valid_first_char(current[1]):
        name, _, value = current[1:].partition(":")
        return name, value
    return None


def split_names(current: str) -> list[str]:
    """Split a comma-separated list of names, trimming each one."""
    return [part.strip(_WHITESPACE) for part in current.split(",")]


def get_default_flag_values(text: str) -> list[tuple[str, str]]:
    """Extract flag names carrying a default: ``name{value}`` or ``!name``."""

    def has_default(name: str) -> bool:
        return bool(name) and (("{" in name and name.endswith("}")) or name.startswith("!"))

    output = []
    for flag in filter(has_default, split_names(text)):
        default = "false"
        start = flag.find("{")
        if start != -1 and flag.endswith("}"):
            default = flag[start + 1 : -1]
            flag = flag[:start]
        output.append((flag.lstrip("-!"), default))
    return output


def get_names(names: list[str]) -> tuple[list[str], list[str], str]:
    """Sort names into short names, long names and a single positional name."""
    short_names: list[str] = []
    long_names: list[str] = []
    pos_name = ""

    for name in names:
        if not name:
            continue
        if len(name) > 1 and name[0] == "-" and name[1] != "-":
            if len(name) == 2 and _valid_first_char(name[1]):
                short_names.append(name[1])
            else:
                raise BadNameString.one_char_name(name)
        elif len(name) > 2 and name.startswith("--"):
            long_name = name[2:]
            if not _valid_name_string(long_name):
                raise BadNameString.bad_long_name(long_name)
            long_names.append(long_name)
        elif name in ("-", "--"):
            raise BadNameString.dashes_only(name)
        else:
            if pos_name:
                raise BadNameString.multi_positional_names(name)
            pos_name = name

    return short_names, long_names, pos_name