"""Conversion of command-line strings into typed values."""

from __future__ import annotations

import math
import re
from enum import Enum

_C_SPACE = "[ \t\n\v\f\r]*"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1

_DECIMAL_PREFIX = re.compile(_C_SPACE + r"([+-]?)([0-9]+)")
_AUTO_BASE_PREFIX = re.compile(
    _C_SPACE + r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)
_FLOAT = re.compile(
    _C_SPACE
    + r"[+-]?(?:"
    r"(?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    r"|(?P<inf>inf(?:inity)?)"
    r"|(?P<nan>nan(?:\([0-9a-z_]*\))?)"
    r")",
    re.IGNORECASE,
)

_TRUE_WORDS = frozenset({"true", "on", "yes", "enable"})
_FALSE_WORDS = frozenset({"false", "off", "no", "disable"})


class ValueKind(Enum):
    """The kinds of value an option can be converted into."""

    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    BOOL = "bool"
    FLOAT = "float"
    VECTOR = "vector"
    ENUM = "enum"
    TEXT = "text"


_TYPE_NAMES = {
    ValueKind.SIGNED_INT: "INT",
    ValueKind.UNSIGNED_INT: "UINT",
    ValueKind.BOOL: "UINT",
    ValueKind.FLOAT: "FLOAT",
    ValueKind.VECTOR: "VECTOR",
    ValueKind.ENUM: "ENUM",
    ValueKind.TEXT: "TEXT",
}


def type_name(kind: ValueKind) -> str:
    """The placeholder shown in help text for a value of this kind."""
    return _TYPE_NAMES[kind]


def _integer_prefix(pattern: re.Pattern[str], text: str) -> tuple[int, int]:
    """Parse the leading integer of ``text``; return its value and the length used."""
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif pattern is _AUTO_BASE_PREFIX and len(digits) > 1 and digits[0] == "0":
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    if sign == "-":
        value = -value
    return value, match.end()


def _checked_signed(value: int) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{value} is out of range")
    return value


def to_flag_value(val: str) -> int:
    """Convert a flag string into an integer: 1 for true, -1 for false, or a count."""
    if val == "true":
        return 1
    if val == "false":
        return -1
    val = val.lower()
    if len(val) == 1:
        char = val
        if char in "0fn-":
            return -1
        if char in "1ty+":
            return 1
        if char in "23456789":
            return int(char)
        raise ValueError("unrecognized character")
    if val in _TRUE_WORDS:
        return 1
    if val in _FALSE_WORDS:
        return -1
    value, _ = _integer_prefix(_DECIMAL_PREFIX, val)
    return _checked_signed(value)


def _cast_signed(text: str) -> int:
    value, used = _integer_prefix(_AUTO_BASE_PREFIX, text)
    if used != len(text):
        raise ValueError(f"trailing characters in {text!r}")
    return _checked_signed(value)


def _cast_unsigned(text: str) -> int:
    if text.lstrip(" \t\n\v\f\r").startswith("-"):
        raise ValueError(f"negative value {text!r} for an unsigned integer")
    value, used = _integer_prefix(_AUTO_BASE_PREFIX, text)
    if used != len(text):
        raise ValueError(f"trailing characters in {text!r}")
    if value > _UINT64_MAX:
        raise ValueError(f"{value} is out of range")
    return value


def _cast_float(text: str) -> float:
    match = _FLOAT.fullmatch(text)
    if match is None:
        raise ValueError(f"could not convert {text!r} to a float")
    body = text.lstrip(" \t\n\v\f\r")
    negative = body.startswith("-")
    if match.group("nan"):
        return math.nan
    if match.group("hex"):
        value = float.fromhex(match.group("hex"))
        value = -value if negative else value
    else:
        value = float(body)
    if math.isinf(value) and not match.group("inf"):
        raise ValueError(f"{text!r} is out of range")
    return value


def lexical_cast(text: str, kind: ValueKind) -> int | bool | float | str:
    """Convert ``text`` into a value of ``kind``; raise ValueError when it does not fit."""
    if kind is ValueKind.SIGNED_INT or kind is ValueKind.ENUM:
        return _cast_signed(text)
    if kind is ValueKind.UNSIGNED_INT:
        return _cast_unsigned(text)
    if kind is ValueKind.BOOL:
        return to_flag_value(text) > 0
    if kind is ValueKind.FLOAT:
        return _cast_float(text)
    if kind is ValueKind.TEXT:
        return text
    raise TypeError(f"a single value cannot be converted to {kind.name}")


def sum_flag_vector(flags: list[str], signed: bool = True) -> int:
    """Sum flag strings; an unsigned result never drops below zero."""
    count = sum(to_flag_value(flag) for flag in flags)
    if not signed and count < 0:
        return 0
    return count