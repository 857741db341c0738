"""Parse functions for single primitive tokens.

Every function takes one raw token and either returns the parsed value or raises
:class:`ValueError` (:class:`decimal.InvalidOperation` for decimals).
"""

import re
from decimal import Decimal

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_char(s: str) -> str:
    if not s:
        raise ValueError("expected a character, got an empty string")
    return s[0]


def parse_text(s: str) -> str:
    return s


def _signed(bits: int):
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    def parse(s: str) -> int:
        value = parse_big_int(s)
        if not low <= value <= high:
            raise ValueError(f"{s!r} is out of range for a {bits}-bit integer.")
        return value

    parse.__name__ = f"parse_int{bits}"
    parse.__doc__ = f"Parse a {bits}-bit signed integer."
    return parse


parse_byte = _signed(8)
parse_short = _signed(16)
parse_int = _signed(32)
parse_long = _signed(64)


def parse_big_int(s: str) -> int:
    # int() alone would also accept whitespace and underscores.
    if not _INTEGER_RE.fullmatch(s):
        raise ValueError(f"invalid integer literal: {s!r}")
    return int(s)


def parse_float(s: str) -> float:
    return float(s)


parse_double = parse_float


def parse_big_decimal(s: str) -> Decimal:
    if not _DECIMAL_RE.fullmatch(s):
        raise ValueError(f"invalid decimal literal: {s!r}")
    return Decimal(s)
