"""Distinct type hints for primitive widths that Python represents with a single type.

A registry maps plain :class:`int` to an unbounded integer converter and plain :class:`float` to a
double-precision converter; these markers select the width-checked variants instead.
"""

from typing import NewType

__all__ = [
    "Byte",
    "Char",
    "Double",
    "Float",
    "Int",
    "Long",
    "Short",
]

Char = NewType("Char", str)
"""A single character."""

Byte = NewType("Byte", int)
"""8-bit signed integer."""

Short = NewType("Short", int)
"""16-bit signed integer."""

Int = NewType("Int", int)
"""32-bit signed integer."""

Long = NewType("Long", int)
"""64-bit signed integer."""

Float = NewType("Float", float)
Double = NewType("Double", float)
