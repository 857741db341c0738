"""Splitting of ``key1=value1,key2=value2`` tokens.

A literal comma or equals sign inside a key or value is escaped with a backslash (``\\,``, ``\\=``).
"""

import re

_COMMA_RE = re.compile(r"(?<!\\),")
_EQUALS_RE = re.compile(r"(?<!\\)=")


def split_pairs(token: str) -> list[str]:
    """Split a token on unescaped commas, unescaping ``\\,`` in each fragment.

    Trailing empty fragments (e.g. from ``"a=1,"``) are discarded.
    """
    fragments = _COMMA_RE.split(token)
    while fragments and not fragments[-1]:
        fragments.pop()
    return [fragment.replace("\\,", ",") for fragment in fragments]


def split_key_value(fragment: str) -> tuple[str, str]:
    """Split a fragment into key and value on the first unescaped ``=``."""
    parts = _EQUALS_RE.split(fragment, maxsplit=1)
    if len(parts) != 2:
        raise ValueError(f"Expected KEY=VALUE, got {fragment!r}.")
    key, value = parts
    return key.replace("\\=", "="), value.replace("\\=", "=")


def split_props(token: str) -> list[tuple[str, str]]:
    """Parse one token into ``(key, value)`` pairs, in order.

    Surrounding whitespace is trimmed; a token consisting of a lone comma yields nothing.

    Example
    -------
    >>> split_props("a=1,b=2")
    [('a', '1'), ('b', '2')]
    >>> split_props(r"a=1\\,b=2")
    [('a', '1,b=2')]
    """
    token = token.strip()
    if token == ",":
        return []
    # A token made only of separators is malformed rather than empty.
    fragments = split_pairs(token) or [token]
    return [split_key_value(fragment) for fragment in fragments]
