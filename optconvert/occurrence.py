from collections.abc import Iterable, Sequence
from itertools import chain

from attrs import field

from optconvert.utils import frozen


def _tokens_converter(value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        raise TypeError(f"Occurrence tokens must be a sequence of strings, not the string {value!r}.")
    return tuple(value)


@frozen
class Occurrence:
    """One appearance of an option on the command line.

    ``tokens`` holds the raw strings captured for this appearance; it is empty for flags.
    """

    name: str = ""
    tokens: tuple[str, ...] = field(default=(), converter=_tokens_converter)


OccurrenceLike = Occurrence | tuple[str, Sequence[str]]


def to_occurrences(occurrences: Iterable[OccurrenceLike]) -> tuple[Occurrence, ...]:
    """Normalize an occurrence list.

    Parameters
    ----------
    occurrences: Iterable[Occurrence | tuple[str, Sequence[str]]]
        Either :class:`Occurrence` objects or plain ``(name, tokens)`` pairs,
        in command-line order.

    Returns
    -------
    tuple[Occurrence, ...]
    """
    out = []
    for occurrence in occurrences:
        if isinstance(occurrence, Occurrence):
            out.append(occurrence)
        else:
            name, tokens = occurrence
            out.append(Occurrence(name, tokens))
    return tuple(out)


def flatten_tokens(occurrences: Iterable[Occurrence]) -> list[str]:
    """Every token, in occurrence order then token order."""
    return list(chain.from_iterable(x.tokens for x in occurrences))
