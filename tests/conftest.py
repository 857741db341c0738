import pytest

from optconvert import Occurrence


@pytest.fixture
def occ():
    """Build an occurrence list; one positional argument per occurrence.

    ``occ()`` is the empty list, ``occ([])`` is a single bare flag,
    ``occ(["1", "2"], ["3"])`` is two occurrences.
    """

    def inner(*token_lists, name="--opt"):
        return [Occurrence(name, tokens) for tokens in token_lists]

    return inner
