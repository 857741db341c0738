import pytest

from optconvert import Occurrence
from optconvert.occurrence import flatten_tokens, to_occurrences


def test_occurrence_tokens_tuple():
    occurrence = Occurrence("--opt", ["a", "b"])
    assert occurrence.tokens == ("a", "b")


def test_occurrence_tokens_string_rejected():
    with pytest.raises(TypeError):
        Occurrence("--opt", "ab")


def test_to_occurrences_mixed():
    out = to_occurrences([("-a", ["1"]), Occurrence("-a", ())])
    assert out == (Occurrence("-a", ("1",)), Occurrence("-a", ()))


def test_to_occurrences_generator():
    out = to_occurrences(("-a", [str(i)]) for i in range(2))
    assert out == (Occurrence("-a", ("0",)), Occurrence("-a", ("1",)))


def test_flatten_tokens_order():
    occurrences = to_occurrences([("x", ["1", "2"]), ("x", []), ("x", ["3"])])
    assert flatten_tokens(occurrences) == ["1", "2", "3"]
