import pytest

from optconvert import ABSENT, Occurrence, opt_default
from optconvert import converters as c

ALL_CONVERTERS = [
    c.flag_converter,
    c.tally_converter,
    c.char_converter,
    c.string_converter,
    c.byte_converter,
    c.short_converter,
    c.int_converter,
    c.long_converter,
    c.float_converter,
    c.double_converter,
    c.big_int_converter,
    c.big_decimal_converter,
    c.duration_converter,
    c.finite_duration_converter,
    c.byte_list_converter,
    c.short_list_converter,
    c.int_list_converter,
    c.long_list_converter,
    c.float_list_converter,
    c.double_list_converter,
    c.string_list_converter,
    c.byte_props_converter,
    c.short_props_converter,
    c.int_props_converter,
    c.long_props_converter,
    c.float_props_converter,
    c.double_props_converter,
    c.char_props_converter,
    c.string_props_converter,
    opt_default(0, c.int_converter),
]

SAMPLES = [
    [],
    [Occurrence("-o", ())],
    [Occurrence("-o", ("1",))],
    [Occurrence("-o", ("1", "2"))],
    [Occurrence("-o", ("a=1",)), Occurrence("-o", ("b=x",))],
    [Occurrence("-o", ("5 s",)), Occurrence("-o", ())],
]


@pytest.mark.parametrize("converter", ALL_CONVERTERS)
def test_empty_is_absent(converter):
    assert converter([]) == ABSENT


@pytest.mark.parametrize("converter", ALL_CONVERTERS)
@pytest.mark.parametrize("occurrences", SAMPLES)
def test_idempotent(converter, occurrences):
    assert converter(occurrences) == converter(occurrences)


@pytest.mark.parametrize("converter", ALL_CONVERTERS)
@pytest.mark.parametrize("occurrences", SAMPLES)
def test_never_raises(converter, occurrences):
    converter(occurrences)
