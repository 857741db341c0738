import pytest

from optconvert import ABSENT, ArgType, Error, Present, opt_default
from optconvert.converters import int_converter, int_list_converter, string_converter


@pytest.fixture
def converter():
    return opt_default(5, int_converter)


def test_opt_default_arg_type(converter):
    assert converter.arg_type is ArgType.LIST


def test_opt_default_absent(occ, converter):
    assert converter(occ()) == ABSENT


def test_opt_default_no_argument(occ, converter):
    assert converter(occ([])) == Present(5)


def test_opt_default_argument(occ, converter):
    assert converter(occ(["9"])) == Present(9)


def test_opt_default_bad_argument(occ, converter):
    assert converter(occ(["bad"])) == Error("bad Int value")


@pytest.mark.parametrize(
    "tokens",
    [
        [["1", "2"]],
        [[], []],
        [["1"], ["2"]],
        [[], ["2"]],
    ],
)
def test_opt_default_too_many(occ, converter, tokens):
    assert converter(occ(*tokens)) == Error("Too many arguments")


def test_opt_default_default_is_not_converted(occ):
    converter = opt_default("unset", int_converter)
    assert converter(occ([])) == Present("unset")


def test_opt_default_wrapping_list(occ):
    converter = opt_default([], int_list_converter)
    assert converter(occ([])) == Present([])
    assert converter(occ(["4"])) == Present([4])


def test_opt_default_text(occ):
    converter = opt_default("-", string_converter)
    assert converter(occ(["out.txt"])) == Present("out.txt")
