import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import timedelta
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from attrs import field

from optconvert import parsers
from optconvert.duration import Duration, parse_duration, parse_finite_duration
from optconvert.handlers import Handler, number_handler, recover
from optconvert.occurrence import Occurrence, OccurrenceLike, flatten_tokens, to_occurrences
from optconvert.props import split_props
from optconvert.result import ABSENT, ArgType, ConversionResult, Error, Present, as_result
from optconvert.utils import frozen, to_tuple_converter

logger = logging.getLogger(__name__)

T = TypeVar("T")


@frozen
class ValueConverter(ABC, Generic[T]):
    """Converts an occurrence list into a :data:`~optconvert.ConversionResult`.

    Converters are stateless; a single instance may be shared between any number of options.
    """

    arg_type: ClassVar[ArgType]
    """Number of tokens the tokenizer should capture per occurrence."""

    def parse(self, occurrences: Iterable[OccurrenceLike]) -> ConversionResult[T]:
        """Convert an occurrence list.

        Parameters
        ----------
        occurrences: Iterable[Occurrence | tuple[str, Sequence[str]]]
            Every appearance of the option, in command-line order.

        Returns
        -------
        Present | Error | Absent
            :data:`~optconvert.ABSENT` if, and only if, the option never appeared.
            Never raises.
        """
        try:
            return self._parse(to_occurrences(occurrences))
        except Exception as e:
            logger.debug("%r failed to convert its occurrences.", self, exc_info=True)
            return recover(e)

    def __call__(self, occurrences: Iterable[OccurrenceLike]) -> ConversionResult[T]:
        return self.parse(occurrences)

    @abstractmethod
    def _parse(self, occurrences: tuple[Occurrence, ...]) -> ConversionResult[T]:
        raise NotImplementedError


def _attempt(convert: Callable[[str], Any], token: str, handlers: Iterable[Handler]) -> Present | Error:
    try:
        return as_result(convert(token))
    except Exception as e:
        return recover(e, handlers)


@frozen
class FlagConverter(ValueConverter[bool]):
    """Boolean flag that takes no argument."""

    arg_type: ClassVar[ArgType] = ArgType.FLAG

    def _parse(self, occurrences):
        match occurrences:
            case []:
                return ABSENT
            case [Occurrence(tokens=[])]:
                return Present(True)
            case _:
                return Error("too many arguments for flag option")


@frozen
class SingleArgConverter(ValueConverter[T]):
    """Option that takes exactly one argument."""

    convert: Callable[[str], T]
    """Parse function for the single token. May raise on malformed input."""

    handlers: tuple[Handler, ...] = field(default=(), converter=to_tuple_converter)
    """Tried in order to translate a parse failure into a message."""

    arg_type: ClassVar[ArgType] = ArgType.SINGLE

    def _parse(self, occurrences):
        match occurrences:
            case []:
                return ABSENT
            case [Occurrence(tokens=[token])]:
                return _attempt(self.convert, token, self.handlers)
            case _:
                return Error("you should provide exactly one argument for this option")


@frozen
class ListArgConverter(ValueConverter[list[T]]):
    """Option that accepts any number of arguments, over any number of occurrences.

    A single malformed token fails the whole conversion; there are no partial results.
    """

    convert: Callable[[str], T]
    handlers: tuple[Handler, ...] = field(default=(), converter=to_tuple_converter)

    arg_type: ClassVar[ArgType] = ArgType.LIST

    def _parse(self, occurrences):
        values = []
        for token in flatten_tokens(occurrences):
            result = _attempt(self.convert, token, self.handlers)
            if isinstance(result, Error):
                return result
            values.append(result.value)
        return Present(values) if values else ABSENT


@frozen
class PropsConverter(ValueConverter[dict[str, T]]):
    """``key=value`` pairs, possibly comma-separated, collected into a dictionary.

    Each value is converted by ``converter``. A repeated key silently replaces the earlier value.
    """

    converter: ValueConverter[T]

    arg_type: ClassVar[ArgType] = ArgType.LIST

    def _parse(self, occurrences):
        out = {}
        for token in flatten_tokens(occurrences):
            for key, raw in split_props(token):
                match self.converter.parse([Occurrence("", (raw,))]):
                    case Present(value):
                        out[key] = value
                    case Error() as error:
                        return error
                    case _:
                        return Error("No result from props converter")
        return Present(out) if out else ABSENT


@frozen
class TallyConverter(ValueConverter[int]):
    """Counts the occurrences of a repeatable, argument-free option (e.g. ``-vvv``)."""

    arg_type: ClassVar[ArgType] = ArgType.FLAG

    def _parse(self, occurrences):
        if any(x.tokens for x in occurrences):
            return Error("this option doesn't need arguments")
        elif occurrences:
            return Present(len(occurrences))
        else:
            return ABSENT


@frozen
class OptDefaultConverter(ValueConverter[T]):
    """Option with a single optional argument.

    Parses both ``--opt`` (yielding ``default``) and ``--opt ARG`` (delegating to ``converter``).
    """

    default: T
    converter: ValueConverter[T]

    # SINGLE would not let the tokenizer hand over an occurrence with no token.
    arg_type: ClassVar[ArgType] = ArgType.LIST

    def _parse(self, occurrences):
        match occurrences:
            case []:
                return ABSENT
            case [Occurrence(tokens=[])]:
                return Present(self.default)
            case [Occurrence(tokens=[_])]:
                return self.converter.parse(occurrences)
            case _:
                return Error("Too many arguments")


def single_arg_converter(
    convert: Callable[[str], T],
    handlers: Handler | Iterable[Handler] = (),
) -> SingleArgConverter[T]:
    """Create a converter for an option with a single argument.

    Parameters
    ----------
    convert: Callable[[str], T]
        Conversion function. May raise, or return an :class:`~optconvert.Error` on failure.
    handlers: Handler | Iterable[Handler]
        Error handlers for writing custom error messages; the first matching handler wins.
        Unmatched failures are described by their string form.
    """
    return SingleArgConverter(convert, handlers)


def list_arg_converter(
    convert: Callable[[str], T],
    handlers: Handler | Iterable[Handler] = (),
) -> ListArgConverter[T]:
    """Create a converter for an option that accepts multiple arguments."""
    return ListArgConverter(convert, handlers)


def props_converter(converter: ValueConverter[T]) -> PropsConverter[T]:
    """Create a converter for ``key=value`` properties, parsing values with ``converter``."""
    return PropsConverter(converter)


def opt_default(default: T, converter: ValueConverter[T]) -> OptDefaultConverter[T]:
    """Create a converter for an option with a single optional argument.

    Parameters
    ----------
    default: T
        Value to use if the option is given without an argument.
    converter: ValueConverter[T]
        Converter to use if an argument was provided.
    """
    return OptDefaultConverter(default, converter)


flag_converter = FlagConverter()
tally_converter = TallyConverter()

char_converter: SingleArgConverter[str] = single_arg_converter(parsers.parse_char)
string_converter: SingleArgConverter[str] = single_arg_converter(parsers.parse_text)
byte_converter: SingleArgConverter[int] = single_arg_converter(parsers.parse_byte, number_handler("Byte"))
short_converter: SingleArgConverter[int] = single_arg_converter(parsers.parse_short, number_handler("Short"))
int_converter: SingleArgConverter[int] = single_arg_converter(parsers.parse_int, number_handler("Int"))
long_converter: SingleArgConverter[int] = single_arg_converter(parsers.parse_long, number_handler("Long"))
float_converter: SingleArgConverter[float] = single_arg_converter(parsers.parse_float, number_handler("Float"))
double_converter: SingleArgConverter[float] = single_arg_converter(parsers.parse_double, number_handler("Double"))
big_int_converter: SingleArgConverter[int] = single_arg_converter(parsers.parse_big_int, number_handler("integer"))
big_decimal_converter: SingleArgConverter[Decimal] = single_arg_converter(
    parsers.parse_big_decimal, number_handler("decimal")
)
duration_converter: SingleArgConverter[Duration] = single_arg_converter(parse_duration)
finite_duration_converter: SingleArgConverter[timedelta] = single_arg_converter(parse_finite_duration)


def _list_of(converter: SingleArgConverter[T]) -> ListArgConverter[T]:
    return list_arg_converter(converter.convert, converter.handlers)


byte_list_converter = _list_of(byte_converter)
short_list_converter = _list_of(short_converter)
int_list_converter = _list_of(int_converter)
long_list_converter = _list_of(long_converter)
float_list_converter = _list_of(float_converter)
double_list_converter = _list_of(double_converter)
string_list_converter = _list_of(string_converter)

byte_props_converter = props_converter(byte_converter)
short_props_converter = props_converter(short_converter)
int_props_converter = props_converter(int_converter)
long_props_converter = props_converter(long_converter)
float_props_converter = props_converter(float_converter)
double_props_converter = props_converter(double_converter)
char_props_converter = props_converter(char_converter)
string_props_converter = props_converter(string_converter)
