"""Three-way outcome of a conversion, and the arity a converter declares to the tokenizer."""

from enum import Enum
from typing import Any, Generic, TypeVar

from optconvert.exceptions import ConversionError, MissingValueError
from optconvert.utils import UNSET, frozen

T = TypeVar("T")


class ArgType(Enum):
    """How many tokens the tokenizer should capture per occurrence."""

    FLAG = "flag"
    """Zero tokens."""

    SINGLE = "single"
    """Exactly one token; only one occurrence is meaningful."""

    LIST = "list"
    """Any number of tokens across any number of occurrences."""


@frozen
class Present(Generic[T]):
    """The option was supplied and converted successfully."""

    value: T

    def unwrap(self, default: Any = UNSET, *, name: str | None = None) -> T:
        return self.value


@frozen
class Error:
    """The option was supplied, but could not be converted."""

    message: str

    def unwrap(self, default: Any = UNSET, *, name: str | None = None):
        raise ConversionError(msg=self.message, name=name)


@frozen
class Absent:
    """The option was not supplied at all.

    Use the :data:`ABSENT` instance rather than creating new ones.
    """

    def unwrap(self, default: Any = UNSET, *, name: str | None = None):
        """Return ``default``; raise :class:`MissingValueError` if no default is given."""
        if default is UNSET:
            raise MissingValueError(name=name)
        return default

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()

ConversionResult = Present[T] | Error | Absent


def as_result(value: Any) -> Present | Error:
    """Wrap the return value of a parse function.

    Parse functions may return a plain value, or a :class:`Present`/:class:`Error` directly.
    A parse function has no business reporting an absent value; that is an internal error.
    """
    if isinstance(value, Present | Error):
        return value
    elif isinstance(value, Absent):
        return Error("parse function produced no value")
    else:
        return Present(value)
