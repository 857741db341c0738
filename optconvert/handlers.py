from collections.abc import Callable, Iterable
from typing import Any

from attrs import field

from optconvert.result import Error
from optconvert.utils import frozen


def _predicate_converter(value: Any) -> Callable[[Exception], bool]:
    if isinstance(value, type) and issubclass(value, BaseException):
        return lambda e: isinstance(e, value)
    elif isinstance(value, tuple):
        return lambda e: isinstance(e, value)
    elif callable(value):
        return value
    else:
        raise TypeError(f"Handler predicate must be an exception type, tuple of types, or callable; got {value!r}.")


def _formatter_converter(value: Any) -> Callable[[Exception], str]:
    if isinstance(value, str):
        return lambda e: value
    return value


@frozen
class Handler:
    """Translate a parse failure into a user-facing message.

    Example Usage:

    .. code-block:: python

        from optconvert import Handler, single_arg_converter

        port_converter = single_arg_converter(
            int,
            handlers=[Handler(ValueError, "port must be a number")],
        )
    """

    predicate: Callable[[Exception], bool] = field(converter=_predicate_converter)
    """Exception type, tuple of exception types, or ``Callable[[Exception], bool]``."""

    formatter: Callable[[Exception], str] = field(converter=_formatter_converter)
    """Fixed message, or ``Callable[[Exception], str]``."""

    def matches(self, exc: Exception) -> bool:
        return bool(self.predicate(exc))

    def __call__(self, exc: Exception) -> str:
        return self.formatter(exc)


def describe_exception(exc: Exception) -> str:
    """Default message for a failure no handler recognized."""
    return str(exc) or type(exc).__name__


def recover(exc: Exception, handlers: Iterable[Handler] = ()) -> Error:
    """Convert ``exc`` into an :class:`Error`; handlers are tried in order."""
    for handler in handlers:
        if handler.matches(exc):
            return Error(handler(exc))
    return Error(describe_exception(exc))


def number_handler(name: str) -> Handler:
    """Handler for numeric types; reports ``"bad {name} value"`` on a format error."""
    return Handler((ValueError, ArithmeticError), f"bad {name} value")
