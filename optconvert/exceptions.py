from attrs import define

__all__ = [
    "ConversionError",
    "MissingValueError",
    "OptconvertError",
    "UnknownConverterError",
]


class UnknownConverterError(Exception):
    """No converter is registered for the requested type hint."""

    # This doesn't derive from OptconvertError since this is a developer error
    # rather than a runtime error.


@define
class OptconvertError(Exception):
    """Root exception for runtime errors raised when consuming a conversion result."""

    msg: str | None = None
    """
    If set, override automatic message generation.
    """

    def __str__(self):
        return "" if self.msg is None else self.msg


@define(kw_only=True)
class ConversionError(OptconvertError):
    """An :class:`~optconvert.Error` result was unwrapped."""

    name: str | None = None
    """Name of the option whose value failed to convert, if known."""

    def __str__(self):
        msg = super().__str__()
        if self.name:
            return f'Invalid value for "{self.name}": {msg}'
        return msg


@define(kw_only=True)
class MissingValueError(OptconvertError):
    """An :data:`~optconvert.ABSENT` result was unwrapped without a default."""

    name: str | None = None

    def __str__(self):
        if self.msg is not None:
            return self.msg
        if self.name:
            return f'Option "{self.name}" was not provided.'
        return "Option was not provided."
