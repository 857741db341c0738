"""Explicit lookup of a converter from the type hint an option is declared with."""

import collections.abc
from collections.abc import Callable
from datetime import timedelta
from decimal import Decimal
from typing import Annotated, Any, get_args, get_origin

from attrs import define, field

from optconvert import converters, types
from optconvert.converters import SingleArgConverter, ValueConverter, list_arg_converter, props_converter
from optconvert.duration import Duration
from optconvert.exceptions import UnknownConverterError

_implicit_type_mapping: dict[type, Any] = {
    list: list[str],
    dict: dict[str, str],
}

_LIST_ORIGINS = {list, collections.abc.Sequence, collections.abc.Iterable}
_MAPPING_ORIGINS = {dict, collections.abc.Mapping}


@define
class ConverterRegistry:
    """Mapping of type hint to :class:`~optconvert.ValueConverter`.

    ``list[T]`` and ``dict[str, T]`` hints are derived on demand from the converter registered for ``T``.

    Example Usage:

    .. code-block:: python

        from pathlib import Path

        from optconvert import default_registry

        registry = default_registry.copy()
        registry.register(Path, Path)

        registry.get(list[Path]).parse([("--include", ["src", "tests"])])
    """

    _converters: dict[Any, ValueConverter] = field(factory=dict)

    def register(self, type_: Any, converter: ValueConverter | Callable[[str], Any] | None = None):
        """Register a converter for ``type_``.

        Parameters
        ----------
        type_: Any
            Type hint to register.
        converter: ValueConverter | Callable[[str], Any] | None
            A converter, or a plain parse function to wrap with
            :func:`~optconvert.single_arg_converter`.
            If omitted, ``register`` returns a decorator.
        """
        if converter is None:

            def decorator(func):
                self.register(type_, func)
                return func

            return decorator

        if not isinstance(converter, ValueConverter):
            converter = converters.single_arg_converter(converter)
        self._converters[type_] = converter
        return converter

    def get(self, type_: Any) -> ValueConverter:
        """Look up the converter for ``type_``.

        Raises
        ------
        UnknownConverterError
            No converter is registered, and none can be derived.
        """
        if get_origin(type_) is Annotated:
            type_ = get_args(type_)[0]
        type_ = _implicit_type_mapping.get(type_, type_)

        try:
            return self._converters[type_]
        except KeyError:
            pass

        origin_type = get_origin(type_)
        inner_types = get_args(type_)

        if origin_type in _LIST_ORIGINS and len(inner_types) == 1:
            element = self.get(inner_types[0])
            if not isinstance(element, SingleArgConverter):
                raise UnknownConverterError(
                    f"Cannot derive a converter for {type_!r}: {inner_types[0]!r} does not take a single argument."
                )
            return list_arg_converter(element.convert, element.handlers)
        elif origin_type in _MAPPING_ORIGINS and len(inner_types) == 2:
            if inner_types[0] is not str:
                raise UnknownConverterError(f"Cannot derive a converter for {type_!r}: keys must be str.")
            return props_converter(self.get(inner_types[1]))

        raise UnknownConverterError(f"No converter registered for {type_!r}.")

    def __contains__(self, type_: Any) -> bool:
        try:
            self.get(type_)
        except UnknownConverterError:
            return False
        return True

    def copy(self) -> "ConverterRegistry":
        return ConverterRegistry(dict(self._converters))


def _build_default_registry() -> ConverterRegistry:
    registry = ConverterRegistry()
    for type_, converter in [
        (bool, converters.flag_converter),
        (str, converters.string_converter),
        (int, converters.big_int_converter),
        (float, converters.double_converter),
        (Decimal, converters.big_decimal_converter),
        (timedelta, converters.finite_duration_converter),
        (Duration, converters.duration_converter),
        (types.Char, converters.char_converter),
        (types.Byte, converters.byte_converter),
        (types.Short, converters.short_converter),
        (types.Int, converters.int_converter),
        (types.Long, converters.long_converter),
        (types.Float, converters.float_converter),
        (types.Double, converters.double_converter),
    ]:
        registry.register(type_, converter)
    return registry


default_registry = _build_default_registry()


def get_converter(type_: Any) -> ValueConverter:
    """Look up the converter for ``type_`` in :data:`default_registry`."""
    return default_registry.get(type_)
