__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Absent",
    "ArgType",
    "ConversionError",
    "ConversionResult",
    "ConverterRegistry",
    "Error",
    "FlagConverter",
    "Handler",
    "ListArgConverter",
    "MissingValueError",
    "Occurrence",
    "OptDefaultConverter",
    "OptconvertError",
    "Present",
    "PropsConverter",
    "SingleArgConverter",
    "TallyConverter",
    "UNSET",
    "UnknownConverterError",
    "ValueConverter",
    "default_registry",
    "get_converter",
    "list_arg_converter",
    "number_handler",
    "opt_default",
    "props_converter",
    "single_arg_converter",
    "types",
]

from optconvert import types
from optconvert.converters import (
    FlagConverter,
    ListArgConverter,
    OptDefaultConverter,
    PropsConverter,
    SingleArgConverter,
    TallyConverter,
    ValueConverter,
    list_arg_converter,
    opt_default,
    props_converter,
    single_arg_converter,
)
from optconvert.exceptions import ConversionError, MissingValueError, OptconvertError, UnknownConverterError
from optconvert.handlers import Handler, number_handler
from optconvert.occurrence import Occurrence
from optconvert.registry import ConverterRegistry, default_registry, get_converter
from optconvert.result import ABSENT, Absent, ArgType, ConversionResult, Error, Present
from optconvert.utils import UNSET
