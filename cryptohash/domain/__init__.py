from .errors import (
    HashValueError,
    InvalidArgumentTypeError,
    InvalidFormatError,
    InvalidFormatSpecifierError,
    NullInputError,
    UnsupportedAlgorithmError,
)
from .ports import DigestProviderPort
from .value_objects import DigestDescriptor, HashFormat, HashValue

__all__ = [
    "DigestDescriptor",
    "DigestProviderPort",
    "HashFormat",
    "HashValue",
    "HashValueError",
    "InvalidArgumentTypeError",
    "InvalidFormatError",
    "InvalidFormatSpecifierError",
    "NullInputError",
    "UnsupportedAlgorithmError",
]
