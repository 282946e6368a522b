from .domain import (
    DigestDescriptor,
    HashFormat,
    HashValue,
    HashValueError,
    InvalidArgumentTypeError,
    InvalidFormatError,
    InvalidFormatSpecifierError,
    NullInputError,
    UnsupportedAlgorithmError,
)
from .infrastructure.container import Container, ContainerConfig, create_container
from .infrastructure.digest import HashlibDigestProvider

__all__ = [
    "Container",
    "ContainerConfig",
    "DigestDescriptor",
    "HashFormat",
    "HashValue",
    "HashValueError",
    "HashlibDigestProvider",
    "InvalidArgumentTypeError",
    "InvalidFormatError",
    "InvalidFormatSpecifierError",
    "NullInputError",
    "UnsupportedAlgorithmError",
    "create_container",
]

__version__ = "1.0.0"
