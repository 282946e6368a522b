from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Optional, Tuple, Union

from ..errors import (
    InvalidArgumentTypeError,
    InvalidFormatError,
    NullInputError,
)
from . import hex_codec
from .hash_format import (
    HashFormat,
    group_hash_code,
    is_valid_hash_bytes,
    normalize_hash_code,
    parse_format_spec,
)

if TYPE_CHECKING:
    from .digest_descriptor import DigestDescriptor

BytesLike = Union[bytes, bytearray, memoryview]

@dataclass(frozen=True)
class HashValue:
    """Fixed-size digest value.

    ``hash_code`` holds the canonical form: exactly ``2 * size`` hex digits
    with no separators. Case is kept as given; equality, ordering and
    hashing ignore it.
    """

    hash_code: str
    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError("Hash size must be an integer number of bytes")
        if self.size < 1:
            raise ValueError("Hash size must be at least one byte")

        if self.hash_code is None:
            raise NullInputError("hash_code")
        if not isinstance(self.hash_code, str):
            raise InvalidFormatError(
                "The hash code must be a string", "hash_code"
            )

        canonical = normalize_hash_code(self.hash_code, self.size)
        if canonical is None:
            raise InvalidFormatError(
                f"The hash code is not a valid {self.size}-byte hash code",
                "hash_code",
            )

        object.__setattr__(self, "hash_code", canonical)

    @classmethod
    def from_string(cls, hash_code: str, size: int) -> HashValue:
        return cls(hash_code=hash_code, size=size)

    @classmethod
    def from_bytes(cls, hash_value: BytesLike, size: int) -> HashValue:
        if hash_value is None:
            raise NullInputError("hash_value")
        if not isinstance(hash_value, (bytes, bytearray, memoryview)):
            raise InvalidFormatError(
                "The hash value must be a bytes-like object", "hash_value"
            )

        data = bytes(hash_value)
        if not is_valid_hash_bytes(data, size):
            raise InvalidFormatError(
                f"The hash value must be exactly {size} bytes, got {len(data)}",
                "hash_value",
            )

        return cls(hash_code=hex_codec.encode(data), size=size)

    @classmethod
    def try_parse(
        cls,
        value: Union[str, BytesLike, None],
        size: int,
    ) -> Tuple[Optional[HashValue], bool]:
        try:
            if isinstance(value, str):
                return cls.from_string(value, size), True
            if isinstance(value, (bytes, bytearray, memoryview)):
                return cls.from_bytes(value, size), True
        except ValueError:
            pass

        return None, False

    @classmethod
    def digest(cls, data: BytesLike, descriptor: DigestDescriptor) -> HashValue:
        if data is None:
            raise NullInputError("data")
        return cls.from_bytes(
            descriptor.digest_fn(bytes(data)), descriptor.byte_length
        )

    @classmethod
    def digest_stream(
        cls,
        stream: BinaryIO,
        descriptor: DigestDescriptor,
    ) -> HashValue:
        if stream is None:
            raise NullInputError("stream")
        return cls.digest(stream.read(), descriptor)

    @classmethod
    def digest_file(cls, path: str, descriptor: DigestDescriptor) -> HashValue:
        if path is None:
            raise NullInputError("path")
        with open(path, "rb") as stream:
            return cls.digest_stream(stream, descriptor)

    def to_bytes(self) -> bytes:
        return hex_codec.decode(self.hash_code)

    def format(self, format_spec: Optional[str] = None) -> str:
        if parse_format_spec(format_spec) is HashFormat.DASHED:
            return group_hash_code(self.hash_code)
        return self.hash_code

    def equals(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return False
        if other.size != self.size:
            return False
        return self._key == other._key

    def compare(self, other: object) -> int:
        if not isinstance(other, HashValue):
            raise InvalidArgumentTypeError(
                f"Cannot compare HashValue with {type(other).__name__}"
            )
        if other.size != self.size:
            raise InvalidArgumentTypeError(
                f"Cannot compare a {self.size}-byte hash value "
                f"with a {other.size}-byte hash value"
            )

        left, right = self._key, other._key
        return (left > right) - (left < right)

    @property
    def _key(self) -> str:
        return self.hash_code.lower()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.hash_code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        return hash((self.size, self._key))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HashValue):
            return NotImplemented
        return self.compare(other) >= 0
