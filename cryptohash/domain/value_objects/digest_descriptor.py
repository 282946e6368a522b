from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Optional, Tuple, Union

from .hash_format import is_valid_hash_code
from .hash_value import BytesLike, HashValue

DigestFunction = Callable[[bytes], bytes]

@dataclass(frozen=True)
class DigestDescriptor:
    """Binds a digest function to the size of the value it produces.

    The function is trusted to return exactly ``byte_length`` bytes for
    any input.
    """

    name: str
    byte_length: int
    digest_fn: DigestFunction = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Digest name cannot be empty")
        if isinstance(self.byte_length, bool) or not isinstance(self.byte_length, int):
            raise ValueError("Digest byte length must be an integer")
        if self.byte_length < 1:
            raise ValueError("Digest byte length must be >= 1")
        if not callable(self.digest_fn):
            raise ValueError("Digest function must be callable")

    @property
    def hash_code_length(self) -> int:
        return self.byte_length * 2

    def accepts(self, hash_code: str) -> bool:
        return hash_code is not None and is_valid_hash_code(
            hash_code, self.byte_length
        )

    def compute(self, data: bytes) -> bytes:
        return self.digest_fn(data)

    def from_string(self, hash_code: str) -> HashValue:
        return HashValue.from_string(hash_code, self.byte_length)

    def from_bytes(self, hash_value: BytesLike) -> HashValue:
        return HashValue.from_bytes(hash_value, self.byte_length)

    def try_parse(
        self,
        value: Union[str, BytesLike, None],
    ) -> Tuple[Optional[HashValue], bool]:
        return HashValue.try_parse(value, self.byte_length)

    def hash_bytes(self, data: BytesLike) -> HashValue:
        return HashValue.digest(data, self)

    def hash_stream(self, stream: BinaryIO) -> HashValue:
        return HashValue.digest_stream(stream, self)

    def hash_file(self, path: str) -> HashValue:
        return HashValue.digest_file(path, self)
