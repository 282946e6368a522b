from .digest_descriptor import DigestDescriptor, DigestFunction
from .hash_format import (
    HashFormat,
    group_hash_code,
    is_valid_hash_bytes,
    is_valid_hash_code,
    normalize_hash_code,
    parse_format_spec,
)
from .hash_value import HashValue

__all__ = [
    "DigestDescriptor",
    "DigestFunction",
    "HashFormat",
    "HashValue",
    "group_hash_code",
    "is_valid_hash_bytes",
    "is_valid_hash_code",
    "normalize_hash_code",
    "parse_format_spec",
]
