from __future__ import annotations

from enum import Enum
from typing import Optional

from ..errors import InvalidFormatSpecifierError
from .hex_codec import is_hex_digit

SEPARATOR = "-"
GROUP_SIZE = 4

class HashFormat(Enum):

    HEX = "H"
    DASHED = "D"

def parse_format_spec(format_spec: Optional[str]) -> HashFormat:
    if format_spec is None or format_spec == "":
        return HashFormat.HEX

    if not isinstance(format_spec, str) or len(format_spec) != 1:
        raise InvalidFormatSpecifierError(format_spec)

    spec = format_spec.upper()
    if spec == "H":
        return HashFormat.HEX
    if spec == "D":
        return HashFormat.DASHED

    raise InvalidFormatSpecifierError(format_spec)

def grouped_length(code_length: int) -> int:
    groups = -(-code_length // GROUP_SIZE)
    return code_length + max(groups - 1, 0)

def is_separator_index(index: int) -> bool:
    return index % (GROUP_SIZE + 1) == GROUP_SIZE

def group_hash_code(hash_code: str) -> str:
    return SEPARATOR.join(
        hash_code[i:i + GROUP_SIZE]
        for i in range(0, len(hash_code), GROUP_SIZE)
    )

def normalize_hash_code(hash_code: str, size: int) -> Optional[str]:
    """Validate a textual hash code for a ``size``-byte digest.

    Returns the separator-free code with its case preserved, or None when
    the length, separator placement or any digit is invalid.
    """
    code_length = size * 2
    length = len(hash_code)

    if length == code_length:
        if all(is_hex_digit(char) for char in hash_code):
            return hash_code
        return None

    if length != grouped_length(code_length):
        return None

    digits = []
    for index, char in enumerate(hash_code):
        if is_separator_index(index):
            if char != SEPARATOR:
                return None
            continue

        if not is_hex_digit(char):
            return None

        digits.append(char)

    return "".join(digits)

def is_valid_hash_code(hash_code: str, size: int) -> bool:
    return normalize_hash_code(hash_code, size) is not None

def is_valid_hash_bytes(data: bytes, size: int) -> bool:
    return len(data) == size
