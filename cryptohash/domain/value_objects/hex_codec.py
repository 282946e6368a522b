HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

def is_hex_digit(char: str) -> bool:
    return char in HEX_DIGITS

def encode(data: bytes) -> str:
    """Encode bytes as lowercase hex, high nibble first."""
    return bytes(data).hex()

def decode(hash_code: str) -> bytes:
    """Pack hex digit pairs into bytes.

    The input must already be validated; characters outside [0-9a-fA-F]
    are not checked here.
    """
    return bytes.fromhex(hash_code)
