from .hashlib_provider import (
    HASHLIB_ALGORITHMS,
    RIPEMD160,
    HashlibDigestProvider,
    normalize_algorithm_name,
)

__all__ = [
    "HASHLIB_ALGORITHMS",
    "RIPEMD160",
    "HashlibDigestProvider",
    "normalize_algorithm_name",
]
