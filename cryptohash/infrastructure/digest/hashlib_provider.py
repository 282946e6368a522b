import hashlib
import logging
import re
from typing import Dict, Iterable, List, Optional

from ...domain.errors import UnsupportedAlgorithmError
from ...domain.ports.digest_provider_port import DigestProviderPort
from ...domain.value_objects.digest_descriptor import (
    DigestDescriptor,
    DigestFunction,
)

logger = logging.getLogger(__name__)

HASHLIB_ALGORITHMS = (
    ("md5", 16),
    ("sha1", 20),
    ("sha256", 32),
    ("sha384", 48),
    ("sha512", 64),
)

RIPEMD160 = "ripemd160"

def normalize_algorithm_name(algorithm: str) -> str:
    return re.sub(r"[\s_-]", "", algorithm).lower()

def _hashlib_digest(name: str) -> DigestFunction:
    def digest(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    return digest

class HashlibDigestProvider(DigestProviderPort):

    def __init__(
        self,
        enabled_algorithms: Optional[Iterable[str]] = None,
    ) -> None:
        self._enabled = (
            None
            if enabled_algorithms is None
            else {normalize_algorithm_name(name) for name in enabled_algorithms}
        )
        self._descriptors: Dict[str, DigestDescriptor] = {}
        self._register_hashlib_digests()
        self._initialize_dependencies()

    def _register_hashlib_digests(self) -> None:
        available = {name.lower() for name in hashlib.algorithms_available}

        for name, byte_length in HASHLIB_ALGORITHMS:
            if name not in available:
                logger.warning("hashlib does not provide %s, skipping", name)
                continue
            self._register(name, byte_length, _hashlib_digest(name))

    def _initialize_dependencies(self) -> None:
        try:
            from Crypto.Hash import RIPEMD160 as ripemd160

            def digest(data: bytes) -> bytes:
                return ripemd160.new(data).digest()

            self._register(RIPEMD160, ripemd160.digest_size, digest)
        except ImportError:
            logger.warning("pycryptodome not installed, RIPEMD-160 unavailable")

    def _register(
        self,
        name: str,
        byte_length: int,
        digest_fn: DigestFunction,
    ) -> None:
        if self._enabled is not None and name not in self._enabled:
            logger.debug("Digest %s not enabled, skipping", name)
            return

        self._descriptors[name] = DigestDescriptor(
            name=name,
            byte_length=byte_length,
            digest_fn=digest_fn,
        )
        logger.debug("Registered digest %s (%d bytes)", name, byte_length)

    def get(self, algorithm: str) -> DigestDescriptor:
        if algorithm is None:
            raise UnsupportedAlgorithmError("None")

        descriptor = self._descriptors.get(normalize_algorithm_name(algorithm))
        if descriptor is None:
            raise UnsupportedAlgorithmError(algorithm)
        return descriptor

    def is_available(self, algorithm: str) -> bool:
        if not algorithm:
            return False
        return normalize_algorithm_name(algorithm) in self._descriptors

    def algorithms(self) -> List[str]:
        return list(self._descriptors)

    def find_by_size(self, byte_length: int) -> List[DigestDescriptor]:
        return [
            descriptor
            for descriptor in self._descriptors.values()
            if descriptor.byte_length == byte_length
        ]

    def candidates_for(self, hash_code: str) -> List[DigestDescriptor]:
        if not hash_code:
            return []
        return [
            descriptor
            for descriptor in self._descriptors.values()
            if descriptor.accepts(hash_code)
        ]
