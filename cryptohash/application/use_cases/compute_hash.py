import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from ...domain.ports.digest_provider_port import DigestProviderPort
from ...domain.value_objects.digest_descriptor import DigestDescriptor
from ...domain.value_objects.hash_value import BytesLike, HashValue

logger = logging.getLogger(__name__)

@dataclass
class ComputeHashResult:

    source: str
    algorithm: str
    success: bool
    hash_value: Optional[HashValue] = None
    error: Optional[str] = None

    def formatted(self, format_spec: Optional[str] = None) -> Optional[str]:
        if self.hash_value is None:
            return None
        return self.hash_value.format(format_spec)

class ComputeHashUseCase:

    def __init__(
        self,
        digest_provider: DigestProviderPort,
        default_algorithm: str = "sha256",
    ) -> None:
        self._provider = digest_provider
        self._default_algorithm = default_algorithm

    @property
    def default_algorithm(self) -> str:
        return self._default_algorithm

    def execute_bytes(
        self,
        data: BytesLike,
        algorithm: Optional[str] = None,
        source: str = "<bytes>",
    ) -> ComputeHashResult:
        return self._execute(
            source,
            algorithm,
            lambda descriptor: descriptor.hash_bytes(data),
        )

    def execute_stream(
        self,
        stream: BinaryIO,
        algorithm: Optional[str] = None,
        source: str = "<stream>",
    ) -> ComputeHashResult:
        return self._execute(
            source,
            algorithm,
            lambda descriptor: descriptor.hash_stream(stream),
        )

    def execute_file(
        self,
        file_path: str,
        algorithm: Optional[str] = None,
    ) -> ComputeHashResult:
        return self._execute(
            file_path,
            algorithm,
            lambda descriptor: descriptor.hash_file(file_path),
        )

    def _execute(
        self,
        source: str,
        algorithm: Optional[str],
        compute: Callable[[DigestDescriptor], HashValue],
    ) -> ComputeHashResult:
        algorithm = algorithm or self._default_algorithm
        logger.info("Computing %s hash of %s", algorithm, source)

        try:
            descriptor: DigestDescriptor = self._provider.get(algorithm)
            hash_value = compute(descriptor)
        except (OSError, ValueError) as err:
            logger.error("Failed to hash %s: %s", source, err)
            return ComputeHashResult(
                source=source,
                algorithm=algorithm,
                success=False,
                error=str(err),
            )

        logger.debug("%s %s = %s", descriptor.name, source, hash_value)
        return ComputeHashResult(
            source=source,
            algorithm=descriptor.name,
            success=True,
            hash_value=hash_value,
        )
