import logging
from typing import Optional

from ...application.use_cases import ComputeHashUseCase, VerifyHashUseCase
from ...domain.ports.digest_provider_port import DigestProviderPort
from ...domain.value_objects.hash_value import HashValue
from ..digest.hashlib_provider import HashlibDigestProvider
from .config import ContainerConfig, DigestConfig, OutputConfig

logger = logging.getLogger(__name__)

class Container:

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

        self._digest_provider: Optional[DigestProviderPort] = None
        self._compute_hash_use_case: Optional[ComputeHashUseCase] = None
        self._verify_hash_use_case: Optional[VerifyHashUseCase] = None

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def digest_provider(self) -> DigestProviderPort:
        if self._digest_provider is None:
            self._digest_provider = HashlibDigestProvider(
                enabled_algorithms=self._config.digest.enabled_algorithms,
            )
            logger.debug("Initialized digest provider")
        return self._digest_provider

    @property
    def compute_hash_use_case(self) -> ComputeHashUseCase:
        if self._compute_hash_use_case is None:
            self._compute_hash_use_case = ComputeHashUseCase(
                digest_provider=self.digest_provider,
                default_algorithm=self._config.digest.default_algorithm,
            )
            logger.debug("Initialized compute hash use case")
        return self._compute_hash_use_case

    @property
    def verify_hash_use_case(self) -> VerifyHashUseCase:
        if self._verify_hash_use_case is None:
            self._verify_hash_use_case = VerifyHashUseCase(
                digest_provider=self.digest_provider,
            )
            logger.debug("Initialized verify hash use case")
        return self._verify_hash_use_case

    def render(self, hash_value: HashValue) -> str:
        text = hash_value.format(self._config.output.format_spec)
        return text.upper() if self._config.output.uppercase else text.lower()

    def close(self) -> None:
        self._digest_provider = None
        self._compute_hash_use_case = None
        self._verify_hash_use_case = None
        logger.info("Container resources released")

    def __enter__(self) -> "Container":
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> bool:
        self.close()
        return False

def create_container(
    default_algorithm: str = "sha256",
    format_spec: str = "H",
    uppercase: bool = False,
    enabled_algorithms: Optional[tuple] = None,
) -> Container:
    config = ContainerConfig(
        digest=DigestConfig(
            default_algorithm=default_algorithm,
            enabled_algorithms=enabled_algorithms,
        ),
        output=OutputConfig(format_spec=format_spec, uppercase=uppercase),
    )

    return Container(config)
