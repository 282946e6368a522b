from dataclasses import dataclass
from typing import Optional, Tuple

from ...domain.value_objects.hash_format import parse_format_spec

@dataclass
class DigestConfig:

    default_algorithm: str = "sha256"
    enabled_algorithms: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if not self.default_algorithm:
            raise ValueError("default_algorithm cannot be empty")
        if self.enabled_algorithms is not None:
            self.enabled_algorithms = tuple(self.enabled_algorithms)

@dataclass
class OutputConfig:

    format_spec: str = "H"
    uppercase: bool = False

    def __post_init__(self) -> None:
        parse_format_spec(self.format_spec)

@dataclass
class ContainerConfig:

    digest: DigestConfig = None
    output: OutputConfig = None

    def __post_init__(self) -> None:
        if self.digest is None:
            self.digest = DigestConfig()
        if self.output is None:
            self.output = OutputConfig()

    @classmethod
    def default(cls) -> "ContainerConfig":
        return cls()

    @classmethod
    def from_options(
        cls,
        algorithm: Optional[str] = None,
        format_spec: Optional[str] = None,
        uppercase: bool = False,
    ) -> "ContainerConfig":
        return cls(
            digest=DigestConfig(default_algorithm=algorithm or "sha256"),
            output=OutputConfig(format_spec=format_spec or "H", uppercase=uppercase),
        )
