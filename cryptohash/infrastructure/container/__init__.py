from .config import ContainerConfig, DigestConfig, OutputConfig
from .main import Container, create_container

__all__ = [
    "Container",
    "create_container",
    "ContainerConfig",
    "DigestConfig",
    "OutputConfig",
]
