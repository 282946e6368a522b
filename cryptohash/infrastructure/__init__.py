from .container import Container, ContainerConfig, create_container
from .digest import HashlibDigestProvider

__all__ = [
    "Container",
    "ContainerConfig",
    "HashlibDigestProvider",
    "create_container",
]
