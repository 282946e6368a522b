from typing import Optional

from injector import Injector, Module, provider, singleton

from ..application.use_cases import ComputeHashUseCase, VerifyHashUseCase
from ..domain.ports.digest_provider_port import DigestProviderPort
from .container import Container, ContainerConfig


class ApplicationModule(Module):

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

    @singleton
    @provider
    def provide_container(self) -> Container:
        return Container(self._config)

    @provider
    def provide_digest_provider(self, container: Container) -> DigestProviderPort:
        return container.digest_provider

    @provider
    def provide_compute_hash_use_case(
        self,
        container: Container,
    ) -> ComputeHashUseCase:
        return container.compute_hash_use_case

    @provider
    def provide_verify_hash_use_case(
        self,
        container: Container,
    ) -> VerifyHashUseCase:
        return container.verify_hash_use_case


class AppInjector:

    _instance: "AppInjector | None" = None

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._module = ApplicationModule(config=config)
        self._injector = Injector([self._module])
        self._container: Container | None = None

    @classmethod
    def get_instance(
        cls,
        config: Optional[ContainerConfig] = None,
    ) -> "AppInjector":
        if cls._instance is None:
            cls._instance = cls(config=config)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        if cls._instance is not None:
            cls._instance.close()
            cls._instance = None

    def get(self, cls: type) -> object:
        return self._injector.get(cls)

    def get_container(self) -> Container:
        if self._container is None:
            self._container = self._injector.get(Container)
        return self._container

    def close(self) -> None:
        if self._container is not None:
            self._container.close()
            self._container = None


__all__ = ["AppInjector", "ApplicationModule"]
