from abc import ABC, abstractmethod
from typing import List

from ..value_objects.digest_descriptor import DigestDescriptor

class DigestProviderPort(ABC):

    @abstractmethod
    def get(self, algorithm: str) -> DigestDescriptor:
        ...

    @abstractmethod
    def is_available(self, algorithm: str) -> bool:
        ...

    @abstractmethod
    def algorithms(self) -> List[str]:
        ...

    @abstractmethod
    def find_by_size(self, byte_length: int) -> List[DigestDescriptor]:
        ...

    @abstractmethod
    def candidates_for(self, hash_code: str) -> List[DigestDescriptor]:
        ...
