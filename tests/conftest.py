import hashlib
import os
import tempfile
from typing import Generator

import pytest

from cryptohash.domain.value_objects.digest_descriptor import DigestDescriptor
from cryptohash.infrastructure.digest.hashlib_provider import HashlibDigestProvider

@pytest.fixture
def hello_world_bytes() -> bytes:
    return "Hello World!".encode("ascii")

@pytest.fixture
def md5_descriptor() -> DigestDescriptor:
    return DigestDescriptor(
        name="md5",
        byte_length=16,
        digest_fn=lambda data: hashlib.md5(data).digest(),
    )

@pytest.fixture
def digest_provider() -> HashlibDigestProvider:
    return HashlibDigestProvider()

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir

@pytest.fixture
def hello_world_file(temp_dir: str, hello_world_bytes: bytes) -> str:
    file_path = os.path.join(temp_dir, "hello.txt")
    with open(file_path, "wb") as f:
        f.write(hello_world_bytes)
    return file_path
