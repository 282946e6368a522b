import io
from unittest.mock import MagicMock

import pytest

from cryptohash.domain.errors import InvalidFormatError
from cryptohash.domain.value_objects.digest_descriptor import DigestDescriptor
from cryptohash.domain.value_objects.hash_value import HashValue

MD5_HASH_H = "ed076287532e86365e841e92bfc50d8c"
MD5_HASH_D = "ed07-6287-532e-8636-5e84-1e92-bfc5-0d8c"

class TestDigestDescriptor:

    def test_create(self, md5_descriptor):
        assert md5_descriptor.name == "md5"
        assert md5_descriptor.byte_length == 16
        assert md5_descriptor.hash_code_length == 32

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            DigestDescriptor(name="", byte_length=16, digest_fn=lambda data: data)

    @pytest.mark.parametrize("byte_length", [0, -4, "16", 2.0])
    def test_invalid_byte_length_raises(self, byte_length):
        with pytest.raises(ValueError):
            DigestDescriptor(name="x", byte_length=byte_length, digest_fn=lambda data: data)

    def test_non_callable_digest_raises(self):
        with pytest.raises(ValueError, match="callable"):
            DigestDescriptor(name="x", byte_length=4, digest_fn=None)

    def test_equality_ignores_function(self):
        first = DigestDescriptor(name="x", byte_length=4, digest_fn=lambda data: b"1234")
        second = DigestDescriptor(name="x", byte_length=4, digest_fn=lambda data: b"abcd")
        assert first == second

    def test_accepts(self, md5_descriptor):
        assert md5_descriptor.accepts(MD5_HASH_H) is True
        assert md5_descriptor.accepts(MD5_HASH_D) is True
        assert md5_descriptor.accepts("INVALID") is False
        assert md5_descriptor.accepts(None) is False

    def test_from_string(self, md5_descriptor):
        value = md5_descriptor.from_string(MD5_HASH_D)
        assert value == HashValue.from_string(MD5_HASH_H, 16)

    def test_from_bytes(self, md5_descriptor):
        value = md5_descriptor.from_bytes(bytes.fromhex(MD5_HASH_H))
        assert value.size == 16

    def test_try_parse(self, md5_descriptor):
        assert md5_descriptor.try_parse(MD5_HASH_H)[1] is True
        assert md5_descriptor.try_parse("INVALID") == (None, False)

    def test_hash_bytes_invokes_digest_function(self):
        digest_fn = MagicMock(return_value=b"\x01\x02\x03\x04")
        descriptor = DigestDescriptor(name="fake", byte_length=4, digest_fn=digest_fn)

        value = descriptor.hash_bytes(b"payload")

        digest_fn.assert_called_once_with(b"payload")
        assert value.hash_code == "01020304"

    def test_hash_bytes_short_digest_raises(self):
        descriptor = DigestDescriptor(name="broken", byte_length=4, digest_fn=lambda data: b"\x01")
        with pytest.raises(InvalidFormatError):
            descriptor.hash_bytes(b"payload")

    def test_hash_stream(self, md5_descriptor, hello_world_bytes):
        value = md5_descriptor.hash_stream(io.BytesIO(hello_world_bytes))
        assert value.hash_code == MD5_HASH_H

    def test_hash_file(self, md5_descriptor, hello_world_file):
        assert md5_descriptor.hash_file(hello_world_file).format("D") == MD5_HASH_D

    def test_compute(self, md5_descriptor, hello_world_bytes):
        assert md5_descriptor.compute(hello_world_bytes).hex() == MD5_HASH_H
