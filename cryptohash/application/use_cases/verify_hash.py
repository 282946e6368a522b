import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.errors import InvalidFormatError
from ...domain.ports.digest_provider_port import DigestProviderPort
from ...domain.value_objects.digest_descriptor import DigestDescriptor
from ...domain.value_objects.hash_value import BytesLike, HashValue

logger = logging.getLogger(__name__)

@dataclass
class VerifyHashResult:

    source: str
    expected: str
    success: bool
    matches: bool = False
    algorithm: Optional[str] = None
    actual: Optional[HashValue] = None
    candidates: List[str] = field(default_factory=list)
    error: Optional[str] = None

class VerifyHashUseCase:
    """Checks data against an expected hash code.

    When no algorithm is named, every available digest whose size accepts
    the expected code is tried, so a 40-digit code is checked as both
    SHA-1 and RIPEMD-160.
    """

    def __init__(self, digest_provider: DigestProviderPort) -> None:
        self._provider = digest_provider

    def execute_bytes(
        self,
        data: BytesLike,
        expected: str,
        algorithm: Optional[str] = None,
        source: str = "<bytes>",
    ) -> VerifyHashResult:
        logger.info("Verifying %s against %s", source, expected)

        try:
            candidates = self._resolve_candidates(expected, algorithm)
            return self._verify(data, expected, candidates, source)
        except ValueError as err:
            logger.error("Failed to verify %s: %s", source, err)
            return VerifyHashResult(
                source=source,
                expected=expected,
                success=False,
                algorithm=algorithm,
                error=str(err),
            )

    def execute_file(
        self,
        file_path: str,
        expected: str,
        algorithm: Optional[str] = None,
    ) -> VerifyHashResult:
        try:
            with open(file_path, "rb") as f:
                data = f.read()
        except OSError as err:
            logger.error("Failed to read %s: %s", file_path, err)
            return VerifyHashResult(
                source=file_path,
                expected=expected,
                success=False,
                algorithm=algorithm,
                error=str(err),
            )

        return self.execute_bytes(data, expected, algorithm, source=file_path)

    def _resolve_candidates(
        self,
        expected: str,
        algorithm: Optional[str],
    ) -> List[DigestDescriptor]:
        if algorithm:
            descriptor = self._provider.get(algorithm)
            descriptor.from_string(expected)
            return [descriptor]

        candidates = self._provider.candidates_for(expected)
        if not candidates:
            raise InvalidFormatError(
                "The expected hash code does not match any available digest",
                "expected",
            )
        return candidates

    def _verify(
        self,
        data: BytesLike,
        expected: str,
        candidates: List[DigestDescriptor],
        source: str,
    ) -> VerifyHashResult:
        names = [descriptor.name for descriptor in candidates]
        actual = None

        for descriptor in candidates:
            expected_value = descriptor.from_string(expected)
            actual = descriptor.hash_bytes(data)

            if actual == expected_value:
                logger.info("%s matches %s", source, descriptor.name)
                return VerifyHashResult(
                    source=source,
                    expected=expected,
                    success=True,
                    matches=True,
                    algorithm=descriptor.name,
                    actual=actual,
                    candidates=names,
                )

        logger.warning("%s does not match %s", source, expected)
        return VerifyHashResult(
            source=source,
            expected=expected,
            success=True,
            matches=False,
            algorithm=names[0] if len(names) == 1 else None,
            actual=actual if len(names) == 1 else None,
            candidates=names,
        )
