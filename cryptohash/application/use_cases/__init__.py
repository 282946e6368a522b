from .compute_hash import ComputeHashResult, ComputeHashUseCase
from .verify_hash import VerifyHashResult, VerifyHashUseCase

__all__ = [
    "ComputeHashResult",
    "ComputeHashUseCase",
    "VerifyHashResult",
    "VerifyHashUseCase",
]
