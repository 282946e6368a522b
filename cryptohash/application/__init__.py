from .use_cases import ComputeHashUseCase, VerifyHashUseCase

__all__ = [
    "ComputeHashUseCase",
    "VerifyHashUseCase",
]
