from .use_cases import DistanceMatrix, DistanceMatrixUseCase

__all__ = [
    "DistanceMatrix",
    "DistanceMatrixUseCase",
]
