from .distance_matrix import DistanceMatrix, DistanceMatrixUseCase

__all__ = [
    "DistanceMatrix",
    "DistanceMatrixUseCase",
]
