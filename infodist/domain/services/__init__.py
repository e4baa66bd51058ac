from .normalized_compression_distance import NormalizedCompressionDistance

__all__ = [
    "NormalizedCompressionDistance",
]
