from abc import ABC, abstractmethod
from typing import Iterable, List

from ..value_objects.byte_data import TextOrBytes, to_byte_data


class CompressorPort(ABC):
    """Deterministic mapping from byte data to its compressed length.

    Implementations are immutable configuration values. Only ``_measure``
    is mandatory; ``compressed_lengths`` may be overridden to share setup
    across a batch as long as the result equals the element-wise map.
    """

    @abstractmethod
    def _measure(self, data: bytes) -> int:
        ...

    def compressed_length(self, data: TextOrBytes) -> int:
        return self._measure(to_byte_data(data))

    def compressed_lengths(self, items: Iterable[TextOrBytes]) -> List[int]:
        return [self.compressed_length(item) for item in items]


def compressed_length(compressor: CompressorPort, data: TextOrBytes) -> int:
    return compressor.compressed_length(data)


def compressed_lengths(
    compressor: CompressorPort,
    items: Iterable[TextOrBytes],
) -> List[int]:
    return compressor.compressed_lengths(items)
