import logging
from typing import Callable, List, Optional, Sequence

from ..errors import CompressorContractError, ConfigurationError
from ..ports.compressor_port import CompressorPort
from ..value_objects.byte_data import TextOrBytes, to_byte_data

logger = logging.getLogger(__name__)

_default_compressor_factory: Optional[Callable[[], CompressorPort]] = None


def register_default_compressor(factory: Callable[[], CompressorPort]) -> None:
    """Set the factory used when a metric is built without a compressor."""
    global _default_compressor_factory
    _default_compressor_factory = factory


class NormalizedCompressionDistance:
    """Normalized compression distance between two strings or byte sequences.

    ``d(x, y) = (Z(xy) - min(Z(x), Z(y))) / max(Z(x), Z(y))`` where ``Z`` is
    the compressed length reported by ``compressor``. Results are clamped to
    ``[0.0, 1.0]``. Identical inputs are at distance 0.0 without compressing
    anything.

    When no compressor is given, the registered default factory supplies
    one (xz at preset 9 without integrity checks once the compression
    adapters are imported).
    """

    def __init__(self, compressor: Optional[CompressorPort] = None) -> None:
        if compressor is None:
            if _default_compressor_factory is None:
                raise ConfigurationError("No default compressor registered")
            compressor = _default_compressor_factory()
        self._compressor = compressor
        logger.debug("NormalizedCompressionDistance using %r", compressor)

    @property
    def compressor(self) -> CompressorPort:
        return self._compressor

    def __call__(self, x: TextOrBytes, y: TextOrBytes) -> float:
        x_bytes = to_byte_data(x)
        y_bytes = to_byte_data(y)

        if x_bytes == y_bytes:
            return 0.0

        len_xy, len_x, len_y = self._compressor.compressed_lengths(
            (x_bytes + y_bytes, x_bytes, y_bytes)
        )

        denominator = max(len_x, len_y)
        if denominator == 0:
            raise CompressorContractError(
                f"{self._compressor!r} reported zero compressed length "
                "for both of two different inputs"
            )

        distance = (len_xy - min(len_x, len_y)) / denominator
        return min(max(float(distance), 0.0), 1.0)

    def distance(self, x: TextOrBytes, y: TextOrBytes) -> float:
        return self(x, y)

    def pairwise(self, items: Sequence[TextOrBytes]) -> List[List[float]]:
        """Square matrix with ``result[i][j] == self(items[i], items[j])``.

        Every ordered pair is computed since the distance is not symmetric
        in general.
        """
        return [[self(x, y) for y in items] for x in items]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NormalizedCompressionDistance):
            return self._compressor == other._compressor
        return NotImplemented

    def __hash__(self) -> int:
        return hash((NormalizedCompressionDistance, self._compressor))

    def __repr__(self) -> str:
        return f"NormalizedCompressionDistance({self._compressor!r})"
