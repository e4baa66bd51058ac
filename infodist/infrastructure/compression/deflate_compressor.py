import logging
import zlib
from typing import Iterable, List

from ...domain.errors import BackendError, ConfigurationError
from ...domain.ports.compressor_port import CompressorPort
from ...domain.value_objects.byte_data import TextOrBytes, to_byte_data

logger = logging.getLogger(__name__)

MIN_LEVEL = 0
MAX_LEVEL = zlib.Z_BEST_COMPRESSION

# Negative window bits select a raw deflate stream without zlib framing.
RAW_DEFLATE_WBITS = -zlib.MAX_WBITS

_BLOCK_LENGTH = 10000
_BLOCK_OVERHEAD = 5
_STREAM_OVERHEAD = 9


def deflate_compress_bound(input_length: int) -> int:
    """Worst-case raw deflate output size for ``input_length`` bytes."""
    max_num_blocks = max(-(-input_length // _BLOCK_LENGTH), 1)
    return _BLOCK_OVERHEAD * max_num_blocks + input_length + _STREAM_OVERHEAD


class DeflateCompressor(CompressorPort):
    """Raw deflate compressor measuring output into a scratch buffer."""

    BACKEND_NAME = "deflate"

    def __init__(self, level: int = MAX_LEVEL) -> None:
        if isinstance(level, bool) or not isinstance(level, int):
            raise ConfigurationError(
                f"Compression level must be an int, got {type(level).__name__}"
            )
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise ConfigurationError(
                f"Compression level must be between {MIN_LEVEL} and {MAX_LEVEL}, "
                f"got {level}"
            )
        self._level = level
        logger.debug("DeflateCompressor initialized: level=%d", level)

    @property
    def level(self) -> int:
        return self._level

    def _new_compressobj(self):
        try:
            return zlib.compressobj(self._level, zlib.DEFLATED, RAW_DEFLATE_WBITS)
        except (zlib.error, ValueError) as err:
            raise BackendError(self.BACKEND_NAME, str(err)) from err

    def _compress_into(
        self, compressobj, data: bytes, out: bytearray, bound: int
    ) -> int:
        written = 0
        try:
            chunks = (compressobj.compress(data), compressobj.flush())
        except zlib.error as err:
            raise BackendError(self.BACKEND_NAME, str(err)) from err

        with memoryview(out) as view:
            for chunk in chunks:
                end = written + len(chunk)
                if end > bound:
                    raise BackendError(
                        self.BACKEND_NAME,
                        f"output exceeded the {bound} byte compress bound",
                    )
                view[written:end] = chunk
                written = end
        return written

    def _measure(self, data: bytes) -> int:
        bound = deflate_compress_bound(len(data))
        out = bytearray(bound)
        return self._compress_into(self._new_compressobj(), data, out, bound)

    def compressed_lengths(self, items: Iterable[TextOrBytes]) -> List[int]:
        template = self._new_compressobj()
        out = bytearray()
        lengths: List[int] = []

        for item in items:
            data = to_byte_data(item)
            required = deflate_compress_bound(len(data))
            if required > len(out):
                out.extend(bytes(required - len(out)))
            lengths.append(
                self._compress_into(template.copy(), data, out, required)
            )

        return lengths

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DeflateCompressor):
            return self._level == other._level
        return NotImplemented

    def __hash__(self) -> int:
        return hash((DeflateCompressor, self._level))

    def __repr__(self) -> str:
        return f"DeflateCompressor(level={self._level})"
