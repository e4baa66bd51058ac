import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Generator, Iterable, List, Mapping, Type

from ...domain.ports.codec_port import CodecPort
from ...domain.ports.compressor_port import CompressorPort
from ...domain.value_objects.byte_data import TextOrBytes, to_byte_data

logger = logging.getLogger(__name__)


class CodecCompressor(CompressorPort):
    """Compressor measuring the output of a streaming codec.

    ``codec_type`` is the codec class; ``options`` are forwarded verbatim to
    its constructor, in insertion order, every time a codec is created. A
    fresh codec is built per call, so one compressor can be shared between
    threads.
    """

    def __init__(self, codec_type: Type[CodecPort], **options: Any) -> None:
        self._codec_type = codec_type
        self._options: Mapping[str, Any] = MappingProxyType(dict(options))
        logger.debug(
            "CodecCompressor initialized: codec=%s, options=%s",
            codec_type.__name__,
            dict(self._options),
        )

    @property
    def codec_type(self) -> Type[CodecPort]:
        return self._codec_type

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @contextmanager
    def _open_codec(self) -> Generator[CodecPort, None, None]:
        codec = self._codec_type(**self._options)
        try:
            codec.initialize()
            yield codec
        finally:
            codec.finalize()

    def _measure(self, data: bytes) -> int:
        with self._open_codec() as codec:
            return len(codec.transform(data))

    def compressed_lengths(self, items: Iterable[TextOrBytes]) -> List[int]:
        with self._open_codec() as codec:
            return [len(codec.transform(to_byte_data(item))) for item in items]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CodecCompressor):
            return (
                self._codec_type is other._codec_type
                and list(self._options.items()) == list(other._options.items())
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._codec_type, tuple(self._options)))

    def __repr__(self) -> str:
        args = [self._codec_type.__name__]
        args.extend(f"{key}={value!r}" for key, value in self._options.items())
        return f"CodecCompressor({', '.join(args)})"
