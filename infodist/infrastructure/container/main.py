import logging
from typing import Any, Optional, Union

from ...application.use_cases.distance_matrix import DistanceMatrixUseCase
from ...domain.ports.compressor_port import CompressorPort
from ...domain.services.normalized_compression_distance import (
    NormalizedCompressionDistance,
)
from ..compression import CodecCompressor, CodecFamily, DeflateCompressor, codec_for
from .config import CompressorType, ContainerConfig

logger = logging.getLogger(__name__)


class Container:

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

        self._compressor: Optional[CompressorPort] = None
        self._distance: Optional[NormalizedCompressionDistance] = None
        self._distance_matrix_use_case: Optional[DistanceMatrixUseCase] = None

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def compressor(self) -> CompressorPort:
        if self._compressor is None:
            if self._config.compressor_type == CompressorType.DEFLATE:
                self._compressor = DeflateCompressor(
                    level=self._config.deflate.level
                )
            else:
                codec_cfg = self._config.codec
                self._compressor = CodecCompressor(
                    codec_for(codec_cfg.family),
                    **codec_cfg.options,
                )
            logger.debug("Initialized compressor: %r", self._compressor)
        return self._compressor

    @property
    def distance(self) -> NormalizedCompressionDistance:
        if self._distance is None:
            self._distance = NormalizedCompressionDistance(self.compressor)
            logger.debug("Initialized normalized compression distance")
        return self._distance

    @property
    def distance_matrix_use_case(self) -> DistanceMatrixUseCase:
        if self._distance_matrix_use_case is None:
            self._distance_matrix_use_case = DistanceMatrixUseCase(
                distance=self.distance,
                max_workers=self._config.distance.max_workers,
            )
            logger.debug("Initialized distance matrix use case")
        return self._distance_matrix_use_case


def create_container(
    compressor: Union[str, CompressorType] = CompressorType.CODEC,
    codec: Union[str, CodecFamily] = CodecFamily.XZ,
    max_workers: int = 4,
    **options: Any,
) -> Container:
    """Build a container from plain values.

    ``options`` go to the codec constructor for ``CompressorType.CODEC``; for
    ``CompressorType.DEFLATE`` only ``level`` is accepted.
    """
    compressor_type = CompressorType(compressor)

    if compressor_type == CompressorType.DEFLATE:
        config = ContainerConfig.for_deflate(**options)
    elif options:
        config = ContainerConfig.for_codec(CodecFamily(codec), **options)
    else:
        config = ContainerConfig()
        config.codec.family = CodecFamily(codec)
        if config.codec.family != CodecFamily.XZ:
            config.codec.options = {}

    config.distance.max_workers = max_workers
    return Container(config)
