from .application.use_cases import DistanceMatrix, DistanceMatrixUseCase
from .domain.errors import (
    BackendError,
    CompressorContractError,
    ConfigurationError,
    InfoDistError,
)
from .domain.ports import (
    CodecPort,
    CompressorPort,
    compressed_length,
    compressed_lengths,
)
from .domain.services import NormalizedCompressionDistance
from .infrastructure.compression import (
    Bzip2Codec,
    CodecCompressor,
    CodecFamily,
    DeflateCompressor,
    NoopCodec,
    XzCodec,
    ZstdCodec,
)
from .infrastructure.container import Container, ContainerConfig, create_container

__all__ = [
    "NormalizedCompressionDistance",
    "CompressorPort",
    "CodecPort",
    "compressed_length",
    "compressed_lengths",
    "DeflateCompressor",
    "CodecCompressor",
    "CodecFamily",
    "XzCodec",
    "Bzip2Codec",
    "ZstdCodec",
    "NoopCodec",
    "DistanceMatrix",
    "DistanceMatrixUseCase",
    "Container",
    "ContainerConfig",
    "create_container",
    "InfoDistError",
    "ConfigurationError",
    "BackendError",
    "CompressorContractError",
]

__version__ = "0.1.0"
