import lzma
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from ..compression.codecs import CodecFamily
from ..compression.deflate_compressor import MAX_LEVEL


class CompressorType(Enum):

    DEFLATE = "deflate"
    CODEC = "codec"


@dataclass
class DeflateConfig:

    level: int = MAX_LEVEL


@dataclass
class CodecConfig:

    family: CodecFamily = CodecFamily.XZ
    options: Dict[str, Any] = field(
        default_factory=lambda: {"level": 9, "check": lzma.CHECK_NONE}
    )

    @classmethod
    def default(cls) -> "CodecConfig":
        return cls()


@dataclass
class DistanceConfig:

    max_workers: int = 4
    """Threads used when computing a distance matrix."""


@dataclass
class ContainerConfig:

    compressor_type: CompressorType = CompressorType.CODEC
    deflate: DeflateConfig = None
    codec: CodecConfig = None
    distance: DistanceConfig = None

    def __post_init__(self) -> None:
        if self.deflate is None:
            self.deflate = DeflateConfig()
        if self.codec is None:
            self.codec = CodecConfig()
        if self.distance is None:
            self.distance = DistanceConfig()

    @classmethod
    def default(cls) -> "ContainerConfig":
        return cls()

    @classmethod
    def for_deflate(cls, level: int = MAX_LEVEL) -> "ContainerConfig":
        return cls(
            compressor_type=CompressorType.DEFLATE,
            deflate=DeflateConfig(level=level),
        )

    @classmethod
    def for_codec(cls, family: CodecFamily, **options: Any) -> "ContainerConfig":
        return cls(
            compressor_type=CompressorType.CODEC,
            codec=CodecConfig(family=family, options=dict(options)),
        )
