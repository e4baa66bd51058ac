from .config import (
    CodecConfig,
    CompressorType,
    ContainerConfig,
    DeflateConfig,
    DistanceConfig,
)
from .main import Container, create_container

__all__ = [
    "Container",
    "create_container",
    "ContainerConfig",
    "CompressorType",
    "DeflateConfig",
    "CodecConfig",
    "DistanceConfig",
]
