from .compression import (
    CodecCompressor,
    CodecFamily,
    DeflateCompressor,
    default_compressor,
)
from .container import Container, ContainerConfig, create_container

__all__ = [
    "Container",
    "ContainerConfig",
    "create_container",
    "CodecCompressor",
    "CodecFamily",
    "DeflateCompressor",
    "default_compressor",
]
