from .codec_port import CodecPort
from .compressor_port import CompressorPort, compressed_length, compressed_lengths

__all__ = [
    "CompressorPort",
    "CodecPort",
    "compressed_length",
    "compressed_lengths",
]
