import lzma

from ...domain.services.normalized_compression_distance import (
    register_default_compressor,
)
from .codec_compressor import CodecCompressor
from .codecs import (
    Bzip2Codec,
    CodecFamily,
    NoopCodec,
    XzCodec,
    ZstdCodec,
    codec_for,
)
from .deflate_compressor import DeflateCompressor, deflate_compress_bound


def default_compressor() -> CodecCompressor:
    """xz at maximum preset with integrity checks disabled."""
    return CodecCompressor(XzCodec, level=9, check=lzma.CHECK_NONE)


register_default_compressor(default_compressor)


__all__ = [
    "CodecCompressor",
    "DeflateCompressor",
    "CodecFamily",
    "XzCodec",
    "Bzip2Codec",
    "ZstdCodec",
    "NoopCodec",
    "codec_for",
    "deflate_compress_bound",
    "default_compressor",
]
