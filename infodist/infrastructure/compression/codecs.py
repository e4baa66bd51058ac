import bz2
import lzma
from enum import Enum
from typing import Dict, Optional, Type

import zstandard as zstd

from ...domain.errors import BackendError, ConfigurationError
from ...domain.ports.codec_port import CodecPort

class CodecFamily(Enum):

    XZ = "xz"
    BZIP2 = "bzip2"
    ZSTD = "zstd"
    NOOP = "noop"


class NoopCodec(CodecPort):
    """Identity transform. Compressed length equals input length."""

    def __init__(self) -> None:
        self._initialized = False

    def initialize(self) -> None:
        self._initialized = True

    def transform(self, data: bytes) -> bytes:
        if not self._initialized:
            raise BackendError("noop", "codec used before initialize()")
        return bytes(data)

    def finalize(self) -> None:
        self._initialized = False


class XzCodec(CodecPort):
    """``.xz`` container compression via :mod:`lzma`.

    ``level`` is the lzma preset (0-9), ``check`` one of the ``lzma.CHECK_*``
    integrity checks. ``lzma.LZMACompressor`` objects are single-use, so one
    is created per ``transform`` call.
    """

    def __init__(
        self,
        level: int = 6,
        check: int = lzma.CHECK_CRC64,
        extreme: bool = False,
    ) -> None:
        if not 0 <= level <= 9:
            raise ConfigurationError(f"xz level must be between 0 and 9, got {level}")
        self._preset = (level | lzma.PRESET_EXTREME) if extreme else level
        self._check = check
        self._initialized = False

    def initialize(self) -> None:
        if not lzma.is_check_supported(self._check):
            raise ConfigurationError(f"Unsupported xz integrity check: {self._check}")
        self._initialized = True

    def transform(self, data: bytes) -> bytes:
        if not self._initialized:
            raise BackendError("xz", "codec used before initialize()")
        try:
            compressor = lzma.LZMACompressor(
                format=lzma.FORMAT_XZ,
                check=self._check,
                preset=self._preset,
            )
            return compressor.compress(data) + compressor.flush()
        except lzma.LZMAError as err:
            raise BackendError("xz", str(err)) from err

    def finalize(self) -> None:
        self._initialized = False


class Bzip2Codec(CodecPort):

    def __init__(self, compresslevel: int = 9) -> None:
        if not 1 <= compresslevel <= 9:
            raise ConfigurationError(
                f"bzip2 compresslevel must be between 1 and 9, got {compresslevel}"
            )
        self._compresslevel = compresslevel
        self._initialized = False

    def initialize(self) -> None:
        self._initialized = True

    def transform(self, data: bytes) -> bytes:
        if not self._initialized:
            raise BackendError("bzip2", "codec used before initialize()")
        compressor = bz2.BZ2Compressor(self._compresslevel)
        return compressor.compress(data) + compressor.flush()

    def finalize(self) -> None:
        self._initialized = False


class ZstdCodec(CodecPort):
    """Zstandard frames via the ``zstandard`` package.

    One ``ZstdCompressor`` is built on ``initialize`` and reused for every
    ``transform`` until ``finalize``; each transform emits an independent frame.
    """

    def __init__(
        self,
        level: int = 3,
        write_checksum: bool = False,
        write_content_size: bool = True,
    ) -> None:
        if level > zstd.MAX_COMPRESSION_LEVEL:
            raise ConfigurationError(
                f"zstd level must be at most {zstd.MAX_COMPRESSION_LEVEL}, got {level}"
            )
        self._level = level
        self._write_checksum = write_checksum
        self._write_content_size = write_content_size
        self._compressor: Optional[zstd.ZstdCompressor] = None

    def initialize(self) -> None:
        try:
            self._compressor = zstd.ZstdCompressor(
                level=self._level,
                write_checksum=self._write_checksum,
                write_content_size=self._write_content_size,
            )
        except (zstd.ZstdError, ValueError) as err:
            raise ConfigurationError(f"Invalid zstd configuration: {err}") from err

    def transform(self, data: bytes) -> bytes:
        if self._compressor is None:
            raise BackendError("zstd", "codec used before initialize()")
        try:
            return self._compressor.compress(data)
        except zstd.ZstdError as err:
            raise BackendError("zstd", str(err)) from err

    def finalize(self) -> None:
        self._compressor = None


_CODECS: Dict[CodecFamily, Type[CodecPort]] = {
    CodecFamily.XZ: XzCodec,
    CodecFamily.BZIP2: Bzip2Codec,
    CodecFamily.ZSTD: ZstdCodec,
    CodecFamily.NOOP: NoopCodec,
}


def codec_for(family: CodecFamily) -> Type[CodecPort]:
    try:
        return _CODECS[family]
    except KeyError:
        raise ConfigurationError(f"Unknown codec family: {family!r}") from None
