from typing import Union

ByteData = Union[bytes, bytearray, memoryview]

TextOrBytes = Union[str, bytes, bytearray, memoryview]

ENCODING = "utf-8"


def to_byte_data(value: TextOrBytes) -> bytes:
    """Normalize text and buffer-like values to an immutable ``bytes`` copy.

    Strings are encoded as UTF-8. Every length computed downstream works on
    the result, so ``"abc"`` and ``b"abc"`` are indistinguishable.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode(ENCODING)
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"Expected str or bytes-like data, got {type(value).__name__}"
    )
