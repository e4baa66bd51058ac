from .byte_data import ByteData, TextOrBytes, to_byte_data

__all__ = [
    "ByteData",
    "TextOrBytes",
    "to_byte_data",
]
