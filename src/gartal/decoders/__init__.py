"""Typed decoders layered on top of read_bytes."""

from .numeric import (
    read_int8, read_uint8,
    read_int16_be, read_int16_le, read_uint16_be, read_uint16_le,
    read_int32_be, read_int32_le, read_uint32_be, read_uint32_le,
    read_int64_be, read_int64_le, read_uint64_be, read_uint64_le,
    read_biguint64_be, read_biguint64_le,
    read_int_be, read_int_le, read_uint_be, read_uint_le,
    read_double_be, read_double_le, read_float_be, read_float_le,
)
from .text import read_text, read_text_uuid, read_binary_uuid

__all__ = [
    "read_int8", "read_uint8",
    "read_int16_be", "read_int16_le", "read_uint16_be", "read_uint16_le",
    "read_int32_be", "read_int32_le", "read_uint32_be", "read_uint32_le",
    "read_int64_be", "read_int64_le", "read_uint64_be", "read_uint64_le",
    "read_biguint64_be", "read_biguint64_le",
    "read_int_be", "read_int_le", "read_uint_be", "read_uint_le",
    "read_double_be", "read_double_le", "read_float_be", "read_float_le",
    "read_text", "read_text_uuid", "read_binary_uuid",
]
