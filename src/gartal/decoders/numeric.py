from __future__ import annotations
import struct

from ..core.model import InvalidArgumentError, ValueOutOfRangeError
from ..core.reader import read_bytes
from ..io.base import ReadableStream

_INT8 = struct.Struct("b")
_INT16_BE, _INT16_LE = struct.Struct(">h"), struct.Struct("<h")
_UINT16_BE, _UINT16_LE = struct.Struct(">H"), struct.Struct("<H")
_INT32_BE, _INT32_LE = struct.Struct(">i"), struct.Struct("<i")
_UINT32_BE, _UINT32_LE = struct.Struct(">I"), struct.Struct("<I")
_INT64_BE, _INT64_LE = struct.Struct(">q"), struct.Struct("<q")
_UINT64_BE, _UINT64_LE = struct.Struct(">Q"), struct.Struct("<Q")
_DOUBLE_BE, _DOUBLE_LE = struct.Struct(">d"), struct.Struct("<d")
_FLOAT_BE, _FLOAT_LE = struct.Struct(">f"), struct.Struct("<f")

MAX_GENERIC_BYTE_LENGTH = 6


async def _unpack(stream: ReadableStream, fmt: struct.Struct):
    buf = await read_bytes(stream, fmt.size)
    return fmt.unpack(buf)[0]


# ---------------------------- 8/16/32 bit ----------------------------- #
async def read_int8(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT8)


async def read_uint8(stream: ReadableStream) -> int:
    buf = await read_bytes(stream, 1)
    return buf[0]


async def read_int16_be(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT16_BE)


async def read_int16_le(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT16_LE)


async def read_uint16_be(stream: ReadableStream) -> int:
    return await _unpack(stream, _UINT16_BE)


async def read_uint16_le(stream: ReadableStream) -> int:
    return await _unpack(stream, _UINT16_LE)


async def read_int32_be(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT32_BE)


async def read_int32_le(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT32_LE)


async def read_uint32_be(stream: ReadableStream) -> int:
    return await _unpack(stream, _UINT32_BE)


async def read_uint32_le(stream: ReadableStream) -> int:
    return await _unpack(stream, _UINT32_LE)


# ------------------------------ 64 bit -------------------------------- #
async def read_int64_be(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT64_BE)


async def read_int64_le(stream: ReadableStream) -> int:
    return await _unpack(stream, _INT64_LE)


async def read_uint64_be(stream: ReadableStream) -> int:
    """Read an unsigned 48-bit value stored as a 64-bit big-endian value.

    Raises ValueOutOfRangeError if either of the first two bytes is non-zero.
    """
    buf = await read_bytes(stream, 8)
    if buf[0] or buf[1]:
        raise ValueOutOfRangeError(f"Value out of range: 0x{buf.hex()}")
    # 0x0000<value>
    return int.from_bytes(buf[2:], "big")


async def read_uint64_le(stream: ReadableStream) -> int:
    """Read an unsigned 48-bit value stored as a 64-bit little-endian value.

    Raises ValueOutOfRangeError if either of the last two bytes is non-zero.
    """
    buf = await read_bytes(stream, 8)
    if buf[6] or buf[7]:
        raise ValueOutOfRangeError(f"Value out of range: 0x{buf.hex()}")
    # 0x<value>0000
    return int.from_bytes(buf[:6], "little")


async def read_biguint64_be(stream: ReadableStream) -> int:
    """Full-range unsigned 64-bit big-endian read."""
    return await _unpack(stream, _UINT64_BE)


async def read_biguint64_le(stream: ReadableStream) -> int:
    """Full-range unsigned 64-bit little-endian read."""
    return await _unpack(stream, _UINT64_LE)


# ------------------------- variable width ----------------------------- #
def _check_byte_length(byte_length) -> None:
    if (not isinstance(byte_length, int) or
            not 1 <= byte_length <= MAX_GENERIC_BYTE_LENGTH):
        raise InvalidArgumentError(f"Invalid byteLength: {byte_length!r}")


async def _read_int(stream: ReadableStream, byte_length: int, order: str, signed: bool) -> int:
    _check_byte_length(byte_length)
    buf = await read_bytes(stream, byte_length)
    return int.from_bytes(buf, order, signed=signed)


async def read_int_be(stream: ReadableStream, byte_length: int) -> int:
    if byte_length == 8:
        return await read_int64_be(stream)
    return await _read_int(stream, byte_length, "big", True)


async def read_int_le(stream: ReadableStream, byte_length: int) -> int:
    if byte_length == 8:
        return await read_int64_le(stream)
    return await _read_int(stream, byte_length, "little", True)


async def read_uint_be(stream: ReadableStream, byte_length: int) -> int:
    if byte_length == 8:
        return await read_uint64_be(stream)
    return await _read_int(stream, byte_length, "big", False)


async def read_uint_le(stream: ReadableStream, byte_length: int) -> int:
    if byte_length == 8:
        return await read_uint64_le(stream)
    return await _read_int(stream, byte_length, "little", False)


# --------------------------- floating point --------------------------- #
async def read_double_be(stream: ReadableStream) -> float:
    return await _unpack(stream, _DOUBLE_BE)


async def read_double_le(stream: ReadableStream) -> float:
    return await _unpack(stream, _DOUBLE_LE)


async def read_float_be(stream: ReadableStream) -> float:
    return await _unpack(stream, _FLOAT_BE)


async def read_float_le(stream: ReadableStream) -> float:
    return await _unpack(stream, _FLOAT_LE)
