"""Fixed-length text and UUID decoders."""

from __future__ import annotations

import re
import uuid

from ..core.model import Pattern, UuidValidationError, as_validator
from ..core.reader import read_bytes
from ..io.base import ReadableStream

DEFAULT_ENCODING = "utf-8"
UUID_STRING_LENGTH = len("xxxxxxxx-xxxx-Mxxx-Nxxx-xxxxxxxxxxxx")
UUID_BINARY_LENGTH = 16
UUID_STRING_PATTERN = re.compile(
    r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}", re.IGNORECASE)
DEFAULT_UUID_VALIDATOR = Pattern(UUID_STRING_PATTERN)


async def read_text(stream: ReadableStream, size: int, encoding: str = DEFAULT_ENCODING,
                    errors: str = "replace") -> str:
    """Read a fixed length string of `size` bytes; no trimming is applied."""
    buf = await read_bytes(stream, size)
    return buf.decode(encoding, errors)


async def read_text_uuid(stream: ReadableStream, *, validator=DEFAULT_UUID_VALIDATOR,
                         size: int = UUID_STRING_LENGTH,
                         encoding: str = DEFAULT_ENCODING) -> str:
    """Read a UUID serialized as text, xxxxxxxx-xxxx-Mxxx-Nxxx-xxxxxxxxxxxx by default.

    `validator` may be a Pattern/Predicate, a compiled regex, a callable
    returning bool, or None to skip validation.
    """
    check = as_validator(validator)
    text = await read_text(stream, size, encoding)
    if check is not None and not check(text):
        raise UuidValidationError(text)
    return text


async def read_binary_uuid(stream: ReadableStream) -> str:
    """Read a 16-byte UUID and return its canonical lowercase dashed form."""
    buf = await read_bytes(stream, UUID_BINARY_LENGTH)
    return str(uuid.UUID(bytes=buf))
