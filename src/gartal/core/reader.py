"""Exact-length reads from an incrementally filled stream."""

from __future__ import annotations

import asyncio
import warnings
from collections import Counter

from ..io.base import ERROR, READABLE, ReadableStream
from .model import InsufficientDataError, InvalidArgumentError

# id(stream) -> number of read_bytes calls currently suspended on it
_active: Counter = Counter()


async def read_bytes(stream: ReadableStream, size: int) -> bytes:
    """Return exactly `size` bytes from the front of `stream`.

    Suspends until the stream can satisfy the request. Raises
    InsufficientDataError if the stream ends first; errors emitted by the
    stream are re-raised unchanged. Only one outstanding call per stream is
    supported: overlapping calls trigger a RuntimeWarning and consume bytes
    in an undefined order.
    """
    if not isinstance(size, int) or size < 0:
        raise InvalidArgumentError(f"Invalid size: {size!r}")
    if size == 0:
        return b""

    key = id(stream)
    if _active[key]:
        warnings.warn("Concurrent read_bytes calls on one stream are not supported; "
                      "byte order between them is undefined", RuntimeWarning, stacklevel=2)
    _active[key] += 1

    loop = asyncio.get_running_loop()
    failed = loop.create_future()

    def on_error(exc: BaseException) -> None:
        if not failed.done():
            failed.set_exception(exc)

    stream.on(ERROR, on_error)
    try:
        while True:
            buf = stream.read(size)
            if buf is not None:
                if len(buf) != size:
                    raise InsufficientDataError(size, len(buf))
                return buf

            # Check again once there is more data available
            readable = loop.create_future()

            def on_readable() -> None:
                if not readable.done():
                    readable.set_result(None)

            stream.once(READABLE, on_readable)
            try:
                await asyncio.wait((readable, failed), return_when=asyncio.FIRST_COMPLETED)
            finally:
                stream.remove_listener(READABLE, on_readable)
                readable.cancel()
            if failed.done():
                failed.result()
    finally:
        stream.remove_listener(ERROR, on_error)
        if failed.done():
            failed.exception()  # mark retrieved
        else:
            failed.cancel()
        _active[key] -= 1
        if not _active[key]:
            del _active[key]
