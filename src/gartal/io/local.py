"""Feed a StreamBuffer from a local file or binary file object."""

import asyncio
from pathlib import Path
from typing import BinaryIO, Union

from ..core.model import StreamError
from .base import DEFAULT_CHUNK_SIZE, DEFAULT_HIGH_WATER_MARK
from .buffer import StreamBuffer


async def _feed_local(stream: StreamBuffer, source: BinaryIO, chunk_size: int):
    """Copy `source` into `stream` chunk by chunk, reading off the event loop."""
    while True:
        try:
            chunk = await asyncio.to_thread(source.read, chunk_size)
        except OSError as e:
            stream.destroy(StreamError(f"Read failed: {e}"))
            return
        if not chunk:
            break
        stream.put(chunk)
        await stream.drain()
    stream.stop()


async def open_local_stream(source: Union[Path, str, BinaryIO],
                            chunk_size: int = DEFAULT_CHUNK_SIZE,
                            high_water_mark: int = DEFAULT_HIGH_WATER_MARK) -> StreamBuffer:
    """Create a stream fed in the background from a path or BinaryIO.

    Files opened here are closed once the feeder finishes, fails or is
    cancelled; caller-owned file objects are left open.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    stream = StreamBuffer(high_water_mark=high_water_mark)
    if hasattr(source, 'read'):
        task = asyncio.create_task(_feed_local(stream, source, chunk_size))
    else:
        fileobj = open(source, 'rb')
        task = asyncio.create_task(_feed_local(stream, fileobj, chunk_size))
        # runs even when the task is cancelled before its first step
        task.add_done_callback(lambda _: fileobj.close())
    stream.attach_feeder(task)
    return stream
