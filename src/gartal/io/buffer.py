"""In-memory readable stream with readable/error notifications."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Tuple

from ..core.model import StreamError
from .base import DEFAULT_HIGH_WATER_MARK, ERROR, READABLE

Listener = Callable[..., None]


class StreamBuffer:
    """Pull-based byte stream fed through put()/stop()/destroy().

    Data is handed out only in the exact amounts asked for by ``read``;
    listeners run synchronously inside the call that triggered them.
    """

    def __init__(self, data: bytes = b"", high_water_mark: int = DEFAULT_HIGH_WATER_MARK):
        self.bytes_read = 0  # running total handed out by read()
        self.high_water_mark = high_water_mark
        self._buffer = bytearray(data)
        self._wanted = 0  # size of the last read() that came back empty
        self._drained = asyncio.Event()
        self._ended = False
        self._error: Optional[BaseException] = None
        self._listeners: Dict[str, List[Tuple[Listener, bool]]] = defaultdict(list)
        self._feeder: Optional[asyncio.Task] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "StreamBuffer":
        """Return an already-ended stream holding `data`."""
        stream = cls(data)
        stream.stop()
        return stream

    # ------------------------------------------------------------------ #
    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def errored(self) -> Optional[BaseException]:
        return self._error

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    # --------------------------- events -------------------------------- #
    def on(self, event: str, listener: Listener) -> None:
        self._listeners[event].append((listener, False))

    def once(self, event: str, listener: Listener) -> None:
        self._listeners[event].append((listener, True))

    def remove_listener(self, event: str, listener: Listener) -> None:
        entries = self._listeners.get(event)
        if not entries:
            return
        for i, (fn, _) in enumerate(entries):
            if fn is listener:
                del entries[i]
                return

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))

    def _emit(self, event: str, *args) -> None:
        entries = self._listeners.get(event)
        if not entries:
            return
        for entry in list(entries):
            fn, once = entry
            if once and entry in entries:
                entries.remove(entry)
            fn(*args)

    # --------------------------- producer ------------------------------ #
    def put(self, data: bytes) -> None:
        if self._ended:
            raise StreamError("Cannot put data after the stream has ended")
        if not data:
            return
        self._buffer.extend(data)
        self._emit(READABLE)

    def stop(self) -> None:
        """Mark the end of data; pending readers get whatever is left."""
        if self._ended:
            return
        self._ended = True
        self._emit(READABLE)

    def destroy(self, exc: BaseException) -> None:
        if self._error is not None:
            return
        self._error = exc
        self._drained.set()
        self._emit(ERROR, exc)

    # --------------------------- consumer ------------------------------ #
    def read(self, size: int) -> Optional[bytes]:
        """Return exactly `size` bytes, None if not yet available.

        After stop() the remainder is returned even if shorter than `size`.
        """
        if self._error is not None:
            raise self._error
        if len(self._buffer) < size and not self._ended:
            self._wanted = size
            self._drained.set()
            return None
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        self._wanted = 0
        self.bytes_read += len(data)
        if not self._full():
            self._drained.set()
        return data

    # ----------------------- backpressure ------------------------------ #
    def _full(self) -> bool:
        # a pending read larger than the mark raises the limit to its size
        return len(self._buffer) >= max(self.high_water_mark, self._wanted)

    async def drain(self) -> None:
        """Wait until the buffer is below its high-water mark or the stream failed."""
        while self._full() and self._error is None:
            self._drained.clear()
            await self._drained.wait()

    # --------------------------- feeder -------------------------------- #
    def attach_feeder(self, task: asyncio.Task) -> None:
        """Tie a background task that produces into this stream to its lifetime."""
        self._feeder = task
        task.add_done_callback(self._on_feeder_done)

    def _on_feeder_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            if not self._ended:
                self.destroy(StreamError("Stream closed before end of data"))
            return
        exc = task.exception()
        if exc is not None:
            self.destroy(exc)

    async def aclose(self) -> None:
        """Cancel the feeder task, if any, and wait for it to finish."""
        if self._feeder is not None and not self._feeder.done():
            self._feeder.cancel()
            await asyncio.gather(self._feeder, return_exceptions=True)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
