"""Base protocol and shared constants for the stream layer."""

from typing import Callable, Optional, Protocol, runtime_checkable


DEFAULT_CHUNK_SIZE = 64 * 1024  # 64 KB per feed step
DEFAULT_HIGH_WATER_MARK = 256 * 1024  # feeders pause once this much is buffered
HTTP_TIMEOUT = 60.0

READABLE = "readable"
ERROR = "error"


@runtime_checkable
class ReadableStream(Protocol):
    """Protocol for pull-based streams consumed by ``read_bytes``."""

    def read(self, size: int) -> Optional[bytes]:
        """Return exactly `size` buffered bytes, or None if they are not there yet.
        Once the stream has ended, return whatever remains (possibly b"").
        """
        ...

    def on(self, event: str, listener: Callable[..., None]) -> None:
        ...

    def once(self, event: str, listener: Callable[..., None]) -> None:
        ...

    def remove_listener(self, event: str, listener: Callable[..., None]) -> None:
        ...
