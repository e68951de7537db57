"""Feed a StreamBuffer from an HTTP response body using httpx."""

import asyncio
import httpx
from typing import Optional
from contextlib import asynccontextmanager

from ..core.model import StreamError
from .base import DEFAULT_CHUNK_SIZE, DEFAULT_HIGH_WATER_MARK, HTTP_TIMEOUT
from .buffer import StreamBuffer


# Global async client
_client: Optional[httpx.AsyncClient] = None


@asynccontextmanager
async def _get_client(client: Optional[httpx.AsyncClient] = None):
    """Yield the caller's client, or create/reuse the global one."""
    global _client
    if client is not None:
        yield client
        return
    if _client is None:
        _client = httpx.AsyncClient(timeout=HTTP_TIMEOUT)
    # shared, so it is not closed here
    yield _client


async def _feed_http(stream: StreamBuffer, url: str, chunk_size: int,
                     client: Optional[httpx.AsyncClient]):
    """Stream the GET response body for `url` into `stream`."""
    async with _get_client(client) as http:
        try:
            async with http.stream("GET", url) as response:
                if response.status_code >= 400:
                    stream.destroy(StreamError(f"GET request failed with status {response.status_code}"))
                    return
                async for chunk in response.aiter_bytes(chunk_size):
                    stream.put(chunk)
                    await stream.drain()
        except httpx.RequestError as e:
            stream.destroy(StreamError(f"GET request failed: {e}"))
            return
    stream.stop()


async def open_http_stream(url: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
                           client: Optional[httpx.AsyncClient] = None,
                           high_water_mark: int = DEFAULT_HIGH_WATER_MARK) -> StreamBuffer:
    """Create a stream fed in the background from an HTTP(S) URL."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    stream = StreamBuffer(high_water_mark=high_water_mark)
    task = asyncio.create_task(_feed_http(stream, url, chunk_size, client))
    stream.attach_feeder(task)
    return stream


async def close_global_client():
    """Close the global httpx client. Call this at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
