"""Stream layer for gartal - the byte sources read_bytes pulls from."""

# Re-export these for import convenience
from .base import ReadableStream, DEFAULT_CHUNK_SIZE
from .buffer import StreamBuffer
from .local import open_local_stream
from .http_async import open_http_stream, close_global_client


async def open_stream(source, chunk_size: int = DEFAULT_CHUNK_SIZE) -> StreamBuffer:
    """Factory function to create a fed StreamBuffer based on source type."""
    if hasattr(source, 'read'):  # BinaryIO
        return await open_local_stream(source, chunk_size)

    source_str = str(source)
    if source_str.startswith(('http://', 'https://')):
        return await open_http_stream(source_str, chunk_size)
    else:
        return await open_local_stream(source, chunk_size)
