"""gartal - exact-length async reads and binary decoders for byte streams."""

# Re-export these for import convenience
from .core.model import (
    InsufficientDataError, StreamError, ValueOutOfRangeError,
    UuidValidationError, InvalidArgumentError, Pattern, Predicate,
)
from .core.reader import read_bytes
from .decoders import *  # noqa: F401,F403
from .decoders import __all__ as _decoder_names
from .io import ReadableStream, StreamBuffer, open_stream, close_global_client

__all__ = [
    "read_bytes",
    *_decoder_names,
    "InsufficientDataError", "StreamError", "ValueOutOfRangeError",
    "UuidValidationError", "InvalidArgumentError", "Pattern", "Predicate",
    "ReadableStream", "StreamBuffer", "open_stream", "close_global_client",
]
