from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Union


class InsufficientDataError(IOError):
    """Raised when a stream ends before the requested number of bytes arrived."""

    def __init__(self, requested: int, actual: int):
        super().__init__(f"Not enough data: requested {requested} bytes "
                         f"but only {actual} bytes are available")
        self.requested = requested
        self.actual = actual


class StreamError(IOError):
    """Raised by the bundled stream sources when the underlying I/O fails."""


class ValueOutOfRangeError(ValueError):
    """Raised when a restricted-width decode sees bits it cannot represent."""


class UuidValidationError(ValueError):
    """Raised when a text UUID is rejected by its validator."""

    def __init__(self, text: str):
        super().__init__(f"UUID failed validation: {text}")
        self.text = text


class InvalidArgumentError(ValueError):
    """Raised for unsupported sizes, byte lengths or validator kinds."""


@dataclass(frozen=True, slots=True)
class Pattern:
    regex: re.Pattern[str]

    def __call__(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True, slots=True)
class Predicate:
    fn: Callable[[str], bool]

    def __call__(self, text: str) -> bool:
        return bool(self.fn(text))


UuidValidator = Union[Pattern, Predicate]


def as_validator(value) -> UuidValidator | None:
    """Normalise a user supplied validator; None disables validation."""
    if value is None or isinstance(value, (Pattern, Predicate)):
        return value
    if isinstance(value, re.Pattern):
        return Pattern(value)
    if isinstance(value, str):
        # a bare string is ambiguous (pattern or literal), refuse it
        raise InvalidArgumentError(f"UUID validator is of invalid type: {value!r}")
    if callable(value):
        return Predicate(value)
    raise InvalidArgumentError(f"UUID validator is of invalid type: {value!r}")
