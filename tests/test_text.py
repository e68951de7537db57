"""Tests for text and UUID decoders."""

import re

import pytest

from gartal import (
    StreamBuffer, read_text, read_text_uuid, read_binary_uuid,
    Pattern, Predicate, UuidValidationError, InvalidArgumentError, InsufficientDataError,
)

TESTING_123 = "TESTING 1 2 3"
UUID = "4bfabc01-d385-46fe-b010-8eb17cf657e7"


class TestReadText:
    """Fixed length strings."""

    @pytest.mark.asyncio
    async def test_fixed_length(self):
        stream = StreamBuffer.from_bytes(TESTING_123.encode())
        actual = await read_text(stream, 7)
        assert isinstance(actual, str)
        assert actual == "TESTING"
        assert stream.bytes_read == 7
        assert await read_text(stream, 6) == " 1 2 3"

    @pytest.mark.asyncio
    async def test_no_trimming(self):
        stream = StreamBuffer.from_bytes(b"ab\x00 ")
        assert await read_text(stream, 4) == "ab\x00 "

    @pytest.mark.asyncio
    async def test_encoding(self):
        stream = StreamBuffer.from_bytes("hé".encode("utf-16-le"))
        assert await read_text(stream, 4, "utf-16-le") == "hé"

    @pytest.mark.asyncio
    async def test_invalid_bytes_are_replaced(self):
        stream = StreamBuffer.from_bytes(b"ok\xff")
        assert await read_text(stream, 3) == "ok\ufffd"

    @pytest.mark.asyncio
    async def test_strict_errors(self):
        stream = StreamBuffer.from_bytes(b"ok\xff")
        with pytest.raises(UnicodeDecodeError):
            await read_text(stream, 3, errors="strict")

    @pytest.mark.asyncio
    async def test_short_stream(self):
        stream = StreamBuffer.from_bytes(b"abc")
        with pytest.raises(InsufficientDataError):
            await read_text(stream, 4)


class TestReadTextUuid:
    """UUIDs serialized as text."""

    @pytest.mark.asyncio
    async def test_valid_uuid(self):
        stream = StreamBuffer.from_bytes(UUID.encode())
        actual = await read_text_uuid(stream)
        assert actual == UUID

    @pytest.mark.asyncio
    async def test_upper_case_uuid(self):
        stream = StreamBuffer.from_bytes(UUID.upper().encode())
        assert await read_text_uuid(stream) == UUID.upper()

    @pytest.mark.asyncio
    async def test_not_a_uuid(self):
        not_uuid_text = "this is a test of some text that is clearly not a UUID"
        stream = StreamBuffer.from_bytes(not_uuid_text.encode())
        with pytest.raises(UuidValidationError, match="UUID failed validation") as exc_info:
            await read_text_uuid(stream)
        assert exc_info.value.text == not_uuid_text[:36]

    @pytest.mark.asyncio
    async def test_compiled_regex_validator(self):
        stream = StreamBuffer.from_bytes(b"ABCD")
        assert await read_text_uuid(stream, validator=re.compile(r"^[A-D]+$"), size=4) == "ABCD"

    @pytest.mark.asyncio
    async def test_callable_validator(self):
        stream = StreamBuffer.from_bytes(b"{" + UUID.encode() + b"}")
        check = lambda text: text.startswith("{") and text.endswith("}")  # noqa: E731
        assert await read_text_uuid(stream, validator=check, size=38) == "{" + UUID + "}"

    @pytest.mark.asyncio
    async def test_variant_validators(self):
        stream = StreamBuffer.from_bytes(b"xxxxyyyy")
        assert await read_text_uuid(stream, validator=Pattern(re.compile("x+")), size=4) == "xxxx"
        with pytest.raises(UuidValidationError):
            await read_text_uuid(stream, validator=Predicate(lambda text: False), size=4)

    @pytest.mark.asyncio
    async def test_no_validation(self):
        stream = StreamBuffer.from_bytes(b"definitely not a uuid at all, no...")
        assert len(await read_text_uuid(stream, validator=None, size=35)) == 35

    @pytest.mark.asyncio
    @pytest.mark.parametrize("validator", [42, "[a-f]+", object()])
    async def test_invalid_validator_kind(self, validator):
        stream = StreamBuffer.from_bytes(UUID.encode())
        with pytest.raises(InvalidArgumentError, match="invalid type"):
            await read_text_uuid(stream, validator=validator)
        assert stream.bytes_read == 0


class TestReadBinaryUuid:
    """UUIDs serialized as 16 raw bytes."""

    @pytest.mark.asyncio
    async def test_binary_uuid(self):
        uuid_as_bytes = bytes.fromhex(UUID.replace("-", ""))
        assert len(uuid_as_bytes) == 16
        stream = StreamBuffer.from_bytes(uuid_as_bytes)
        assert await read_binary_uuid(stream) == UUID

    @pytest.mark.asyncio
    async def test_always_lower_case(self):
        stream = StreamBuffer.from_bytes(b"\xab" * 16 + b"\x00")
        actual = await read_binary_uuid(stream)
        assert actual == "abababab-abab-abab-abab-abababababab"
        assert stream.buffered == 1
