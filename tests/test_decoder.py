"""Tests for z-base-32 decoding."""

import pytest

from vectors import RANDOM, STANDARD
from zb32.alphabet import character_to_quintet
from zb32.decoder import (
    decode,
    decode_full_bytes,
    decode_into,
    decode_slices,
    is_last_quintet_valid,
    quintets_to_octets,
)
from zb32.errors import (
    ErrorType,
    InputBufferDoesntMatchBits,
    InvalidCharacter,
    InvalidQuintet,
    OutputBufferDoesntMatchBits,
    TrailingNonZeroBits,
)
from zb32.lengths import required_octets_buffer_len

VECTORS = STANDARD + RANDOM


def test_decode_standard():
    for hex_data, text, bits in STANDARD:
        assert decode(text, bits) == bytes.fromhex(hex_data)


def test_decode_random():
    for hex_data, text, bits in RANDOM:
        assert decode(text, bits) == bytes.fromhex(hex_data)


def test_decode_slices():
    for hex_data, text, bits in VECTORS:
        out = bytearray(required_octets_buffer_len(bits))
        decode_slices(text.encode("ascii"), out, bits)
        assert out == bytes.fromhex(hex_data)


def test_decode_two_step():
    for hex_data, text, bits in VECTORS:
        quintets = [character_to_quintet(c) for c in text]
        out = [0] * required_octets_buffer_len(bits)
        quintets_to_octets(quintets, out, bits)
        assert bytes(out) == bytes.fromhex(hex_data)


def test_decode_literal():
    assert decode("y", 1) == b"\x00"
    assert decode("6n9hq", 24) == bytes([0xF0, 0xBF, 0xC7])


def test_decode_uppercase():
    assert decode("6IM5SD", 30) == bytes([0xF5, 0x57, 0xBB, 0x0C])


def test_decode_bytes_input():
    assert decode(b"on", 10) == b"\x80\x80"


@pytest.mark.parametrize("bad", ["0", "L", "l", " ", "!", "_", "2", "v"])
def test_decode_non_zbase32_characters(bad):
    with pytest.raises(InvalidCharacter) as exc:
        decode(bad, 5)
    assert exc.value.error_type() is ErrorType.INPUT


@pytest.mark.parametrize("text", ["99", "y9", "on", "yt", "zb"])
def test_decode_trailing_bits_past_last_octet(text):
    """Two characters hold 10 bits; these set bits 9 or 10, so 8 bits must fail."""
    out = bytearray(1)
    with pytest.raises(TrailingNonZeroBits, match="Trailing non-zero bits"):
        decode_slices(text, out, 8)


def test_trailing_bits_depend_on_declared_length():
    with pytest.raises(TrailingNonZeroBits):
        decode("on", 8)
    assert decode("on", 10) == b"\x80\x80"


@pytest.mark.parametrize("text", ["6n9h", "6n9hqy"])
def test_input_buffer_mismatch(text):
    with pytest.raises(InputBufferDoesntMatchBits) as exc:
        decode_slices(text, bytearray(3), 24)
    assert exc.value.error_type() is ErrorType.USAGE
    with pytest.raises(InputBufferDoesntMatchBits):
        decode(text, 24)


@pytest.mark.parametrize("text", ["\u00ff", "\U0001f4a9"])
def test_non_ascii_length_counts_utf8_bytes(text):
    """One non-ASCII character is several bytes, so it can't fill a single position."""
    with pytest.raises(InputBufferDoesntMatchBits):
        decode(text, 5)
    with pytest.raises(InputBufferDoesntMatchBits):
        decode_slices(text, bytearray(1), 5)


def test_non_ascii_at_matching_length_is_invalid_character():
    # "\u00ff" is two UTF-8 bytes, the length of a 10-bit encoding.
    with pytest.raises(InvalidCharacter):
        decode("\u00ff", 10)


def test_input_mismatch_checked_before_contents():
    with pytest.raises(InputBufferDoesntMatchBits):
        decode_slices("!!!!", bytearray(3), 24)


@pytest.mark.parametrize("size", [2, 4])
def test_output_buffer_mismatch(size):
    with pytest.raises(OutputBufferDoesntMatchBits):
        decode_slices("6n9hq", bytearray(size), 24)
    with pytest.raises(OutputBufferDoesntMatchBits):
        quintets_to_octets([0] * 5, bytearray(size), 24)


def test_zero_bits():
    assert decode("", 0) == b""
    out = bytearray()
    decode_slices("", out, 0)
    quintets_to_octets([], out, 0)
    assert out == b""


def test_invalid_quintet():
    with pytest.raises(InvalidQuintet):
        quintets_to_octets([32], bytearray(1), 5)


def test_decode_into_appends():
    out = bytearray(b"ab")
    decode_into("on", out, 10)
    assert out == b"ab\x80\x80"
    decode_into("", out, 0)
    assert out == b"ab\x80\x80"


def test_decode_full_bytes():
    assert decode_full_bytes("yysdxyy") == bytes([0, 44, 55, 128])
    assert decode_full_bytes("") == b""
    with pytest.raises(InputBufferDoesntMatchBits):
        decode_full_bytes("yyy")  # 15 bits can't be whole bytes


def test_is_last_quintet_valid():
    assert not is_last_quintet_valid(0, 0)
    assert is_last_quintet_valid(10, 2)
    assert not is_last_quintet_valid(8, 2)
    assert is_last_quintet_valid(8, 4)
    assert not is_last_quintet_valid(5, 32)
