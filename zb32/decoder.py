"""z-base-32 decoding: characters → quintets → octets.

The slice functions work on caller-provided, pre-sized output buffers
(bytearray, list, memoryview) and never resize them:

    quintets_to_octets(quintets, out, bits)   quintet values (0-31) → bytes
    decode_slices(text, out, bits)            characters → bytes, one pass

`decode_into`, `decode` and `decode_full_bytes` build on them for the
common case of wanting a bytes result.

On error, whatever was already written to the output is garbage.
"""

from collections.abc import MutableSequence, Sequence

from zb32.alphabet import character_to_quintet
from zb32.errors import InputBufferDoesntMatchBits
from zb32.lengths import (
    QUINTET_BITS,
    has_valid_trailing_bits,
    live_bits_in_final_symbol,
    required_octets_buffer_len,
    required_quintets_buffer_len,
)
from zb32.regroup import QUINTETS_TO_OCTETS, check_buffers, regroup


def _as_bytes(text: bytes | str) -> bytes:
    # Lengths are counted in UTF-8 bytes.
    if isinstance(text, str):
        return text.encode("utf-8")
    return text


def is_last_quintet_valid(bits: int, quintet: int) -> bool:
    """Could `quintet` be the final quintet of a `bits`-bit encoding?"""
    final = live_bits_in_final_symbol(bits, QUINTET_BITS)
    if final is None:
        return False
    return 0 <= quintet <= 31 and has_valid_trailing_bits(final, QUINTET_BITS, quintet)


def quintets_to_octets(in_quintets: Sequence[int], out_octets: MutableSequence[int], bits: int) -> None:
    """Convert quintet values (integers 0-31) into octets.

    len(in_quintets) must be required_quintets_buffer_len(bits) and
    len(out_octets) must be required_octets_buffer_len(bits).
    """
    final = check_buffers(len(in_quintets), len(out_octets), bits, QUINTETS_TO_OCTETS)
    if final is None:
        return
    for i, octet in enumerate(regroup(in_quintets, QUINTETS_TO_OCTETS, final)):
        out_octets[i] = octet


def decode_slices(in_characters: bytes | str, out_octets: MutableSequence[int], bits: int) -> None:
    """Decode characters straight to octets.

    Same as character_to_quintet on every character followed by
    quintets_to_octets, without the intermediate buffer.

    A str is taken as its UTF-8 bytes: its length is the byte count, not
    the number of code points.
    """
    in_characters = _as_bytes(in_characters)
    final = check_buffers(len(in_characters), len(out_octets), bits, QUINTETS_TO_OCTETS)
    if final is None:
        return
    quintets = map(character_to_quintet, in_characters)
    for i, octet in enumerate(regroup(quintets, QUINTETS_TO_OCTETS, final)):
        out_octets[i] = octet


def decode_into(text: bytes | str, output: bytearray, bits: int) -> None:
    """Decode `text` and append exactly required_octets_buffer_len(bits) bytes to `output`.

    Existing content of `output` is left alone.
    """
    text = _as_bytes(text)
    if len(text) != required_quintets_buffer_len(bits):
        raise InputBufferDoesntMatchBits()
    needed = required_octets_buffer_len(bits)
    start = len(output)
    output.extend(bytes(needed))
    final = check_buffers(len(text), needed, bits, QUINTETS_TO_OCTETS)
    if final is None:
        return
    quintets = map(character_to_quintet, text)
    for i, octet in enumerate(regroup(quintets, QUINTETS_TO_OCTETS, final), start):
        output[i] = octet


def decode(text: bytes | str, bits: int) -> bytes:
    """Decode `bits` bits of data from z-base-32 `text`."""
    out = bytearray()
    decode_into(text, out, bits)
    return bytes(out)


def decode_full_bytes(text: bytes | str) -> bytes:
    """Decode `text`, taking as many whole bytes as it can hold.

    For text produced by encode_full_bytes this gives back the original.
    """
    text = _as_bytes(text)
    bits = len(text) * QUINTET_BITS // 8 * 8
    return decode(text, bits)
