"""z-base-32 encoding: octets → quintets → characters.

Mirror image of zb32.decoder. The slice functions fill caller-provided,
pre-sized output buffers:

    octets_to_quintets(data, out, bits)   bytes → quintet values (0-31)
    encode_slices(data, out, bits)        bytes → ASCII character codes

`encode_into`, `encode` and `encode_full_bytes` build on them.

z-base-32 is big-endian: encoding a single bit encodes the *highest* bit
of the first byte, and every bit of the last byte past `bits` must be 0.
"""

from collections.abc import MutableSequence, Sequence

from zb32.alphabet import quintet_to_character
from zb32.errors import InputBufferDoesntMatchBits
from zb32.lengths import (
    OCTET_BITS,
    has_valid_trailing_bits,
    live_bits_in_final_symbol,
    required_octets_buffer_len,
    required_quintets_buffer_len,
)
from zb32.regroup import OCTETS_TO_QUINTETS, check_buffers, regroup


def is_last_octet_valid(bits: int, octet: int) -> bool:
    """Could `octet` be the final byte of `bits` bits of data?"""
    final = live_bits_in_final_symbol(bits, OCTET_BITS)
    if final is None:
        return False
    return 0 <= octet <= 0xFF and has_valid_trailing_bits(final, OCTET_BITS, octet)


def octets_to_quintets(in_octets: Sequence[int], out_quintets: MutableSequence[int], bits: int) -> None:
    """Convert octets into quintet values (integers 0-31).

    len(in_octets) must be required_octets_buffer_len(bits) and
    len(out_quintets) must be required_quintets_buffer_len(bits).
    """
    final = check_buffers(len(in_octets), len(out_quintets), bits, OCTETS_TO_QUINTETS)
    if final is None:
        return
    for i, quintet in enumerate(regroup(in_octets, OCTETS_TO_QUINTETS, final)):
        out_quintets[i] = quintet


def encode_slices(in_octets: Sequence[int], out_characters: MutableSequence[int], bits: int) -> None:
    """Encode octets straight to ASCII character codes."""
    final = check_buffers(len(in_octets), len(out_characters), bits, OCTETS_TO_QUINTETS)
    if final is None:
        return
    for i, quintet in enumerate(regroup(in_octets, OCTETS_TO_QUINTETS, final)):
        out_characters[i] = quintet_to_character(quintet)


def encode_into(data: Sequence[int], output: bytearray, bits: int) -> None:
    """Encode `data` and append exactly required_quintets_buffer_len(bits) characters to `output`."""
    if len(data) != required_octets_buffer_len(bits):
        raise InputBufferDoesntMatchBits()
    needed = required_quintets_buffer_len(bits)
    start = len(output)
    output.extend(bytes(needed))
    final = check_buffers(len(data), needed, bits, OCTETS_TO_QUINTETS)
    if final is None:
        return
    for i, quintet in enumerate(regroup(data, OCTETS_TO_QUINTETS, final), start):
        output[i] = quintet_to_character(quintet)


def encode(data: Sequence[int], bits: int) -> str:
    """Encode the first `bits` bits of `data` as z-base-32 text."""
    out = bytearray()
    encode_into(data, out, bits)
    return out.decode("ascii")


def encode_full_bytes(data: Sequence[int]) -> str:
    return encode(data, len(data) * 8)
