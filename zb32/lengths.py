"""Bit length arithmetic.

z-base-32 lengths are given in bits of the decoded data, not in bytes or
characters. Both sides of the codec need to turn that bit length into a
symbol count for each width:

    octets   = ceil(bits / 8)
    quintets = ceil(bits / 5)

and to know how many bits of the last symbol are meaningful. A bit length
that is an exact multiple of the width still has a final symbol, fully
used, so the "live bits" of the last symbol are in [1, width], never 0:

    bits=12, width=8  → 2 octets, 4 live bits in the last one
    bits=16, width=8  → 2 octets, 8 live bits in the last one
    bits=0            → no symbols at all
"""

import sys

from zb32.errors import BitsOverflow, NegativeBits

OCTET_BITS = 8
QUINTET_BITS = 5

# Largest length any Python sequence can have on this platform.
MAX_SYMBOLS = sys.maxsize


def _check_bits(bits: int) -> None:
    if bits < 0:
        raise NegativeBits()


def required_symbols(bits: int, symbol_width: int) -> int:
    """Number of `symbol_width`-bit symbols needed to hold `bits` bits.

    Raises BitsOverflow if that count could not be the length of a buffer
    on this platform.
    """
    _check_bits(bits)
    needed = -(-bits // symbol_width)
    if needed > MAX_SYMBOLS:
        raise BitsOverflow()
    return needed


def required_octets_buffer_len(bits: int) -> int:
    return required_symbols(bits, OCTET_BITS)


def required_quintets_buffer_len(bits: int) -> int:
    return required_symbols(bits, QUINTET_BITS)


def live_bits_in_final_symbol(bits: int, symbol_width: int) -> int | None:
    """Meaningful bits in the last symbol, or None when there is no symbol."""
    _check_bits(bits)
    if bits == 0:
        return None
    return bits % symbol_width or symbol_width


def trailing_bits_mask(live_bits: int, symbol_width: int) -> int:
    """Mask of the low-order bits of a symbol that lie past `live_bits`."""
    return ((1 << symbol_width) - 1) >> live_bits


def has_valid_trailing_bits(live_bits: int, symbol_width: int, symbol: int) -> bool:
    return symbol & trailing_bits_mask(live_bits, symbol_width) == 0
