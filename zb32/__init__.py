"""z-base-32 encoding with lengths in bits.

    >>> from zb32 import encode, decode
    >>> encode(bytes([0, 44, 55, 128]), 25)
    'yysdx'
    >>> decode("yysdx", 25)
    b'\\x00,7\\x80'

The lower-level pieces live in zb32.decoder, zb32.encoder (pre-sized
buffers, two-step conversions) and zb32.regroup (the state machine).
"""

from zb32.alphabet import CHARS, character_to_quintet, quintet_to_character
from zb32.decoder import decode, decode_full_bytes, decode_into
from zb32.encoder import encode, encode_full_bytes, encode_into
from zb32.errors import ErrorType, InputError, UsageError, ZBase32Error
from zb32.lengths import required_octets_buffer_len, required_quintets_buffer_len

__all__ = [
    "CHARS", "character_to_quintet", "quintet_to_character",
    "encode", "encode_full_bytes", "encode_into",
    "decode", "decode_full_bytes", "decode_into",
    "required_octets_buffer_len", "required_quintets_buffer_len",
    "ZBase32Error", "InputError", "UsageError", "ErrorType",
]
