"""z-base-32 alphabet.

z-base-32 uses its own 32-character alphabet instead of RFC 4648's:

    ybndrfg8ejkmcpqxot1uwisza345h769

The ordering puts the easiest characters to read, write and say at the
positions that occur most often. The digits 0 and 2 and the letters l, v
are left out because they are easily confused with o, z, 1 and u.

Encoding always produces lower case. Decoding accepts either case.

See: https://philzimmermann.com/docs/human-oriented-base-32-encoding.txt
"""

from zb32.errors import InvalidCharacter, InvalidQuintet

CHARS = "ybndrfg8ejkmcpqxot1uwisza345h769"

_ENCODE_TABLE = CHARS.encode("ascii")
_DECODE_MAP = {ord(c): i for i, c in enumerate(CHARS)}
_DECODE_MAP.update({ord(c.upper()): i for i, c in enumerate(CHARS) if c.isalpha()})


def character_to_quintet(character: int | str) -> int:
    """Map a character ("y", or its code 0x79) to its quintet value (0)."""
    if isinstance(character, str):
        if len(character) != 1:
            raise InvalidCharacter(f"expected a single character, got {character!r}")
        character = ord(character)
    quintet = _DECODE_MAP.get(character)
    if quintet is None:
        raise InvalidCharacter()
    return quintet


def quintet_to_character(quintet: int) -> int:
    """Map a quintet value (0-31) to the ASCII code of its character."""
    if not 0 <= quintet < len(_ENCODE_TABLE):
        raise InvalidQuintet()
    return _ENCODE_TABLE[quintet]
