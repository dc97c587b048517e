#!/usr/bin/env python3
"""zb32: z-base-32 from the command line."""

import argparse
import logging
import sys

from zb32.decoder import decode, decode_full_bytes
from zb32.encoder import encode
from zb32.errors import ErrorType, InputError, UsageError, ZBase32Error

log = logging.getLogger(__name__)


def _read_data(arg: str) -> bytes:
    if arg == "-":
        return sys.stdin.buffer.read()
    try:
        return bytes.fromhex(arg)
    except ValueError:
        raise UsageError(f"not a hex string: {arg!r}") from None


def cmd_encode(args):
    data = _read_data(args.data)
    bits = len(data) * 8 if args.bits is None else args.bits
    log.debug("encoding %d bytes as %d bits", len(data), bits)
    print(encode(data, bits))


def cmd_decode(args):
    text = args.text.strip()
    if args.bits is None:
        log.debug("decoding %d characters as whole bytes", len(text))
        data = decode_full_bytes(text)
    else:
        log.debug("decoding %d characters as %d bits", len(text), args.bits)
        data = decode(text, args.bits)
    print(data.hex())


def cmd_check(args):
    try:
        decode(args.text.strip(), args.bits)
    except InputError as e:
        print(f"invalid: {e}")
        sys.exit(1)
    print("valid")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="zb32", description="z-base-32 encoding with lengths in bits")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    # encode
    p = sub.add_parser("encode", help="Encode hex bytes (or raw stdin with -) as z-base-32")
    p.add_argument("data")
    p.add_argument("--bits", type=int, help="Number of bits to encode (default: all bytes)")
    p.set_defaults(func=cmd_encode)

    # decode
    p = sub.add_parser("decode", help="Decode z-base-32 text, print hex")
    p.add_argument("text")
    p.add_argument("--bits", type=int, help="Number of encoded bits (default: whole bytes)")
    p.set_defaults(func=cmd_decode)

    # check
    p = sub.add_parser("check", help="Check that text is a valid encoding of BITS bits")
    p.add_argument("text")
    p.add_argument("--bits", type=int, required=True)
    p.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except ZBase32Error as e:
        log.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1 if e.error_type() is ErrorType.INPUT else 2)


if __name__ == "__main__":
    main()
