"""Errors raised by the z-base-32 codec.

Every failure is one of two kinds, depending on who is at fault:

  InputError: the data is bad (a character outside the alphabet, a symbol
              out of range, non-zero bits past the declared length).
  UsageError: the call is bad (buffer sizes that disagree with `bits`,
              a bit length too large to address on this platform).

Both derive from ZBase32Error, which is a ValueError, so callers that only
care about "this didn't decode" can catch ValueError. `error_type()` tells
the two kinds apart without isinstance checks.
"""

import enum


class ErrorType(enum.Enum):
    INPUT = "input"
    USAGE = "usage"


class ZBase32Error(ValueError):
    """Root of all codec errors."""

    message = "z-base-32 error"
    kind: ErrorType

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def error_type(self) -> ErrorType:
        return self.kind


class InputError(ZBase32Error):
    kind = ErrorType.INPUT


class UsageError(ZBase32Error):
    kind = ErrorType.USAGE


class InvalidCharacter(InputError):
    message = "Invalid character found in input."


class InvalidQuintet(InputError):
    message = "Invalid quintet value found in input."


class InvalidOctet(InputError):
    message = "Invalid octet value found in input."


class TrailingNonZeroBits(InputError):
    message = "Trailing non-zero bits found in input."


class InputBufferDoesntMatchBits(UsageError):
    message = "The input buffer size doesn't agree with the provided bits value"


class OutputBufferDoesntMatchBits(UsageError):
    message = "The output buffer size doesn't agree with the provided bits value"


class BitsOverflow(UsageError):
    message = "The value for bits was too large for the platform size"


class NegativeBits(UsageError):
    message = "The value for bits must not be negative"
