"""Regrouping a sequence of n-bit symbols into a sequence of m-bit symbols.

Decoding turns quintets (5 bits) into octets (8 bits); encoding does the
reverse. Neither width divides the other, so symbols are collected into
batches of lcm(5, 8) = 40 bits, which is exactly 8 quintets or 5 octets:

    quintets  |aaaaa|bbbbb|ccccc|ddddd|eeeee|fffff|ggggg|hhhhh|
    octets    |aaaaabbb|bbcccccd|ddddeeee|efffffgg|ggghhhhh|

Every batch is packed most-significant symbol first into one integer
register and then sliced back out at the other width. Only the very last
batch may be short. Its size is given by the declared bit length, which
fixes how many bits of the final input symbol are "live"; any bit of that
symbol past the live ones must be zero (TrailingNonZeroBits otherwise).

The conversion is a two-state machine. Both states are immutable: every
transition returns a new state and the old one must not be reused.

    Accumulating ──provide(symbol, last)──▶ Accumulating   (batch not full)
                                        └─▶ Draining       (batch full, or last)
    Draining ──next_symbol()──▶ (symbol, Draining)
                            └─▶ Accumulating              (batch empty, more input)
                            └─▶ COMPLETE                  (batch empty, input done)

`regroup()` drives the machine over an in-memory iterable. Callers that
receive input a piece at a time can drive the states themselves.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from zb32.errors import (
    InputBufferDoesntMatchBits,
    InputError,
    InvalidOctet,
    InvalidQuintet,
    OutputBufferDoesntMatchBits,
    TrailingNonZeroBits,
)
from zb32.lengths import (
    OCTET_BITS,
    QUINTET_BITS,
    has_valid_trailing_bits,
    live_bits_in_final_symbol,
    required_symbols,
)

REGISTER_LIMIT = 64  # bits
DRAIN_SLOTS = 8  # output symbols a full batch can hold


@dataclass(frozen=True)
class Widths:
    """Symbol widths of one conversion direction."""

    input_width: int
    output_width: int
    invalid_symbol: type[InputError]

    def __post_init__(self):
        if self.register_bits > REGISTER_LIMIT or self.output_width * DRAIN_SLOTS > REGISTER_LIMIT:
            raise ValueError(
                f"unsupported widths {self.input_width}->{self.output_width}: "
                f"batch does not fit a {REGISTER_LIMIT}-bit register"
            )

    @property
    def capacity(self) -> int:
        """Input symbols per batch."""
        return math.lcm(self.input_width, self.output_width) // self.input_width

    @property
    def register_bits(self) -> int:
        return self.input_width * self.capacity


QUINTETS_TO_OCTETS = Widths(QUINTET_BITS, OCTET_BITS, InvalidQuintet)
OCTETS_TO_QUINTETS = Widths(OCTET_BITS, QUINTET_BITS, InvalidOctet)


@dataclass(frozen=True)
class Complete:
    """Terminal state: every output symbol has been produced."""


COMPLETE = Complete()


@dataclass(frozen=True)
class Draining:
    """A packed batch of output symbols waiting to be handed out."""

    widths: Widths
    register: int
    remaining: int
    final_live_bits: int
    completed: bool

    def next_symbol(self) -> "tuple[int, Draining] | Accumulating | Complete":
        if self.remaining == 0:
            if self.completed:
                return COMPLETE
            return Accumulating(self.widths, self.final_live_bits)

        w = self.widths
        shift = w.register_bits - w.output_width
        symbol = (self.register >> shift) & ((1 << w.output_width) - 1)
        register = (self.register << w.output_width) & ((1 << w.register_bits) - 1)
        return symbol, Draining(w, register, self.remaining - 1, self.final_live_bits, self.completed)


@dataclass(frozen=True)
class Accumulating:
    """Collecting input symbols until a batch is full or the input ends.

    `final_live_bits` is the number of meaningful bits in the last input
    symbol of the whole conversion, in [1, input_width].
    """

    widths: Widths
    final_live_bits: int
    buffer: tuple[int, ...] = ()

    @classmethod
    def start(cls, widths: Widths, final_live_bits: int) -> "Accumulating":
        """Initial state of a conversion. Later states are built by transitions."""
        if not 1 <= final_live_bits <= widths.input_width:
            raise ValueError(f"final_live_bits out of range: {final_live_bits}")
        return cls(widths, final_live_bits)

    def provide(self, symbol: int, last: bool = False) -> "Accumulating | Draining":
        w = self.widths
        if not 0 <= symbol < 1 << w.input_width:
            raise w.invalid_symbol()
        if last and not has_valid_trailing_bits(self.final_live_bits, w.input_width, symbol):
            raise TrailingNonZeroBits()

        buffer = self.buffer + (symbol,)
        if len(buffer) < w.capacity and not last:
            return Accumulating(w, self.final_live_bits, buffer)

        register = 0
        for s in buffer:
            register = (register << w.input_width) | s
        # Left-justify a short final batch.
        register <<= (w.capacity - len(buffer)) * w.input_width

        live = (len(buffer) - 1) * w.input_width + (self.final_live_bits if last else w.input_width)
        return Draining(
            widths=w,
            register=register,
            remaining=-(-live // w.output_width),
            final_live_bits=self.final_live_bits,
            completed=last,
        )


def _mark_last(symbols: Iterable[int]) -> Iterator[tuple[int, bool]]:
    """Pair each symbol with a flag telling whether it is the last one."""
    it = iter(symbols)
    try:
        current = next(it)
    except StopIteration:
        raise ValueError("regroup() needs at least one input symbol") from None
    for following in it:
        yield current, False
        current = following
    yield current, True


def regroup(symbols: Iterable[int], widths: Widths, final_live_bits: int) -> Iterator[int]:
    """Lazily regroup `symbols` from widths.input_width to widths.output_width.

    Errors raised by the state machine, or by `symbols` itself, propagate
    out of the iterator at the point they happen; nothing after them is
    produced.
    """
    state: Accumulating | Draining = Accumulating.start(widths, final_live_bits)
    for symbol, last in _mark_last(symbols):
        state = state.provide(symbol, last)
        while isinstance(state, Draining):
            step = state.next_symbol()
            if isinstance(step, Complete):
                return
            if isinstance(step, Accumulating):
                state = step
                break
            out, state = step
            yield out


def check_buffers(input_len: int, output_len: int, bits: int, widths: Widths) -> int | None:
    """Validate buffer lengths against `bits` for one conversion direction.

    Returns the live bits of the final input symbol, or None when `bits`
    is 0 and there is nothing to convert.
    """
    if input_len != required_symbols(bits, widths.input_width):
        raise InputBufferDoesntMatchBits()
    if output_len != required_symbols(bits, widths.output_width):
        raise OutputBufferDoesntMatchBits()
    return live_bits_in_final_symbol(bits, widths.input_width)
