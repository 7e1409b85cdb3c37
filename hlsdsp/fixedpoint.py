"""Bit-accurate integer and fixed-point helpers with hardware wrap semantics."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass

# Direct digital synthesiser and up-converter parameters.
ACC_WIDTH = 16
PHASE_WIDTH = 5
DDS_WIDTH = 16
DITHER_WIDTH = ACC_WIDTH - PHASE_WIDTH
DEFAULT_FREQ = 6628

SRRC_TAPS = 45
IMF1_TAPS = 23
IMF2_TAPS = 11
IMF3_TAPS = 11
DATA_WIDTH = 18
FILTER_ACC_WIDTH = 38
MIX_DATA_WIDTH = 18

# Real-FFT front end parameters.
DIN_WIDTH = 16
DOUT_WIDTH = DIN_WIDTH
REAL_FFT_LEN = 1024
LOG2_REAL_FFT_LEN = 10


def _check_width(width: int) -> int:
    width = operator.index(width)
    if width < 1:
        raise ValueError(f"bit width must be positive, got {width}")
    return width


def wrap_signed(value: int, width: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``width`` bits."""
    width = _check_width(width)
    value = operator.index(value) & ((1 << width) - 1)
    if value >> (width - 1):
        value -= 1 << width
    return value


def wrap_unsigned(value: int, width: int) -> int:
    """Reduce ``value`` to an unsigned integer of ``width`` bits."""
    width = _check_width(width)
    return operator.index(value) & ((1 << width) - 1)


def get_bit(value: int, bit: int) -> int:
    """Return bit ``bit`` of ``value`` (0 or 1)."""
    bit = operator.index(bit)
    if bit < 0:
        raise ValueError(f"bit index must not be negative, got {bit}")
    return (operator.index(value) >> bit) & 1


def get_range(value: int, high: int, low: int) -> int:
    """Return bits ``high`` down to ``low`` of ``value`` as an unsigned integer."""
    high = operator.index(high)
    low = operator.index(low)
    if low < 0 or high < low:
        raise ValueError(f"invalid bit range [{high}:{low}]")
    return (operator.index(value) >> low) & ((1 << (high - low + 1)) - 1)


@dataclass(frozen=True)
class FixedFormat:
    """Signed fixed-point format: ``width`` bits, ``int_bits`` of them integer.

    Quantisation truncates toward minus infinity; overflow wraps unless
    ``saturate`` is set.
    """

    width: int
    int_bits: int
    saturate: bool = False

    def __post_init__(self) -> None:
        _check_width(self.width)
        operator.index(self.int_bits)

    @property
    def frac_bits(self) -> int:
        return self.width - self.int_bits

    @property
    def min_raw(self) -> int:
        return -(1 << (self.width - 1))

    @property
    def max_raw(self) -> int:
        return (1 << (self.width - 1)) - 1

    @property
    def resolution(self) -> float:
        return math.ldexp(1.0, -self.frac_bits)

    def to_raw(self, value: float) -> int:
        """Return the raw integer that ``value`` is stored as."""
        value = float(value)
        if math.isnan(value):
            raise ValueError("cannot quantize NaN")
        if math.isinf(value):
            if not self.saturate:
                raise OverflowError("cannot wrap an infinite value")
            return self.max_raw if value > 0 else self.min_raw
        raw = math.floor(math.ldexp(value, self.frac_bits))
        if self.saturate:
            return max(self.min_raw, min(self.max_raw, raw))
        return wrap_signed(raw, self.width)

    def from_raw(self, raw: int) -> float:
        """Return the real value of the raw integer ``raw``."""
        return math.ldexp(float(wrap_signed(raw, self.width)), -self.frac_bits)

    def quantize(self, value: float) -> float:
        """Return ``value`` as it reads back after storing in this format."""
        return self.from_raw(self.to_raw(value))


DIN_FORMAT = FixedFormat(DIN_WIDTH, 1)
DOUT_FORMAT = FixedFormat(DOUT_WIDTH, 1)
COEFF_FORMAT = FixedFormat(DIN_WIDTH, 1, saturate=True)