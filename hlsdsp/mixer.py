"""Complex mixer that up-converts I/Q samples with a table-driven oscillator."""

from __future__ import annotations

from hlsdsp.dds import Dds
from hlsdsp.fixedpoint import (
    ACC_WIDTH,
    DDS_WIDTH,
    MIX_DATA_WIDTH,
    wrap_signed,
    wrap_unsigned,
)
from hlsdsp.mac import mult

CACHE_SIZE = 16
FRAME_LENGTH = 6
VALID_SLOTS = 2
OUTPUT_SHIFT = DDS_WIDTH - 2


def mix_sub_dsp(a: int, b: int, c: int) -> int:
    """Return ``(a - b) * c`` with the subtraction in a 19-bit pre-adder."""
    pre = wrap_signed(wrap_signed(a, 18) - wrap_signed(b, 18), 19)
    return mult(c, pre)


def mix_add_dsp(a: int, b: int, c: int) -> int:
    """Return ``(a + b) * c`` with a 19-bit pre-adder, narrowed to 36 bits."""
    pre = wrap_signed(wrap_signed(a, 18) + wrap_signed(b, 18), 19)
    return wrap_signed(mult(c, pre), 36)


class Mixer:
    """Mixes interleaved I and Q blocks with sine and cosine.

    Calls come in frames of six; only the first two of each frame carry
    data.  Sixteen data calls of the I channel are cached, then the next
    sixteen data calls (the Q channel) produce outputs.  While the mixer is
    still in its first pass the oscillator is held at zero frequency.
    ``step`` returns the last outputs written when it writes none.
    """

    def __init__(self) -> None:
        self.dds = Dds()
        self._cache = [0] * CACHE_SIZE
        self._init = True
        self._index = 0
        self._i = 0
        self._ch = 1
        self.output: tuple[int, int] = (0, 0)

    def step(self, freq: int, din: int) -> tuple[int, int]:
        """Process one call and return ``(dout_i, dout_q)``."""
        valid = self._i < VALID_SLOTS
        freq_dds = 0 if self._init else wrap_unsigned(freq, ACC_WIDTH)
        din_im = wrap_signed(din, MIX_DATA_WIDTH)

        if valid:
            if self._ch:
                self._cache[self._index] = din_im
            else:
                sine, cosine = self.dds.step(freq_dds)
                din_re = self._cache[self._index]
                tmp = wrap_signed(mix_sub_dsp(sine, cosine, din_im), 34)
                sum_i = wrap_signed(tmp + mix_sub_dsp(din_re, din_im, sine), 37)
                sum_q = wrap_signed(tmp + mix_add_dsp(din_re, din_im, cosine), 36)
                self.output = (
                    wrap_signed(sum_i >> OUTPUT_SHIFT, MIX_DATA_WIDTH),
                    wrap_signed(sum_q >> OUTPUT_SHIFT, MIX_DATA_WIDTH),
                )
                if self._index == CACHE_SIZE - 1:
                    self._init = False

        if self._index == CACHE_SIZE - 1:
            self._ch ^= 1
        if valid:
            self._index = (self._index + 1) % CACHE_SIZE
        self._i = 0 if self._i == FRAME_LENGTH - 1 else self._i + 1
        return self.output