"""Two-channel polyphase FIR filters of the digital up-converter chain.

Each filter is a transposed-form FIR computed one tap per call, shared
between two channels (I and Q) that alternate in blocks of 48 calls.  An
output is produced on the calls where the hardware writes its result; on
the other calls ``step`` returns the last output held in the register.
"""

from __future__ import annotations

from hlsdsp.fixedpoint import DATA_WIDTH, FILTER_ACC_WIDTH, get_bit, wrap_signed
from hlsdsp.mac import mac, mac1, mac2, srrc_mac

OUTPUT_SHIFT = 17

SRRC_COEFFS: tuple[int, ...] = (
    25, -56, 121, -155, 84, 176, -680, 1415,
    -2283, 3116, -3719, 69475, -3719, 3116, -2283, 1415,
    -680, 176, 84, -155, 121, -56, 25, 0,
    46, -16, -78, 226, -347, 268, 288, -1727,
    4751, -11484, 40865, 40865, -11484, 4751, -1727, 288,
    268, -347, 226, -78, -16, 46, 0, 0,
)

IMF1_COEFFS: tuple[int, ...] = (
    -224, 1139, -3642, 9343, -22689, 81597, 81597, -22689,
    9343, -3642, 1139, -224, 0, 0, 0, 0,
    0, 131071, 0, 0, 0, 0, 0, 0,
)

IMF2_COEFFS: tuple[int, ...] = (
    2054, -14177, 77667, 77667, -14177, 2054,
    0, 0, 131071, 0, 0, 0,
)

IMF3_COEFFS: tuple[tuple[int, int], ...] = (
    (1651, 0),
    (-13134, 0),
    (77019, 0),
    (77019, 131071),
    (-13134, 0),
    (1651, 0),
)


def _scale(acc: int) -> int:
    """Drop the fractional bits of an accumulator into an 18-bit sample."""
    return wrap_signed(acc >> OUTPUT_SHIFT, DATA_WIDTH)


def _registers(count: int) -> list[list[int]]:
    return [[0, 0] for _ in range(count)]


class SrrcFilter:
    """Square-root raised-cosine filter, interpolating by two (48-call frame)."""

    def __init__(self) -> None:
        self._regs = _registers(len(SRRC_COEFFS))
        self._in = 0
        self._init = True
        self._ch = 0
        self._i = 0
        self.output = 0

    def step(self, x: int) -> int:
        """Compute one tap; ``x`` is latched at the start of each frame."""
        i = self._i
        last = len(SRRC_COEFFS) - 1
        if i == 0:
            self._in = wrap_signed(x, DATA_WIDTH)
        carry = 0 if (self._init or i in (23, last)) else self._regs[i + 1][self._ch]
        acc = srrc_mac(SRRC_COEFFS[i], self._in, carry)
        self._regs[i][self._ch] = acc
        if i == last:
            if self._ch:
                self._init = False
            self._ch ^= 1
        if i in (0, 24):
            self.output = _scale(acc)
        self._i = 0 if i == last else i + 1
        return self.output


class Imf1Filter:
    """First half-band interpolation filter (24-call frame)."""

    def __init__(self) -> None:
        self._regs = _registers(len(IMF1_COEFFS) + 1)
        self._in = 0
        self._init = True
        self._cnt = 0
        self._ch = 0
        self._i = 0
        self.output = 0

    def step(self, x: int) -> int:
        """Compute one tap; ``x`` is latched at the start of each frame."""
        i = self._i
        last = len(IMF1_COEFFS) - 1
        if i == 0:
            self._in = wrap_signed(x, DATA_WIDTH)
        carry = 0 if (self._init or i in (11, last)) else self._regs[i + 1][self._ch]
        acc = mac1(IMF1_COEFFS[i], self._in, carry)
        self._regs[i][self._ch] = acc
        if i == last:
            if self._ch:
                self._init = False
            self._ch ^= self._cnt
            self._cnt ^= 1
        if i in (0, 12):
            self.output = _scale(acc)
        self._i = 0 if i == last else i + 1
        return self.output


class Imf2Filter:
    """Second half-band interpolation filter (12-call frame)."""

    def __init__(self) -> None:
        self._regs = _registers(len(IMF2_COEFFS) + 1)
        self._in = 0
        self._init = True
        self._cnt = 0
        self._ch = 0
        self._i = 0
        self.output = 0

    def step(self, x: int) -> int:
        """Compute one tap; ``x`` is latched at the start of each frame."""
        i = self._i
        last = len(IMF2_COEFFS) - 1
        if i == 0:
            self._in = wrap_signed(x, DATA_WIDTH)
        carry = 0 if (self._init or i in (5, last)) else self._regs[i + 1][self._ch]
        acc = mac2(IMF2_COEFFS[i], self._in, carry)
        self._regs[i][self._ch] = acc
        if i == last:
            if self._cnt == 3:
                if self._ch:
                    self._init = False
                self._ch ^= 1
            self._cnt = (self._cnt + 1) & 0b11
        if i in (0, 6):
            self.output = _scale(acc)
        self._i = 0 if i == last else i + 1
        return self.output


class Imf3Filter:
    """Third interpolation filter with two polyphase branches (6-call frame).

    An output is produced on every call.
    """

    def __init__(self) -> None:
        self._regs0 = _registers(len(IMF3_COEFFS))
        self._regs1 = _registers(len(IMF3_COEFFS))
        self._in = 0
        self._init = True
        self._i = 0
        self._j = 0
        self.output = 0

    def step(self, x: int) -> int:
        """Compute one tap of both branches; ``x`` is latched each frame."""
        i = self._i
        last = len(IMF3_COEFFS) - 1
        if i == 0:
            self._in = wrap_signed(x, DATA_WIDTH)
        ch = get_bit(self._j, 3)
        bypass = self._init or i == last
        carry0 = 0 if bypass else self._regs0[i + 1][ch]
        carry1 = 0 if bypass else self._regs1[i + 1][ch]
        coef0, coef1 = IMF3_COEFFS[i]
        acc0 = wrap_signed(mac(coef0, self._in, carry0), FILTER_ACC_WIDTH)
        acc1 = wrap_signed(mac(coef1, self._in, carry1), FILTER_ACC_WIDTH)
        self._regs0[i][ch] = acc0
        self._regs1[i][ch] = acc1
        self.output = _scale(acc0 if i == 0 else acc1)
        if i == last:
            if self._j == 15:
                self._init = False
            self._j = 0 if self._j == 15 else self._j + 1
        self._i = 0 if i == last else i + 1
        return self.output