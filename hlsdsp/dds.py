"""Table-driven direct digital synthesiser producing sine and cosine."""

from __future__ import annotations

from hlsdsp.fixedpoint import (
    ACC_WIDTH,
    DITHER_WIDTH,
    PHASE_WIDTH,
    get_range,
    wrap_unsigned,
)

DDS_TABLE: tuple[int, ...] = (
    0, 3196, 6270, 9102, 11585, 13623, 15137, 16069,
    16384, 16069, 15137, 13623, 11585, 9102, 6270, 3196,
    0, -3196, -6270, -9102, -11585, -13623, -15137, -16069,
    -16384, -16069, -15137, -13623, -11585, -9102, -6270, -3196,
)

_QUARTER_TURN = 1 << (PHASE_WIDTH - 2)


class Dds:
    """Phase accumulator with a 32-entry sine table.

    With ``noise_shape`` set, the truncated phase bits are fed back into the
    next phase to spread the truncation error.
    """

    def __init__(self, noise_shape: bool = False) -> None:
        self.noise_shape = noise_shape
        self.reset()

    def reset(self) -> None:
        """Clear the phase accumulator and noise feedback."""
        self.acc = 0
        self.noise = 0

    def step(self, freq: int) -> tuple[int, int]:
        """Advance the phase by ``freq`` and return ``(sine, cosine)``."""
        self.acc = wrap_unsigned(self.acc + wrap_unsigned(freq, ACC_WIDTH), ACC_WIDTH)
        if self.noise_shape:
            lphase = wrap_unsigned(self.acc + self.noise, ACC_WIDTH)
            phase = lphase >> DITHER_WIDTH
            self.noise = get_range(lphase, DITHER_WIDTH - 1, 0)
        else:
            phase = self.acc >> DITHER_WIDTH
        cos_phase = wrap_unsigned(_QUARTER_TURN - phase, PHASE_WIDTH)
        return DDS_TABLE[phase], DDS_TABLE[cos_phase]