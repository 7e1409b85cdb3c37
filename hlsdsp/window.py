"""Window functions applied to blocks of fixed-point samples."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable

from hlsdsp.fixedpoint import COEFF_FORMAT, DIN_FORMAT, FixedFormat

GAUSSIAN_SIGMA = 0.5


class WindowType(enum.IntEnum):
    RECT = 0
    HANN = 1
    HAMMING = 2
    GAUSSIAN = 3


def coef_calc(size: int, window_type: WindowType, index: int) -> float:
    """Return the ideal coefficient at ``index`` of a window of ``size`` points."""
    if size <= 0:
        raise ValueError(f"window size must be positive, got {size}")
    window_type = WindowType(window_type)
    if window_type is WindowType.RECT:
        return 1.0
    if window_type is WindowType.HANN:
        return 0.5 * (1.0 - math.cos(2.0 * math.pi * index / float(size)))
    if window_type is WindowType.HAMMING:
        return 0.54 - 0.46 * math.cos(2.0 * math.pi * index / float(size))
    half = size // 2
    x = (index - half) / (GAUSSIAN_SIGMA * half)
    return math.exp(-0.5 * x * x)


def coefficient_table(
    size: int, window_type: WindowType, coeff_format: FixedFormat = COEFF_FORMAT
) -> list[float]:
    """Return all ``size`` coefficients quantised to ``coeff_format``."""
    return [coeff_format.quantize(coef_calc(size, window_type, i)) for i in range(size)]


def apply_window(
    samples: Iterable[float],
    coefficients: Iterable[float],
    out_format: FixedFormat = DIN_FORMAT,
) -> list[float]:
    """Multiply samples by coefficients, storing each product in ``out_format``.

    Raises ValueError when the two sequences differ in length.
    """
    return [
        out_format.quantize(coef * sample)
        for sample, coef in zip(samples, coefficients, strict=True)
    ]