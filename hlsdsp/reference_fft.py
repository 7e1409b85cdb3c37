"""Reference fixed-point radix-2 FFT used to stand in for an FFT core."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import TypeVar

from hlsdsp.fixedpoint import FixedFormat

T = TypeVar("T")

DEFAULT_TWIDDLE_FORMAT = FixedFormat(16, 1, saturate=True)


def _check_power_of_two(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")


def _reverse_bits(value: int, bits: int) -> int:
    if bits == 0:
        return 0
    return int(format(value, f"0{bits}b")[::-1], 2)


def bitrev_sort(values: Iterable[T]) -> list[T]:
    """Return ``values`` reordered with bit-reversed addressing.

    The length must be a power of two; an empty input gives an empty list.
    """
    items = list(values)
    if not items:
        return []
    _check_power_of_two(len(items))
    bits = len(items).bit_length() - 1
    return [items[_reverse_bits(index, bits)] for index in range(len(items))]


def gen_twiddles(n_pts: int, fmt: FixedFormat = DEFAULT_TWIDDLE_FORMAT) -> list[complex]:
    """Return the ``n_pts // 2`` twiddle factors ``exp(-2j*pi*i/n_pts)`` in ``fmt``."""
    if n_pts < 1:
        raise ValueError(f"FFT size must be positive, got {n_pts}")
    step = 2.0 * math.pi / n_pts
    return [
        complex(fmt.quantize(math.cos(step * float(i))), fmt.quantize(-math.sin(step * float(i))))
        for i in range(n_pts // 2)
    ]


def fft_rad2_dit_nr(
    x_in: Sequence[complex],
    io_width: int = 16,
    twiddle_width: int = 16,
    inverse: bool = False,
) -> list[complex]:
    """Scaled radix-2 decimation-in-time FFT on normalised fixed-point data.

    Inputs and outputs are complex values in a signed format of ``io_width``
    bits with one integer bit, range [-1.0, 1.0).  Each stage halves its
    results, so the output is the transform divided by the length.  Input
    is in natural order and the output in bit-reversed order.
    """
    values = [complex(v) for v in x_in]
    n = len(values)
    _check_power_of_two(n)

    io_fmt = FixedFormat(io_width, 1)
    wide_fmt = FixedFormat(io_width + 1, 2)
    stored_twiddle = FixedFormat(twiddle_width, 1)
    twiddles = bitrev_sort(gen_twiddles(n, FixedFormat(twiddle_width, 1, saturate=True)))

    y = [complex(io_fmt.quantize(v.real), io_fmt.quantize(v.imag)) for v in values]
    groups = 1
    dist = n // 2
    while groups < n:
        for k in range(groups):
            w = twiddles[k]
            wr = stored_twiddle.quantize(w.real)
            wi = stored_twiddle.quantize(-w.imag if inverse else w.imag)
            start = 2 * k * dist
            for j in range(start, start + dist):
                top = y[j]
                bottom = y[j + dist]
                a = wide_fmt.quantize(wr * bottom.real - wi * bottom.imag)
                b = wide_fmt.quantize(wr * bottom.imag + wi * bottom.real)
                y[j + dist] = complex(
                    io_fmt.quantize((top.real - a) / 2), io_fmt.quantize((top.imag - b) / 2)
                )
                y[j] = complex(
                    io_fmt.quantize((top.real + a) / 2), io_fmt.quantize((top.imag + b) / 2)
                )
        groups *= 2
        dist //= 2
    return y