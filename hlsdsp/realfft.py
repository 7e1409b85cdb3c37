"""Real-FFT front end: sliding window, Hamming window and pairwise packing."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from hlsdsp.fixedpoint import (
    COEFF_FORMAT,
    DIN_FORMAT,
    DIN_WIDTH,
    DOUT_FORMAT,
    DOUT_WIDTH,
    REAL_FFT_LEN,
    FixedFormat,
)
from hlsdsp.reference_fft import fft_rad2_dit_nr
from hlsdsp.sliding_window import SlidingWindow
from hlsdsp.window import WindowType, apply_window, coefficient_table

NUM_TESTS = 8
TWIDDLE_WIDTH = 16
WINDOW_TYPE = WindowType.HAMMING
SIGNAL_FORMAT = FixedFormat(DIN_WIDTH, 1, saturate=True)


@dataclass(frozen=True)
class XfftSample:
    """One complex word on the FFT input stream, with its end-of-frame flag."""

    data: complex
    last: bool = False


@dataclass(frozen=True)
class FrequencyComponent:
    cycles_per_window: float
    phase: float  # kept with the component set; the generator does not apply it
    amplitude: float


FREQUENCY_SET: tuple[FrequencyComponent, ...] = (
    FrequencyComponent(497.0, 0.7, 0.8),
    FrequencyComponent(235.0, 1.6, 1.0),
    FrequencyComponent(100.0, 0.0, 0.6),
    FrequencyComponent(35.0, 0.0, 0.8),
    FrequencyComponent(5.0, 0.0, 0.9),
)


class RealToXfft:
    """Turns blocks of real samples into windowed complex FFT input frames.

    Each block of ``REAL_FFT_LEN // 2`` samples completes a window of
    ``REAL_FFT_LEN`` samples (half previous block, half new), which is
    multiplied by a Hamming window and packed two samples per complex word.
    """

    def __init__(self) -> None:
        self._window = SlidingWindow(REAL_FFT_LEN)
        self.coefficients = coefficient_table(REAL_FFT_LEN, WINDOW_TYPE, COEFF_FORMAT)

    def process(self, block: Iterable[float]) -> list[XfftSample]:
        """Return the ``REAL_FFT_LEN // 2`` complex words for one input block."""
        samples = [DIN_FORMAT.quantize(v) for v in block]
        frame = self._window.push_block(samples)
        windowed = apply_window(frame, self.coefficients, DIN_FORMAT)
        pairs = list(zip(windowed[0::2], windowed[1::2]))
        return [
            XfftSample(complex(re, im), last=pos == len(pairs) - 1)
            for pos, (re, im) in enumerate(pairs)
        ]


class SignalGenerator:
    """Sum of five cosines normalised to full scale, continuing across calls."""

    def __init__(self) -> None:
        self.t = 0

    def generate(self, num_samples: int) -> list[float]:
        """Return the next ``num_samples`` samples in the saturating input format."""
        if num_samples < 0:
            raise ValueError(f"sample count must not be negative, got {num_samples}")
        total_amplitude = sum(c.amplitude for c in FREQUENCY_SET)
        samples = []
        for _ in range(num_samples):
            total = sum(
                c.amplitude
                * math.cos(2.0 * math.pi * c.cycles_per_window * self.t / (2 * num_samples))
                for c in FREQUENCY_SET
            )
            samples.append(SIGNAL_FORMAT.quantize(total / total_amplitude))
            self.t += 1
        return samples


def _hex_word(value: float, width: int) -> int:
    return DOUT_FORMAT.to_raw(value) & ((1 << width) - 1) if width == DOUT_WIDTH else (
        FixedFormat(width, 1).to_raw(value) & ((1 << width) - 1)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Drive generated signals through the front end and the reference FFT.

    Writes input test vectors and FFT output test vectors as hex words and
    prints every bin of the last test.
    """
    parser = argparse.ArgumentParser(description="Run the real-FFT front-end test.")
    parser.add_argument("--tests", type=int, default=NUM_TESTS)
    parser.add_argument("--tvin", type=Path, default=Path("realfft_fe_tvin.dat"))
    parser.add_argument("--tvout", type=Path, default=Path("realfft_fft_tvout.dat"))
    args = parser.parse_args(argv)

    half = REAL_FFT_LEN // 2
    generator = SignalGenerator()
    frontend = RealToXfft()

    with args.tvin.open("w") as tvin, args.tvout.open("w") as tvout:
        for test in range(args.tests):
            block = generator.generate(half)
            for sample in block:
                tvin.write(f"{_hex_word(sample, DIN_WIDTH):0{DIN_WIDTH // 4}x}\n")

            frame = frontend.process(block)
            spectrum = fft_rad2_dit_nr(
                [word.data for word in frame], DOUT_WIDTH, TWIDDLE_WIDTH, False
            )
            for index, value in enumerate(spectrum):
                word = (_hex_word(value.imag, DOUT_WIDTH) << DOUT_WIDTH) | _hex_word(
                    value.real, DOUT_WIDTH
                )
                tvout.write(f"{word:0{2 * DOUT_WIDTH // 4}x}\n")
                if test == args.tests - 1:
                    mag = math.hypot(value.real, value.imag)
                    print(f"{index:4d}:\t{{ {value.real:9.6f}, {value.imag:9.6f} }}; mag = {mag:8.6f}")
            print()

    print("*** TEST COMPLETE ***")
    print()
    return 0