"""Direct-form FIR filter with a shift register and 32-bit integer arithmetic."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from hlsdsp.fixedpoint import wrap_signed

TAPS = 11
WORD_WIDTH = 32
DEFAULT_TAPS: tuple[int, ...] = (0, -10, -9, 23, 56, 63, 56, 23, -9, -10, 0)
DEFAULT_SAMPLES = 600
DEFAULT_LIMIT = 75

_BANNER = "*******************************************"


class FirFilter:
    """FIR filter that keeps its delay line between calls.

    Samples, coefficients and the accumulator are 32-bit signed integers
    that wrap on overflow.
    """

    def __init__(self, coefficients: Iterable[int] = DEFAULT_TAPS) -> None:
        coeffs = tuple(wrap_signed(c, WORD_WIDTH) for c in coefficients)
        if not coeffs:
            raise ValueError("a FIR filter needs at least one coefficient")
        self.coefficients = coeffs
        self.reset()

    def reset(self) -> None:
        """Clear the delay line."""
        self.shift_reg = [0] * len(self.coefficients)

    def step(self, x: int) -> int:
        """Shift in ``x`` and return the filter output for it."""
        sample = wrap_signed(x, WORD_WIDTH)
        self.shift_reg = [sample, *self.shift_reg[:-1]]
        acc = 0
        for data, coef in zip(reversed(self.shift_reg), reversed(self.coefficients)):
            acc = wrap_signed(acc + wrap_signed(data * coef, WORD_WIDTH), WORD_WIDTH)
        return acc


def ramp_signal(samples: int, limit: int = DEFAULT_LIMIT) -> Iterator[int]:
    """Yield ``samples`` values of a triangle wave between ``-limit`` and ``limit``.

    The wave starts at 1 and rises by one per sample; it turns around once
    it reaches ``limit`` or ``-limit``.
    """
    if samples < 0:
        raise ValueError(f"sample count must not be negative, got {samples}")
    signal = 0
    ramp_up = True
    for _ in range(samples):
        signal += 1 if ramp_up else -1
        yield signal
        if ramp_up and signal >= limit:
            ramp_up = False
        elif not ramp_up and signal <= -limit:
            ramp_up = True


def run_ramp_test(
    coefficients: Sequence[int] = DEFAULT_TAPS, samples: int = DEFAULT_SAMPLES
) -> list[tuple[int, int, int]]:
    """Filter the ramp signal for indices 0 to ``samples`` inclusive.

    Returns ``(index, input, output)`` rows.
    """
    fir = FirFilter(coefficients)
    return [
        (index, signal, fir.step(signal))
        for index, signal in enumerate(ramp_signal(samples + 1))
    ]


def format_results(rows: Iterable[tuple[int, int, int]]) -> str:
    """Render result rows as lines of ``index input output``."""
    return "".join(f"{index} {signal} {output}\n" for index, signal, output in rows)


def _squeeze(text: str) -> list[str]:
    return ["".join(line.split()) for line in text.splitlines()]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ramp test, write the results and compare them with a golden file."""
    parser = argparse.ArgumentParser(description="Run the FIR ramp test.")
    parser.add_argument("--output", type=Path, default=Path("out.dat"))
    parser.add_argument("--golden", type=Path, default=Path("out.gold.dat"))
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    args = parser.parse_args(argv)

    text = format_results(run_ramp_test(DEFAULT_TAPS, args.samples))
    args.output.write_text(text)

    print("Comparing against output data ")
    try:
        golden = args.golden.read_text()
    except OSError as exc:
        print(f"cannot read {args.golden}: {exc}")
        matches = False
    else:
        matches = _squeeze(text) == _squeeze(golden)

    print(_BANNER)
    if matches:
        print("PASS: The output matches the golden output!")
    else:
        print("FAIL: Output DOES NOT match the golden output")
    print(_BANNER)
    return 0 if matches else 1