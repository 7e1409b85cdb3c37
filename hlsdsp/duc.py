"""Digital up-converter: pulse shaping, three interpolators and a mixer."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

from hlsdsp.filters import Imf1Filter, Imf2Filter, Imf3Filter, SrrcFilter
from hlsdsp.fixedpoint import DATA_WIDTH, DEFAULT_FREQ, wrap_signed
from hlsdsp.mixer import Mixer

BLOCK_CALLS = 96
CHANNEL_CALLS = 48
OUTPUTS_PER_BLOCK = 16
DEFAULT_SAMPLES = 33

Row = tuple[int, int, int]


class Duc:
    """Chains the SRRC filter, three interpolators and the mixer.

    A full input sample takes 96 calls: 48 for the I channel followed by
    48 for the Q channel.
    """

    def __init__(self) -> None:
        self.srrc = SrrcFilter()
        self.imf1 = Imf1Filter()
        self.imf2 = Imf2Filter()
        self.imf3 = Imf3Filter()
        self.mixer = Mixer()

    def step(self, din: int, freq: int = DEFAULT_FREQ) -> tuple[int, int]:
        """Run one call of the whole chain and return ``(dout_i, dout_q)``."""
        srrc_o = self.srrc.step(din)
        imf1_o = self.imf1.step(srrc_o)
        imf2_o = self.imf2.step(imf1_o)
        imf3_o = self.imf3.step(imf2_o)
        return self.mixer.step(freq, imf3_o)


def _run_block(duc: Duc, xi: int, xq: int, freq: int) -> list[tuple[int, int]]:
    outputs = []
    for call in range(BLOCK_CALLS):
        out = duc.step(xi if call < CHANNEL_CALLS else xq, freq)
        if call >= CHANNEL_CALLS and call % 6 < 2:
            outputs.append(out)
    return outputs


def impulse_response(
    samples: int = DEFAULT_SAMPLES, freq: int = DEFAULT_FREQ
) -> tuple[list[Row], list[Row]]:
    """Drive an impulse through the chain and collect blocks 0 to ``samples``.

    Returns ``(i_rows, q_rows)``; each row is ``(block, input >> 17, output)``
    and each block contributes 16 rows.
    """
    if samples < 0:
        raise ValueError(f"sample count must not be negative, got {samples}")
    duc = Duc()
    _run_block(duc, 0, 0, freq)

    i_rows: list[Row] = []
    q_rows: list[Row] = []
    for block in range(samples + 1):
        xi = wrap_signed(1 << 17, DATA_WIDTH) if block == 0 else 0
        xq = wrap_signed(-xi, DATA_WIDTH)
        for yi, yq in _run_block(duc, xi, xq, freq):
            i_rows.append((block, xi >> 17, yi))
            q_rows.append((block, xq >> 17, yq))
    return i_rows, q_rows


def _format(rows: Iterable[Row]) -> str:
    return "".join(f"{block} {x} {y}\n" for block, x, y in rows)


def _matches(text: str, golden: Path) -> bool:
    try:
        reference = golden.read_text()
    except OSError as exc:
        print(f"cannot read {golden}: {exc}")
        return False

    def squeeze(content: str) -> list[str]:
        return ["".join(line.split()) for line in content.splitlines()]

    return squeeze(text) == squeeze(reference)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the impulse test, write both channels and compare with golden files."""
    parser = argparse.ArgumentParser(description="Run the up-converter impulse test.")
    parser.add_argument("--output-i", type=Path, default=Path("duc_i.dat"))
    parser.add_argument("--output-q", type=Path, default=Path("duc_q.dat"))
    parser.add_argument("--golden-i", type=Path, default=Path("golden/duc_i.dat"))
    parser.add_argument("--golden-q", type=Path, default=Path("golden/duc_q.dat"))
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    parser.add_argument("--freq", type=int, default=DEFAULT_FREQ)
    args = parser.parse_args(argv)

    i_rows, q_rows = impulse_response(args.samples, args.freq)
    text_i = _format(i_rows)
    text_q = _format(q_rows)
    args.output_i.write_text(text_i)
    args.output_q.write_text(text_q)

    ok_i = _matches(text_i, args.golden_i)
    ok_q = _matches(text_q, args.golden_q)
    if ok_i and ok_q:
        print("\n *** DUC hardware test PASSED ! *** \n")
        return 0
    print("\n *** DUC hardware test FAILED ! *** \n")
    return 1