# hlsdsp

Bit-accurate Python models of a small family of fixed-point signal
processing blocks. Each block keeps its state between calls and works on
integers wrapped to fixed bit widths, so the numbers it produces can be
compared sample for sample with a hardware simulation.

## What is inside

| Module | Contents |
| --- | --- |
| `hlsdsp.fixedpoint` | `wrap_signed`, `wrap_unsigned`, `get_bit`, `get_range`, and the `FixedFormat` dataclass (`quantize`, `to_raw`, `from_raw`) for signed fixed-point values that truncate toward minus infinity and wrap or saturate |
| `hlsdsp.mac` | Multiply and multiply-accumulate primitives: `mult`, `srrc_mac`, `mac1`, `mac2`, `mac`, `symtap` |
| `hlsdsp.dds` | `Dds`, a 32-entry table-driven oscillator returning `(sine, cosine)` from `step(freq)`, with an optional `noise_shape` mode and `reset()` |
| `hlsdsp.fir` | `FirFilter`, an integer FIR filter with 32-bit wrapping arithmetic (`step`, `reset`), and the ramp test bench `ramp_signal`, `run_ramp_test`, `format_results`, `main` |
| `hlsdsp.filters` | The two-channel polyphase interpolation stages of the up-converter: `SrrcFilter`, `Imf1Filter`, `Imf2Filter`, `Imf3Filter` |
| `hlsdsp.mixer` | `Mixer`, which mixes interleaved I/Q blocks with the oscillator, and the helpers `mix_sub_dsp`, `mix_add_dsp` |
| `hlsdsp.duc` | `Duc`, the complete up-converter chain, `impulse_response`, and `main` |
| `hlsdsp.window` | `WindowType` (`RECT`, `HANN`, `HAMMING`, `GAUSSIAN`), `coef_calc`, `coefficient_table`, `apply_window` |
| `hlsdsp.sliding_window` | `SlidingWindow`, producing windows that are half the previous block and half the new one |
| `hlsdsp.reference_fft` | `bitrev_sort`, `gen_twiddles`, `fft_rad2_dit_nr`: a scaled fixed-point radix-2 FFT with bit-reversed output |
| `hlsdsp.realfft` | `RealToXfft`, `XfftSample` and `SignalGenerator` for the real-FFT front end, and `main` |

## Installing

```
pip install .
```

The package has no run-time dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

An FIR filter takes one sample per call and returns the filtered output:

```python
from hlsdsp.fir import FirFilter

taps = [0, -10, -9, 23, 56, 63, 56, 23, -9, -10, 0]
fir = FirFilter(taps)
outputs = [fir.step(x) for x in range(1, 20)]
```

The up-converter takes 96 calls per input sample, 48 for the I channel
followed by 48 for the Q channel:

```python
from hlsdsp.duc import Duc, impulse_response

duc = Duc()
dout_i, dout_q = duc.step(0, 6628)

i_rows, q_rows = impulse_response(samples=33, freq=6628)
```

The real-FFT front end turns blocks of 512 real samples into 512 windowed
complex words:

```python
from hlsdsp.realfft import RealToXfft, SignalGenerator

generator = SignalGenerator()
frontend = RealToXfft()
words = frontend.process(generator.generate(512))
```

`Dds`, `FirFilter` have a `reset` method; the other blocks start fresh
when a new object is created. Separate objects never share state.

## Commands

Each command runs with no arguments.

```
hlsdsp-fir [--output out.dat] [--golden out.gold.dat] [--samples 600]
```

Filters a triangular ramp with the default 11 taps, writes
`index input output` lines to the output file and compares them, ignoring
whitespace, with the golden file. Prints PASS or FAIL and exits with 0 or 1.

```
hlsdsp-duc [--output-i duc_i.dat] [--output-q duc_q.dat]
           [--golden-i golden/duc_i.dat] [--golden-q golden/duc_q.dat]
           [--samples 33] [--freq 6628]
```

Runs an impulse through the up-converter, writes the I and Q outputs and
compares each with its golden file. Exits with 0 when both match, else 1.

```
hlsdsp-realfft [--tests 8] [--tvin realfft_fe_tvin.dat] [--tvout realfft_fft_tvout.dat]
```

Generates a five-tone test signal, passes it through the windowing front
end and the reference FFT, writes the input samples and the FFT outputs
as hex words, and prints every bin of the last test.

## What it does not do

- There is no back end that extracts the real-signal spectrum from the
  half-length complex FFT: `hlsdsp-realfft` stops at the reference FFT
  output, which is in bit-reversed order.
- `Dds` has no random-dither mode; only plain truncation and
  `noise_shape` are available.
- The golden files the `hlsdsp-fir` and `hlsdsp-duc` commands compare
  against are not included; supply them yourself.