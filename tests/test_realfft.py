import pytest

from hlsdsp.fixedpoint import DIN_FORMAT, REAL_FFT_LEN
from hlsdsp.realfft import RealToXfft, SignalGenerator, XfftSample, main
from hlsdsp.window import WindowType, coefficient_table

HALF = REAL_FFT_LEN // 2


def test_first_generated_sample_saturates():
    samples = SignalGenerator().generate(HALF)
    assert samples[0] == 1 - 2**-15


def test_generated_samples_are_in_range_and_on_grid():
    samples = SignalGenerator().generate(HALF)
    assert len(samples) == HALF
    for s in samples:
        assert -1.0 <= s < 1.0
        assert DIN_FORMAT.quantize(s) == s


def test_generator_is_deterministic_and_keeps_time():
    a = SignalGenerator()
    b = SignalGenerator()
    assert a.generate(HALF) == b.generate(HALF)
    assert a.generate(HALF) == b.generate(HALF)
    assert a.t == 2 * HALF


def test_generator_rejects_negative_count():
    with pytest.raises(ValueError):
        SignalGenerator().generate(-1)


def test_frontend_frame_shape_and_last_flag():
    frame = RealToXfft().process([0.25] * HALF)
    assert len(frame) == HALF
    assert [w.last for w in frame].count(True) == 1
    assert frame[-1].last is True
    assert all(isinstance(w, XfftSample) for w in frame)


def test_first_frame_starts_with_zeros():
    frame = RealToXfft().process([0.5] * HALF)
    for word in frame[: HALF // 2]:
        assert word.data == complex(0.0, 0.0)


def test_second_frame_windows_previous_block():
    frontend = RealToXfft()
    frontend.process([0.5] * HALF)
    frame = frontend.process([0.0] * HALF)
    coeffs = coefficient_table(REAL_FFT_LEN, WindowType.HAMMING)
    assert frame[1].data == complex(
        DIN_FORMAT.quantize(coeffs[2] * 0.5), DIN_FORMAT.quantize(coeffs[3] * 0.5)
    )
    for word in frame[HALF // 2 :]:
        assert word.data == complex(0.0, 0.0)


def test_frame_is_symmetric_for_constant_input():
    frontend = RealToXfft()
    frontend.process([0.5] * HALF)
    frame = frontend.process([0.5] * HALF)
    flat = [v for w in frame for v in (w.data.real, w.data.imag)]
    assert flat[1:REAL_FFT_LEN] == flat[1:REAL_FFT_LEN][::-1]


def test_frontend_rejects_wrong_block_length():
    with pytest.raises(ValueError):
        RealToXfft().process([0.0] * (HALF - 1))


def test_main_writes_vectors(tmp_path, capsys):
    tvin = tmp_path / "tvin.dat"
    tvout = tmp_path / "tvout.dat"
    assert main(["--tests", "1", "--tvin", str(tvin), "--tvout", str(tvout)]) == 0
    in_lines = tvin.read_text().splitlines()
    out_lines = tvout.read_text().splitlines()
    assert len(in_lines) == HALF
    assert in_lines[0] == "7fff"
    assert all(len(line) == 4 for line in in_lines)
    assert len(out_lines) == HALF
    assert all(len(line) == 8 for line in out_lines)
    printed = capsys.readouterr().out
    assert printed.count("mag =") == HALF
    assert "*** TEST COMPLETE ***" in printed