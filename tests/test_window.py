import pytest

from hlsdsp.fixedpoint import COEFF_FORMAT, DIN_FORMAT
from hlsdsp.window import WindowType, apply_window, coef_calc, coefficient_table


def test_rect_is_one():
    assert all(coef_calc(64, WindowType.RECT, i) == 1.0 for i in range(64))


def test_hann_ends_and_centre():
    assert coef_calc(64, WindowType.HANN, 0) == pytest.approx(0.0)
    assert coef_calc(64, WindowType.HANN, 32) == pytest.approx(1.0)


def test_gaussian_peaks_at_centre():
    values = [coef_calc(64, WindowType.GAUSSIAN, i) for i in range(64)]
    assert max(values) == values[32]
    assert values[32] == pytest.approx(1.0)


@pytest.mark.parametrize("window_type", [WindowType.HANN, WindowType.HAMMING])
def test_raised_cosine_windows_are_symmetric(window_type):
    for k in range(1, 32):
        assert coef_calc(64, window_type, k) == pytest.approx(
            coef_calc(64, window_type, 64 - k)
        )


def test_window_type_accepts_integer():
    assert coef_calc(16, 1, 5) == coef_calc(16, WindowType.HANN, 5)


def test_invalid_size():
    with pytest.raises(ValueError):
        coef_calc(0, WindowType.HANN, 0)


def test_coefficient_table_is_quantised_and_saturated():
    table = coefficient_table(1024, WindowType.HAMMING)
    assert len(table) == 1024
    assert all(COEFF_FORMAT.quantize(v) == v for v in table)
    rect = coefficient_table(8, WindowType.RECT)
    assert rect == [COEFF_FORMAT.from_raw(COEFF_FORMAT.max_raw)] * 8


def test_apply_window_with_exact_products():
    samples = [0.5, -0.5, 0.25, 0.0]
    out = apply_window(samples, [1.0 - 2 ** -15 + 2 ** -15] * 0 + [0.5] * 4)
    assert out == [s * 0.5 for s in samples]


def test_apply_window_quantises_output():
    table = coefficient_table(32, WindowType.HANN)
    samples = [DIN_FORMAT.quantize(0.3) for _ in range(32)]
    out = apply_window(samples, table)
    assert all(DIN_FORMAT.quantize(v) == v for v in out)
    assert all(abs(v) <= abs(s) for v, s in zip(out, samples))


def test_apply_window_length_mismatch():
    with pytest.raises(ValueError):
        apply_window([0.1, 0.2], [1.0])