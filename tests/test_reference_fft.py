import math

import pytest

from hlsdsp.fixedpoint import FixedFormat
from hlsdsp.reference_fft import bitrev_sort, fft_rad2_dit_nr, gen_twiddles

IO = FixedFormat(16, 1)


def test_bitrev_sort_eight_points():
    assert bitrev_sort(range(8)) == [0, 4, 2, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("n", [1, 2, 4, 16, 64])
def test_bitrev_sort_is_involution(n):
    data = [f"v{i}" for i in range(n)]
    once = bitrev_sort(data)
    assert sorted(once) == sorted(data)
    assert bitrev_sort(once) == data


def test_bitrev_sort_empty():
    assert bitrev_sort([]) == []


@pytest.mark.parametrize("n", [3, 6, 12])
def test_bitrev_sort_rejects_non_power_of_two(n):
    with pytest.raises(ValueError):
        bitrev_sort(range(n))


def test_twiddles_saturate_at_one():
    w = gen_twiddles(8)
    assert len(w) == 4
    assert w[0] == complex(1 - 2**-15, 0.0)
    assert w[2] == complex(0.0, -1.0)


def test_twiddles_reject_bad_size():
    with pytest.raises(ValueError):
        gen_twiddles(0)


def test_fft_of_constant_concentrates_in_bin_zero():
    out = fft_rad2_dit_nr([0.5] * 8)
    assert out[0].real == pytest.approx(0.5, abs=2e-3)
    for value in out[1:]:
        assert abs(value) < 2e-3


def test_fft_of_impulse_is_flat():
    x = [0.5] + [0.0] * 7
    out = fft_rad2_dit_nr(x)
    for value in out:
        assert value.real == pytest.approx(0.5 / 8, abs=1e-3)
        assert value.imag == pytest.approx(0.0, abs=1e-3)


def test_fft_of_tone_in_natural_order():
    amplitude = 0.5
    x = [amplitude * math.cos(2 * math.pi * n / 8) for n in range(8)]
    natural = bitrev_sort(fft_rad2_dit_nr(x))
    assert natural[1].real == pytest.approx(amplitude / 2, abs=2e-3)
    assert natural[7].real == pytest.approx(amplitude / 2, abs=2e-3)
    for k in (0, 2, 3, 4, 5, 6):
        assert abs(natural[k]) < 2e-3


def test_fft_outputs_are_on_io_grid():
    x = [complex(0.25 * (-1) ** n, 0.1 * n / 16) for n in range(16)]
    for value in fft_rad2_dit_nr(x):
        assert IO.quantize(value.real) == value.real
        assert IO.quantize(value.imag) == value.imag


def test_single_point_passes_through_quantized():
    out = fft_rad2_dit_nr([complex(0.25, -0.5)])
    assert out == [complex(0.25, -0.5)]


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft_rad2_dit_nr([0.0] * 6)