import pytest

from hlsdsp.mac import mac, mac1, mac2, mult, srrc_mac, symtap

SMALL = [(0, 0), (3, 7), (-5, 11), (69475, -3719), (-131072, 131071), (131071, 131071)]


@pytest.mark.parametrize("c,d", SMALL)
def test_mult_exact_in_range(c, d):
    assert mult(c, d) == c * d


def test_mult_accepts_19_bit_operand():
    assert mult(131071, 262143) == 131071 * 262143
    assert mult(-131072, -262144) == (-131072) * (-262144)


def test_mult_wraps_coefficient_to_18_bits():
    assert mult(1 << 17, 1) == -(1 << 17)


@pytest.mark.parametrize("c,d", SMALL)
@pytest.mark.parametrize("s", [0, 1, -1000, 1 << 30])
def test_macs_exact_in_range(c, d, s):
    expected = c * d + s
    assert srrc_mac(c, d, s) == expected
    assert mac1(c, d, s) == expected
    assert mac2(c, d, s) == expected
    assert mac(c, d, s) == expected


def test_mac_accumulator_widths():
    big = (1 << 37) - 1
    assert mac1(1, 1, big) == -(1 << 37)
    assert mac2(1, 1, big) == mac1(1, 1, big)
    assert mac(1, 1, big) == big + 1
    assert srrc_mac(1, 1, big) == mac1(1, 1, big)


@pytest.mark.parametrize("c,d", SMALL)
def test_macs_are_commutative_in_operands(c, d):
    assert mac(c, d, 9) == mac(d, c, 9)
    assert srrc_mac(c, d, -9) == srrc_mac(d, c, -9)


@pytest.mark.parametrize("a,b,c", [(1, 2, 3), (-7, 4, 100), (131071, 131071, 2), (-131072, -131072, -1)])
def test_symtap_is_preadded_mult(a, b, c):
    assert symtap(a, b, c) == mult(c, a + b)
    assert symtap(a, b, c) == (a + b) * c


def test_symtap_symmetric():
    assert symtap(1000, -250, 77) == symtap(-250, 1000, 77)