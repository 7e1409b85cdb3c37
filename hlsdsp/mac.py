"""Multiply and multiply-accumulate primitives sized like DSP slices."""

from __future__ import annotations

from hlsdsp.fixedpoint import FILTER_ACC_WIDTH, wrap_signed


def mult(c: int, d: int) -> int:
    """Multiply an 18-bit ``c`` by a 19-bit ``d`` into 37 bits."""
    product = wrap_signed(c, 18) * wrap_signed(d, 19)
    return wrap_signed(product, 37)


def _product36(c: int, d: int) -> int:
    return wrap_signed(wrap_signed(c, 18) * wrap_signed(d, 18), 36)


def srrc_mac(c: int, d: int, s: int) -> int:
    """Return ``c * d + s`` with a 40-bit sum narrowed to the 38-bit accumulator."""
    total = wrap_signed(_product36(c, d) + wrap_signed(s, 40), 40)
    return wrap_signed(total, FILTER_ACC_WIDTH)


def mac1(c: int, d: int, s: int) -> int:
    """Return ``c * d + s`` for the first interpolation filter (38-bit)."""
    return wrap_signed(_product36(c, d) + wrap_signed(s, FILTER_ACC_WIDTH), FILTER_ACC_WIDTH)


def mac2(c: int, d: int, s: int) -> int:
    """Return ``c * d + s`` for the second interpolation filter (38-bit)."""
    return wrap_signed(_product36(c, d) + wrap_signed(s, FILTER_ACC_WIDTH), FILTER_ACC_WIDTH)


def mac(c: int, d: int, s: int) -> int:
    """Return ``c * d + s`` with a 48-bit accumulator."""
    return wrap_signed(_product36(c, d) + wrap_signed(s, 48), 48)


def symtap(a: int, b: int, c: int) -> int:
    """Symmetric tap: ``(a + b) * c`` with a 19-bit pre-adder."""
    pre = wrap_signed(wrap_signed(a, 18) + wrap_signed(b, 18), 19)
    return mult(c, pre)