"""Straightforward reference versions of the data-lab puzzles."""

import math
import struct

_MASK32 = 0xFFFFFFFF
_POS_INF_BITS = 0x7F800000
_NEG_INF_BITS = 0xFF800000


def _s32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def u2f(u):
    """Interpret a 32-bit pattern as a single-precision float."""
    return struct.unpack("<f", struct.pack("<I", u & _MASK32))[0]


def f2u(f):
    """Round f to single precision and return its 32-bit pattern."""
    try:
        return struct.unpack("<I", struct.pack("<f", f))[0]
    except OverflowError:
        return _POS_INF_BITS if f > 0 else _NEG_INF_BITS


def _f32(value):
    return u2f(f2u(value))


def ref_bit_xor(x, y):
    """Return x ^ y."""
    return _s32(x) ^ _s32(y)


def ref_tmin():
    """Return the minimum 32-bit integer."""
    return _s32(0x80000000)


def ref_is_tmax(x):
    """Return 1 if x is the maximum 32-bit integer."""
    return int(_s32(x) == 0x7FFFFFFF)


def ref_all_odd_bits(x):
    """Return 1 if all odd-numbered bits of x are set."""
    x = _s32(x)
    return int(all(x & (1 << i) for i in range(1, 32, 2)))


def ref_negate(x):
    """Return -x with 32-bit wrap-around."""
    return _s32(-_s32(x))


def ref_is_ascii_digit(x):
    """Return 1 if x is the code of an ASCII digit."""
    return int(0x30 <= _s32(x) <= 0x39)


def ref_conditional(x, y, z):
    """Return y if x is non-zero, else z."""
    return _s32(y) if _s32(x) else _s32(z)


def ref_is_less_or_equal(x, y):
    """Return 1 if x <= y."""
    return int(_s32(x) <= _s32(y))


def ref_logical_neg(x):
    """Return !x."""
    return int(_s32(x) == 0)


def ref_how_many_bits(x):
    """Return the number of bits needed to hold x in two's complement."""
    x = _s32(x)
    if x < 0:
        x = -x - 1
    return x.bit_length() + 1


def ref_float_scale2(uf):
    """Return the pattern of 2*f, or uf itself when f is NaN."""
    f = u2f(uf)
    if math.isnan(f):
        return uf & _MASK32
    return f2u(2 * f)


def ref_float_float2int(uf):
    """Return (int) f; NaN, infinities and out-of-range values give tmin."""
    f = u2f(uf)
    if math.isnan(f) or math.isinf(f) or not -2.0**31 <= f < 2.0**31:
        return ref_tmin()
    return int(f)


def ref_float_power2(x):
    """Return the pattern of 2.0**x computed by single-precision multiplication."""
    x = _s32(x)
    if x == ref_tmin():
        return 0
    result = 1.0
    p2 = 2.0
    if x < 0:
        x = -x
        p2 = 0.5
    while x > 0:
        if x & 1:
            result = _f32(result * p2)
        p2 = _f32(p2 * p2)
        x >>= 1
    return f2u(result)