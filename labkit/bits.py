"""Data-lab puzzle solutions on 32-bit two's-complement ints and float bit patterns."""

_MASK32 = 0xFFFFFFFF


def _s32(value):
    """Wrap an integer to a signed 32-bit value."""
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _u32(value):
    """Wrap an integer to an unsigned 32-bit value."""
    return value & _MASK32


def _not(value):
    """Logical negation yielding 0 or 1."""
    return int(value == 0)


def _bool(value):
    """Double logical negation yielding 0 or 1."""
    return int(value != 0)


def bit_xor(x, y):
    """Return x ^ y built only from ~ and &."""
    x, y = _s32(x), _s32(y)
    return ~(~x & ~y) & ~(x & y)


def tmin():
    """Return the minimum two's-complement 32-bit integer."""
    return _s32(1 << 31)


def is_tmax(x):
    """Return 1 if x is the maximum 32-bit integer, else 0."""
    x = _s32(x)
    succ = _s32(x + 1)
    return _not(~succ ^ x) & _bool(succ)


def all_odd_bits(x):
    """Return 1 if every odd-numbered bit of x is set, else 0."""
    x = _s32(x)
    a = 0xA
    aa = a | a << 4
    aaaa = aa | aa << 8
    mask = _s32(aaaa | aaaa << 16)
    return _not((x & mask) ^ mask)


def negate(x):
    """Return -x with 32-bit wrap-around."""
    return _s32(~_s32(x) + 1)


def is_ascii_digit(x):
    """Return 1 if 0x30 <= x <= 0x39, else 0."""
    x = _s32(x)
    high_ok = _not((x >> 4) ^ 3)
    low_ok = _s32((x & 0xF) + (~10 + 1)) >> 31
    return high_ok & low_ok


def conditional(x, y, z):
    """Return y if x is non-zero, else z."""
    x, y, z = _s32(x), _s32(y), _s32(z)
    mask = _s32(_bool(x) << 31) >> 31
    return (mask & y) | (~mask & z)


def is_less_or_equal(x, y):
    """Return 1 if x <= y, else 0."""
    x, y = _s32(x), _s32(y)
    sign_x = x >> 31
    sign_y = y >> 31
    not_pos_neg = _not(_not(sign_x) & sign_y)
    diff_sign = _s32(x + ~y + 1) >> 31
    return not_pos_neg & ((sign_x & _not(sign_y)) | diff_sign | _not(x ^ y))


def logical_neg(x):
    """Return !x without using the ! operator."""
    x = _s32(x)
    return ((_s32(~x + 1) | x) >> 31) + 1


def how_many_bits(x):
    """Return the minimum number of bits to represent x in two's complement."""
    x = _s32(x)
    sign = x >> 31
    x = (sign & ~x) | (~sign & x)

    bit_16 = _not(_bool(x >> 16) ^ 1) << 4
    x >>= bit_16
    bit_8 = _not(_bool(x >> 8) ^ 1) << 3
    x >>= bit_8
    bit_4 = _not(_bool(x >> 4) ^ 1) << 2
    x >>= bit_4
    bit_2 = _not(_bool(x >> 2) ^ 1) << 1
    x >>= bit_2
    bit_1 = _bool(x >> 1)
    x >>= bit_1
    bit_0 = x

    mask = _s32(_bool(x) << 31) >> 31
    result = 1 + bit_0 + bit_1 + bit_2 + bit_4 + bit_8 + bit_16
    return _not(x) | (mask & result)


def float_scale2(uf):
    """Return the bit pattern of 2*f for the single-precision pattern uf."""
    uf = _u32(uf)
    sign = uf >> 31 & 1
    exp = uf >> 23 & 0xFF
    frac = uf & 0x7FFFFF
    if exp == 0 and frac == 0:
        return uf
    if exp == 0xFF:
        return uf
    if exp == 0:
        frac = _u32(frac << 1)
        return _u32((sign << 31) | frac)
    exp += 1
    return _u32(sign << 31 | exp << 23 | frac)


def float_float2int(uf):
    """Return (int) f for the single-precision pattern uf; out of range gives tmin."""
    uf = _u32(uf)
    sign = uf >> 31 & 1
    exp = uf >> 23 & 0xFF
    frac = uf & 0x7FFFFF

    if exp == 0xFF:
        return tmin()
    if exp == 0:
        return 0

    e = exp - 127
    frac |= 1 << 23

    if e > 31:
        return tmin()
    if e < 0:
        return 0

    if e >= 23:
        frac = _u32(frac << (e - 23))
    else:
        frac >>= 23 - e

    if sign:
        return _s32(~frac + 1)
    return _s32(frac)


def float_power2(x):
    """Return the single-precision bit pattern of 2.0**x."""
    x = _s32(x)
    if x < -149:
        return 0
    if x < -126:
        return _u32(1 << (23 - (-x - 126)))
    if x < 128:
        return _u32((x + 127) << 23)
    return _u32(0xFF << 23)