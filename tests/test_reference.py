import math

import pytest

from labkit import reference


def test_u2f_of_one_pattern():
    assert reference.u2f(0x3F800000) == 1.0


def test_f2u_of_one():
    assert reference.f2u(1.0) == 0x3F800000


@pytest.mark.parametrize(
    "pattern",
    [0, 1, 0x00800000, 0x007FFFFF, 0x3F800000, 0x7F000000, 0x7F800000, 0xFF800000, 0x80000001],
)
def test_pattern_round_trip(pattern):
    assert reference.f2u(reference.u2f(pattern)) == pattern


def test_f2u_overflow_gives_infinity():
    assert reference.f2u(1e300) == 0x7F800000
    assert reference.f2u(-1e300) == 0xFF800000


def test_u2f_nan_pattern():
    value = reference.u2f(0x7FC00000)
    assert math.isnan(value) is True
    assert reference.f2u(value) == 0x7FC00000


def test_tmin_value():
    assert reference.ref_tmin() == -0x80000000


def test_integer_references():
    assert reference.ref_bit_xor(4, 5) == 1
    assert reference.ref_is_tmax(0x7FFFFFFF) == 1
    assert reference.ref_is_tmax(0x7FFFFFFE) == 0
    assert reference.ref_all_odd_bits(0xAAAAAAAA) == 1
    assert reference.ref_all_odd_bits(0xFFFFFFFD) == 0
    assert reference.ref_negate(1) == -1
    assert reference.ref_negate(reference.ref_tmin()) == reference.ref_tmin()
    assert reference.ref_is_ascii_digit(0x35) == 1
    assert reference.ref_is_ascii_digit(0x3A) == 0
    assert reference.ref_conditional(2, 4, 5) == 4
    assert reference.ref_conditional(0, 4, 5) == 5
    assert reference.ref_is_less_or_equal(4, 5) == 1
    assert reference.ref_is_less_or_equal(5, 4) == 0
    assert reference.ref_logical_neg(3) == 0
    assert reference.ref_logical_neg(0) == 1


@pytest.mark.parametrize(
    "value, expected",
    [(12, 5), (298, 10), (-5, 4), (0, 1), (-1, 1), (0x80000000, 32)],
)
def test_how_many_bits(value, expected):
    assert reference.ref_how_many_bits(value) == expected


def test_float_scale2_keeps_nan():
    assert reference.ref_float_scale2(0x7FC00000) == 0x7FC00000


def test_float_float2int_truncates():
    assert reference.ref_float_float2int(reference.f2u(2.5)) == 2
    assert reference.ref_float_float2int(reference.f2u(-2.5)) == -2


def test_float_float2int_out_of_range():
    tmin = reference.ref_tmin()
    assert reference.ref_float_float2int(reference.f2u(3e9)) == tmin
    assert reference.ref_float_float2int(0x7F800000) == tmin
    assert reference.ref_float_float2int(0x7FC00000) == tmin


def test_float_power2_matches_exact_powers():
    for x in range(-149, 128):
        assert reference.ref_float_power2(x) == reference.f2u(2.0**x), x


def test_float_power2_extremes():
    assert reference.ref_float_power2(0) == 0x3F800000
    assert reference.ref_float_power2(200) == 0x7F800000
    assert reference.ref_float_power2(-200) == 0
    assert reference.ref_float_power2(-0x80000000) == 0