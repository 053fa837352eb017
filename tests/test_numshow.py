import pytest

from labkit import numshow
from labkit.reference import f2u


def test_parse_hex_pattern():
    assert numshow.parse_num_val("0x3f800000", True) == 0x3F800000


def test_parse_float_text():
    assert numshow.parse_num_val("1.0", True) == 0x3F800000
    assert numshow.parse_num_val("1e2", True) == f2u(100.0)


def test_parse_negative_decimal_wraps():
    assert numshow.parse_num_val("-1", False) == 0xFFFFFFFF


def test_parse_full_unsigned_range():
    assert numshow.parse_num_val("0xffffffff", False) == 0xFFFFFFFF


def test_parse_rejects_too_wide():
    with pytest.raises(ValueError):
        numshow.parse_num_val("0x100000000", True)


def test_parse_rejects_float_when_not_allowed():
    with pytest.raises(ValueError):
        numshow.parse_num_val("1.5", False)


def test_parse_rejects_bad_float():
    with pytest.raises(ValueError):
        numshow.parse_num_val("1.5.5", True)


def test_parse_octal_and_hex_e():
    assert numshow.parse_num_val("010", False) == 8
    assert numshow.parse_num_val("0x1e", False) == 0x1E


def test_show_float_one():
    text = numshow.show_float(0x3F800000)
    assert "Floating point value 1\n" in text
    assert "Bit Representation 0x3f800000, sign = 0, exponent = 0x7f, fraction = 0x000000" in text
    assert "Normalized.  +1.0000000000 X 2^(0)" in text


def test_show_float_specials():
    assert "+Infinity" in numshow.show_float(0x7F800000)
    assert "-Infinity" in numshow.show_float(0xFF800000)
    assert "Not-A-Number" in numshow.show_float(0x7FC00000)


def test_show_float_denormal():
    assert "Denormalized." in numshow.show_float(1)


def test_show_int_all_ones():
    expected = "Hex = 0xffffffff,\tSigned = -1,\tUnsigned = %d\n" % 0xFFFFFFFF
    assert numshow.show_int(0xFFFFFFFF) == expected


def test_fshow_main_without_args_prints_usage(capsys):
    assert numshow.fshow_main([]) == 0
    assert "Usage: fshow val1 val2 ..." in capsys.readouterr().out


def test_fshow_main_stops_on_invalid(capsys):
    assert numshow.fshow_main(["1.0", "1.5.5", "2.0"]) == 0
    out = capsys.readouterr().out
    assert "Invalid 32-bit number: '1.5.5'" in out
    assert "0x40000000" not in out
    assert "0x3f800000" in out


def test_ishow_main_continues_after_error(capsys):
    assert numshow.ishow_main(["1.5", "0x10"]) == 0
    out = capsys.readouterr().out
    assert "Cannot convert '1.5' to 32-bit number" in out
    assert numshow.show_int(0x10) in out