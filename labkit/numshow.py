"""Show the structure of 32-bit integers and single-precision floats."""

import math
import re
import sys

from labkit.reference import f2u, u2f

_MASK32 = 0xFFFFFFFF
_FRAC_SIZE = 23
_EXP_SIZE = 8
_BIAS = (1 << (_EXP_SIZE - 1)) - 1
_FRAC_MASK = (1 << _FRAC_SIZE) - 1
_EXP_MASK = (1 << _EXP_SIZE) - 1

_INT_PREFIX = re.compile(
    r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))"
)
_LLONG_MIN = -(1 << 63)
_LLONG_MAX = (1 << 63) - 1


def _leading_integer(text):
    """Parse the leading integer of text with automatic base; 0 if none."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    sign, hex_digits, oct_digits, dec_digits = match.groups()
    if hex_digits is not None:
        value = int(hex_digits, 16)
    elif oct_digits is not None:
        value = int(oct_digits, 8)
    else:
        value = int(dec_digits)
    if sign == "-":
        value = -value
    return max(_LLONG_MIN, min(_LLONG_MAX, value))


def _parse_float(text):
    if not text or "_" in text or text[-1].isspace():
        raise ValueError(f"not a floating point number: {text!r}")
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float.fromhex(text)
    except ValueError:
        raise ValueError(f"not a floating point number: {text!r}") from None


def parse_num_val(text, allow_float):
    """Return the 32-bit pattern for a hex, decimal or float string.

    Raises ValueError if the text cannot be read as a 32-bit value.
    """
    is_hex = False
    is_float = False
    for ch in text:
        if ch in "xX":
            is_hex = True
        elif ch in "eE":
            if not is_hex:
                is_float = True
        elif ch == ".":
            is_float = True

    if is_float:
        if not allow_float:
            raise ValueError(f"floating point value not allowed: {text!r}")
        return f2u(_parse_float(text))

    value = _leading_integer(text)
    if (value >> 31) not in (-1, 0, 1):
        raise ValueError(f"value does not fit in 32 bits: {text!r}")
    return value & _MASK32


def show_float(uf):
    """Return a description of the single-precision float with pattern uf."""
    uf &= _MASK32
    value = u2f(uf)
    exp = (uf >> _FRAC_SIZE) & _EXP_MASK
    frac = uf & _FRAC_MASK
    sign = (uf >> 31) & 1

    if math.isnan(value):
        value_text = "-nan" if sign else "nan"
    else:
        value_text = "%.10g" % value

    lines = [
        "",
        f"Floating point value {value_text}",
        "Bit Representation 0x%.8x, sign = %x, exponent = 0x%.2x, fraction = 0x%.6x"
        % (uf, sign, exp, frac),
    ]
    if exp == _EXP_MASK:
        if frac == 0:
            lines.append(f"{'-' if sign else '+'}Infinity")
        else:
            lines.append("Not-A-Number")
    else:
        denorm = exp == 0
        uexp = 1 - _BIAS if denorm else exp - _BIAS
        mantissa = frac if denorm else frac + (1 << _FRAC_SIZE)
        fman = mantissa / (1 << _FRAC_SIZE)
        lines.append(
            "%s.  %c%.10f X 2^(%d)"
            % ("Denormalized" if denorm else "Normalized", "-" if sign else "+", fman, uexp)
        )
    return "\n".join(lines) + "\n"


def show_int(uf):
    """Return the hex, signed and unsigned views of a 32-bit pattern."""
    uf &= _MASK32
    signed = uf - (1 << 32) if uf & 0x80000000 else uf
    return "Hex = 0x%.8x,\tSigned = %d,\tUnsigned = %u\n" % (uf, signed, uf)


def _fshow_usage():
    sys.stdout.write(
        "Usage: fshow val1 val2 ...\n"
        "Values may be given as hex patterns or as floating point numbers\n"
    )


def _ishow_usage():
    sys.stdout.write("Usage: ishow val1 val2 ...\nValues may be given in hex or decimal\n")


def fshow_main(argv=None):
    """Print the float structure of each argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _fshow_usage()
        return 0
    for text in args:
        try:
            uf = parse_num_val(text, True)
        except ValueError:
            sys.stdout.write(f"Invalid 32-bit number: '{text}'\n")
            _fshow_usage()
            return 0
        sys.stdout.write(show_float(uf))
    return 0


def ishow_main(argv=None):
    """Print the integer views of each argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _ishow_usage()
        return 0
    for text in args:
        try:
            uf = parse_num_val(text, False)
        except ValueError:
            sys.stdout.write(f"Cannot convert '{text}' to 32-bit number\n")
            continue
        sys.stdout.write(show_int(uf))
    return 0