"""Small command-line and file exercises: option parsing and reading numbers."""

import getopt
import re
import sys

_MASK32 = 0xFFFFFFFF
_SUM_INPUT = re.compile(r"a\s*=\s*([+-]?\d+)\s*b\s*=\s*([+-]?\d+)")


def _s32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return _s32(int(match.group(1))) if match else 0


def add_main(argv=None):
    """Add -a and -b (defaults 15000 and 213), negating the sum with -n."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, _ = getopt.gnu_getopt(args, "na:b:")
    except getopt.GetoptError:
        return 1

    negate = False
    a, b = 15000, 213
    for flag, value in opts:
        if flag == "-n":
            negate = True
        elif flag == "-a":
            a = _atoi(value)
        elif flag == "-b":
            b = _atoi(value)

    c = _s32(a + b)
    sys.stdout.write(f"{a} + {b} = {c}\n")
    if negate:
        negated = _s32(-c)
        sys.stdout.write(f"Negating {c} yields {negated}\n")
        c = negated
    sys.stdout.write(f"The result is {c}.\n")
    return 0


def sum_files(in_path, out_path):
    """Read "a = <n>" and "b = <n>" from in_path, write their sum to out_path.

    Returns the sum. Raises ValueError if the input does not follow that format.
    """
    with open(in_path) as infile:
        text = infile.read()
    match = _SUM_INPUT.match(text)
    if match is None:
        raise ValueError(f"{in_path} does not follow required format")
    total = _s32(int(match.group(1)) + int(match.group(2)))
    with open(out_path, "w") as outfile:
        outfile.write(f"a + b = {total}\n")
    return total