"""Test harness that checks the data-lab puzzle solutions against reference versions."""

import getopt
import itertools
import math
import random
import re
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from labkit import bits, reference
from labkit.numshow import parse_num_val

TIMEOUT_LIMIT = 10
TEST_RANGE = 500000
MAX_TEST_VALS = 13 * TEST_RANGE

TMIN = -(1 << 31)
TMAX = (1 << 31) - 1

_MASK32 = 0xFFFFFFFF
_INT_RANGES = ((TMIN, TMAX), (TMIN, TMAX), (TMIN, TMAX))
_FLOAT_RANGES = ((1, 1), (1, 1), (1, 1))

_SMALLEST_NORM = 0x00800000
_ONE = 0x3F800000
_LARGEST_NORM = 0x7F000000
_INF = 0x7F800000
_NAN = 0x7FC00000
_SIGN = 0x80000000


def _s32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _fmt(value):
    return f"{_s32(value)}[0x{value & _MASK32:x}]"


@dataclass(frozen=True)
class Puzzle:
    """A puzzle: its solution, reference, argument count, rules and rating."""

    name: str
    solution: Callable[..., int]
    reference: Callable[..., int]
    args: int
    ops: str
    op_limit: int
    rating: int
    arg_ranges: Tuple[Tuple[int, int], ...] = _INT_RANGES


@dataclass
class BtestOptions:
    """Settings for a harness run.

    ``puzzles`` selects the puzzle table to run; None means the standard one.
    """

    grade: bool = False
    timeout_limit: int = TIMEOUT_LIMIT
    test_fname: Optional[str] = None
    fixed_args: Tuple[Optional[int], Optional[int], Optional[int]] = (None, None, None)
    global_rating: int = 0
    test_range: int = TEST_RANGE
    seed: Optional[int] = None
    puzzles: Optional[Tuple[Puzzle, ...]] = None


PUZZLES = (
    Puzzle("bitXor", bits.bit_xor, reference.ref_bit_xor, 2, "& ~", 14, 1),
    Puzzle("tmin", bits.tmin, reference.ref_tmin, 0, "! ~ & ^ | + << >>", 4, 1),
    Puzzle("isTmax", bits.is_tmax, reference.ref_is_tmax, 1, "! ~ & ^ | +", 10, 1),
    Puzzle("allOddBits", bits.all_odd_bits, reference.ref_all_odd_bits, 1,
           "! ~ & ^ | + << >>", 12, 2),
    Puzzle("negate", bits.negate, reference.ref_negate, 1, "! ~ & ^ | + << >>", 5, 2),
    Puzzle("isAsciiDigit", bits.is_ascii_digit, reference.ref_is_ascii_digit, 1,
           "! ~ & ^ | + << >>", 15, 3),
    Puzzle("conditional", bits.conditional, reference.ref_conditional, 3,
           "! ~ & ^ | << >>", 16, 3),
    Puzzle("isLessOrEqual", bits.is_less_or_equal, reference.ref_is_less_or_equal, 2,
           "! ~ & ^ | + << >>", 24, 3),
    Puzzle("logicalNeg", bits.logical_neg, reference.ref_logical_neg, 1,
           "~ & ^ | + << >>", 12, 4),
    Puzzle("howManyBits", bits.how_many_bits, reference.ref_how_many_bits, 1,
           "! ~ & ^ | + << >>", 90, 4),
    Puzzle("floatScale2", bits.float_scale2, reference.ref_float_scale2, 1,
           "$", 30, 4, _FLOAT_RANGES),
    Puzzle("floatFloat2Int", bits.float_float2int, reference.ref_float_float2int, 1,
           "$", 30, 4, _FLOAT_RANGES),
    Puzzle("floatPower2", bits.float_power2, reference.ref_float_power2, 1,
           "$", 30, 4, _FLOAT_RANGES),
)


def _random_val(lo, hi, rng):
    weight = rng.random()
    return int(lo * (1 - weight) + hi * weight)


def _float_vals(test_range):
    test_range = min(test_range, 1 << 23)
    vals = []
    for i in range(test_range):
        vals += [
            i,
            _SIGN | i,
            _SMALLEST_NORM + i,
            _SMALLEST_NORM - i,
            _SIGN | (_SMALLEST_NORM + i),
            _SIGN | (_SMALLEST_NORM - i),
            _ONE + i,
            _ONE - i,
            _SIGN | (_ONE + i),
            _SIGN | (_ONE - i),
            _LARGEST_NORM - i,
            _SIGN | (_LARGEST_NORM - i),
        ]
    vals += [_INF, _SIGN | _INF, _NAN, _SIGN | _NAN]
    return vals


def gen_vals(lo, hi, test_range, rng):
    """Return the argument values used to test a function over [lo, hi].

    The range (1, 1) stands for float bit patterns: values near zero, the
    denorm/norm boundary, one and the largest norm, plus infinities and NaNs.
    """
    if lo == 1 and hi == 1:
        return _float_vals(test_range)

    if hi - MAX_TEST_VALS <= lo:
        return list(range(lo, hi + 1))

    vals = []
    for i in range(test_range):
        vals.append(lo + i)
        vals.append(hi - i)
        if lo <= i <= hi:
            vals.append(i)
        if lo <= -i <= hi:
            vals.append(-i)
        vals.append(_random_val(lo, hi, rng))
    return vals


def _arg_ranges(args, test_range):
    if args == 1:
        ranges = [test_range, 0, 0]
    elif args == 2:
        root = int(math.pow(test_range, 0.5))
        ranges = [root, root, 0]
    else:
        root = int(math.pow(test_range, 0.333))
        ranges = [root, root, root]
    return [max(r, 1) for r in ranges]


def test_function(puzzle, options, rng):
    """Check a puzzle's solution against its reference.

    Returns the number of errors and the messages to report. Testing stops
    at the first mismatch.
    """
    if not 0 <= puzzle.args <= 3:
        raise ValueError(
            f"Configuration error: invalid number of args ({puzzle.args}) "
            f"for function {puzzle.name}"
        )

    ranges = _arg_ranges(puzzle.args, options.test_range)
    arg_vals = []
    for i in range(puzzle.args):
        fixed = options.fixed_args[i]
        if fixed is not None:
            arg_vals.append([fixed])
        else:
            lo, hi = puzzle.arg_ranges[i]
            arg_vals.append(gen_vals(lo, hi, ranges[i], rng))

    deadline = None
    if options.timeout_limit > 0:
        deadline = time.monotonic() + options.timeout_limit

    for call_args in itertools.product(*arg_vals):
        if deadline is not None and time.monotonic() > deadline:
            return 1, [
                f"ERROR: Test {puzzle.name} failed.\n"
                f"  Timed out after {options.timeout_limit} secs "
                f"(probably infinite loop)"
            ]
        result = _s32(puzzle.solution(*call_args))
        expected = _s32(puzzle.reference(*call_args))
        if result != expected:
            messages = []
            if not options.grade:
                shown = ",".join(_fmt(a) for a in call_args)
                messages.append(
                    f"ERROR: Test {puzzle.name}({shown}) failed...\n"
                    f"...Gives {_fmt(result)}. Should be {_fmt(expected)}"
                )
            return 1, messages
    return 0, []


def run_tests(options, out=None):
    """Run the selected puzzles, write a score table and return the error count."""
    out = sys.stdout if out is None else out
    puzzles = PUZZLES if options.puzzles is None else options.puzzles
    rng = random.Random(options.seed)
    errors = 0
    points = 0.0
    max_points = 0.0

    out.write("Score\tRating\tErrors\tFunction\n")
    for puzzle in puzzles:
        if options.test_fname is not None and puzzle.name != options.test_fname:
            continue
        rating = options.global_rating or puzzle.rating
        terrors, messages = test_function(puzzle, options, rng)
        for message in messages:
            out.write(message + "\n")
        errors += terrors
        tpoints = rating * (1.0 if terrors == 0 else 0.0)
        points += tpoints
        max_points += rating
        if options.grade or terrors < 1:
            out.write(" %.0f\t%d\t%d\t%s\n" % (tpoints, rating, terrors, puzzle.name))

    out.write("Total points: %.0f/%.0f\n" % (points, max_points))
    return errors


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _usage(out):
    out.write(
        "Usage: btest [-hg] [-r <n>] [-f <name> [-1|-2|-3 <val>]*] [-T <time limit>]\n"
        "  -1 <val>  Specify first function argument\n"
        "  -2 <val>  Specify second function argument\n"
        "  -3 <val>  Specify third function argument\n"
        "  -f <name> Test only the named function\n"
        "  -g        Compact output for grading (with no error msgs)\n"
        "  -h        Print this message\n"
        "  -r <n>    Give uniform weight of n for all problems\n"
        "  -T <lim>  Set timeout limit to lim\n"
    )


def main(argv=None):
    """Command-line entry point; returns the process exit status."""
    args: Sequence[str] = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    try:
        opts, _ = getopt.gnu_getopt(list(args), "hgf:r:T:1:2:3:")
    except getopt.GetoptError:
        _usage(out)
        return 1

    options = BtestOptions()
    fixed = [None, None, None]
    for flag, value in opts:
        if flag == "-h":
            _usage(out)
            return 1
        if flag == "-g":
            options.grade = True
        elif flag == "-f":
            options.test_fname = value
        elif flag == "-r":
            options.global_rating = _atoi(value)
            if options.global_rating < 0:
                _usage(out)
                return 1
        elif flag in ("-1", "-2", "-3"):
            try:
                fixed[int(flag[1]) - 1] = parse_num_val(value, True)
            except ValueError:
                out.write(f"Bad argument '{value}'\n")
                return 0
        elif flag == "-T":
            options.timeout_limit = _atoi(value)
    options.fixed_args = tuple(fixed)

    run_tests(options, out)
    return 0