"""Set-associative cache simulator with LRU replacement driven by memory traces."""

import getopt
import re
import sys

_MASK64 = (1 << 64) - 1
_RECORD = re.compile(r"\s*(\S+)\s+(?:0[xX])?([0-9a-fA-F]+),\s*([+-]?\d+)\s*")


class CacheSimulator:
    """A cache of 2**set_bits sets, each holding `lines` lines, with LRU eviction."""

    def __init__(self, set_bits, lines, block_bits):
        if (
            set_bits <= 0
            or lines <= 0
            or block_bits <= 0
            or set_bits + block_bits > 64
        ):
            raise ValueError(
                f"invalid cache geometry: s={set_bits} E={lines} b={block_bits}"
            )
        self.set_bits = set_bits
        self.lines = lines
        self.block_bits = block_bits
        self.hits = 0
        self.misses = 0
        self.evictions = 0
        self._clock = 0
        self._sets = {}

    def _tick(self):
        self._clock += 1
        return self._clock

    def access(self, addr):
        """Touch the block holding addr; return True on a hit."""
        addr &= _MASK64
        tag = addr >> (self.set_bits + self.block_bits)
        index = (addr >> self.block_bits) & ((1 << self.set_bits) - 1)
        ways = self._sets.setdefault(index, {})

        if tag in ways:
            self.hits += 1
            ways[tag] = self._tick()
            return True

        self.misses += 1
        if len(ways) >= self.lines:
            victim = min(ways, key=ways.get)
            del ways[victim]
            self.evictions += 1
        ways[tag] = self._tick()
        return False

    def run(self, records, verbose=False):
        """Replay (op, addr, size) records and return (hits, misses, evictions).

        Instruction loads ('I') are skipped; a modify ('M') is a load
        followed by a store, so its second half always hits.
        """
        for op, addr, size in records:
            if op.startswith("I"):
                continue
            if verbose:
                sys.stdout.write("%s %x,%d \n" % (op, addr, size))
            self.access(addr)
            if op.startswith("M"):
                self.hits += 1
        return self.hits, self.misses, self.evictions


def parse_trace(lines):
    """Yield (op, addr, size) from trace lines, stopping at the first malformed one."""
    for line in lines:
        if not line.strip():
            continue
        match = _RECORD.fullmatch(line)
        if match is None:
            return
        op, addr, size = match.groups()
        yield op, int(addr, 16), int(size)


def print_summary(hits, misses, evictions, results_path=".csim_results"):
    """Print the statistics and record them in results_path for grading."""
    sys.stdout.write(f"hits:{hits} misses:{misses} evictions:{evictions}\n")
    with open(results_path, "w") as results:
        results.write(f"{hits} {misses} {evictions}\n")


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _usage():
    sys.stdout.write(
        "Usage: csim [-hv] -s <num> -E <num> -b <num> -t <file>\n"
        "Options:\n"
        "  -h         Print this help message.\n"
        "  -v         Optional verbose flag.\n"
        "  -s <num>   Number of set index bits.\n"
        "  -E <num>   Number of lines per set.\n"
        "  -b <num>   Number of block offset bits.\n"
        "  -t <file>  Trace file.\n"
        "Examples:\n"
        "  linux>  ./csim -s 4 -E 1 -b 4 -t traces/yi.trace\n"
        "  linux>  ./csim-ref -v -s 8 -E 2 -b 4 -t traces/yi.trace\n"
    )


def main(argv=None):
    """Command-line entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, _ = getopt.gnu_getopt(args, "vs:E:b:t:")
    except getopt.GetoptError:
        _usage()
        return 1

    verbose = False
    set_bits = lines = block_bits = -1
    trace_path = None
    for flag, value in opts:
        if flag == "-v":
            verbose = True
        elif flag == "-s":
            set_bits = _atoi(value)
        elif flag == "-E":
            lines = _atoi(value)
        elif flag == "-b":
            block_bits = _atoi(value)
        elif flag == "-t":
            trace_path = value

    if trace_path is None:
        return 1
    try:
        simulator = CacheSimulator(set_bits, lines, block_bits)
    except ValueError:
        return 1

    try:
        with open(trace_path) as trace:
            hits, misses, evictions = simulator.run(parse_trace(trace), verbose)
    except OSError as exc:
        sys.stderr.write(f"csim: cannot open {trace_path}: {exc.strerror}\n")
        return 1

    print_summary(hits, misses, evictions)
    return 0