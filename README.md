# labkit

A small toolkit for working through classic systems-programming labs in
Python:

- **Bit puzzles** (`labkit.bits`): 32-bit two's-complement and IEEE 754
  single-precision puzzles such as `bit_xor`, `is_tmax`, `how_many_bits`,
  `float_scale2`, `float_float2int` and `float_power2`, together with
  straightforward reference answers in `labkit.reference`.
- **Puzzle checker** (`labkit.btest`): runs every puzzle against its
  reference over many arguments near the interesting boundaries and
  reports a score.
- **Number inspectors** (`labkit.numshow`): show how a 32-bit pattern
  reads as a float or as a signed/unsigned integer.
- **Cache simulator** (`labkit.cachesim`): an LRU set-associative cache
  that replays memory traces and counts hits, misses and evictions.
- **Small containers** (`labkit.lru`, `labkit.fifo`): a key-only LRU cache
  and a FIFO queue of identified objects.
- **Exercises** (`labkit.bootcamp`): option parsing and reading numbers
  from a file.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Inspect numbers

```
labkit-fshow 0x3f800000 1.5 -2.0e-3
labkit-ishow 0x80000000 -1 42
```

`labkit-fshow` accepts hex or decimal patterns or floating-point literals
and prints the sign, exponent and fraction of each value, saying whether it
is normalized, denormalized, infinite or not a number. `labkit-ishow`
accepts hex or decimal values and prints each as hex, signed and unsigned.

### Check the bit puzzles

```
labkit-btest
labkit-btest -f howManyBits
labkit-btest -f conditional -1 0 -2 4 -3 5
labkit-btest -g
```

Options:

- `-f <name>` test only the named puzzle
- `-1`, `-2`, `-3 <val>` fix the first, second or third argument
- `-g` compact output for grading
- `-r <n>` give every puzzle the same rating `n`
- `-T <lim>` time limit in seconds
- `-h` help

### Simulate a cache

```
labkit-csim -s 4 -E 1 -b 4 -t traces/yi.trace
labkit-csim -v -s 8 -E 2 -b 4 -t traces/yi.trace
```

`-s` is the number of set-index bits, `-E` the number of lines per set,
`-b` the number of block-offset bits, `-t` the trace file and `-v` prints
each access as it is replayed. The summary line is
`hits:<n> misses:<n> evictions:<n>`, and the same three numbers are
written to `.csim_results`.

Trace lines look like ` L 10,4`, ` S 18,4` or ` M 20,1`; instruction
loads (`I`) are ignored, and a modify (`M`) counts as a load followed by a
store.

### Add two numbers

```
labkit-add -a 1 -b 2 -n
```

Prints `a + b` (defaults 15000 and 213), optionally negated with `-n`.

## Library use

```python
from labkit.bits import how_many_bits, float_power2
from labkit.cachesim import CacheSimulator, parse_trace
from labkit.lru import LRUCache
from labkit.fifo import ObjectQueue

how_many_bits(12)        # 5
float_power2(0)          # 0x3f800000

sim = CacheSimulator(set_bits=4, lines=1, block_bits=4)
with open("traces/yi.trace") as fh:
    sim.run(parse_trace(fh), verbose=False)

cache = LRUCache(2)
cache.put(1)             # True: fitted without eviction
cache.get(1)             # True

queue = ObjectQueue()
queue.enqueue("A", 15213)
queue.find("A")          # 15213
queue.dequeue()          # 15213
```

`labkit.bootcamp.sum_files` reads `a = <n>` / `b = <n>` from one file and
writes `a + b = <sum>` to another, raising `ValueError` when the input does
not follow that format.

## What it does not do

labkit has no matrix-transpose functions and no tool that generates or
filters memory traces of running code. `labkit-csim` only replays trace
files that already exist; it does not produce them.