# yuletide

Solvers for Advent of Code puzzles from the 2022 and 2025 seasons, with a
small linear and integer programming toolkit used by one of them. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Puzzles covered

| Season | Days                 | Module names                               |
|--------|----------------------|--------------------------------------------|
| 2022   | 1, 2, 3, 4, 5, 6, 25 | `yuletide.y2022_day01` … `y2022_day25`     |
| 2025   | 1 to 12              | `yuletide.y2025_day01` … `y2025_day12`     |

## Using the solvers from Python

Every solver takes the whole puzzle input as a string and returns the answer.

```python
from pathlib import Path

from yuletide import y2025_day01

text = Path("1.txt").read_text()
print(y2025_day01.part_one(text))
print(y2025_day01.part_two(text))
```

Most days offer `part_one(text)` and `part_two(text)`. The exceptions:

- `yuletide.y2022_day25` and `yuletide.y2025_day12` have only `part_one(text)`.
- `yuletide.y2025_day08.part_one(text, connections=1000)` takes the number of
  closest pairs to join.

Malformed input raises `ValueError` with a message naming the offending line
or value.

Many modules also expose their building blocks, for example:

- `y2022_day06.find_marker(stream, width)`
- `y2022_day25.snafu_to_int(snafu)` and `int_to_snafu(number)`
- `y2025_day02.is_doubled(number)` and `is_repeated(number)`
- `y2025_day03.max_joltage(bank, digits)`
- `y2025_day06.transpose(text)`; `part_two` reads the worksheet as given
  and transposes it itself
- `y2025_day10.parse_machine(line)`, `fewest_toggle_presses(machine)` and
  `fewest_counter_presses(machine)`
- `y2025_day11.parse_graph(text)`, `count_paths(graph, start)` and
  `count_paths_through(graph, start, required)`
- `y2025_day12.orientations(shape)` and `fits(width, height, presents, counts)`

## Linear programming

`yuletide.lp` contains a simplex solver and a branch-and-bound integer
optimiser. Both maximise `c · x` subject to `a x <= b` and `x >= 0`, and
return a `Solution` named tuple of `(value, x)`:

```python
from yuletide import lp

a = [[1.0, 1.0], [1.0, -1.0]]
b = [4.0, 1.0]
c = [1.0, 2.0]
print(lp.simplex(a, b, c))
print(lp.integer_optimum(a, b, c))
```

When there is no optimum they raise `lp.InfeasibleError` or
`lp.UnboundedError`, both subclasses of `ValueError`.

## Command line

Installing the package provides a `yuletide` command:

```
yuletide YEAR DAY [PART] [-i FILE] [-t]
```

It runs the given day's solver and prints the answer of each part, or only
of `PART` (1 or 2) when given. The input is read from `DAY.txt` in the
current directory unless `-i FILE` names another file; `-i -` reads standard
input. `-t` reports the time taken, in seconds, on standard error. Errors in
the input are reported on standard error with exit status 1.

```
yuletide 2025 1
yuletide 2022 5 2 -i inputs/day5.txt -t
yuletide --help
```

## What it does not do

The package does not download puzzle inputs or submit answers; inputs must
be saved to files (or piped in) beforehand. Only the days listed above are
solved.