# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set
of operations. The program prints the operations it performs, one per line;
applying them in order to the input leaves stack `a` sorted in ascending
order (smallest on top) with stack `b` empty.

## Installation

```
pip install .
```

## Usage

```
push-swap 2 1 3 5 8
```

prints

```
ra
pb
rra
pb
pa
pa
```

Each argument is one integer; the first argument is the top of stack `a`.
With no arguments nothing is printed. Input that is already sorted produces
no output. The same entry point can be run as `python -m pushswap.cli`.

The program writes `Error` to standard error and exits with status 1 when:

- an argument is not an optional `+` or `-` followed by one or more digits;
- an argument falls outside the 32-bit signed range. The check is on the
  text: a number with more digits than `2147483647` (or, after a minus sign,
  `2147483648`) is rejected, so a leading `+` or leading zeros count
  towards the length;
- two arguments denote the same integer (`1`, `+1` and `01` are duplicates).

```
push-swap 0 one 2 3
```

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` then `sb`                                    |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top element becomes the bottom |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` then `rb`                                    |
| `rra` | rotate `a` down: the bottom element becomes top   |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` then `rrb`                                  |

An operation that cannot apply (for example `sa` with fewer than two
elements) changes nothing and prints nothing. The combined operations `ss`,
`rr` and `rrr` print the lines of the two single operations they perform and
then their own name. The sorting strategies never use them.

## Strategy

Up to five values are sorted with hand-picked sequences: the smallest values
are parked on `b`, the remaining three are sorted in place, and the parked
values are pushed back. Larger inputs are split into value ranges ("chunks":
5 up to 100 values, 7 up to 200, 9 up to 300, 11 beyond); each chunk is
pushed to `b`, always taking the element of the range that is fewest
rotations from the top, and values in the lower half of a chunk are rotated
to the bottom of `b`. The values are then returned to `a` largest first.

## Library use

```python
import io
from pushswap.stacks import Stacks, is_sorted
from pushswap.sorting import big_sort

out = io.StringIO()
stacks = Stacks([3, 1, 2], out)
big_sort(stacks)
print(out.getvalue().split())   # ['ra']
print(list(stacks.a))           # [1, 2, 3]
```

Modules:

- `pushswap.cli` – `main(argv=None)`, the command-line entry point; it takes
  an argument list (`main(["3", "2", "1"])`) and returns the exit status.
- `pushswap.stacks` – the `Stacks` class (stacks `a` and `b` as deques, top
  at index 0, with one method per operation) and `is_sorted`.
- `pushswap.sorting` – `big_sort`, `medium_sort`, `small_sort` and the chunk
  helpers `calculate_chunks`, `process_chunks`, `push_chunks_to_b`,
  `push_chunk_to_b`, `move_max_to_top_b`.
- `pushswap.finder` – position and value searches over a stack:
  `find_next_in_range`, `find_max_position`, `find_min_value`,
  `find_max_value`, `min_distance`.
- `pushswap.validation` – `validate` (raises `InputError`), `check_int`,
  `is_overflow`, `has_duplicate`, `parse_values`.
- `pushswap.chars`, `pushswap.text`, `pushswap.memory`, `pushswap.output`,
  `pushswap.printf` – small helpers with C-library behaviour: character
  classification and `atoi`/`itoa`; string routines that return indices or
  new strings; byte-buffer routines over `bytearray`; writing to text
  streams; and `render`/`printf` supporting `%c %s %d %i %u %x %X %p %%`.

## What it does not do

There is no checker: the package produces operation lists but has no command
that reads a list of operations and verifies that it sorts a given input.

## Tests

```
pip install .[test]
pytest
```