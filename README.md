# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of instructions. It prints the instructions it applies,
one per line; following them in order is meant to leave stack `a` in
ascending order with `b` empty.

## Instructions

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top goes to the bottom         |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down: the bottom goes to the top       |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

## Command line

Install the package, then pass the numbers as separate arguments. The first
argument is the top of stack `a`.

```
pip install .
push-swap 3 1 2
```

This prints:

```
ra
```

Rules for the input:

- every argument must be a whole number that fits in a signed 32-bit integer,
  written with digits and an optional leading `+` or `-`;
- no number may appear twice.

If any rule is broken, `Error` is written to standard error and the exit
status is 1. With no arguments, nothing is printed and the exit status is 1.
Input that is already sorted produces no output and exit status 0.

## Library use

```python
from pushswap.algorithm import solve
from pushswap.parsing import parse_arguments, InputError
from pushswap.stacks import Stacks

values = parse_arguments(["5", "-2", "9", "0"])   # raises InputError on bad input
moves = solve(values)                              # list of instruction names

stacks = Stacks([2, 1, 3])
stacks.sa(True)                                    # swaps and records "sa"
stacks.moves                                       # ["sa"]
stacks.is_a_sorted()                               # True
stacks.stack_a                                     # [1, 2, 3]
```

- `pushswap.parsing`: `parse_int` checks and converts one argument,
  `parse_arguments` converts a list and rejects repeats; both raise
  `InputError`.
- `pushswap.stacks`: `Stacks` holds both stacks, applies the eleven
  instructions (`pa`, `pb`, `sa`, `sb`, `ss`, `ra`, `rb`, `rr`, `rra`, `rrb`,
  `rrr`) and records each emitted one in `moves`.
- `pushswap.algorithm`: `solve` returns the instruction list for a list of
  values; `sort_stacks` runs the strategy on an existing `Stacks`. It uses a
  short fixed sequence for up to three numbers, a selection pass followed by
  insertion for four to nineteen, and median partitioning followed by a
  cost-based insertion for more than twenty.
- `pushswap.cli`: `main` is the `push-swap` command.
- `pushswap.printf`: `format_printf` and `printf`, a small formatter with
  `%c %s %d %i %u %x %X %p %%` conversions.
- `pushswap.util`: `chars` (ASCII classification and case mapping),
  `cstrings` (NUL-terminated string helpers such as `strlen`, `strlcpy`,
  `strncmp`, `atoi`), `memory` (byte-buffer helpers such as `memset`,
  `memmove`, `calloc`), `textops` (`substr`, `strjoin`, `split`, `itoa`,
  `strtrim`, `strmapi`, `striteri`) and `linked_list` (`ListNode` and the
  `lst_*` operations).

## Limitations

- Exactly twenty unsorted values match none of the strategies: no
  instructions are produced for them.
- There is no checker command that reads instructions and verifies them;
  the package only produces instructions.

## Tests

```
pip install .[test]
pytest
```