# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, printing each operation it performs on its own line.

## Operations

| Move  | Effect                                                   |
|-------|----------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                         |
| `sb`  | swap the top two elements of `b`                         |
| `ss`  | `sa` and `sb` together                                   |
| `pa`  | move the top of `b` onto `a` (only if `b` is not empty)  |
| `pb`  | move the top of `a` onto `b` (only if `a` is not empty)  |
| `ra`  | rotate `a` up (top goes to the bottom)                   |
| `rb`  | rotate `b` up                                            |
| `rr`  | `ra` and `rb` together, only if both hold two or more    |
| `rra` | rotate `a` down (bottom goes to the top)                 |
| `rrb` | rotate `b` down                                          |
| `rrr` | `rra` and `rrb` together, only if both hold two or more  |

## Command line

```
pip install .
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

Give the numbers as separate arguments, or as one argument with the numbers
separated by spaces. The first number is the top of stack `a`.

- Input that is already sorted prints nothing; the exit status is 0.
- With no arguments, or one argument holding no numbers, nothing is printed
  and the exit status is 1.
- Input that is invalid prints `Error` on standard output, and the exit
  status is 1. Each number must be an optional `-` followed by digits only,
  must fit in a signed 32-bit integer, and must not repeat another argument.
  Duplicates are found by comparing the text of the arguments.

Up to five numbers are sorted by a small hand-tuned routine. Larger inputs
are ranked, split around the median between the two stacks, and sorted bit
by bit (`a` ascending, `b` descending) before `b` is pushed back onto `a`.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])   # ['sa', 'rra']
```

- `pushswap.sorting.solve(values)` returns the list of moves for the given
  values, top of `a` first. The strategies it uses (`tiny_sort`,
  `sort_three`, `sort_up_to_five`, `divide_between_stacks`,
  `bit_by_bit_processing` and friends) are in the same module.
- `pushswap.validation.parse_arguments(args)` turns command-line arguments
  into a list of integers and raises `InputError` (a `ValueError`) for
  invalid input. `check_numeric`, `check_limits` and `check_duplicates` are
  the individual checks.
- `pushswap.stacks.PushSwap(values, stream=None)` holds the two stacks as
  `stack_a` and `stack_b`. Each operation is a method (`sa`, `pb`, `rra`, …);
  every move performed is appended to `moves` and, if a text `stream` is
  given, written to it as a line.
- `pushswap.cli.main(argv=None)` is the command; it returns the exit status.

## What it does not do

The package only produces moves. It has no checker that reads a list of
moves and verifies that they sort a given input.

## Tests

```
pip install .[test]
pytest
```