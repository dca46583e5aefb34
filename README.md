# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. Each operation used is printed on its own line.

The integers start on stack `a`, with the first one on top. The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate `a`, `b`, or both: the bottom element goes to the top |

Each number is first given its rank (0 for the smallest). Lists of up to five
numbers are sorted with hand-picked sequences; longer lists are sorted with a
binary radix sort on the ranks, using stack `b` for the elements whose current
bit is 0.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one argument separated by spaces:

```
push_swap 2 1 3
push_swap "3 2 5 1 4"
```

Each operation is printed on its own line. Nothing is printed if the input is
already sorted. An argument must be digits with an optional leading `-`; if an
argument is not such an integer, is repeated, or lies outside the 32-bit signed
range, `Error` is printed and nothing else. With no arguments at all the
command prints nothing and exits with a non-zero status.

## Library

```python
from pushswap.cli import solve

operations = solve([2, 1, 3])   # ["sa"]
```

- `pushswap.cli.solve(numbers)` returns the list of operations that sort the
  numbers; `pushswap.cli.main(argv=None)` is the command above.
- `pushswap.stacks.PushSwap(values, emit)` holds the two stacks (`a` and `b`,
  each a `deque` of `Element`s with the top on the left) and has one method per
  operation (`sa`, `pb`, `rra`, ...). A method returns `True` and passes the
  operation's name to `emit` when the operation could be done, and `False`
  otherwise; `ss`, `rr` and `rrr` need at least two elements on both stacks.
  Without `emit`, names are written to standard output. `values()` lists the
  values on `a` from top to bottom.
- `pushswap.sorting.index_stack` ranks the elements, and
  `pushswap.sorting.sort_stack` sorts a ranked machine, choosing between
  `simple_sort` and `radix_sort`.
- `pushswap.arguments.parse_arguments(argv)` checks command-line style
  arguments and converts them to integers, raising
  `pushswap.arguments.ArgumentError` when they are invalid.

## What it does not do

The package only produces operations. It has no checker that reads a list of
operations and verifies that they sort a given input.

## Running the tests

```
pip install .[test]
pytest
```