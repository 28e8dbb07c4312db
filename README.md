# pushswap

Sort a list of distinct integers using only a small set of operations on two
stacks, `a` and `b`. You can also check whether a sequence of those operations
really sorts a given input.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` at once                               |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` at once                               |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` at once                             |

An operation that cannot act, such as `pa` with `b` empty or `sa` with fewer
than two elements on `a`, does nothing.

## Installation

```
pip install .
```

## Sorting

Give the numbers as separate arguments, or as one argument separated by
spaces. The first number is the top of stack `a`.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The operations that sort the stack are printed one per line. If the input is
already sorted, nothing is printed. With no arguments the command prints
nothing and exits with status 0. If an argument is not an integer (only an
optional sign followed by ASCII digits), is outside the 32-bit signed range,
or appears twice, or if a single argument holds no numbers, `Error` is
written to standard error and the exit status is 1.

## Checking

`pushswap-checker` takes the same arguments and reads operations from standard
input, one per line, each line ending with a newline:

```
push-swap 3 2 1 | pushswap-checker 3 2 1
```

It prints `OK` if the operations leave `a` sorted in ascending order from the
top and `b` empty, and `KO` otherwise. An unknown operation, or a line without
its newline, makes it print `Error` to standard error and exit with status 1.

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import check

ops = solve([3, 2, 1])
print([str(op) for op in ops])
print(check([3, 2, 1], [f"{op}\n" for op in ops]))  # OK
```

- `pushswap.solver.solve(values)` returns the list of `Operation` values that
  sorts the numbers; `sort3`, `radix_pass` and `binary_length` are the steps
  it is built from.
- `pushswap.checker.check(values, lines)` runs instruction lines and returns
  `"OK"` or `"KO"`; `parse_operation` and `read_operations` read instructions.
- `pushswap.parsing` has `parse_stack`, `split_arguments`, `is_valid_int`,
  `parse_int` and the `InputError` exception.
- `pushswap.normalize.normalize(values)` replaces each value by its rank.
- `pushswap.greedy` holds the cost-driven insertion (`greedy_sort`,
  `get_cost`, `find_value` and the `Rotation` directions).
- `pushswap.stacks` provides `Stack`, `StackPair` and the `Operation` enum for
  working with the two stacks directly. `StackPair.apply` records each
  operation that took effect in `StackPair.operations`, and
  `StackPair.render` draws both stacks side by side.