# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
stack operations. The program prints one operation per line. If you replay
them on the input, stack `a` ends up sorted in ascending order and stack `b`
ends up empty.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

## Command line

```
pip install .
pushswap 3 2 1
pushswap "4 67 3 87 23"
python -m pushswap.cli 2 1
```

You can give the numbers as separate arguments, or inside one argument
separated by spaces. Only the space character separates numbers. The first
number is the top of the stack.

- With no arguments, or with input that is already sorted, the program prints
  nothing and exits with status 0.
- The following inputs make the program write `Error` (in red, using ANSI
  escape codes) to standard error and exit with status 1:
  - anything that is not an optional `+`/`-` sign followed by digits
  - values outside the 32-bit signed integer range
  - duplicate values
  - an argument that holds no numbers

## Library use

```python
from pushswap.algorithm import sort
from pushswap.parsing import parse_numbers, ParseError
from pushswap.stacks import Stacks, is_sorted

values = parse_numbers(["3 2 1"])
operations = sort(values)

stacks = Stacks(values)
for op in operations:
    stacks.apply(op)
assert is_sorted(stacks.a) and not stacks.b
```

### `pushswap.parsing`

- `parse_numbers` raises `ParseError`, a subclass of `ValueError`, on invalid
  input.
- `split_words`, `is_valid_number`, `within_int_limits`, `count_numbers`,
  `atoi` and `atol` expose the individual parsing steps.

### `pushswap.stacks`

- `Stacks` holds the lists `a` and `b`. Index 0 of each list is the top of that
  stack.
- `Stacks` also keeps an `operations` log of every move that took effect.
- `apply` raises `ValueError` for an unknown operation name.

### `pushswap.algorithm`

- `sort` returns the list of operations.
- The module also exposes the individual steps it uses, among them:
  - `sort_three`
  - `push_all_except_three`
  - `reinsert_from_b`
  - `finish_rotation`

### `pushswap.cli`

- `run` takes the argument list and returns the operations the command would
  print.
- `main` is the command itself.

## What it does not do

There is no checker command that reads operations from standard input and
verifies them. To check a sequence, replay it through `Stacks.apply` and test
the result with `is_sorted`, as in the example above.

## Tests

```
pip install .[test]
pytest
```