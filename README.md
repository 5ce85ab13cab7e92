# pushswap

A small library and command for the *push_swap* puzzle: sort a list of
integers using two stacks, **A** and **B**, and a fixed set of operations.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pushswap
```

sorts a built-in set of twenty integers. It prints stack A and stack B with
their sizes, then each instruction as the sorter runs it, one per line, then
both stacks again, and finally reports whether stack A ended up sorted with
stack B empty. The command takes no options besides `--help` and always exits
with status 0.

## The stacks (`pushswap.stacks`)

`Stacks` holds two deques, `a` and `b`, top element first. Build one with
`Stacks.from_values(values)`, which puts the first value on top of `a` and
leaves `b` empty. `size_a` and `size_b` are properties giving the lengths.

| Method | Effect                                               |
|--------|------------------------------------------------------|
| `sa`   | swap the top two elements of A                       |
| `sb`   | swap the top two elements of B                       |
| `ss`   | swap the tops of A and of B                          |
| `pa`   | move the top of B onto A                             |
| `pb`   | move the top of A onto B                             |
| `ra`   | rotate A: the top element goes to the bottom         |
| `rb`   | rotate B                                             |
| `rr`   | rotate A and B                                       |
| `rra`  | reverse-rotate A: the bottom element goes to the top |
| `rrb`  | reverse-rotate B                                     |
| `rrr`  | reverse-rotate A and B                               |

Each of these appends its name to `stacks.operations` and, when
`stacks.stream` is set to a text stream, writes the name on its own line.
`sa`, `sb`, `pa`, `pb`, `ra`, `rb`, `rra` and `rrb` do nothing and record
nothing when there is nothing to act on (for example `sa` with fewer than two
elements on A). `ss`, `rr` and `rrr` are always recorded.

The silent moves `swap_a`, `swap_b`, `rotate_a`, `rotate_b`,
`reverse_rotate_a` and `reverse_rotate_b` do the same work without recording
anything and return whether anything moved.

Helpers:

- `is_sorted(values)` – true when the values never decrease.
- `has_duplicates(values)` – true when any value appears twice.
- `get_index(values, value)` – position of the first occurrence; raises
  `ValueError` when the value is absent.
- `format_stack(values)` – each value on its own line.
- `format_stacks(stacks)` – both stacks with their sizes, as text.

## Sorting (`pushswap.sorting`)

```python
from pushswap.stacks import Stacks, format_stacks
from pushswap.sorting import sort_stack

stacks = Stacks.from_values([3, 1, 2, 5, 4])
sort_stack(stacks)
print(stacks.operations)
print(format_stacks(stacks))
```

`sort_stack` leaves stack A untouched when it is already in order; otherwise
it runs `hybrid_sort(stacks, size, is_stack_a)`, a recursive partition sort
that splits each run around a pivot and finishes runs of three or fewer with
`handle_small_a` and `handle_small_b` (which use `sort_three` and
`sort_three_b`).

Also available:

- `sort_two`, `sort_three` and `sort_five` for tiny inputs on A
  (`sort_five` parks the two smallest values on B when A holds five).
- `bubble_sort(values)` – a new list in ascending order.
- `get_pivot(values, size)` – the element at 70 % of the first `size` values
  once sorted; raises `ValueError` for a non-positive size or no values.
- `find_min_pos(values)` – position of the first smallest value; raises
  `ValueError` on an empty sequence.

## Reading input (`pushswap.parsing`)

`parse_arguments(argv)` turns command-line style arguments into `Stacks`:

- a single argument is split on spaces into several numbers;
- several arguments are taken one number each;
- each number may carry one leading `+` or `-` and must otherwise be digits
  only, and must fit a signed 32-bit integer;
- duplicates are rejected.

It raises `ParseError` (a `ValueError`) on empty or invalid input. The helpers
`atol`, `is_valid_number`, `has_overflow`, `split` and `get_args` are exposed
as well.

## What it does not do

The `pushswap` command does not read numbers from its arguments: it only
sorts its built-in sample. To sort your own numbers, call `parse_arguments`
and `sort_stack` from Python. There is no checker that reads a list of
instructions and verifies them.