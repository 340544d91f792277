"""Sorting a stack of integers with the two-stack operations.

The result of a sort is the list of operations performed. Stack a ends
up holding every value with the smallest on top.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Sequence

from minilib.parsing import InputError, check_duplicates, is_sorted, parse_arguments
from minilib.stacks import StackError, Stacks


def normalize(values: Sequence[int]) -> List[int]:
    """Replace each value by its position in ascending order."""
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]


def three_sort(stacks: Stacks) -> None:
    """Order the bottom three elements of a so the smallest is highest."""
    a = stacks.a
    if len(a) < 3:
        raise StackError("three_sort needs at least three elements on a")
    if a[2] > a[1] and a[2] > a[0]:
        stacks.ra()
    if a[1] > a[2] and a[1] > a[0]:
        stacks.rra()
    if a[2] > a[1]:
        stacks.sa()


def _isolate(stacks: Stacks, target: int, inner: Callable[[Stacks], None]) -> None:
    """Bring target to the top of a, park it on b, sort the rest, bring it back."""
    from_top = stacks.a[::-1]
    if target not in from_top:
        raise StackError(f"value {target} is not on stack a")
    place = from_top.index(target) + 1
    for _ in range(len(stacks.a)):
        if stacks.a[-1] == target:
            stacks.pb()
            inner(stacks)
            stacks.pa()
            return
        if place <= 2:
            stacks.ra()
        else:
            stacks.rra()


def four_sort(stacks: Stacks) -> None:
    """Sort four normalised values on a, with b empty or holding one value."""
    if len(stacks.a) != 4 or len(stacks.b) > 1:
        raise StackError("four_sort needs four elements on a and at most one on b")
    _isolate(stacks, 1 if stacks.b else 0, three_sort)


def five_sort(stacks: Stacks) -> None:
    """Sort five normalised values on a, with b empty."""
    if len(stacks.a) != 5 or stacks.b:
        raise StackError("five_sort needs five elements on a and an empty b")
    _isolate(stacks, 0, four_sort)


def _a_in_order(stacks: Stacks) -> bool:
    return is_sorted(stacks.a[::-1])


def radix_sort(stacks: Stacks) -> None:
    """Sort non-negative values on a, one bit at a time through b."""
    max_bits = max(len(stacks.a).bit_length() - 1, 0)
    bit = 0
    while bit <= max_bits:
        for _ in range(len(stacks.a)):
            if _a_in_order(stacks):
                continue
            if (stacks.a[-1] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        bit += 1
        if bit <= max_bits:
            for _ in range(len(stacks.b)):
                if (stacks.b[-1] >> bit) & 1 == 0:
                    stacks.rb()
                else:
                    stacks.pa()
    while stacks.b:
        stacks.pa()


_SMALL_SORTS: Dict[int, Callable[[Stacks], None]] = {
    3: three_sort,
    4: four_sort,
    5: five_sort,
}


def solve(values: Sequence[int], arg_count: Optional[int] = None) -> List[str]:
    """Return the operations that sort values, given top first.

    arg_count is the number of command-line arguments the values came
    from; three, four or five select the dedicated sorts, anything else
    the radix sort. It defaults to the number of values. Already sorted
    input needs no operations; repeated values raise InputError.
    """
    values = list(values)
    if arg_count is None:
        arg_count = len(values)
    if is_sorted(values):
        return []
    check_duplicates(values)
    stacks = Stacks(reversed(normalize(values)))
    _SMALL_SORTS.get(arg_count, radix_sort)(stacks)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: print the operations that sort the given integers."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        operations = solve(parse_arguments(args), len(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    except StackError:
        return 1
    for operation in operations:
        print(operation)
    return 0