"""Finding a sequence of operations that sorts stack a."""

from __future__ import annotations

from typing import Iterable

from .greedy import greedy_sort
from .normalize import normalize
from .stacks import Operation, Stack, StackPair

# Radix passes stop at this bit; the greedy insertion finishes the job.
_LAST_RADIX_BIT = 2


def sort3(pair: StackPair) -> None:
    """Order stack a when it holds exactly three values.

    Raises ValueError when stack a holds any other number of values.
    """
    if len(pair.a) != 3:
        raise ValueError("sort3 needs exactly three values on stack a")
    top, middle, bottom = pair.a
    if top > middle > bottom:
        pair.apply(Operation.SA)
        pair.apply(Operation.RRA)
    elif middle > top > bottom:
        pair.apply(Operation.RRA)
    elif top > bottom > middle:
        pair.apply(Operation.RA)
    elif bottom > top > middle:
        pair.apply(Operation.SA)
    elif middle > bottom > top:
        pair.apply(Operation.SA)
        pair.apply(Operation.RA)


def radix_pass(pair: StackPair, bit: int) -> None:
    """Go once through stack a: keep values with the bit set, push the others to b."""
    for _ in range(len(pair.a)):
        if (pair.a.peek() >> bit) & 1:
            pair.apply(Operation.RA)
        else:
            pair.apply(Operation.PB)


def binary_length(n: int) -> int:
    """Return the number of binary digits of a non-negative n; zero has one."""
    if n < 0:
        raise ValueError("binary_length needs a non-negative number")
    return max(1, n.bit_length())


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the values, given with the top first.

    Values already in ascending order need no operation at all.
    """
    items = list(values)
    if Stack(items).is_ordered():
        return []
    pair = StackPair(Stack(normalize(items)))
    bit = binary_length(len(items)) - 1
    while bit > _LAST_RADIX_BIT:
        radix_pass(pair, bit)
        bit -= 1
    greedy_sort(pair)
    return pair.operations