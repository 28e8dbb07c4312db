"""Cost-driven insertion of stack b back into stack a."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .stacks import Operation, Stack, StackPair

INT32_MAX = 2**31 - 1


class Rotation(Enum):
    """Directions in which stacks a and b are turned before a push."""

    UP_UP = "up_up"
    DOWN_DOWN = "down_down"
    UP_DOWN = "up_down"
    DOWN_UP = "down_up"


def get_index(stack: Stack, value: int) -> int:
    """Return how far below the top value lies, or 0 if it is absent."""
    return next((index for index, item in enumerate(stack) if item == value), 0)


def get_target(stack: Stack, value: int) -> int:
    """Return the smallest value above value, or the minimum if none is."""
    larger = [item for item in stack if item > value]
    if larger:
        return min(larger)
    return min(stack, default=INT32_MAX)


def get_cost(a: Stack, b: Stack, value: int) -> tuple[int, Rotation]:
    """Return the cheapest number of moves to bring value and its target on top.

    The result pairs that count with the rotation that achieves it; on a
    tie the earlier of up-up, down-down, up-down, down-up wins.
    """
    pos_target = get_index(a, get_target(a, value))
    pos_value = get_index(b, value)
    cost = max(pos_target, pos_value)
    rotation = Rotation.UP_UP
    down_down = max(len(a) - pos_target, len(b) - pos_value)
    if down_down < cost:
        cost, rotation = down_down, Rotation.DOWN_DOWN
    up_down = pos_target + len(b) - pos_value
    if up_down < cost:
        cost, rotation = up_down, Rotation.UP_DOWN
    down_up = pos_value + len(a) - pos_target
    if down_up < cost:
        cost, rotation = down_up, Rotation.DOWN_UP
    return cost, rotation


def find_value(a: Stack, b: Stack) -> tuple[int, Rotation]:
    """Pick the value of b that is cheapest to move into place.

    Candidates are tried from the bottom of b upward and the first with
    the lowest cost is kept. Raises ValueError when b is empty.
    """
    best: tuple[int, int, Rotation] | None = None
    for candidate in reversed(b):
        cost, rotation = get_cost(a, b, candidate)
        if best is None or cost < best[0]:
            best = (cost, candidate, rotation)
    if best is None:
        raise ValueError("stack b is empty")
    return best[1], best[2]


def _repeat(pair: StackPair, operation: Operation, times: int) -> None:
    for _ in range(times):
        pair.apply(operation)


def rotate_up_up(pair: StackPair, pos_target: int, pos_value: int) -> None:
    """Rotate both stacks upward, together as far as both need."""
    shared = min(pos_target, pos_value)
    _repeat(pair, Operation.RR, shared)
    _repeat(pair, Operation.RA, pos_target - shared)
    _repeat(pair, Operation.RB, pos_value - shared)


def rotate_down_down(pair: StackPair, pos_target: int, pos_value: int) -> None:
    """Rotate both stacks downward, together as far as both need."""
    steps_a = len(pair.a) - pos_target
    steps_b = len(pair.b) - pos_value
    shared = max(0, min(steps_a, steps_b))
    _repeat(pair, Operation.RRR, shared)
    _repeat(pair, Operation.RRA, max(0, steps_a - shared))
    _repeat(pair, Operation.RRB, max(0, steps_b - shared))


def rotate_up_down(pair: StackPair, pos_target: int, pos_value: int) -> None:
    """Rotate stack a upward and stack b downward."""
    _repeat(pair, Operation.RA, pos_target)
    _repeat(pair, Operation.RRB, max(0, len(pair.b) - pos_value))


def rotate_down_up(pair: StackPair, pos_target: int, pos_value: int) -> None:
    """Rotate stack a downward and stack b upward."""
    _repeat(pair, Operation.RRA, max(0, len(pair.a) - pos_target))
    _repeat(pair, Operation.RB, pos_value)


_ROTATORS: dict[Rotation, Callable[[StackPair, int, int], None]] = {
    Rotation.UP_UP: rotate_up_up,
    Rotation.DOWN_DOWN: rotate_down_down,
    Rotation.UP_DOWN: rotate_up_down,
    Rotation.DOWN_UP: rotate_down_up,
}


def _push_value_to_a(pair: StackPair, value: int, rotation: Rotation) -> None:
    pos_target = get_index(pair.a, get_target(pair.a, value))
    pos_value = get_index(pair.b, value)
    _ROTATORS[rotation](pair, pos_target, pos_value)
    pair.apply(Operation.PA)


def _sort_three(pair: StackPair) -> None:
    """Order stack a when it holds at most three values."""
    items = list(pair.a)
    if len(items) == 2:
        if items[0] > items[1]:
            pair.apply(Operation.SA)
        return
    if len(items) != 3:
        return
    top, middle, bottom = items
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


def rotate_ascending_order(pair: StackPair) -> None:
    """Turn stack a the short way until the value 0 is on top."""
    index = get_index(pair.a, 0)
    if index <= len(pair.a) // 2:
        _repeat(pair, Operation.RA, index)
    else:
        _repeat(pair, Operation.RRA, len(pair.a) - index)


def greedy_sort(pair: StackPair) -> None:
    """Sort stack a, whose values are the ranks 0 to n - 1.

    All but three values go to b, the three are ordered, and b is moved
    back one value at a time, always the cheapest one first.
    """
    while len(pair.a) > 3:
        pair.apply(Operation.PB)
    _sort_three(pair)
    while len(pair.b):
        value, rotation = find_value(pair.a, pair.b)
        _push_value_to_a(pair, value, rotation)
    rotate_ascending_order(pair)