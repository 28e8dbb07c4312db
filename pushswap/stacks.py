"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator


class Stack:
    """A stack of integers; iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        # Index 0 of the deque is the top of the stack.
        self._items: deque[int] = deque(values)

    def push(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[0]

    def swap(self) -> bool:
        """Swap the two top values; return whether the stack changed."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom; return whether it was done."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; return whether it was done."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def is_ordered(self) -> bool:
        """True when the values ascend from the top to the bottom."""
        return all(upper <= lower for upper, lower in zip(self._items, list(self._items)[1:]))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"


class Operation(str, Enum):
    """The instructions of the puzzle, valued by their written names."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _move(source: Stack, destination: Stack) -> bool:
    if not source:
        return False
    destination.push(source.pop())
    return True


@dataclass
class StackPair:
    """Stacks a and b, with the list of operations that took effect on them."""

    a: Stack = field(default_factory=Stack)
    b: Stack = field(default_factory=Stack)
    operations: list[Operation] = field(default_factory=list)

    def apply(self, operation: Operation | str) -> bool:
        """Carry out one operation; record it and return True if it took effect.

        A string is accepted in place of an Operation; an unknown name
        raises ValueError.
        """
        operation = Operation(operation)
        a, b = self.a, self.b
        if operation is Operation.SA:
            done = a.swap()
        elif operation is Operation.SB:
            done = b.swap()
        elif operation is Operation.SS:
            done = len(a) >= 2 or len(b) >= 2
            a.swap()
            b.swap()
        elif operation is Operation.PA:
            done = _move(b, a)
        elif operation is Operation.PB:
            done = _move(a, b)
        elif operation is Operation.RA:
            done = a.rotate()
        elif operation is Operation.RB:
            done = b.rotate()
        elif operation is Operation.RR:
            done = len(a) > 1 or len(b) > 1
            a.rotate()
            b.rotate()
        elif operation is Operation.RRA:
            done = a.reverse_rotate()
        elif operation is Operation.RRB:
            done = b.reverse_rotate()
        else:
            done = len(a) > 1 or len(b) > 1
            a.reverse_rotate()
            b.reverse_rotate()
        if done:
            self.operations.append(operation)
        return done

    def render(self) -> str:
        """Draw both stacks side by side, tops aligned on the highest row."""
        a_items = list(self.a)
        b_items = list(self.b)
        height = max(len(a_items), len(b_items))
        rows = []
        for level in range(height, 0, -1):
            left = str(a_items[len(a_items) - level]) if len(a_items) >= level else " "
            right = str(b_items[len(b_items) - level]) if len(b_items) >= level else ""
            rows.append(f"{left} {right}\n")
        return "".join(rows) + "a b\n\n"