"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from .parsing import InputError, parse_stack
from .stacks import Operation, Stack, StackPair


def parse_operation(line: str) -> Operation:
    """Read one instruction line, which must end with a newline.

    Raises InputError for anything that is not a known instruction.
    """
    name, newline, rest = line.partition("\n")
    if not newline or rest:
        raise InputError(f"not an instruction: {line!r}")
    try:
        return Operation(name)
    except ValueError:
        raise InputError(f"not an instruction: {line!r}") from None


def read_operations(stream: TextIO) -> list[Operation]:
    """Read every line of the stream as an instruction."""
    return [parse_operation(line) for line in stream]


def _verdict(values: Iterable[int], operations: Iterable[Operation]) -> str:
    pair = StackPair(Stack(values))
    for operation in operations:
        pair.apply(operation)
    if len(pair.b) == 0 and pair.a.is_ordered():
        return "OK"
    return "KO"


def check(values: Iterable[int], lines: Iterable[str]) -> str:
    """Run the instruction lines on the values and return OK or KO.

    Raises InputError on the first line that is not an instruction.
    """
    return _verdict(values, [parse_operation(line) for line in lines])


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    """Read instructions from stdin and print OK or KO; Error on bad input."""
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin
    if not argv:
        return 0
    try:
        stack = parse_stack(argv)
        operations = read_operations(stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(_verdict(stack, operations) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())