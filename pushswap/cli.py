"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from typing import Sequence

from .parsing import InputError, parse_stack
from .solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print Error to stderr on bad input."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        stack = parse_stack(argv)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in solve(stack)))
    return 0


if __name__ == "__main__":
    sys.exit(main())