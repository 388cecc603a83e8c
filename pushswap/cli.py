"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import sort
from pushswap.parsing import ParseError, parse_numbers
from pushswap.stacks import is_sorted

_RED = "\033[31m"
_RESET = "\033[0m"


def run(args: Sequence[str]) -> list[str]:
    """Return the operations for the given arguments.

    Raises ParseError for invalid input. Already sorted input needs none.
    """
    numbers = parse_numbers(args)
    if is_sorted(numbers):
        return []
    return sort(numbers)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = run(args)
    except ParseError:
        sys.stderr.write(f"{_RED}Error\n{_RESET}")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())