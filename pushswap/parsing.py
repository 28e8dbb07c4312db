"""Reading the starting stack from command-line arguments."""

from __future__ import annotations

from typing import Sequence

from .stacks import Stack

INT_MIN_TEXT = "-2147483648"
INT_MAX_TEXT = "2147483647"
_DIGITS = frozenset("0123456789")
_BLANKS = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, detail: str = "Error") -> None:
        super().__init__(detail)


def is_valid_int(text: str) -> bool:
    """True when text is an optionally signed decimal that fits in 32 bits.

    Only ASCII digits are accepted, with no surrounding blanks. A number
    written with more characters than the widest 32-bit value is refused
    even when leading zeros or a plus sign account for the extra length.
    """
    digits = text[1:] if text[:1] in ("-", "+") else text
    if not digits or not set(digits) <= _DIGITS:
        return False
    if text.startswith("-") and len(text) >= len(INT_MIN_TEXT):
        return len(text) == len(INT_MIN_TEXT) and text <= INT_MIN_TEXT
    if not text.startswith("-") and len(text) >= len(INT_MAX_TEXT):
        return len(text) == len(INT_MAX_TEXT) and text <= INT_MAX_TEXT
    return True


def parse_int(text: str) -> int:
    """Read a leading integer: blanks, an optional sign, then digits.

    Reading stops at the first character that is not a digit; text with
    no digits reads as zero.
    """
    position = 0
    while position < len(text) and text[position] in _BLANKS:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < len(text) and text[position] in _DIGITS:
        result = result * 10 + int(text[position])
        position += 1
    return sign * result


def split_arguments(argv: Sequence[str]) -> list[str]:
    """Return the number words given on the command line.

    A single argument is split on spaces; several arguments are taken as
    they are. A single argument holding no words raises InputError.
    """
    if len(argv) == 1:
        words = [word for word in argv[0].split(" ") if word]
        if not words:
            raise InputError("no numbers given")
        return words
    return list(argv)


def parse_stack(argv: Sequence[str]) -> Stack:
    """Build stack a from the arguments, the first number on top.

    Raises InputError for a word that is not a 32-bit integer and for a
    number given twice.
    """
    words = split_arguments(argv)
    seen: set[int] = set()
    for word in reversed(words):
        if not is_valid_int(word):
            raise InputError(f"not an integer: {word!r}")
        value = parse_int(word)
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
    return Stack(parse_int(word) for word in words)