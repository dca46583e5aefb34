"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """The arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read an optional sign and leading digits after whitespace; 0 if none."""
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        number = number * 10 + ord(char) - ord("0")
    return sign * number


def split_words(text: str, separator: str) -> list[str]:
    """Split on runs of ``separator``, dropping empty words."""
    return [word for word in text.split(separator) if word]


def is_number(text: str) -> bool:
    """True when ``text`` is an optional minus sign followed only by digits."""
    digits = text[1:] if text.startswith("-") else text
    return all("0" <= char <= "9" for char in digits)


def contains(number: int, args: Sequence[str], position: int) -> bool:
    """True when an argument after ``position`` reads as ``number``."""
    return any(parse_long(arg) == number for arg in args[position + 1 :])


def collect_arguments(argv: Sequence[str]) -> list[str]:
    """One argument is split on spaces; several are taken as they are."""
    if len(argv) == 1:
        return split_words(argv[0], " ")
    return list(argv)


def check_arguments(argv: Sequence[str]) -> None:
    """Raise ArgumentError unless every argument is a distinct 32-bit integer."""
    args = collect_arguments(argv)
    for position, arg in enumerate(args):
        number = parse_long(arg)
        if not is_number(arg):
            raise ArgumentError()
        if contains(number, args, position):
            raise ArgumentError()
        if not INT_MIN <= number <= INT_MAX:
            raise ArgumentError()


def parse_arguments(argv: Sequence[str]) -> list[int]:
    """Check the arguments and return their numbers in order."""
    check_arguments(argv)
    return [parse_long(arg) for arg in collect_arguments(argv)]