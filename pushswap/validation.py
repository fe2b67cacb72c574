"""Command-line argument checks and parsing into a list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import List

from pushswap.stacks import atoll

INT_MIN = -2147483648
INT_MAX = 2147483647

# Only this many leading characters are compared when looking for duplicates.
_DUPLICATE_PREFIX = 11


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Parse a leading integer like C's atoi, wrapped to a 32-bit int."""
    value = atoll(text)
    return (value - INT_MIN) % (1 << 32) + INT_MIN


def split_words(text: str, sep: str) -> List[str]:
    """Split text on a single separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def _as_bytes(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n leading bytes; return their difference or 0."""
    left = _as_bytes(first)[:n]
    right = _as_bytes(second)[:n]
    width = max(len(left), len(right))
    for a, b in zip(left.ljust(width, b"\0"), right.ljust(width, b"\0")):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def _is_digits(text: str) -> bool:
    return all("0" <= char <= "9" for char in text)


def check_numeric(arguments: Iterable[str]) -> bool:
    """Return True if each argument is an optional '-' followed by digits."""
    return all(
        _is_digits(arg[1:] if arg.startswith("-") else arg) for arg in arguments
    )


def check_limits(arguments: Iterable[str]) -> bool:
    """Return True if each argument's value fits in a signed 32-bit int."""
    return all(INT_MIN <= atoll(arg) <= INT_MAX for arg in arguments)


def check_duplicates(arguments: Sequence[str]) -> bool:
    """Return True if no two arguments share the same leading characters."""
    return not any(
        strncmp(arguments[i], later, _DUPLICATE_PREFIX) == 0
        for i in range(len(arguments))
        for later in arguments[i + 1:]
    )


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn program arguments into the values of stack a, top first.

    A single argument is split on spaces; several arguments are taken as
    they are. No arguments give an empty list. Invalid input raises
    InputError.
    """
    if not args:
        return []
    elements = split_words(args[0], " ") if len(args) == 1 else list(args)
    if not (
        check_numeric(elements)
        and check_limits(elements)
        and check_duplicates(elements)
    ):
        raise InputError()
    return [atoi(element) for element in elements]