"""String manipulation and matching routines."""

from __future__ import annotations

from functools import lru_cache

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _swap_char(char: str) -> str:
    code = ord(char)
    if code in _UPPER:
        return chr(code + _CASE_OFFSET)
    if code in _LOWER:
        return chr(code - _CASE_OFFSET)
    return char


def swap_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving every other character alone."""
    return "".join(_swap_char(char) for char in text)


def is_scramble(first: str, second: str) -> bool:
    """Tell whether ``second`` is a scramble of ``first``.

    A scramble is obtained by splitting a string into two non-empty parts,
    optionally swapping them, and scrambling each part recursively.
    """

    @lru_cache(maxsize=None)
    def solve(left: str, right: str) -> bool:
        if left == right:
            return True
        if len(left) != len(right):
            return False
        size = len(left)
        for cut in range(1, size):
            if solve(left[:cut], right[size - cut:]) and solve(left[cut:], right[: size - cut]):
                return True
            if solve(left[:cut], right[:cut]) and solve(left[cut:], right[cut:]):
                return True
        return False

    return solve(first, second)


def reverse_with_stack(text: str) -> str:
    """Reverse a string by pushing its characters on a stack and popping them."""
    stack = list(text)
    reversed_chars = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


def reverse_each_word(text: str) -> str:
    """Reverse every space-separated word in place, keeping the spaces as they are."""
    return " ".join(word[::-1] for word in text.split(" "))


def wildcard_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``pattern`` where ``?`` is any one character and ``*`` any run."""
    width = len(pattern)
    previous = [True] + [False] * width
    for column, symbol in enumerate(pattern, start=1):
        previous[column] = previous[column - 1] and symbol == "*"
    for char in text:
        current = [False] * (width + 1)
        for column, symbol in enumerate(pattern, start=1):
            if symbol == "?" or symbol == char:
                current[column] = previous[column - 1]
            elif symbol == "*":
                current[column] = previous[column] or current[column - 1]
        previous = current
    return previous[width]