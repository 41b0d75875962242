"""Number bases, bit tricks and primality."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

_MIN_BASE = 2
_MAX_BASE = 36


def _check_base(base: int) -> None:
    if not _MIN_BASE <= base <= _MAX_BASE:
        raise ValueError(f"base must be between {_MIN_BASE} and {_MAX_BASE}, got {base}")


def _digit_value(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    raise ValueError(f"invalid digit {char!r}")


def _digit_char(value: int) -> str:
    if value <= 9:
        return chr(value + ord("0"))
    return chr(value - 10 + ord("A"))


def to_decimal(digits: str, base: int) -> int:
    """Convert a string of digits 0-9 and A-Z in ``base`` to an integer."""
    _check_base(base)
    number = 0
    for char in digits:
        value = _digit_value(char)
        if value >= base:
            raise ValueError(f"digit {char!r} is not valid in base {base}")
        number = number * base + value
    return number


def from_decimal(number: int, base: int) -> str:
    """Write a non-negative integer in ``base``; zero gives the empty string."""
    _check_base(base)
    if number < 0:
        raise ValueError("number must be non-negative")
    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(_digit_char(remainder))
    return "".join(reversed(digits))


def get_bit(number: int, position: int) -> int:
    """Return the bit of ``number`` at ``position`` as 0 or 1."""
    if position < 0:
        raise ValueError("position must be non-negative")
    shifted = number >> position
    return shifted & 1


def set_bit(number: int, position: int) -> int:
    """Return ``number`` with the bit at ``position`` set."""
    return number | (1 << position)


def clear_bit(number: int, position: int) -> int:
    """Return ``number`` with the bit at ``position`` cleared."""
    return number & ~(1 << position)


def count_ones(number: int) -> int:
    """Count the set bits of a non-negative integer."""
    if number < 0:
        raise ValueError("number must be non-negative")
    count = 0
    while number:
        number &= number - 1
        count += 1
    return count


def is_power_of_two(number: int) -> bool:
    """Tell whether ``number`` is a positive power of two."""
    return number > 0 and not number & (number - 1)


def subsets(items: Iterable[T]) -> list[list[T]]:
    """List every subset, ordered by the bit mask that selects it."""
    pool: list[Any] = list(items)
    return [
        [item for bit, item in enumerate(pool) if mask >> bit & 1]
        for mask in range(1 << len(pool))
    ]


def is_prime(number: int) -> bool:
    """Primality by trial division over numbers of the form 6k +/- 1."""
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False
    divisor = 5
    while divisor * divisor <= number:
        if number % divisor == 0 or number % (divisor + 2) == 0:
            return False
        divisor += 6
    return True


def minimizing_shift(bits: str) -> int:
    """Return the shift Y that minimises X xor (X >> Y) for the binary string ``bits``."""
    if set(bits) - {"0", "1"}:
        raise ValueError(f"not a binary string: {bits!r}")
    if not bits:
        return 0
    rest = bits[1:]
    leading_zeros = len(rest) - len(rest.lstrip("0"))
    return (1 if bits[0] == "1" else 0) + leading_zeros