"""Decimal digit helpers for engraved stones."""

from __future__ import annotations


def count_digits(stone: int) -> int:
    """Number of decimal digits in a non-negative number."""
    if stone < 0:
        raise ValueError("stone numbers are non-negative")
    return len(str(stone))


def split_even_digits(stone: int, digits: int) -> list[int]:
    """Split a number of ``digits`` digits into its upper and lower halves."""
    split = digits // 2
    higher, lower = divmod(stone, 10**split)
    return [higher % 10 ** (digits - split), lower]