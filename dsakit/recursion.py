"""Reversal of sequences and palindrome checks."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TypeVar

T = TypeVar("T")


def reversed_list(items: Iterable[T]) -> list[T]:
    """A new list with the items in reverse order."""
    return list(items)[::-1]


def reverse_in_place(items: MutableSequence[T]) -> None:
    """Reverse a mutable sequence by swapping its ends towards the middle."""
    left, right = 0, len(items) - 1
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def is_palindrome(text: str) -> bool:
    """True when the text reads the same forwards and backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))