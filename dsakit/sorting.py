"""Selection sort, digit counting and minimum search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return the items in increasing order, sorted by repeated minimum selection."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def digit_count(number: int) -> int:
    """Number of decimal digits of a positive integer; 0 for zero or negatives."""
    count = 0
    while number > 0:
        number //= 10
        count += 1
    return count


def smallest_with_index(items: Sequence[T]) -> tuple[T, int]:
    """The smallest item and the index of its first occurrence."""
    if not items:
        raise ValueError("cannot take the smallest item of an empty sequence")
    index = min(range(len(items)), key=items.__getitem__)
    return items[index], index