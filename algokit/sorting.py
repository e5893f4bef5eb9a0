"""Simple comparison sorts: bubble sort and recursive insertion sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order, sorted by bubble sort."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _insert_last(prefix: list[Any], length: int) -> None:
    """Sort the first ``length`` elements of ``prefix`` in place, recursively."""
    if length <= 1:
        return
    _insert_last(prefix, length - 1)
    last = prefix[length - 1]
    j = length - 2
    while j >= 0 and prefix[j] > last:
        prefix[j + 1] = prefix[j]
        j -= 1
    prefix[j + 1] = last


def insertion_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order, sorted by recursive insertion sort."""
    result = list(items)
    _insert_last(result, len(result))
    return result