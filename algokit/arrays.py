"""Array problems: falling dominoes, stock profit, unsorted span, image rotation."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, pairwise
from typing import Any


def push_dominoes(dominoes: str) -> str:
    """Return the final state of a row of dominoes pushed left ('L') or right ('R')."""
    forces = [("L", -1)]
    forces += [(ch, i) for i, ch in enumerate(dominoes) if ch in "LR"]
    forces.append(("R", len(dominoes)))

    result = list(dominoes)
    for (left, i), (right, j) in pairwise(forces):
        if left == right:
            result[i + 1 : j] = left * (j - i - 1)
        elif left == "R":
            total = i + j
            mid = total // 2
            if total % 2 == 0:
                result[i:mid] = "R" * (mid - i)
                result[mid] = "."
            else:
                result[i : mid + 1] = "R" * (mid + 1 - i)
            result[mid + 1 : j + 1] = "L" * (j - mid)
    return "".join(result)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    if not prices:
        return 0
    best = 0
    begin = finish = prices[0]
    for price in prices:
        if price < begin:
            best = max(best, finish - begin)
            begin = finish = price
        else:
            finish = max(finish, price)
    return max(best, finish - begin)


def find_unsorted_subarray(nums: Sequence[Any]) -> int:
    """Return the length of the shortest span whose sorting sorts all of ``nums``."""
    n = len(nums)
    if n <= 1:
        return 0
    prefix_max = list(accumulate(nums, max))
    suffix_min = list(accumulate(reversed(nums), min))[::-1]

    def misplaced(i: int) -> bool:
        return (i < n - 1 and nums[i] > suffix_min[i + 1]) or (
            i > 0 and nums[i] < prefix_max[i - 1]
        )

    low = next((i for i in range(n) if misplaced(i)), None)
    if low is None:
        return 0
    high = next(i for i in reversed(range(n)) if misplaced(i))
    return high - low + 1


def rotate_clockwise(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return ``matrix`` turned 90 degrees clockwise."""
    return [list(column) for column in zip(*reversed(matrix))]