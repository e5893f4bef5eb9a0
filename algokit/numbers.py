"""Number problems: powers of two, square roots, primes, races, cricket, OR-pair XOR, knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt

_BISECTION_STEPS = 50
_SHOT_RUNS = (6, 4, 1, 2)


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return bool(n) and not (n & (n - 1))


def sqrt_bisect(num: float) -> float:
    """Approximate the square root of ``num`` by 50 bisection steps on [0, num]."""
    lower, upper = 0.0, float(num)
    guess = 0.0
    for _ in range(_BISECTION_STEPS):
        guess = (lower + upper) / 2
        square = guess * guess
        if square == num:
            return guess
        if square > num:
            upper = guess
        else:
            lower = guess
    return guess


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, by trial division up to its square root."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def speed_winner(a: float, b: float, x: float, y: float) -> str:
    """Compare speeds a/x (Alice) and b/y (Bob): 'ALICE', 'BOB' or 'EQUAL'."""
    alice = a / x
    bob = b / y
    if alice > bob:
        return "ALICE"
    if bob > alice:
        return "BOB"
    return "EQUAL"


def min_balls(runs: int) -> int:
    """Return the fewest balls needed to score exactly ``runs`` with shots of 6, 4, 2 and 1."""
    if runs < 0:
        raise ValueError("runs must not be negative")
    best = [0] * (runs + 1)
    for total in range(1, runs + 1):
        best[total] = min(best[total - shot] for shot in _SHOT_RUNS if shot <= total) + 1
    return best[runs]


def or_pairs_xor(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the XOR of ``a[i] | b[j]`` over every pair of positions i, j.

    Both sequences must have the same length and hold non-negative integers.
    """
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    if any(v < 0 for v in a) or any(v < 0 for v in b):
        raise ValueError("values must not be negative")
    n = len(a)
    width = max((v.bit_length() for v in (*a, *b)), default=0)
    result = 0
    for bit in range(width):
        in_b = sum((v >> bit) & 1 for v in b)
        in_a = sum((v >> bit) & 1 for v in a)
        pairs_set = in_a * n + (n - in_a) * in_b
        if pairs_set & 1:
            result |= 1 << bit
    return result


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items (each used at most once) fitting in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity <= 0:
        return 0
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            candidate = best[room - weight] + value
            if candidate > best[room]:
                best[room] = candidate
    return best[capacity]