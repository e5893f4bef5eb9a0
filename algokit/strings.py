"""String problems: anagrams, subsequences, base palindromes and a bead necklace."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

_DIGITS = "0123456789ABCDEFGHIJ"
_PALINDROME_BASES = range(2, 11)


def are_anagrams(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters the same number of times."""
    return len(first) == len(second) and sorted(first) == sorted(second)


def subsequences(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``.

    At each character the subsequences without it come before those with it,
    so ``"ab"`` gives ``"", "b", "a", "ab"``.
    """

    def walk(rest: str, chosen: str) -> Iterator[str]:
        if not rest:
            yield chosen
            return
        yield from walk(rest[1:], chosen)
        yield from walk(rest[1:], chosen + rest[0])

    yield from walk(text, "")


def to_base(num: int, base: int) -> str:
    """Write the non-negative ``num`` in ``base`` (2 to 20), using A-J for digits 10-19."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}")
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return "0"
    digits = []
    while num:
        num, digit = divmod(num, base)
        digits.append(_DIGITS[digit])
    return "".join(reversed(digits))


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways."""
    return text == text[::-1]


def _is_dual_palindrome(number: int) -> bool:
    hits = 0
    for base in _PALINDROME_BASES:
        if is_palindrome(to_base(number, base)):
            hits += 1
            if hits >= 2:
                return True
    return False


def dual_palindromes(count: int, start: int) -> list[int]:
    """Return the first ``count`` numbers above ``start`` that are palindromes in two or more bases 2-10."""
    if start < 0:
        raise ValueError("start must not be negative")
    found: list[int] = []
    candidates = itertools.count(start + 1)
    while len(found) < count:
        number = next(candidates)
        if _is_dual_palindrome(number):
            found.append(number)
    return found


def max_beads(beads: str) -> int:
    """Return the most beads collectable from one break in a circular necklace.

    Beads are 'r', 'b' or 'w'; white beads match either colour. Starting at
    each break point, beads are taken while at most one colour change occurs.
    """
    best = 0
    for start in range(len(beads)):
        colour = "w"
        switched = False
        taken = 0
        for bead in beads[start:] + beads[:start]:
            if bead != "w":
                if colour == "w":
                    colour = bead
                elif colour != bead:
                    if switched:
                        break
                    colour = bead
                    switched = True
            taken += 1
        best = max(best, taken)
    return best