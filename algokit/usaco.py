"""Calendar and bookkeeping problems: Friday the 13th counts and gift balances."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_FIRST_YEAR = 1900
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
# 13 January 1900 fell on a Saturday; weekday 0 is Saturday throughout.
_FIRST_THIRTEENTH = 0


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a leap year in the Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def friday_counts(years: int) -> list[int]:
    """Count the weekdays on which the 13th falls from 1900 for ``years`` years.

    The seven counts run Saturday, Sunday, Monday, ..., Friday.
    """
    if years < 0:
        raise ValueError("years must not be negative")
    counts = [0] * 7
    weekday = _FIRST_THIRTEENTH
    for year in range(_FIRST_YEAR, _FIRST_YEAR + years):
        leap = is_leap_year(year)
        for month, days in enumerate(_MONTH_DAYS):
            counts[weekday] += 1
            if month == 1 and leap:
                days += 1
            weekday = (weekday + days) % 7
    return counts


def gift_balances(
    names: Sequence[str],
    gifts: Iterable[tuple[str, int, Sequence[str]]],
) -> dict[str, int]:
    """Return how much more each person received than gave.

    Each gift is ``(giver, amount, recipients)``: the amount is split evenly
    in whole units among the recipients and the giver keeps what is left.
    The result keeps the order of ``names``.
    """
    known = set(names)
    given = dict.fromkeys(names, 0)
    received = dict.fromkeys(names, 0)

    def check(name: str) -> None:
        if name not in known:
            raise ValueError(f"unknown person {name!r}")

    for giver, amount, recipients in gifts:
        check(giver)
        for recipient in recipients:
            check(recipient)
        if recipients and amount:
            share, left_over = divmod(amount, len(recipients))
        else:
            share, left_over = 0, amount
        given[giver] = amount
        received[giver] += left_over
        for recipient in recipients:
            received[recipient] += share
    return {name: received[name] - given[name] for name in names}