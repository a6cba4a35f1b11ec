"""Natural-order comparison of printer model names.

Embedded runs of decimal digits compare by numeric value and everything else
compares by character code, so "LaserJet-2200" sorts after "LaserJet-100".
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")

DIGITS = frozenset("0123456789")


def _run_length(s: str, start: int, *, digits: bool) -> int:
    """Length of the run of digit (or non-digit) characters at ``s[start]``."""
    end = start
    while end < len(s) and (s[end] in DIGITS) is digits:
        end += 1
    return end - start


def _sign(a: int | str, b: int | str) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _compare_numbers(a: str, b: str) -> int:
    """Compare two digit strings by value, without converting to int.

    int() refuses very long digit strings, so magnitude is decided by the
    number of significant digits first and then digit by digit.
    """
    a = a.lstrip("0")
    b = b.lstrip("0")
    return _sign(len(a), len(b)) or _sign(a, b)


def model_compare(a: str, b: str) -> int:
    """Compare two model names in natural order.

    Returns -1, 0 or 1. Digit runs only ever compare against digit runs: when
    one side has digits where the other has none, the digits sort first.

    Comparison stops as soon as either string runs out and the result is then
    0, whatever is left in the other string. ``model_compare("100", "100a")``
    is therefore 0.

    Args:
        a: First model name
        b: Second model name

    Returns:
        -1 if a sorts before b, 1 if after, 0 otherwise
    """
    i = j = 0
    while i < len(a) and j < len(b):
        ca, cb = a[i], b[j]
        if ca != cb and ca not in DIGITS and cb not in DIGITS:
            return -1 if ca < cb else 1

        len_a = _run_length(a, i, digits=True)
        a_is_digit = len_a > 0
        if not a_is_digit:
            len_a = _run_length(a, i, digits=False)

        len_b = _run_length(b, j, digits=True)
        if not len_b:
            if a_is_digit:
                return -1
            len_b = _run_length(b, j, digits=False)
        elif not a_is_digit:
            return 1

        if a_is_digit:
            cmp = _compare_numbers(a[i : i + len_a], b[j : j + len_b])
        else:
            n = min(len_a, len_b)
            cmp = _sign(a[i : i + n], b[j : j + n])

        if cmp:
            return cmp
        if len_a != len_b:
            return -1 if len_a < len_b else 1

        i += len_a
        j += len_b

    return 0


model_sort_key = functools.cmp_to_key(model_compare)


def sort_models(
    names: Iterable[T],
    *,
    key: Callable[[T], str] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Return names sorted in natural model order.

    Args:
        names: Model names, or arbitrary items when ``key`` is given
        key: Extracts the model name from each item
        reverse: Sort in descending order

    Returns:
        New sorted list
    """
    if key is None:
        return sorted(names, key=model_sort_key, reverse=reverse)  # type: ignore[arg-type]
    return sorted(names, key=lambda item: model_sort_key(key(item)), reverse=reverse)
