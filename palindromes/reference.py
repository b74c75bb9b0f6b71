"""Quadratic reference solver for longest palindromic substrings.

The expand-around-center search inspects all ``2n - 1`` centres of the input
and grows each one until the characters on either side differ.  It is kept as
an independent oracle for :mod:`palindromes.manacher` and as the baseline for
:mod:`palindromes.profiling`.
"""

from __future__ import annotations

from typing import List, Tuple


def _expand_from_center(text: str, left: int, right: int) -> Tuple[int, int]:
    """Return the (start, end) indices after expanding around a center.

    Parameters
    ----------
    text:
        String to inspect.
    left, right:
        Starting indices for the expansion. When *left == right* the expansion
        considers odd-length palindromes, otherwise even-length palindromes.
    """

    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return left + 1, right - 1


def is_palindrome(text: str) -> bool:
    """Return ``True`` when *text* reads the same in both directions."""

    return text == text[::-1]


def expand_around_center(text: str) -> List[str]:
    """Return all longest palindromic substrings of *text* in O(n^2) time.

    Results are ordered by start offset, matching
    :func:`palindromes.manacher.longest_palindromic_substrings`.

    Raises
    ------
    TypeError
        If *text* is not a string.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a string")

    best_length = 0
    starts: List[int] = []
    for center in range(len(text)):
        for left, right in ((center, center), (center, center + 1)):
            start, end = _expand_from_center(text, left, right)
            length = end - start + 1
            if length > best_length:
                best_length = length
                starts = [start]
            elif length == best_length and length > 0:
                starts.append(start)

    return [text[start : start + best_length] for start in sorted(starts)]


__all__ = ["expand_around_center", "is_palindrome"]
