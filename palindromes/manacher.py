"""Linear-time longest palindromic substring search.

This module implements Manacher's algorithm.  The input is interleaved with a
boundary marker so that odd- and even-length palindromes share a single
centre-expansion scan, and the radii of previously discovered palindromes are
reused through mirror symmetry to keep the total work linear.

The public API covers the following capabilities:

* ``longest_palindromic_substrings`` – every maximal-length palindrome as a
  list of strings, ordered left to right.
* ``find_longest_palindromes`` – the same result with location metadata.
* ``palindrome_radii`` – the raw radius table produced by the scan.
* ``pad_sequence`` – the interleaved working sequence.

The boundary marker is ``None`` rather than a reserved character such as
``"#"``, so every string is a legal input.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

BOUNDARY = None


@dataclass(frozen=True)
class PalindromeMatch:
    """A maximal palindrome located inside *text*.

    Attributes
    ----------
    text:
        Original string.
    start:
        Inclusive start index of the palindrome inside *text*.
    length:
        Number of characters covered by the palindrome.
    """

    text: str
    start: int
    length: int

    @property
    def end(self) -> int:
        """Return the inclusive end index of the palindrome."""

        return self.start + self.length - 1

    @property
    def value(self) -> str:
        """Return the palindromic substring."""

        return self.text[self.start : self.start + self.length]


def _validate_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError("text must be a string")


def pad_sequence(text: str) -> List[Optional[str]]:
    """Return *text* interleaved with boundary markers.

    The result has length ``2 * len(text) + 1``: odd indices hold the original
    characters and even indices hold :data:`BOUNDARY`.
    """

    _validate_text(text)
    padded: List[Optional[str]] = [BOUNDARY] * (2 * len(text) + 1)
    padded[1::2] = text
    return padded


def palindrome_radii(text: str) -> List[int]:
    """Return the palindrome radius for every position of the padded sequence.

    ``radii[i]`` is the half-width of the longest palindrome centred at padded
    index ``i``, which equals the length of the matching palindrome in *text*.
    The two outermost positions are never used as centres and stay ``0``.
    """

    padded = pad_sequence(text)
    size = len(padded)
    radii = [0] * size
    center = right_boundary = 0

    for i in range(1, size - 1):
        if i < right_boundary:
            radii[i] = min(right_boundary - i, radii[2 * center - i])

        radius = radii[i]
        while (
            i - radius - 1 >= 0
            and i + radius + 1 < size
            and padded[i - radius - 1] == padded[i + radius + 1]
        ):
            radius += 1
        radii[i] = radius

        if i + radius > right_boundary:
            center, right_boundary = i, i + radius

    logger.debug(
        "Scanned %d padded positions; rightmost palindrome centred at %d",
        size,
        center,
    )
    return radii


def find_longest_palindromes(text: str) -> List[PalindromeMatch]:
    """Return every longest palindrome of *text* with its location.

    Matches are ordered by start offset.  Identical substrings found at
    different offsets are reported once per offset.  An empty input yields an
    empty list.

    Raises
    ------
    TypeError
        If *text* is not a string.
    """

    radii = palindrome_radii(text)
    max_radius = max(radii)
    if max_radius == 0:
        return []

    matches = [
        PalindromeMatch(text=text, start=(index - max_radius) // 2, length=max_radius)
        for index, radius in enumerate(radii)
        if radius == max_radius
    ]
    logger.debug(
        "Found %d palindrome(s) of length %d", len(matches), max_radius
    )
    return matches


def longest_palindromic_substrings(text: str) -> List[str]:
    """Return all longest palindromic substrings of *text*.

    The search runs in O(n) time and O(n) additional space.  The result lists
    each maximal palindrome in left-to-right order; ``""`` yields ``[]`` and a
    single character ``c`` yields ``[c]``.

    Raises
    ------
    TypeError
        If *text* is not a string.
    """

    return [match.value for match in find_longest_palindromes(text)]


def longest_palindrome_length(text: str) -> int:
    """Return the length of the longest palindrome in *text* (``0`` if empty)."""

    return max(palindrome_radii(text))


__all__ = [
    "BOUNDARY",
    "PalindromeMatch",
    "find_longest_palindromes",
    "longest_palindrome_length",
    "longest_palindromic_substrings",
    "pad_sequence",
    "palindrome_radii",
]
