"""Demonstration harness for the longest palindromic substring search.

Running the module checks the built-in scenarios against
``palindromes.longest_palindromic_substrings`` and then prints the sample
report for ``"google"``.  Any scenario whose result differs from its expected
palindromes aborts the run with a ``RuntimeError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from palindromes import find_longest_palindromes, longest_palindromic_substrings
from palindromes.cli import format_plain

SAMPLE_INPUT = "google"


@dataclass(frozen=True)
class DemoCase:
    """Container describing an input and its expected longest palindromes."""

    name: str
    text: str
    expected: Tuple[str, ...]


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase("Empty string", "", ())
    yield DemoCase("Single character", "a", ("a",))
    yield DemoCase("Odd length", "aba", ("aba",))
    yield DemoCase("Palindrome in the middle", "cbbd", ("bb",))
    yield DemoCase("Longer string", "bananas", ("anana",))
    yield DemoCase("Even length", "abba", ("abba",))
    yield DemoCase("Two disjoint maxima", "abccba xyzzyx", ("abccba", "xyzzyx"))
    yield DemoCase("Whole string", "levelmadamlevel", ("levelmadamlevel",))
    yield DemoCase(
        "Six disjoint maxima",
        "aabbccddeeff",
        ("aa", "bb", "cc", "dd", "ee", "ff"),
    )


def _format_report(case: DemoCase) -> str:
    """Return the status line for *case*."""

    actual = tuple(longest_palindromic_substrings(case.text))
    if actual != case.expected:
        raise RuntimeError(
            "Demo case expectation mismatch:"
            f" {case.name} expected {list(case.expected)}"
            f" but received {list(actual)}"
        )
    return f"{case.name}: {case.text!r} -> {list(actual)}"


def main() -> None:
    """Execute every demo case and print the sample report."""

    lines: List[str] = [_format_report(case) for case in _iter_demo_cases()]
    for line in lines:
        print(line)
    print()
    print(format_plain(SAMPLE_INPUT, find_longest_palindromes(SAMPLE_INPUT)))


if __name__ == "__main__":
    main()
