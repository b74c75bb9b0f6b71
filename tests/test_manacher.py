"""Tests for :mod:`palindromes.manacher`."""

from __future__ import annotations

from itertools import product
from typing import List

import pytest

from palindromes.manacher import (
    BOUNDARY,
    PalindromeMatch,
    find_longest_palindromes,
    longest_palindrome_length,
    longest_palindromic_substrings,
    pad_sequence,
    palindrome_radii,
)


def _brute_force(text: str) -> List[str]:
    """Return all longest palindromes by checking every substring."""

    best: List[str] = []
    for start in range(len(text)):
        for end in range(start + 1, len(text) + 1):
            candidate = text[start:end]
            if candidate != candidate[::-1]:
                continue
            if not best or len(candidate) > len(best[0]):
                best = [candidate]
            elif len(candidate) == len(best[0]):
                best.append(candidate)
    return best


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("aba", ["aba"]),
        ("cbbd", ["bb"]),
        ("bananas", ["anana"]),
        ("abba", ["abba"]),
        ("abccba xyzzyx", ["abccba", "xyzzyx"]),
        ("levelmadamlevel", ["levelmadamlevel"]),
        ("aabbccddeeff", ["aa", "bb", "cc", "dd", "ee", "ff"]),
        ("babad", ["bab", "aba"]),
        ("google", ["goog"]),
        ("abcd", ["a", "b", "c", "d"]),
    ],
)
def test_known_scenarios(text: str, expected: List[str]) -> None:
    assert longest_palindromic_substrings(text) == expected


def test_repeated_text_at_distinct_offsets_is_reported_per_offset() -> None:
    assert longest_palindromic_substrings("abaxaba") == ["abaxaba"]
    assert longest_palindromic_substrings("abacaba-xy-abacaba") == [
        "abacaba",
        "abacaba",
    ]


def test_sentinel_like_characters_are_ordinary_input() -> None:
    assert longest_palindromic_substrings("#a#a#") == ["#a#a#"]
    assert longest_palindromic_substrings("a##b") == ["##"]
    assert longest_palindromic_substrings("\x00\x00x") == ["\x00\x00"]


def test_matches_brute_force_on_small_alphabets() -> None:
    for alphabet, max_length in (("ab", 9), ("abc", 6)):
        for length in range(max_length + 1):
            for letters in product(alphabet, repeat=length):
                text = "".join(letters)
                assert longest_palindromic_substrings(text) == _brute_force(text), text


def test_results_are_maximal_palindromic_substrings() -> None:
    text = "forgeeksskeegfor racecar"
    result = longest_palindromic_substrings(text)
    assert result == ["geeksskeeg"]
    for value in result:
        assert value in text
        assert value == value[::-1]
    longest = len(result[0])
    for start in range(len(text)):
        for end in range(start + longest + 1, len(text) + 1):
            window = text[start:end]
            assert window != window[::-1]


def test_results_are_deterministic() -> None:
    text = "mississippi"
    first = longest_palindromic_substrings(text)
    assert first == ["ississi"]
    assert longest_palindromic_substrings(text) == first


def test_pad_sequence_interleaves_boundaries() -> None:
    padded = pad_sequence("abc")
    assert padded == [BOUNDARY, "a", BOUNDARY, "b", BOUNDARY, "c", BOUNDARY]
    assert pad_sequence("") == [BOUNDARY]


def test_palindrome_radii_table() -> None:
    assert palindrome_radii("") == [0]
    assert palindrome_radii("a") == [0, 1, 0]
    assert palindrome_radii("aba") == [0, 1, 0, 3, 0, 1, 0]
    assert palindrome_radii("abba") == [0, 1, 0, 1, 4, 1, 0, 1, 0]


def test_find_longest_palindromes_reports_locations() -> None:
    matches = find_longest_palindromes("abccba xyzzyx")
    assert matches == [
        PalindromeMatch(text="abccba xyzzyx", start=0, length=6),
        PalindromeMatch(text="abccba xyzzyx", start=7, length=6),
    ]
    assert [match.end for match in matches] == [5, 12]
    assert [match.value for match in matches] == ["abccba", "xyzzyx"]
    assert find_longest_palindromes("") == []


def test_longest_palindrome_length() -> None:
    assert longest_palindrome_length("") == 0
    assert longest_palindrome_length("x") == 1
    assert longest_palindrome_length("bananas") == 5


def test_rejects_non_string_input() -> None:
    with pytest.raises(TypeError):
        longest_palindromic_substrings(123)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        longest_palindromic_substrings(["a", "b"])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        find_longest_palindromes(b"abba")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        pad_sequence(None)  # type: ignore[arg-type]
    assert BOUNDARY is None
