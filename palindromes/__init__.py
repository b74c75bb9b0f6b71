"""Longest palindromic substring search."""

from .manacher import (
    BOUNDARY,
    PalindromeMatch,
    find_longest_palindromes,
    longest_palindrome_length,
    longest_palindromic_substrings,
    pad_sequence,
    palindrome_radii,
)
from .profiling import SolverProfile, profile_solvers, write_profiles_to_csv
from .reference import expand_around_center, is_palindrome

__all__ = [
    "BOUNDARY",
    "PalindromeMatch",
    "SolverProfile",
    "expand_around_center",
    "find_longest_palindromes",
    "is_palindrome",
    "longest_palindrome_length",
    "longest_palindromic_substrings",
    "pad_sequence",
    "palindrome_radii",
    "profile_solvers",
    "write_profiles_to_csv",
]
