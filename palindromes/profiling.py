"""Runtime and memory profiling for the palindrome solvers.

Both the linear-time Manacher scan and the quadratic expand-around-center
reference are executed under ``tracemalloc`` so their timings and peak
allocations can be compared.  The helpers assert that the two solvers agree
before reporting any metric.
"""

from __future__ import annotations

from dataclasses import dataclass
import csv
import logging
import time
import tracemalloc
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

from .manacher import longest_palindromic_substrings
from .reference import expand_around_center, is_palindrome

logger = logging.getLogger(__name__)

CSV_HEADER = ["solver", "longest_length", "match_count", "time_seconds", "peak_bytes"]


@dataclass(frozen=True)
class SolverProfile:
    """Profiling information captured for a single solver run."""

    name: str
    longest_length: int
    match_count: int
    time_seconds: float
    peak_bytes: int

    def to_row(self) -> List[str]:
        """Serialise the profile for CSV persistence."""

        return [
            self.name,
            str(self.longest_length),
            str(self.match_count),
            f"{self.time_seconds:.9f}",
            str(self.peak_bytes),
        ]


def _run(
    name: str, solver: Callable[[str], List[str]], text: str
) -> Tuple[List[str], float, int]:
    tracemalloc.start()
    try:
        start = time.perf_counter()
        result = solver(text)
        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        logger.debug("%s traced memory: current=%d peak=%d", name, current, peak)
    finally:
        if tracemalloc.is_tracing():
            tracemalloc.stop()
    return result, elapsed, peak


def profile_solvers(text: str) -> Tuple[SolverProfile, SolverProfile]:
    """Profile both solvers on *text* and return ``(manacher, reference)``.

    Raises
    ------
    TypeError
        If *text* is not a string.
    AssertionError
        If the solvers disagree on the longest palindromes of *text* or report
        a string that is not a palindrome.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a string")

    fast_result, fast_time, fast_peak = _run(
        "manacher", longest_palindromic_substrings, text
    )
    slow_result, slow_time, slow_peak = _run(
        "expand_around_center", expand_around_center, text
    )

    if fast_result != slow_result:
        raise AssertionError(
            "Palindrome solvers produced divergent results: "
            f"manacher={fast_result!r}, expand_around_center={slow_result!r}"
        )
    invalid = [value for value in fast_result if not is_palindrome(value)]
    if invalid:
        raise AssertionError(f"Palindrome solvers reported non-palindromes: {invalid!r}")

    longest = len(fast_result[0]) if fast_result else 0
    return (
        SolverProfile(
            name="manacher",
            longest_length=longest,
            match_count=len(fast_result),
            time_seconds=fast_time,
            peak_bytes=fast_peak,
        ),
        SolverProfile(
            name="expand_around_center",
            longest_length=longest,
            match_count=len(slow_result),
            time_seconds=slow_time,
            peak_bytes=slow_peak,
        ),
    )


def write_profiles_to_csv(
    path: Path, profiles: Iterable[SolverProfile], *, newline: str = ""
) -> None:
    """Persist profiling results to ``path`` using a deterministic header."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline=newline) as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for profile in profiles:
            writer.writerow(profile.to_row())


__all__ = [
    "CSV_HEADER",
    "SolverProfile",
    "profile_solvers",
    "write_profiles_to_csv",
]
