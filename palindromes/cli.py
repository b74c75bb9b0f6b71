"""Command line interface for the longest palindromic substring search.

Each positional ``TEXT`` argument (or each line read from standard input when
``--stdin`` is given) is scanned and its longest palindromes are reported in
plain text, JSON, or as a ``rich`` table.  ``--profile`` additionally compares
the linear and quadratic solvers and writes their metrics to CSV.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .manacher import PalindromeMatch, find_longest_palindromes
from .profiling import SolverProfile, profile_solvers, write_profiles_to_csv

logger = logging.getLogger(__name__)

FORMATS = ("plain", "json", "table")


def format_plain(text: str, matches: Sequence[PalindromeMatch]) -> str:
    """Return the one-line plain-text report for *text*."""

    header = f'Longest palindromic substrings of "{text}":'
    if not matches:
        return f"{header} No palindromes found."
    return f"{header} " + " ".join(match.value for match in matches)


def _to_payload(text: str, matches: Sequence[PalindromeMatch]) -> Dict[str, object]:
    return {
        "text": text,
        "length": matches[0].length if matches else 0,
        "palindromes": [match.value for match in matches],
        "matches": [
            {"start": match.start, "end": match.end, "value": match.value}
            for match in matches
        ],
    }


def render_table(results: Iterable[tuple[str, List[PalindromeMatch]]]) -> Table:
    """Build a ``rich`` table summarising every scanned input."""

    table = Table(title="Longest palindromic substrings")
    table.add_column("Input")
    table.add_column("Length", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("Palindrome")
    for text, matches in results:
        if not matches:
            table.add_row(Text(repr(text)), "0", "-", "-")
            continue
        for match in matches:
            table.add_row(
                Text(repr(text)),
                str(match.length),
                str(match.start),
                Text(match.value),
            )
    return table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palindromes",
        description="Find every longest palindromic substring in linear time",
    )
    parser.add_argument("texts", nargs="*", metavar="TEXT", help="Strings to scan")
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read one input per line from standard input",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="plain",
        help="Output format (default: plain)",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Profile both solvers and write the metrics to this CSV file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point returning the process exit code."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    texts = list(args.texts)
    if args.stdin:
        texts.extend(line.rstrip("\r\n") for line in sys.stdin)
    if not texts:
        parser.error("provide at least one TEXT argument or use --stdin")

    results = [(text, find_longest_palindromes(text)) for text in texts]

    if args.format == "json":
        print(json.dumps([_to_payload(text, matches) for text, matches in results], indent=2))
    elif args.format == "table":
        Console().print(render_table(results))
    else:
        for text, matches in results:
            print(format_plain(text, matches))

    if args.profile is not None:
        profiles: List[SolverProfile] = []
        try:
            for text in texts:
                profiles.extend(profile_solvers(text))
        except AssertionError as exc:
            logger.error("Failed to profile solvers: %s", exc)
            return 1
        write_profiles_to_csv(args.profile, profiles)
        logger.info("Profiles written to %s", args.profile)

    return 0


__all__ = ["FORMATS", "format_plain", "main", "render_table"]
