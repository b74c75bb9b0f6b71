"""Tests for the ``palindrome_demo`` demonstration script."""

from __future__ import annotations

import importlib

import pytest

import palindrome_demo


def test_demo_outputs_expected_lines(capsys: pytest.CaptureFixture[str]) -> None:
    importlib.reload(palindrome_demo)
    palindrome_demo.main()
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Empty string: '' -> []"
    assert lines[6] == "Two disjoint maxima: 'abccba xyzzyx' -> ['abccba', 'xyzzyx']"
    assert lines[-2] == ""
    assert lines[-1] == 'Longest palindromic substrings of "google": goog'


def test_demo_rejects_mismatched_expectation(monkeypatch: pytest.MonkeyPatch) -> None:
    def bad_cases():  # noqa: ANN202 - test double
        yield palindrome_demo.DemoCase("Broken", "abba", ("bb",))

    monkeypatch.setattr(palindrome_demo, "_iter_demo_cases", bad_cases)
    with pytest.raises(RuntimeError, match="Broken"):
        palindrome_demo.main()
