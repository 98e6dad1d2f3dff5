"""Run-length shortening of strings."""

from __future__ import annotations

from itertools import groupby


def _runs(text: str):
    for char, group in groupby(text):
        yield char, sum(1 for _ in group)


def compress_runs(text: str) -> str:
    """Write runs longer than two as the letter followed by the length."""
    parts = []
    for char, length in _runs(text):
        parts.append(f"{char}{length}" if length > 2 else char * length)
    return "".join(parts)


def count_runs(text: str) -> str:
    """Write runs longer than two as the length followed by the letter."""
    parts = []
    for char, length in _runs(text):
        parts.append(f"{length}{char}" if length > 2 else char * length)
    return "".join(parts)