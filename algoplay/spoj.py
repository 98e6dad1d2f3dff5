"""Read judge-style input for one of the puzzle tasks and produce its output."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from algoplay.numbers import (
    add_reversed,
    add_reversed_trimmed,
    binary_to_decimal,
    cookie_boxes,
    gcd_by_factors,
    larger_reversed,
    last_digit_of_power,
    lcm,
    palindrome_steps,
    quadratic_root_count,
    transpose,
    wow,
)
from algoplay.text import compress_runs, count_runs


class _Tokens:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._items = text.split()
        self._pos = 0

    def remaining(self) -> int:
        return len(self._items) - self._pos

    def next_word(self) -> str:
        if self._pos >= len(self._items):
            raise ValueError("unexpected end of input")
        item = self._items[self._pos]
        self._pos += 1
        return item

    def next_int(self) -> int:
        return int(self.next_word())

    def next_float(self) -> float:
        return float(self.next_word())


def _lines(items) -> str:
    return "".join(f"{item}\n" for item in items)


def _pairs(tokens: _Tokens, func) -> str:
    results = []
    for _ in range(tokens.next_int()):
        a = tokens.next_int()
        b = tokens.next_int()
        results.append(func(a, b))
    return _lines(results)


def _sum(tokens: _Tokens) -> str:
    results = []
    for _ in range(tokens.next_int()):
        count = tokens.next_int()
        results.append(sum(tokens.next_int() for _ in range(count)))
    return _lines(results)


def _bfn1(tokens: _Tokens) -> str:
    results = []
    for _ in range(tokens.next_int()):
        palindrome, steps = palindrome_steps(tokens.next_int())
        results.append(f"{palindrome} {steps}")
    return _lines(results)


def _glutton(tokens: _Tokens) -> str:
    results = []
    for _ in range(tokens.next_int()):
        eaters = tokens.next_int()
        box_size = tokens.next_int()
        times = [tokens.next_int() for _ in range(eaters)]
        results.append(cookie_boxes(times, box_size))
    return _lines(results)


def _trn(tokens: _Tokens) -> str:
    rows = tokens.next_int()
    columns = tokens.next_int()
    matrix = [[tokens.next_int() for _ in range(columns)] for _ in range(rows)]
    body = "".join(" ".join(map(str, row)) + " \n" for row in transpose(matrix))
    return "\n" + body


def _flamaster(tokens: _Tokens) -> str:
    words = [tokens.next_word() for _ in range(tokens.next_int())]
    return _lines(compress_runs(word) for word in words)


def _runs(tokens: _Tokens) -> str:
    parts = []
    for _ in range(tokens.next_int()):
        tokens.next_int()
        parts.append(count_runs(tokens.next_word()))
    return "".join(parts)


def _rownanie(tokens: _Tokens) -> str:
    results = []
    while tokens.remaining() >= 3:
        a, b, c = tokens.next_float(), tokens.next_float(), tokens.next_float()
        results.append(quadratic_root_count(a, b, c))
    return _lines(results)


_TASKS: dict[str, Callable[[_Tokens], str]] = {
    "addrev": lambda t: _pairs(t, add_reversed),
    "adding-reversed": lambda t: _pairs(t, add_reversed_trimmed),
    "bfn1": _bfn1,
    "power": lambda t: _pairs(t, last_digit_of_power),
    "flamaster": _flamaster,
    "glutton": _glutton,
    "nwd": lambda t: _pairs(t, gcd_by_factors),
    "sum": _sum,
    "trn": _trn,
    "wow": lambda t: wow(t.next_int()),
    "bin": lambda t: str(binary_to_decimal(t.next_int())),
    "latkarf": lambda t: _pairs(t, larger_reversed),
    "przedszkolanka": lambda t: _pairs(t, lcm),
    "rownanie": _rownanie,
    "runs": _runs,
}

TASKS = tuple(sorted(_TASKS))


def solve(task: str, text: str) -> str:
    """Run the named task on the input text and return its output."""
    try:
        handler = _TASKS[task]
    except KeyError:
        raise ValueError(f"unknown task {task!r}; choose from {', '.join(TASKS)}") from None
    return handler(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    """Read a task's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Solve a puzzle task from its input.")
    parser.add_argument("task", choices=TASKS)
    parser.add_argument("input", nargs="?", help="input file; standard input when left out")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        output = solve(args.task, text)
    except ValueError as error:
        parser.error(str(error))
    sys.stdout.write(output)
    return 0