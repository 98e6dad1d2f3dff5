"""Classic sorting algorithms and a command to try them on random data."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable


def radix_sort(values: Iterable[int], passes: int = 4) -> list[int]:
    """Sort non-negative integers by their lowest ``passes`` decimal digits."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative values")
    for digit in range(passes):
        divisor = 10**digit
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by straight insertion."""
    result: list[int] = []
    for value in values:
        pos = len(result)
        while pos > 0 and result[pos - 1] > value:
            pos -= 1
        result.insert(pos, value)
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def counting_sort(values: Iterable[int], value_range: int) -> list[int]:
    """Sort integers from ``0`` to ``value_range - 1`` by counting them."""
    if value_range <= 0:
        raise ValueError("value_range must be positive")
    counts = [0] * value_range
    for value in values:
        if not 0 <= value < value_range:
            raise ValueError(f"value {value} outside range 0..{value_range - 1}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort with Hoare partitioning around the middle element."""
    items = list(values)
    pending = [(0, len(items) - 1)] if items else []
    while pending:
        left, right = pending.pop()
        pivot = items[(left + right) // 2]
        i, j = left, right
        while i <= j:
            while items[i] < pivot:
                i += 1
            while items[j] > pivot:
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if j > left:
            pending.append((left, j))
        if i < right:
            pending.append((i, right))
    return items


_ALGORITHMS: dict[str, Callable[[list[int], int], list[int]]] = {
    "radix": lambda values, _range: radix_sort(values),
    "insertion": lambda values, _range: insertion_sort(values),
    "merge": lambda values, _range: merge_sort(values),
    "counting": counting_sort,
    "quick": lambda values, _range: quick_sort(values),
}

_DEFAULT_RANGES = {"radix": 9000, "insertion": 20, "merge": 50, "counting": 50, "quick": 50}


def _generate(algorithm: str, count: int, value_range: int, rng: random.Random) -> list[int]:
    offset = 1000 if algorithm == "radix" else 0
    return [rng.randrange(value_range) + offset for _ in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Sort random numbers with the chosen algorithm and print before and after."""
    parser = argparse.ArgumentParser(description="Sort random numbers.")
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("count", type=int, help="how many numbers to draw")
    parser.add_argument("--range", dest="value_range", type=int, help="draw values below this")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("count must not be negative")
    value_range = args.value_range or _DEFAULT_RANGES[args.algorithm]
    if value_range <= 0:
        parser.error("range must be positive")

    rng = random.Random(args.seed)
    values = _generate(args.algorithm, args.count, value_range, rng)
    print(" ".join(map(str, values)))

    start = time.perf_counter()
    result = _ALGORITHMS[args.algorithm](values, value_range)
    elapsed = time.perf_counter() - start

    print(" ".join(map(str, result)))
    if args.algorithm == "radix":
        print(f"{elapsed} s")
    return 0