"""Finding the leader: a value that occurs in more than half of a sequence."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable


def candidate_leader(values: Iterable[int]) -> int | None:
    """Return the only value that could be a leader, or None if none can be."""
    it = iter(values)
    try:
        candidate = next(it)
    except StopIteration:
        return None
    votes = 1
    for value in it:
        if votes == 0:
            candidate = value
            votes = 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    return candidate if votes else None


def find_leader(values: Iterable[int]) -> int | None:
    """Return the leader of the values, or None if there is none."""
    items = list(values)
    candidate = candidate_leader(items)
    if candidate is None:
        return None
    return candidate if items.count(candidate) > len(items) // 2 else None


def main(argv: list[str] | None = None) -> int:
    """Draw random zeros and ones and report their leader."""
    parser = argparse.ArgumentParser(description="Find the leader of random bits.")
    parser.add_argument("count", type=int, help="how many numbers to draw")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("count must not be negative")

    rng = random.Random(args.seed)
    values = [rng.randrange(2) for _ in range(args.count)]
    print(" ".join(map(str, values)))

    leader = find_leader(values)
    print("No leader" if leader is None else f"Leader is {leader}")
    return 0