import random
import re

from algoplay.text import compress_runs, count_runs


def _expand_suffix(text):
    return "".join(ch * int(n or 1) for ch, n in re.findall(r"([A-Za-z])(\d*)", text))


def _expand_prefix(text):
    return "".join(ch * int(n or 1) for n, ch in re.findall(r"(\d*)([A-Za-z])", text))


def _samples():
    rng = random.Random(5)
    return ["".join(rng.choice("ABC") for _ in range(rng.randrange(1, 40))) for _ in range(50)]


def test_compress_pinned():
    assert compress_runs("AAAA") == "A4"
    assert compress_runs("abc") == "abc"
    assert compress_runs("aabb") == "aabb"
    assert compress_runs("") == ""


def test_count_pinned():
    assert count_runs("AAAA") == "4A"
    assert count_runs("abc") == "abc"
    assert count_runs("") == ""


def test_compress_round_trip():
    for text in _samples():
        assert _expand_suffix(compress_runs(text)) == text


def test_count_round_trip():
    for text in _samples():
        assert _expand_prefix(count_runs(text)) == text


def test_never_longer():
    for text in _samples():
        assert len(compress_runs(text)) <= len(text)
        assert len(count_runs(text)) == len(compress_runs(text))