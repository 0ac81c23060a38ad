import time

from strongpass.charsets import MIN_LENGTH
from strongpass.generator import generate
from strongpass.validator import is_valid


def test_rapid_generation():
    start = time.perf_counter()
    passwords = [generate() for _ in range(500)]
    elapsed = time.perf_counter() - start
    assert all(len(pw) >= MIN_LENGTH and is_valid(pw) for pw in passwords)
    # generous bound; a single call is well under a millisecond
    assert elapsed < 10


def test_uniqueness_rate():
    passwords = [generate() for _ in range(150)]
    assert len(set(passwords)) / len(passwords) >= 0.95


def test_first_characters_vary():
    firsts = [generate()[0] for _ in range(20)]
    same = sum(1 for a, b in zip(firsts, firsts[1:]) if a == b)
    assert same <= 8
