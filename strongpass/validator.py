"""
strongpass.validator
Pure predicate deciding whether a candidate satisfies the generation policy.
"""

from typing import Optional

from .charsets import (
    CHARACTER_CLASSES,
    MIN_LENGTH,
    contains_weak_pattern,
    has_adjacent_repeat,
)


def first_violation(password: str) -> Optional[str]:
    """
    Return the name of the first rule `password` breaks, or None.

    Rules are checked in order: length, one character of each class
    (lowercase, uppercase, digit, special), no adjacent repeat, no weak
    pattern.
    """
    if len(password) < MIN_LENGTH:
        return "length"

    for name, chars in CHARACTER_CLASSES:
        if not any(c in chars for c in password):
            return name

    if has_adjacent_repeat(password):
        return "repeat"

    if contains_weak_pattern(password):
        return "weak_pattern"

    return None


def is_valid(password: str) -> bool:
    return first_violation(password) is None
