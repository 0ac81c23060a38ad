"""
strongpass.charsets
Character classes, policy constants and weak-pattern denylists.
"""

from typing import Iterable, Optional, Tuple

MIN_LENGTH = 12
MAX_LENGTH = 20
MAX_GENERATION_ATTEMPTS = 20
MAX_REPAIR_RETRIES = 10

LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS = "0123456789"
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# order matters: the synthesizer takes one guaranteed pick from each, in this order
CHARACTER_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("lowercase", LOWERCASE_CHARS),
    ("uppercase", UPPERCASE_CHARS),
    ("digit", DIGIT_CHARS),
    ("special", SPECIAL_CHARS),
)

ALL_CHARS = "".join(chars for _, chars in CHARACTER_CLASSES)


def _lowered(patterns: Iterable[str]) -> Tuple[str, ...]:
    return tuple(p.lower() for p in patterns)


# Substrings rejected anywhere in a generated password (case-insensitive).
WEAK_PATTERNS: Tuple[str, ...] = _lowered([
    "123456", "password", "Pa$$w0rd", "p@ssword", "qwerty",
    "abc123", "password123", "admin", "letmein", "welcome",
    "monkey", "dragon", "master", "hello", "freedom",
    "whatever", "qazwsx", "trustno1", "jordan", "harley",
    "ranger", "buster", "thomas", "tigger", "robert",
    "soccer", "batman", "test", "pass", "guest",
    "info", "adm", "mysql", "user", "administrator",
    "oracle", "ftp", "pi", "puppet", "ansible",
    "ec2-user", "vagrant", "azureuser", "secret",
])

# The strength checker uses a shorter list.
SCORER_WEAK_PATTERNS: Tuple[str, ...] = _lowered([
    "123456", "password", "qwerty", "abc123", "password123",
    "admin", "letmein", "welcome", "monkey", "dragon",
    "master", "hello", "freedom", "whatever", "qazwsx",
    "trustno1", "jordan", "harley", "ranger", "buster",
    "thomas", "tigger", "robert", "soccer", "batman",
    "test", "pass", "guest", "info", "adm", "mysql",
    "user", "administrator", "oracle", "ftp", "pi",
    "puppet", "ansible", "ec2-user", "vagrant", "azureuser",
])


def class_of(char: str) -> Optional[str]:
    """Name of the character class containing `char`, or None."""
    for name, chars in CHARACTER_CLASSES:
        if char in chars:
            return name
    return None


def contains_weak_pattern(text: str, patterns: Tuple[str, ...] = WEAK_PATTERNS) -> Optional[str]:
    """Return the first pattern found in `text` (case-insensitive), else None."""
    lower = text.lower()
    for pattern in patterns:
        if pattern in lower:
            return pattern
    return None


def has_adjacent_repeat(text: str) -> bool:
    return any(a == b for a, b in zip(text, text[1:]))
