"""
strongpass.generator
Secure password generator built on the OS random source.

generate() retries synthesize() until the validator accepts a candidate,
giving up after MAX_GENERATION_ATTEMPTS.
"""

import logging
from typing import List, Optional

from .charsets import (
    ALL_CHARS,
    CHARACTER_CLASSES,
    MAX_GENERATION_ATTEMPTS,
    MAX_LENGTH,
    MAX_REPAIR_RETRIES,
    MIN_LENGTH,
    class_of,
)
from .errors import GenerationExhausted
from .rand import RandomSource, default_source
from .validator import first_violation

logger = logging.getLogger(__name__)


def alternative_char(current: str, rng: Optional[RandomSource] = None) -> str:
    """
    Pick a character from one of the classes `current` does not belong to.
    Classes are disjoint, so the result always differs from `current`.
    """
    rng = rng or default_source()
    home = class_of(current)
    others = [chars for name, chars in CHARACTER_CLASSES if name != home]
    return rng.pick(rng.pick(others))


def repair(chars: List[str], rng: Optional[RandomSource] = None) -> List[str]:
    """
    Replace characters equal to their left neighbour, in place.

    Single left-to-right sweep; the left neighbour may itself be a
    replacement. A replacement is only checked against the character it
    replaces, never re-swept.
    """
    rng = rng or default_source()
    for i in range(1, len(chars)):
        if chars[i] != chars[i - 1]:
            continue
        offending = chars[i]
        replacement = None
        for _ in range(MAX_REPAIR_RETRIES):
            candidate = rng.pick(ALL_CHARS)
            if candidate != offending:
                replacement = candidate
                break
        if replacement is None:
            replacement = alternative_char(offending, rng)
        chars[i] = replacement
    return chars


def synthesize(rng: Optional[RandomSource] = None) -> str:
    """Build one candidate: class coverage, random fill, shuffle, repair."""
    rng = rng or default_source()
    length = rng.randint(MIN_LENGTH, MAX_LENGTH)

    password_chars = [rng.pick(chars) for _, chars in CHARACTER_CLASSES]
    for _ in range(length - len(password_chars)):
        password_chars.append(rng.pick(ALL_CHARS))

    rng.shuffle(password_chars)
    repair(password_chars, rng)
    return "".join(password_chars)


def generate(rng: Optional[RandomSource] = None) -> str:
    """
    Generate a password satisfying every validator rule.

    Raises GenerationExhausted when MAX_GENERATION_ATTEMPTS candidates in a
    row are rejected.
    """
    for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
        password = synthesize(rng)
        violation = first_violation(password)
        if violation is None:
            logger.debug("generated password on attempt %d", attempt)
            return password
        logger.debug("attempt %d rejected: %s", attempt, violation)

    logger.warning("password generation exhausted after %d attempts", MAX_GENERATION_ATTEMPTS)
    raise GenerationExhausted(MAX_GENERATION_ATTEMPTS)
