"""
strongpass.checker

Password strength checker. Scores any string against eight independent
criteria, one point each:

- hasLowercase, hasUppercase, hasNumber, hasSpecialChar
- isAtLeast8Chars, isMoreThan8Chars
- hasNoCommonPatterns, hasNoRepeatingChars

score_password(password) returns a StrengthResult with the score (0-8),
the per-criterion outcomes and a label.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from .charsets import SCORER_WEAK_PATTERNS, contains_weak_pattern, has_adjacent_repeat

SPECIAL_RE = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?]""")


class Criterion(NamedTuple):
    name: str
    check: Callable[[str], bool]
    suggestion: str


CRITERIA: Tuple[Criterion, ...] = (
    Criterion("hasLowercase", lambda pw: re.search(r"[a-z]", pw) is not None,
              "Add at least one lowercase letter (a-z)"),
    Criterion("hasUppercase", lambda pw: re.search(r"[A-Z]", pw) is not None,
              "Add at least one uppercase letter (A-Z)"),
    Criterion("hasNumber", lambda pw: re.search(r"[0-9]", pw) is not None,
              "Add at least one number (0-9)"),
    Criterion("hasSpecialChar", lambda pw: SPECIAL_RE.search(pw) is not None,
              "Add at least one special character (!@#$%^&*)"),
    Criterion("isAtLeast8Chars", lambda pw: len(pw) >= 8,
              "Make your password at least 8 characters long"),
    Criterion("isMoreThan8Chars", lambda pw: len(pw) > 8,
              "Make your password longer than 8 characters for better security"),
    Criterion("hasNoCommonPatterns", lambda pw: contains_weak_pattern(pw, SCORER_WEAK_PATTERNS) is None,
              "Avoid common words and patterns"),
    Criterion("hasNoRepeatingChars", lambda pw: not has_adjacent_repeat(pw),
              "Avoid repeating consecutive characters"),
)

MAX_SCORE = len(CRITERIA)


def strength_label(score: int) -> str:
    if score <= 2:
        return "weak"
    elif score <= 4:
        return "still weak"
    elif score <= 6:
        return "moderate"
    elif score <= 7:
        return "good"
    return "excellent"


@dataclass(frozen=True)
class StrengthResult:
    score: int
    details: Dict[str, bool]
    label: str = ""

    def __post_init__(self):
        names = {c.name for c in CRITERIA}
        if set(self.details) != names:
            raise ValueError(f"details must cover exactly the criteria {sorted(names)}")
        if not all(isinstance(v, bool) for v in self.details.values()):
            raise ValueError("criterion outcomes must be booleans")
        if self.score != sum(self.details.values()):
            raise ValueError(f"score {self.score} does not match {sum(self.details.values())} passed criteria")

    @property
    def max_score(self) -> int:
        return MAX_SCORE

    @property
    def percentage(self) -> float:
        return self.score / MAX_SCORE * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "strength": self.label,
            "details": dict(self.details),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StrengthResult":
        """
        Rebuild a result from its to_dict() shape. Only `details` is
        required; the score is recomputed from it. Missing criteria count
        as failed; present ones must be JSON booleans.
        """
        raw = data.get("details")
        if not isinstance(raw, dict):
            raise ValueError("result must contain a 'details' mapping")
        details = {}
        for c in CRITERIA:
            value = raw.get(c.name, False)
            if not isinstance(value, bool):
                raise ValueError(f"'{c.name}' must be true or false")
            details[c.name] = value
        score = sum(details.values())
        return cls(score=score, details=details, label=strength_label(score))


def score_password(password: Optional[str]) -> StrengthResult:
    """Evaluate `password` against every criterion. Empty input scores 0."""
    if not password:
        return StrengthResult(score=0, details={c.name: False for c in CRITERIA}, label="")

    details = {c.name: c.check(password) for c in CRITERIA}
    score = sum(details.values())
    return StrengthResult(score=score, details=details, label=strength_label(score))


if __name__ == "__main__":
    # For quick testing
    pwd = input("Enter password to test: ")
    result = score_password(pwd)
    print(f"Password Strength: {result.label} (Score: {result.score}/{MAX_SCORE})")
