"""
strongpass.suggestions

Turn a checker result into remediation hints, one per failed criterion,
in the checker's criterion order.
"""

from typing import List

from .checker import CRITERIA, StrengthResult


def suggest_improvements(result: StrengthResult) -> List[str]:
    return [c.suggestion for c in CRITERIA if not result.details.get(c.name, False)]
