"""
strongpass.errors
Exceptions raised by the generator and the random source.
"""


class PasswordPolicyError(Exception):
    """Base class for password policy failures."""


class EmptyCharacterSet(PasswordPolicyError, ValueError):
    """A character set handed to the random source has no members."""

    def __init__(self, message: str = "Character set cannot be empty"):
        super().__init__(message)


class GenerationExhausted(PasswordPolicyError, RuntimeError):
    """Every generation attempt produced a candidate the validator rejected."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Unable to generate a valid password after {attempts} attempts")
