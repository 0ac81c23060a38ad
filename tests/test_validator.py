from strongpass.charsets import (
    DIGIT_CHARS,
    LOWERCASE_CHARS,
    MIN_LENGTH,
    SPECIAL_CHARS,
    UPPERCASE_CHARS,
    WEAK_PATTERNS,
)
from strongpass.validator import first_violation, is_valid


def test_example_password_checked_rule_by_rule():
    pw = "Kp9$mQ2@xR7!"
    assert len(pw) >= MIN_LENGTH
    assert any(c in LOWERCASE_CHARS for c in pw)
    assert any(c in UPPERCASE_CHARS for c in pw)
    assert any(c in DIGIT_CHARS for c in pw)
    assert any(c in SPECIAL_CHARS for c in pw)
    assert all(pw[i] != pw[i - 1] for i in range(1, len(pw)))
    assert not any(p in pw.lower() for p in WEAK_PATTERNS)
    assert is_valid(pw)


def test_too_short():
    assert first_violation("Kp9$mQ2@xR7") == "length"


def test_missing_classes():
    assert first_violation("KP9$MQ2@XR7!") == "lowercase"
    assert first_violation("kp9$mq2@xr7!") == "uppercase"
    assert first_violation("Kpx$mQz@xRy!") == "digit"
    assert first_violation("Kp9xmQ2bxR7c") == "special"


def test_adjacent_repeat():
    assert first_violation("Kp9$mQQ2@xR7!") == "repeat"


def test_weak_pattern_case_insensitive():
    assert first_violation("Kp9$PaSs@xR7!") == "weak_pattern"
    assert first_violation("Zq7!DrAgOn#4x") == "weak_pattern"
    assert not is_valid("Kp9$mQ2@xRpI!")


def test_pure():
    for pw in ("Kp9$mQ2@xR7!", "aaaa", ""):
        assert is_valid(pw) == is_valid(pw)
        assert first_violation(pw) == first_violation(pw)
