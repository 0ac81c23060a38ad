from strongpass.checker import score_password
from strongpass.suggestions import suggest_improvements


def test_suggestions_follow_criterion_order():
    s = suggest_improvements(score_password("aaaaaaaa"))
    assert s == [
        "Add at least one uppercase letter (A-Z)",
        "Add at least one number (0-9)",
        "Add at least one special character (!@#$%^&*)",
        "Make your password longer than 8 characters for better security",
        "Avoid repeating consecutive characters",
    ]


def test_no_suggestions_for_strong_password():
    assert suggest_improvements(score_password("Tr0ub4dor&3XyZ")) == []


def test_empty_password_gets_every_suggestion():
    assert len(suggest_improvements(score_password(""))) == 8
