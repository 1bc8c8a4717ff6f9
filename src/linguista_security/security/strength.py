"""
Password strength scoring.

Every check runs independently; feedback order follows evaluation order
(length, lowercase, uppercase, digit, symbol, repetition, dictionary,
sequential), not severity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MIN_LENGTH = 8
BONUS_LENGTH = 12
MAX_SCORE = 5
STRONG_SCORE = 4

MSG_TOO_SHORT = "Password must be at least 8 characters long"
MSG_NO_LOWER = "Include lowercase letters"
MSG_NO_UPPER = "Include uppercase letters"
MSG_NO_DIGIT = "Include numbers"
MSG_NO_SYMBOL = "Include special characters (!@#$%^&*)"
MSG_REPEATING = "Avoid repeating characters"
MSG_COMMON = "Avoid common patterns and dictionary words"
MSG_SEQUENTIAL = "Avoid sequential characters"

COMMON_PATTERNS = ("123", "abc", "qwe", "password", "admin")

_LETTERS = "abcdefghijklmnopqrstuvwxyz"
_DIGITS = "0123456789"
SEQUENTIAL_RUNS = tuple(
    seq[i : i + 3] for seq in (_LETTERS, _DIGITS) for i in range(len(seq) - 2)
)

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"[0-9]")
SYMBOL = re.compile(r"[^a-zA-Z0-9]")
REPEAT = re.compile(r"(.)\1{2,}")
COMMON = re.compile("|".join(map(re.escape, COMMON_PATTERNS)), re.IGNORECASE)
SEQUENTIAL = re.compile("|".join(SEQUENTIAL_RUNS), re.IGNORECASE)

_LABELS = ("Very Weak", "Very Weak", "Weak", "Fair", "Good", "Strong")


def strength_label(score: int) -> str:
    """Human label for a score; out-of-range values saturate."""
    return _LABELS[max(0, min(MAX_SCORE, score))]


@dataclass(frozen=True)
class StrengthResult:
    score: int
    feedback: tuple[str, ...] = ()
    is_strong: bool = False

    @property
    def label(self) -> str:
        return strength_label(self.score)


def evaluate(password: str) -> StrengthResult:
    feedback: list[str] = []
    score = 0

    if len(password) < MIN_LENGTH:
        feedback.append(MSG_TOO_SHORT)
    else:
        score += 1
    if len(password) >= BONUS_LENGTH:
        score += 1

    for pattern, message in (
        (LOWER, MSG_NO_LOWER),
        (UPPER, MSG_NO_UPPER),
        (DIGIT, MSG_NO_DIGIT),
        (SYMBOL, MSG_NO_SYMBOL),
    ):
        if pattern.search(password):
            score += 1
        else:
            feedback.append(message)

    for pattern, message, penalty in (
        (REPEAT, MSG_REPEATING, 1),
        (COMMON, MSG_COMMON, 2),
        (SEQUENTIAL, MSG_SEQUENTIAL, 1),
    ):
        if pattern.search(password):
            feedback.append(message)
            score -= penalty

    score = max(0, min(MAX_SCORE, score))
    return StrengthResult(
        score=score,
        feedback=tuple(feedback),
        is_strong=score >= STRONG_SCORE and not feedback,
    )


__all__ = ["StrengthResult", "evaluate", "strength_label"]
