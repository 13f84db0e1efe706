"""
Score & Suggestion Engine
==========================

Turns a password into a :class:`PasswordStrengthResult`: a 0-5 score at
half-point granularity, a verdict, ordered improvement suggestions and
crack-time projections.

Scoring (common-lexicon passwords score 0 outright):

    length   >= 8  +1    >= 12 +1    >= 16 +0.5
    variety  >= 2  +0.5  >= 3  +0.5  >= 4  +1
    entropy  >= 40 +0.5  >= 60 +0.5  >= 80 +0.5
    repeating block -0.5, sequential run -0.5

The total is clamped to [0, 5] and rounded half-up to the nearest 0.5.

The scoring path is total over all strings, including the empty string,
and fully deterministic.
"""

from __future__ import annotations

import math
from typing import Optional

from pwguard.analyzers.charset import scan_character_classes, simple_entropy
from pwguard.analyzers.crack_time import CrackTimeEstimator
from pwguard.analyzers.keyspace import (
    KeyspaceAnalyzer,
    has_repeating_pattern,
    has_sequential_pattern,
)
from pwguard.analyzers.patterns import is_common_password
from pwguard.core.collaborators import BreachChecker
from pwguard.core.models import (
    AttackScenario,
    KeyspaceBreakdown,
    PasswordAnalysis,
    PasswordStrengthResult,
    PwnedCheckResult,
    Verdict,
)
from shared.config import StrengthConfig
from shared.logger import PwGuardLogger

logger = PwGuardLogger("strength")

MAX_SCORE = 5.0

SUGGEST_AVOID_COMMON = "Avoid common passwords - use a unique combination"
SUGGEST_MIN_LENGTH = "Use at least 8 characters"
SUGGEST_LONGER = "Consider using 12+ characters for better security"
SUGGEST_UPPERCASE = "Add uppercase letters (A-Z)"
SUGGEST_LOWERCASE = "Add lowercase letters (a-z)"
SUGGEST_NUMBERS = "Add numbers (0-9)"
SUGGEST_SYMBOLS = "Add special characters (!@#$%^&*)"
SUGGEST_MIX = "Mix different character types for complexity"
SUGGEST_RANDOMNESS = "Increase randomness - avoid predictable patterns"
SUGGEST_ENCOURAGE = (
    "Great password! Consider using a password manager for unique "
    "passwords across all accounts"
)


# ===================================================================== #
#  Analysis, Score & Suggestions
# ===================================================================== #


def analyze_password(password: str) -> PasswordAnalysis:
    """Scan *password* once and report its composition."""
    flags = scan_character_classes(password)
    return PasswordAnalysis(
        length=len(password),
        flags=flags,
        entropy_bits=simple_entropy(len(password), flags.charset_size),
        is_common_password=is_common_password(password),
        variety_score=flags.variety_score,
    )


def round_to_half(value: float) -> float:
    """Round half-up to the nearest 0.5."""
    return math.floor(value * 2 + 0.5) / 2


def calculate_score(analysis: PasswordAnalysis, password: str) -> float:
    if analysis.is_common_password:
        return 0.0

    score = 0.0
    if analysis.length >= 8:
        score += 1
    if analysis.length >= 12:
        score += 1
    if analysis.length >= 16:
        score += 0.5

    if analysis.variety_score >= 2:
        score += 0.5
    if analysis.variety_score >= 3:
        score += 0.5
    if analysis.variety_score >= 4:
        score += 1

    if analysis.entropy_bits >= 40:
        score += 0.5
    if analysis.entropy_bits >= 60:
        score += 0.5
    if analysis.entropy_bits >= 80:
        score += 0.5

    if has_repeating_pattern(password):
        score -= 0.5
    if has_sequential_pattern(password):
        score -= 0.5

    return round_to_half(min(MAX_SCORE, max(0.0, score)))


def generate_suggestions(analysis: PasswordAnalysis) -> list[str]:
    """Improvement suggestions in their fixed presentation order."""
    flags = analysis.flags
    suggestions: list[str] = []

    if analysis.is_common_password:
        suggestions.append(SUGGEST_AVOID_COMMON)

    if analysis.length < 8:
        suggestions.append(SUGGEST_MIN_LENGTH)
    elif analysis.length < 12:
        suggestions.append(SUGGEST_LONGER)

    if not flags.has_upper:
        suggestions.append(SUGGEST_UPPERCASE)
    if not flags.has_lower:
        suggestions.append(SUGGEST_LOWERCASE)
    if not flags.has_digit:
        suggestions.append(SUGGEST_NUMBERS)
    if not flags.has_symbol:
        suggestions.append(SUGGEST_SYMBOLS)

    if analysis.variety_score < 3:
        suggestions.append(SUGGEST_MIX)
    if analysis.entropy_bits < 40:
        suggestions.append(SUGGEST_RANDOMNESS)

    if not suggestions and analysis.entropy_bits >= 60:
        suggestions.append(SUGGEST_ENCOURAGE)

    return suggestions


# ===================================================================== #
#  Checker
# ===================================================================== #


class PasswordStrengthChecker:
    """Full strength check: analysis, score, suggestions and crack times.

    Args:
        config: Attack rates for crack-time projection. Defaults apply
            when omitted.
    """

    def __init__(self, config: Optional[StrengthConfig] = None) -> None:
        self._keyspace = KeyspaceAnalyzer()
        self._estimator = CrackTimeEstimator(config)

    @property
    def rates(self) -> dict[AttackScenario, float]:
        """Guesses per second for each attacker profile."""
        return self._estimator.rates

    def check(self, password: str) -> PasswordStrengthResult:
        result, _ = self.check_detailed(password)
        return result

    def check_detailed(
        self, password: str
    ) -> tuple[PasswordStrengthResult, KeyspaceBreakdown]:
        """Like :meth:`check`, also returning the keyspace breakdown."""
        analysis = analyze_password(password)
        breakdown = self._keyspace.analyze(
            password, analysis.flags, is_common=analysis.is_common_password
        )
        score = calculate_score(analysis, password)
        result = PasswordStrengthResult(
            score=score,
            verdict=Verdict.from_score(score),
            suggestions=generate_suggestions(analysis),
            crack_time=self._estimator.estimate_all(breakdown.smart_keyspace),
        )
        logger.debug(
            "Strength computed",
            length=analysis.length,
            score=score,
            verdict=result.verdict.value,
        )
        return result, breakdown

    def check_with_breach(
        self, password: str, checker: BreachChecker
    ) -> PasswordStrengthResult:
        """Strength check with a breach lookup attached.

        A failing *checker* never fails the check: the lookup degrades to
        ``is_pwned=False`` carrying the error message.
        """
        result = self.check(password)
        try:
            pwned = checker.check(password)
        except Exception as exc:
            logger.warning("Breach check failed: %s", exc)
            pwned = PwnedCheckResult(is_pwned=False, error_message=str(exc))
        return result.model_copy(update={"pwned_check": pwned})


def check_password(password: str) -> PasswordStrengthResult:
    """Check *password* with the default attack rates."""
    return PasswordStrengthChecker().check(password)
