import pytest
from pydantic import ValidationError

from pwguard import check_password
from pwguard.analyzers.patterns import COMMON_PASSWORDS
from pwguard.analyzers.strength import (
    SUGGEST_AVOID_COMMON,
    SUGGEST_ENCOURAGE,
    SUGGEST_LONGER,
    SUGGEST_LOWERCASE,
    SUGGEST_MIN_LENGTH,
    SUGGEST_MIX,
    SUGGEST_NUMBERS,
    SUGGEST_RANDOMNESS,
    SUGGEST_SYMBOLS,
    SUGGEST_UPPERCASE,
    PasswordStrengthChecker,
    analyze_password,
    calculate_score,
    generate_suggestions,
    round_to_half,
)
from pwguard.core.models import (
    CrackTimeEstimate,
    CrackTimes,
    AttackScenario,
    PasswordStrengthResult,
    PwnedCheckResult,
    Verdict,
)


class TestScenarios:
    def test_password_is_weak(self):
        result = check_password("password")
        assert result.score == 0
        assert result.verdict is Verdict.WEAK
        assert SUGGEST_AVOID_COMMON in result.suggestions

    def test_long_mixed_password_is_strong(self):
        result = check_password("MyV3ry$tr0ngP@ssw0rd!")
        assert result.score >= 4
        assert result.verdict in (Verdict.STRONG, Verdict.VERY_STRONG)

    @pytest.mark.parametrize("pw", sorted(COMMON_PASSWORDS))
    def test_every_common_password_is_instant(self, pw):
        result = check_password(pw.upper())
        assert result.score == 0
        assert result.verdict is Verdict.WEAK
        assert result.crack_time.online.human_readable == "instantly"

    @pytest.mark.parametrize(
        "pw",
        ["abc123", "123abc", "a1b2c3", "1q2w3e4r", "1qaz2wsx", "zxc123",
         "01011990", "20200101", "john123", "Password123"],
    )
    def test_well_known_weak_passwords(self, pw):
        result = check_password(pw)
        assert result.score == 0
        assert result.suggestions[0] == SUGGEST_AVOID_COMMON
        assert result.crack_time.online.human_readable == "instantly"

    def test_empty_password(self):
        result = check_password("")
        assert result.score == 0
        assert result.verdict is Verdict.WEAK
        assert result.suggestions == [
            SUGGEST_MIN_LENGTH,
            SUGGEST_UPPERCASE,
            SUGGEST_LOWERCASE,
            SUGGEST_NUMBERS,
            SUGGEST_SYMBOLS,
            SUGGEST_MIX,
            SUGGEST_RANDOMNESS,
        ]

    def test_deterministic(self):
        assert check_password("Tr0ub4dor&3") == check_password("Tr0ub4dor&3")

    def test_longer_password_scores_at_least_as_high(self):
        short = check_password("Xk9#mQ2$")
        longer = check_password("Xk9#mQ2$vL7!pR4&")
        assert short.score == 3.5
        assert longer.score == 5
        assert longer.score >= short.score


class TestScore:
    def test_analysis(self):
        analysis = analyze_password("abc")
        assert analysis.length == 3
        assert analysis.variety_score == 1
        assert analysis.flags.has_lower and not analysis.flags.has_upper

    def test_unicode_counts_as_symbol(self):
        assert analyze_password("é").flags.has_symbol

    def test_empty_entropy_is_zero(self):
        assert analyze_password("").entropy_bits == 0

    def test_repeating_penalty(self):
        assert calculate_score(analyze_password("Zz9#akqm"), "Zz9#akqm") == 3.5
        assert calculate_score(analyze_password("Zz9#aaaa"), "Zz9#aaaa") == 3.0

    @pytest.mark.parametrize(
        "value, expected", [(1.0, 1.0), (2.25, 2.5), (2.75, 3.0), (0.2, 0.0), (4.8, 5.0)]
    )
    def test_round_half_up(self, value, expected):
        assert round_to_half(value) == expected

    @pytest.mark.parametrize(
        "score, verdict",
        [
            (0, Verdict.WEAK),
            (1, Verdict.WEAK),
            (1.5, Verdict.MEDIUM),
            (2.5, Verdict.MEDIUM),
            (3, Verdict.STRONG),
            (4, Verdict.STRONG),
            (4.5, Verdict.VERY_STRONG),
            (5, Verdict.VERY_STRONG),
        ],
    )
    def test_verdict_thresholds(self, score, verdict):
        assert Verdict.from_score(score) is verdict


class TestSuggestions:
    def test_fixed_order(self):
        assert generate_suggestions(analyze_password("lowercaseonly")) == [
            SUGGEST_UPPERCASE,
            SUGGEST_NUMBERS,
            SUGGEST_SYMBOLS,
            SUGGEST_MIX,
        ]

    def test_consider_longer(self):
        assert generate_suggestions(analyze_password("Xk9#mQ2$vL")) == [SUGGEST_LONGER]

    def test_encouragement(self):
        assert generate_suggestions(analyze_password("Xk9#mQ2$vL7!pR4&")) == [SUGGEST_ENCOURAGE]


class _Breached:
    def check(self, password):
        return PwnedCheckResult(is_pwned=True, breach_count=42)


class _Offline:
    def check(self, password):
        raise ConnectionError("service unreachable")


class TestBreachCheck:
    def test_result_attached(self):
        result = PasswordStrengthChecker().check_with_breach("hunter2", _Breached())
        assert result.pwned_check.is_pwned
        assert result.pwned_check.breach_count == 42

    def test_failure_degrades(self):
        result = PasswordStrengthChecker().check_with_breach("hunter2", _Offline())
        assert result.pwned_check.is_pwned is False
        assert result.pwned_check.breach_count is None
        assert result.pwned_check.error_message == "service unreachable"
        assert result.score == check_password("hunter2").score


def _crack_times():
    est = {
        s: CrackTimeEstimate(seconds=0, human_readable="instantly", attack_scenario=s)
        for s in AttackScenario
    }
    return CrackTimes(
        online=est[AttackScenario.ONLINE],
        offline=est[AttackScenario.OFFLINE],
        offline_fast=est[AttackScenario.OFFLINE_FAST],
    )


class TestResultModel:
    def test_verdict_derived_from_score(self):
        result = PasswordStrengthResult(score=3, crack_time=_crack_times())
        assert result.verdict is Verdict.STRONG

    def test_mismatched_verdict_rejected(self):
        with pytest.raises(ValidationError):
            PasswordStrengthResult(score=5, verdict=Verdict.WEAK, crack_time=_crack_times())

    def test_score_granularity(self):
        with pytest.raises(ValidationError):
            PasswordStrengthResult(score=2.3, crack_time=_crack_times())

    def test_score_range(self):
        with pytest.raises(ValidationError):
            PasswordStrengthResult(score=6, crack_time=_crack_times())
