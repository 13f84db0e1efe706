"""
PwGuard Core Data Models
=========================

Pydantic models for the strength-estimation and generation engines.
Every model here is created per call and discarded afterwards; none of
them is cached or shared between calls.

All models are serialisable to JSON and consumed both by the CLI output
layer and by the JSON report generator.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Verdict(str, enum.Enum):
    """Qualitative strength label derived from the 0-5 score."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @classmethod
    def from_score(cls, score: float) -> Verdict:
        """Map a score to its verdict.

        Thresholds:
          - score <= 1   : weak
          - score <= 2.5 : medium
          - score <= 4   : strong
          - otherwise    : very_strong
        """
        if score <= 1:
            return cls.WEAK
        if score <= 2.5:
            return cls.MEDIUM
        if score <= 4:
            return cls.STRONG
        return cls.VERY_STRONG


class AttackScenario(str, enum.Enum):
    """Attacker profile used for crack-time projection."""

    ONLINE = "online"
    OFFLINE = "offline"
    OFFLINE_FAST = "offline_fast"


class CharacterClass(str, enum.Enum):
    """Character classes recognised by analysis and generation."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


class GenerationStrategy(str, enum.Enum):
    """Password generation strategies exposed by the engine."""

    RANDOM = "random"
    STRONG = "strong"
    MEMORABLE = "memorable"


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class CharacterClassFlags(BaseModel):
    """Which character classes occur in a password.

    Attributes:
        has_lower:  At least one ASCII lowercase letter.
        has_upper:  At least one ASCII uppercase letter.
        has_digit:  At least one ASCII digit.
        has_symbol: At least one character that is none of the above.
    """

    model_config = ConfigDict(frozen=True)

    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False

    @property
    def variety_score(self) -> int:
        """Number of classes present (0-4)."""
        return sum((self.has_lower, self.has_upper, self.has_digit, self.has_symbol))

    @property
    def charset_size(self) -> int:
        """Attacker charset size: 26 + 26 + 10 + 32 over the present classes."""
        return (
            26 * self.has_lower
            + 26 * self.has_upper
            + 10 * self.has_digit
            + 32 * self.has_symbol
        )


class PasswordAnalysis(BaseModel):
    """Per-call analysis of a password's composition.

    Attributes:
        length: Password length in characters.
        flags: Character classes present.
        entropy_bits: ``length * log2(charset_size)``; 0 for an empty password.
        is_common_password: Case-insensitive hit in the common lexicon.
        variety_score: Number of classes present (always equal to
            ``flags.variety_score``).
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=0, ge=0)
    flags: CharacterClassFlags = Field(default_factory=CharacterClassFlags)
    entropy_bits: float = Field(default=0.0, ge=0.0)
    is_common_password: bool = False
    variety_score: int = Field(default=0, ge=0, le=4)

    @model_validator(mode="after")
    def _check_variety(self) -> PasswordAnalysis:
        if self.variety_score != self.flags.variety_score:
            raise ValueError(
                "variety_score must equal the number of character classes present"
            )
        return self


class PasswordPattern(BaseModel):
    """A weakening pattern detected while estimating the keyspace.

    Attributes:
        pattern_type: Pattern family (e.g. "keyboard", "date", "dictionary").
        value: Matched word or short description.
        multiplier: Keyspace multiplier this pattern contributed.
    """

    pattern_type: str
    value: str = ""
    multiplier: float = Field(default=1.0, gt=0.0, le=1.0)


class KeyspaceBreakdown(BaseModel):
    """Intermediate values of the attacker-adjusted keyspace pipeline.

    Attributes:
        charset_size: Attacker charset size used for the base keyspace.
        base_keyspace: ``charset_size ** length`` (1 when short-circuited).
        composite_penalty: Product of all pattern multipliers.
        hybrid_penalty: Dictionary-plus-variations multiplier.
        statistical_penalty: Alternation / adjacent-repeat multiplier.
        keyspace: Final attacker-adjusted keyspace (>= 1).
        smart_keyspace: Keyspace narrowed for dictionary/mask strategies.
        short_circuit: ``"common"`` or ``"leet_common"`` when a lexicon
            exact match replaced the whole computation.
        patterns: Individual patterns that contributed a multiplier.
        dictionary_words: Lexicon entries found as substrings.
    """

    charset_size: int = 0
    base_keyspace: float = 1.0
    composite_penalty: float = 1.0
    hybrid_penalty: float = 1.0
    statistical_penalty: float = 1.0
    keyspace: float = Field(default=1.0, ge=1.0)
    smart_keyspace: float = Field(default=1.0, ge=1.0)
    short_circuit: Optional[str] = None
    patterns: list[PasswordPattern] = Field(default_factory=list)
    dictionary_words: list[str] = Field(default_factory=list)


class CrackTimeEstimate(BaseModel):
    """Projected time to crack under one attacker profile.

    Attributes:
        seconds: Average time in seconds (half the smart keyspace).
        human_readable: Rounded, pluralised description.
        attack_scenario: Attacker profile.
    """

    model_config = ConfigDict(frozen=True)

    seconds: float = Field(..., ge=0.0)
    human_readable: str
    attack_scenario: AttackScenario


class CrackTimes(BaseModel):
    """Crack-time estimates for the three attacker profiles."""

    model_config = ConfigDict(frozen=True)

    online: CrackTimeEstimate
    offline: CrackTimeEstimate
    offline_fast: CrackTimeEstimate


# ===================================================================== #
#  Collaborator Boundary Models
# ===================================================================== #


class PwnedCheckResult(BaseModel):
    """Result returned by a breach-check collaborator.

    Attributes:
        is_pwned: Whether the password was found in a breach corpus.
        breach_count: Occurrence count, ``None`` when the check failed.
        error_message: Set when the check could not be completed.
    """

    is_pwned: bool = False
    breach_count: Optional[int] = Field(default=None, ge=0)
    error_message: Optional[str] = None


class EmailStatus(str, enum.Enum):
    VALID = "VALID"
    INVALID = "INVALID"


class EmailValidations(BaseModel):
    """Structured booleans produced by an email-validation collaborator."""

    syntax: bool = False
    domain_exists: bool = False
    mx_records: bool = False
    mailbox_exists: bool = False
    is_disposable: bool = False
    is_role_based: bool = False


class EmailValidationResult(BaseModel):
    """Result returned by an email-validation collaborator."""

    email: str
    validations: EmailValidations = Field(default_factory=EmailValidations)
    score: int = Field(default=0, ge=0, le=100)
    status: EmailStatus = EmailStatus.INVALID
    suggestions: list[str] = Field(default_factory=list)


# ===================================================================== #
#  Result Models
# ===================================================================== #


class PasswordStrengthResult(BaseModel):
    """Outcome of a strength check.

    The verdict is never independent state: when omitted it is derived
    from the score, and a conflicting verdict is rejected.

    Attributes:
        score: Score in [0, 5] at 0.5 granularity.
        verdict: Label derived from ``score``.
        suggestions: Improvement suggestions, in a fixed order.
        crack_time: Crack-time estimates for each attacker profile.
        pwned_check: Breach-check outcome, when one was requested.
    """

    score: float = Field(..., ge=0.0, le=5.0)
    verdict: Verdict = Field(default=None)  # type: ignore[assignment]
    suggestions: list[str] = Field(default_factory=list)
    crack_time: CrackTimes
    pwned_check: Optional[PwnedCheckResult] = None

    @model_validator(mode="after")
    def _derive_verdict(self) -> PasswordStrengthResult:
        if (self.score * 2) != int(self.score * 2):
            raise ValueError("score must be a multiple of 0.5")
        expected = Verdict.from_score(self.score)
        if self.verdict is None:
            self.verdict = expected
        elif self.verdict != expected:
            raise ValueError(
                f"verdict {self.verdict.value!r} does not match score {self.score}"
            )
        return self


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class GeneratePasswordOptions(BaseModel):
    """Options for random password generation.

    Length and class-selection rules are enforced by the generator, which
    raises :class:`~pwguard.core.errors.InvalidLengthError` or
    :class:`~pwguard.core.errors.NoCharacterClassSelectedError`.

    Attributes:
        length: Requested password length (must be >= 4).
        numbers: Include digits.
        symbols: Include symbols.
        uppercase: Include uppercase letters.
        lowercase: Include lowercase letters.
        exclude_similar: Drop visually ambiguous glyphs (0 O 1 l I |).
    """

    model_config = ConfigDict(frozen=True)

    length: int = 12
    numbers: bool = True
    symbols: bool = True
    uppercase: bool = True
    lowercase: bool = True
    exclude_similar: bool = False

    @property
    def enabled_classes(self) -> list[CharacterClass]:
        """Enabled classes in draw order: lowercase, uppercase, numbers, symbols."""
        selected = (
            (CharacterClass.LOWERCASE, self.lowercase),
            (CharacterClass.UPPERCASE, self.uppercase),
            (CharacterClass.NUMBERS, self.numbers),
            (CharacterClass.SYMBOLS, self.symbols),
        )
        return [cls for cls, enabled in selected if enabled]
