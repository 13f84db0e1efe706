"""
PwGuard Engine
===============

Central orchestrator for PwGuard. :class:`PwGuardEngine` coordinates the
strength checker and the password generator and wraps every operation
in a :class:`~shared.models.ScanResult` so the console and report layers
render checks and generations the same way.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the individual analyzer subsystems.

The engine never places a checked password in a log record or in a
result; targets and findings carry the masked form only. Generated
passwords are returned in the result metadata, since handing them to
the caller is the point of the operation.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from typing import Optional

from shared.config import PwGuardConfig
from shared.logger import PwGuardLogger
from shared.models import Finding, ScanResult, Severity

from pwguard.analyzers.strength import PasswordStrengthChecker
from pwguard.core.models import (
    GeneratePasswordOptions,
    GenerationStrategy,
    KeyspaceBreakdown,
    PasswordPattern,
    PasswordStrengthResult,
    Verdict,
)
from pwguard.generators.password import PasswordGenerator

_VERDICT_SEVERITY: dict[Verdict, Severity] = {
    Verdict.WEAK: Severity.HIGH,
    Verdict.MEDIUM: Severity.MEDIUM,
    Verdict.STRONG: Severity.LOW,
    Verdict.VERY_STRONG: Severity.INFO,
}

_PATTERN_TITLES: dict[str, str] = {
    "common": "Common Password",
    "leet_common": "L33t Variant of a Common Password",
    "leet": "L33t Substitution",
    "dictionary": "Dictionary Word",
    "keyboard": "Keyboard Walk",
    "date": "Date Pattern",
    "phone": "Phone Number Pattern",
    "topic_word": "Common Topic Word",
    "first_name": "First Name",
    "repeating": "Repeating Characters",
    "sequential": "Sequential Characters",
}

_PATTERN_SEVERITY: dict[str, Severity] = {
    "common": Severity.CRITICAL,
    "leet_common": Severity.CRITICAL,
    "dictionary": Severity.MEDIUM,
}

_REFERENCES = [
    "NIST SP 800-63B (2017). Digital Identity Guidelines.",
    "Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength "
    "Estimation. USENIX Security.",
]


def mask_password(password: str) -> str:
    """Mask a password for display, keeping only its first and last characters.

    >>> mask_password("hunter22")
    'h******2'
    """
    if not password:
        return "[empty]"
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class PwGuardEngine:
    """Orchestrates PwGuard strength checks and password generation.

    Usage::

        engine = PwGuardEngine()
        result = engine.analyze_password("P@ssw0rd!")
        result = engine.generate(GeneratePasswordOptions(length=20))

    Attributes:
        config: PwGuard configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[PwGuardConfig] = None,
        logger: Optional[PwGuardLogger] = None,
    ) -> None:
        self.config = config or PwGuardConfig()
        self.logger = logger or PwGuardLogger.from_config(
            "engine", self.config.global_settings
        )
        self._checker = PasswordStrengthChecker(self.config.strength)
        self._generator = PasswordGenerator(self.config.generator)

    @property
    def checker(self) -> PasswordStrengthChecker:
        return self._checker

    # ------------------------------------------------------------------ #
    #  Strength Analysis
    # ------------------------------------------------------------------ #

    def analyze_password(self, password: str) -> ScanResult:
        """Check the strength of *password*.

        Args:
            password: The password to analyse. It is masked in the result.

        Returns:
            ScanResult with a primary strength finding, one finding per
            detected pattern and one INFO finding per suggestion.
        """
        result = ScanResult(tool_name="pwguard", target=mask_password(password))

        with self.logger.operation("check"):
            self.logger.info("Starting password analysis", length=len(password))
            try:
                with self.logger.timed("strength check"):
                    strength, breakdown = self._checker.check_detailed(password)
            except Exception as exc:
                self.logger.exception("Password analysis failed: %s", exc)
                result.add_finding(Finding(
                    title="Password Analysis Error",
                    description=f"Error during password analysis: {exc}",
                    severity=Severity.MEDIUM,
                ))
                return result.finalize(f"Error: {exc}")

            self._add_strength_findings(result, strength, breakdown)
            result.metadata = {
                "length": len(password),
                "strength": strength.model_dump(),
                "keyspace": breakdown.model_dump(exclude={"dictionary_words"}),
            }
            self.logger.info(
                "Password analysis complete",
                score=strength.score,
                verdict=strength.verdict.value,
            )

        return result.finalize(
            f"Password strength: {_verdict_label(strength.verdict)}, "
            f"score={strength.score}/5, "
            f"offline crack time: {strength.crack_time.offline.human_readable}"
        )

    def check(self, password: str) -> PasswordStrengthResult:
        """Plain strength result without the findings wrapper."""
        return self._checker.check(password)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(
        self,
        options: Optional[GeneratePasswordOptions] = None,
        strategy: GenerationStrategy = GenerationStrategy.RANDOM,
        *,
        word_count: Optional[int] = None,
    ) -> ScanResult:
        """Generate a password and attach its strength check.

        ``word_count`` only applies to the memorable strategy, which
        reads ``options.numbers`` and ``options.symbols`` for its suffixes.

        Raises:
            PasswordGenerationError: The options were rejected.
        """
        opts = options or GeneratePasswordOptions(
            length=self.config.generator.default_length
        )
        result = ScanResult(tool_name="pwguard", target=f"generate:{strategy.value}")

        with self.logger.operation("generate"):
            self.logger.info("Generating password", strategy=strategy.value)
            if strategy is GenerationStrategy.MEMORABLE:
                password = self._generator.generate_memorable(
                    word_count, add_numbers=opts.numbers, add_symbols=opts.symbols
                )
            elif strategy is GenerationStrategy.STRONG:
                password = self._generator.generate_strong(opts)
            else:
                password = self._generator.generate(opts)

            strength = self._checker.check(password)
            result.metadata = {
                "password": password,
                "strategy": strategy.value,
                "options": opts.model_dump(),
                "strength": strength.model_dump(),
            }
            result.add_finding(Finding(
                title="Password Generated",
                description=(
                    f"Generated a {len(password)}-character password "
                    f"({strategy.value} strategy). Strength: "
                    f"{_verdict_label(strength.verdict)}, score {strength.score}/5."
                ),
                severity=Severity.INFO,
                evidence={"length": len(password), "score": strength.score},
            ))
            self.logger.info("Password generated", length=len(password))

        return result.finalize(
            f"Generated {strategy.value} password, "
            f"strength {_verdict_label(strength.verdict)}"
        )

    # ------------------------------------------------------------------ #
    #  Findings
    # ------------------------------------------------------------------ #

    def _add_strength_findings(
        self,
        result: ScanResult,
        strength: PasswordStrengthResult,
        breakdown: KeyspaceBreakdown,
    ) -> None:
        ct = strength.crack_time
        result.add_finding(Finding(
            title=f"Password Strength: {_verdict_label(strength.verdict)}",
            description=(
                f"Score: {strength.score}/5. "
                f"Crack time online: {ct.online.human_readable}, "
                f"offline: {ct.offline.human_readable}, "
                f"offline fast: {ct.offline_fast.human_readable}."
            ),
            severity=_VERDICT_SEVERITY[strength.verdict],
            evidence={
                "score": strength.score,
                "verdict": strength.verdict.value,
                "charset_size": breakdown.charset_size,
                "smart_keyspace": breakdown.smart_keyspace,
            },
            references=list(_REFERENCES),
        ))

        for pattern in breakdown.patterns:
            result.add_finding(self._pattern_finding(pattern))

        for suggestion in strength.suggestions:
            result.add_finding(Finding(
                title="Password Improvement Suggestion",
                description=suggestion,
                severity=Severity.INFO,
            ))

    @staticmethod
    def _pattern_finding(pattern: PasswordPattern) -> Finding:
        title = _PATTERN_TITLES.get(pattern.pattern_type, pattern.pattern_type)
        return Finding(
            title=f"Pattern Detected: {title}",
            description=(
                f"Detected {title.lower()} ({pattern.value}). Attackers try "
                f"this shape early; keyspace multiplied by {pattern.multiplier:g}."
            ),
            severity=_PATTERN_SEVERITY.get(pattern.pattern_type, Severity.LOW),
            evidence={"pattern_type": pattern.pattern_type, "multiplier": pattern.multiplier},
        )


def _verdict_label(verdict: Verdict) -> str:
    return verdict.value.replace("_", " ").title()
