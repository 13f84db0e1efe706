"""
PwGuard Core Module
====================

Data models, error types and collaborator interfaces shared by the
analyzers, generators and the engine (``pwguard.core.engine``).
"""

from pwguard.core.errors import (
    InvalidLengthError,
    NoCharacterClassSelectedError,
    PasswordGenerationError,
    PwGuardError,
)
from pwguard.core.models import (
    AttackScenario,
    CharacterClass,
    CharacterClassFlags,
    CrackTimeEstimate,
    CrackTimes,
    GeneratePasswordOptions,
    GenerationStrategy,
    KeyspaceBreakdown,
    PasswordAnalysis,
    PasswordPattern,
    PasswordStrengthResult,
    PwnedCheckResult,
    Verdict,
)

__all__ = [
    "AttackScenario",
    "CharacterClass",
    "CharacterClassFlags",
    "CrackTimeEstimate",
    "CrackTimes",
    "GeneratePasswordOptions",
    "GenerationStrategy",
    "InvalidLengthError",
    "KeyspaceBreakdown",
    "NoCharacterClassSelectedError",
    "PasswordAnalysis",
    "PasswordGenerationError",
    "PasswordPattern",
    "PasswordStrengthResult",
    "PwGuardError",
    "PwnedCheckResult",
    "Verdict",
]
