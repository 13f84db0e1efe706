"""
PwGuard Analyzers
==================

Strength-estimation building blocks: character classes, the pattern
library, keyspace penalties, crack-time projection and scoring.
"""

from pwguard.analyzers.crack_time import CrackTimeEstimator, format_crack_time
from pwguard.analyzers.keyspace import KeyspaceAnalyzer
from pwguard.analyzers.strength import PasswordStrengthChecker, check_password

__all__ = [
    "CrackTimeEstimator",
    "KeyspaceAnalyzer",
    "PasswordStrengthChecker",
    "check_password",
    "format_crack_time",
]
