"""
PwGuard -- Password Strength Estimation & Secure Generation
============================================================

Estimates how long a password survives realistic guessing attacks and
generates random, best-of-N and memorable passwords from a
cryptographically secure source.

Modules:
    - pwguard.core.engine: Central orchestrator
    - pwguard.core.models: Pydantic data models
    - pwguard.analyzers: Pattern library, keyspace, crack-time and scoring
    - pwguard.generators: Secure password generation
    - pwguard.output: Console and report output
    - pwguard.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

__version__ = "1.0.0"
__tool_name__ = "pwguard"

from pwguard.analyzers.strength import check_password
from pwguard.generators.password import (
    generate_memorable_password,
    generate_password,
    generate_strong_password,
)

__all__ = [
    "check_password",
    "generate_password",
    "generate_strong_password",
    "generate_memorable_password",
]
