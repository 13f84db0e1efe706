"""
PwGuard Generators
===================

Random, best-of-N and memorable password generation.
"""

from pwguard.generators.password import (
    PasswordGenerator,
    generate_memorable_password,
    generate_password,
    generate_strong_password,
)

__all__ = [
    "PasswordGenerator",
    "generate_password",
    "generate_strong_password",
    "generate_memorable_password",
]
