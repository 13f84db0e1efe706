"""
PwGuard Exceptions
===================

Input-validation failures raised by the generators. Both are
programming errors on the caller's side: they are raised before any
randomness is consumed and are never retried.

The strength-checking path defines no errors; it accepts every string.
"""

from __future__ import annotations

MIN_PASSWORD_LENGTH = 4


class PwGuardError(Exception):
    """Base class for all PwGuard errors."""


class PasswordGenerationError(PwGuardError, ValueError):
    """Generation options were rejected before any password was drawn."""


class InvalidLengthError(PasswordGenerationError):
    """Requested password length is below :data:`MIN_PASSWORD_LENGTH`."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Password length must be at least {MIN_PASSWORD_LENGTH} characters"
        )


class NoCharacterClassSelectedError(PasswordGenerationError):
    """Every character class was disabled."""

    def __init__(self) -> None:
        super().__init__("At least one character type must be enabled")
