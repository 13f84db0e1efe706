"""
Collaborator Boundaries
========================

Structural interfaces for the services that sit next to the strength
checker but are not part of it: a breach-corpus lookup and an email
validator. PwGuard ships no implementation of either; callers inject
their own.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pwguard.core.models import EmailValidationResult, PwnedCheckResult


@runtime_checkable
class BreachChecker(Protocol):
    """Looks a password up in a breach corpus.

    Implementations should report network failures through
    ``PwnedCheckResult.error_message`` rather than raising.
    """

    def check(self, password: str) -> PwnedCheckResult: ...


@runtime_checkable
class EmailValidator(Protocol):
    """Validates an email address and scores it from 0 to 100."""

    def validate(self, email: str) -> EmailValidationResult: ...
