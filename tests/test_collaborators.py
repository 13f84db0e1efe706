from pwguard.core.collaborators import BreachChecker, EmailValidator
from pwguard.core.models import (
    EmailStatus,
    EmailValidationResult,
    EmailValidations,
    PwnedCheckResult,
)


class _StaticBreachChecker:
    def check(self, password):
        return PwnedCheckResult(is_pwned=False, breach_count=0)


class _DomainValidator:
    def validate(self, email):
        valid = "@" in email
        return EmailValidationResult(
            email=email,
            validations=EmailValidations(syntax=valid),
            score=30 if valid else 0,
            status=EmailStatus.VALID if valid else EmailStatus.INVALID,
        )


def test_breach_checker_is_structural():
    assert isinstance(_StaticBreachChecker(), BreachChecker)
    assert not isinstance(object(), BreachChecker)


def test_email_validator_is_structural():
    validator = _DomainValidator()
    assert isinstance(validator, EmailValidator)
    assert not isinstance(_StaticBreachChecker(), EmailValidator)
    assert validator.validate("nobody").status is EmailStatus.INVALID
