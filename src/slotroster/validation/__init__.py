"""Validation module for placement rules and schedule audits."""

from slotroster.validation.validator import AuditResult, ConstraintValidator, Violation

__all__ = [
    "AuditResult",
    "ConstraintValidator",
    "Violation",
]
