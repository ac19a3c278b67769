"""Shared domain components.

This module exports the exception hierarchy, IBAN utilities and the time
and randomness ports used across the package.
"""

from sepa_ct.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from sepa_ct.domain.shared.iban import is_valid_iban_checksum, normalize_iban
from sepa_ct.domain.shared.time import (
    ClockPort,
    RandomSourcePort,
    SystemClock,
    SystemRandomSource,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    # IBAN
    "is_valid_iban_checksum",
    "normalize_iban",
    # Time and randomness
    "ClockPort",
    "RandomSourcePort",
    "SystemClock",
    "SystemRandomSource",
]
