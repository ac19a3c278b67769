"""Payments domain exceptions."""

from typing import Any

from sepa_ct.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class FieldValidationError(ValidationError):
    """Base for errors that point at one offending input field."""

    def __init__(
        self,
        field: str,
        reason: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        prefix: str = "Invalid input",
    ) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            message=f"{prefix}, error with: {reason}",
            code=code,
            details={"field": field, "reason": reason},
        )


class ConfigError(FieldValidationError):
    """Raised when the message configuration is missing or invalid."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            field=field,
            reason=reason,
            code=ErrorCode.INVALID_CONFIG,
            prefix="Invalid config",
        )


class PaymentError(FieldValidationError):
    """Raised when a payment instruction is missing a field or fails validation."""

    def __init__(
        self,
        field: str,
        reason: str,
        code: ErrorCode = ErrorCode.INVALID_PAYMENT,
    ) -> None:
        super().__init__(
            field=field,
            reason=reason,
            code=code,
            prefix="Invalid payment",
        )


class CustomNodeError(FieldValidationError):
    """Raised when a custom node cannot be written as XML."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            field=field,
            reason=reason,
            code=ErrorCode.INVALID_NODE,
            prefix="Invalid custom node",
        )


class LocationError(EntityNotFoundError):
    """Raised when a custom node location does not resolve to one usable parent."""

    def __init__(self, location: str, matches: int, reason: str | None = None) -> None:
        if reason is not None:
            msg = f"Invalid location, {reason}: {location}"
        elif matches == 0:
            msg = f"Invalid location, or no results found: {location}"
        else:
            msg = f"Ambiguous location, {matches} nodes found: {location}"
        super().__init__(
            message=msg,
            code=ErrorCode.LOCATION_NOT_FOUND,
            details={"location": location, "matches": matches},
        )
        self.location = location
        self.matches = matches


class StateError(BusinessRuleViolation):
    """Raised when a finalized message or sealed node is modified."""

    def __init__(self, operation: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Cannot {operation}: message is already finalized",
            code=ErrorCode.MESSAGE_FINALIZED,
            details={"operation": operation, **(details or {})},
        )
        self.operation = operation
