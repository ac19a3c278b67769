"""Payments bounded context: pain.001 credit transfer assembly."""

from sepa_ct.domain.payments.aggregates import CreditTransferMessage
from sepa_ct.domain.payments.exceptions import (
    ConfigError,
    CustomNodeError,
    LocationError,
    PaymentError,
    StateError,
)
from sepa_ct.domain.payments.value_objects import (
    BatchSummary,
    CreditTransferSummary,
    MessageConfig,
    MessageState,
    PaymentInstruction,
    SchemaValidationResult,
    SchemaVersion,
    TransferType,
)

__all__ = [
    # Aggregate
    "CreditTransferMessage",
    # Exceptions
    "ConfigError",
    "CustomNodeError",
    "LocationError",
    "PaymentError",
    "StateError",
    # Value objects
    "BatchSummary",
    "CreditTransferSummary",
    "MessageConfig",
    "MessageState",
    "PaymentInstruction",
    "SchemaValidationResult",
    "SchemaVersion",
    "TransferType",
]
