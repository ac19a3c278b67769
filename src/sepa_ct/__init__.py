"""SEPA Credit Transfer (pain.001) message builder."""

from sepa_ct.domain.payments import (
    CreditTransferMessage,
    MessageConfig,
    PaymentInstruction,
)

__version__ = "0.1.0"

__all__ = [
    "CreditTransferMessage",
    "MessageConfig",
    "PaymentInstruction",
]
