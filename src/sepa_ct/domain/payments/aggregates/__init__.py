"""Aggregates for the payments domain."""

from sepa_ct.domain.payments.aggregates.credit_transfer_message import (
    CreditTransferMessage,
)

__all__ = ["CreditTransferMessage"]
