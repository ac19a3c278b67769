"""Application services."""

from sepa_ct.application.services.credit_transfer_service import (
    CreditTransferService,
)

__all__ = ["CreditTransferService"]
