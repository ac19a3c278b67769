"""Entities for the payments domain."""

from sepa_ct.domain.payments.entities.batch import Batch, BatchKey

__all__ = ["Batch", "BatchKey"]
