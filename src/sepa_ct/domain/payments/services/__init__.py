"""Domain services for the payments domain."""

from sepa_ct.domain.payments.services.batch_registry import BatchRegistry
from sepa_ct.domain.payments.services.identifier_factory import IdentifierFactory
from sepa_ct.domain.payments.services.totals import TreeTotals, compute_tree_totals

__all__ = [
    "BatchRegistry",
    "IdentifierFactory",
    "TreeTotals",
    "compute_tree_totals",
]
