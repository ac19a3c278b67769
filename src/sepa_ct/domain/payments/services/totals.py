"""Message totals recomputed from the assembled document tree."""

from __future__ import annotations

from dataclasses import dataclass

from sepa_ct.domain.payments.document import Node
from sepa_ct.domain.payments.value_objects.amount import parse_minor_units, to_decimal

TRANSACTION_TAG = "CdtTrfTxInf"
INSTRUCTED_AMOUNT_PATH = "Amt/InstdAmt"


@dataclass(frozen=True)
class TreeTotals:
    count: int
    amount_minor_units: int

    @property
    def amount_decimal(self) -> str:
        return to_decimal(self.amount_minor_units)


def compute_tree_totals(root: Node) -> TreeTotals:
    """Count every CdtTrfTxInf under root and sum their instructed amounts.

    This walks the tree itself rather than trusting batch counters, so the
    group header reflects what will actually be serialized.
    """
    count = 0
    amount = 0
    for transaction in root.iter(TRANSACTION_TAG):
        count += 1
        instructed = transaction.find_text(INSTRUCTED_AMOUNT_PATH)
        if instructed:
            amount += parse_minor_units(instructed)
    return TreeTotals(count=count, amount_minor_units=amount)
