"""In-memory registry of in-progress payment batches."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from sepa_ct.domain.payments.document import Node
from sepa_ct.domain.payments.entities import Batch, BatchKey
from sepa_ct.domain.payments.value_objects.transfer_type import TransferType

logger = logging.getLogger(__name__)

BatchFactory = Callable[[BatchKey], Batch]


class BatchRegistry:
    """Batches keyed by (transfer type, execution date), in creation order.

    Batches are never removed; the registry lives as long as its message.
    """

    def __init__(self) -> None:
        self._batches: dict[BatchKey, Batch] = {}

    def get(self, key: BatchKey) -> Optional[Batch]:
        return self._batches.get(key)

    def resolve(
        self,
        transfer_type: Optional[TransferType],
        execution_date: str,
        factory: BatchFactory,
    ) -> Batch:
        """Return the batch for the key, creating and registering it if needed."""
        key = BatchKey(transfer_type, execution_date)
        batch = self._batches.get(key)
        if batch is None:
            batch = factory(key)
            self._batches[key] = batch
            logger.debug(
                "Created batch %s for %s on %s",
                batch.batch_id,
                key.type_code or "untyped",
                execution_date,
            )
        return batch

    def apply_payment(self, batch: Batch, entry: Node, amount_minor_units: int) -> None:
        batch.add_transaction(entry, amount_minor_units)

    def all(self) -> tuple[Batch, ...]:
        return tuple(self._batches.values())

    def total_count(self) -> int:
        return sum(batch.count for batch in self._batches.values())

    def total_control_sum(self) -> int:
        return sum(batch.control_sum for batch in self._batches.values())

    def is_empty(self) -> bool:
        return not self._batches

    def __len__(self) -> int:
        return len(self._batches)
