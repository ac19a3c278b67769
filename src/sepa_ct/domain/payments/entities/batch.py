"""Payment information batch entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sepa_ct.domain.payments.document import Node
from sepa_ct.domain.payments.exceptions import StateError
from sepa_ct.domain.payments.value_objects.amount import to_decimal
from sepa_ct.domain.payments.value_objects.transfer_type import TransferType


@dataclass(frozen=True)
class BatchKey:
    """Composite batch identity: transfer type plus execution date."""

    transfer_type: Optional[TransferType]
    execution_date: str

    @property
    def type_code(self) -> str:
        return self.transfer_type.value if self.transfer_type else ""


class Batch:
    """A PmtInf block collecting transactions that share a BatchKey.

    The batch owns its PmtInf node until the message is finalized. The
    running count and control sum always describe exactly the entries that
    were appended; the NbOfTxs/CtrlSum nodes are only written on close.
    """

    def __init__(self, key: BatchKey, batch_id: str, node: Node):
        self._key = key
        self._batch_id = batch_id
        self._node = node
        self._entries: list[Node] = []
        self._count = 0
        self._control_sum = 0
        self._closed = False

    @property
    def key(self) -> BatchKey:
        return self._key

    @property
    def batch_id(self) -> str:
        return self._batch_id

    @property
    def node(self) -> Node:
        return self._node

    @property
    def entries(self) -> list[Node]:
        return self._entries.copy()

    @property
    def count(self) -> int:
        return self._count

    @property
    def control_sum(self) -> int:
        """Running control sum in minor units."""
        return self._control_sum

    @property
    def is_closed(self) -> bool:
        return self._closed

    def add_transaction(self, entry: Node, amount_minor_units: int) -> None:
        """Append one CdtTrfTxInf entry and update count and sum together."""
        if self._closed:
            raise StateError("add payment to batch", details={"batch_id": self._batch_id})
        self._node.append(entry)
        self._entries.append(entry)
        self._count, self._control_sum = (
            self._count + 1,
            self._control_sum + amount_minor_units,
        )

    def close(self) -> Node:
        """Write the batch totals into the PmtInf node, seal it and return it."""
        if self._closed:
            raise StateError("close batch", details={"batch_id": self._batch_id})
        nb_of_txs = self._node.find("NbOfTxs")
        ctrl_sum = self._node.find("CtrlSum")
        if nb_of_txs is None or ctrl_sum is None:
            msg = f"Batch {self._batch_id} is missing its NbOfTxs/CtrlSum nodes"
            raise ValueError(msg)
        nb_of_txs.set_text(str(self._count))
        ctrl_sum.set_text(to_decimal(self._control_sum))
        self._node.seal()
        self._closed = True
        return self._node

    def __repr__(self) -> str:
        return (
            f"Batch(key={self._key!r}, batch_id={self._batch_id!r}, "
            f"count={self._count}, control_sum={self._control_sum})"
        )
