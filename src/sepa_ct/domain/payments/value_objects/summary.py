"""Read-only aggregate view over a credit transfer message."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BatchSummary(BaseModel):
    """Totals of one payment information batch. Amounts are in minor units."""

    type: str = Field(..., description="Transfer type code, empty if none was given")
    execution_date: str
    batch_id: str
    transactions: int = Field(..., ge=0)
    amount: str = Field(..., description="Control sum in minor units")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ExecutionDate": self.execution_date,
            "Type": self.type,
            "BatchId": self.batch_id,
            "BatchTransactions": self.transactions,
            "BatchAmount": self.amount,
        }


class CreditTransferSummary(BaseModel):
    """Message id plus transaction count and amount totals.

    ``batches`` is only filled in batch mode; in single-payment mode the
    totals are derived from the document tree.
    """

    message_id: str
    total_transactions: int = Field(..., ge=0)
    total_amount: str = Field(..., description="Total amount in minor units")
    batched: bool = False
    batches: tuple[BatchSummary, ...] = ()

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "MessageId": self.message_id,
            "TotalTransactions": self.total_transactions,
            "TotalAmount": self.total_amount,
        }
        if self.batched:
            info["Batches"] = [batch.to_dict() for batch in self.batches]
        return info
