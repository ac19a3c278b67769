"""Lifecycle states of a credit transfer message."""

from enum import Enum


class MessageState(Enum):
    """State of a CreditTransferMessage."""

    INITIALIZED = "initialized"
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"

    def accepts_payments(self) -> bool:
        return self in [
            MessageState.INITIALIZED,
            MessageState.ACCUMULATING,
        ]
