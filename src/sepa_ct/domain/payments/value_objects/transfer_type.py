"""Credit transfer sequence type enumeration."""

from enum import Enum


class TransferType(str, Enum):
    """Sequence type used as part of the batch key."""

    FIRST = "FRST"
    RECURRING = "RCUR"
    FINAL = "FNAL"
    ONE_OFF = "OOFF"

    @classmethod
    def codes(cls) -> list[str]:
        return [member.value for member in cls]
