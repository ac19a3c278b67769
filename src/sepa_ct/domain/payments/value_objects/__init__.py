"""Value objects for the payments domain."""

from sepa_ct.domain.payments.value_objects.amount import (
    MAX_AMOUNT_DIGITS,
    MAX_MINOR_UNITS,
    parse_minor_units,
    sum_decimals,
    to_decimal,
    to_minor_units,
)
from sepa_ct.domain.payments.value_objects.message_config import MessageConfig
from sepa_ct.domain.payments.value_objects.message_state import MessageState
from sepa_ct.domain.payments.value_objects.payment_instruction import (
    PaymentInstruction,
)
from sepa_ct.domain.payments.value_objects.schema_version import (
    XSI_NAMESPACE,
    SchemaVersion,
)
from sepa_ct.domain.payments.value_objects.summary import (
    BatchSummary,
    CreditTransferSummary,
)
from sepa_ct.domain.payments.value_objects.transfer_type import TransferType
from sepa_ct.domain.payments.value_objects.validation_result import (
    SchemaValidationResult,
)

__all__ = [
    "MAX_AMOUNT_DIGITS",
    "MAX_MINOR_UNITS",
    "XSI_NAMESPACE",
    "BatchSummary",
    "CreditTransferSummary",
    "MessageConfig",
    "MessageState",
    "PaymentInstruction",
    "SchemaValidationResult",
    "SchemaVersion",
    "TransferType",
    "parse_minor_units",
    "sum_decimals",
    "to_decimal",
    "to_minor_units",
]
