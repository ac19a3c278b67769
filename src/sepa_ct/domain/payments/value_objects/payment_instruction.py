"""Payment instruction value object."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from sepa_ct.domain.payments.exceptions import PaymentError
from sepa_ct.domain.payments.validators import (
    PAYMENT_REQUIRED,
    InputField,
    check_required,
    payment_validators,
    run_validators,
)
from sepa_ct.domain.payments.value_objects.transfer_type import TransferType

_WIRE_NAMES = {
    "iban": InputField.IBAN.value,
    "bic": InputField.BIC.value,
    "transfer_type": InputField.TYPE.value,
}

_TEXT_FIELDS = (
    InputField.NAME,
    InputField.IBAN,
    InputField.BIC,
    InputField.AMOUNT,
    InputField.EXECUTION_DATE,
    InputField.DESCRIPTION,
    InputField.END_TO_END_ID,
)

# Context key carrying the message's ``validate`` flag into model validation
CHECKSUM_CONTEXT_KEY = "checksum_validation"


class PaymentInstruction(BaseModel):
    """A single credit transfer to one creditor.

    ``amount`` is kept as the minor-unit digit string the caller supplied.
    ``transfer_type`` is only used as part of the batch key in batch mode.
    """

    name: str
    iban: str = Field(alias="IBAN")
    bic: str | None = Field(default=None, alias="BIC")
    amount: str
    execution_date: str
    description: str
    end_to_end_id: str | None = None
    transfer_type: TransferType | None = Field(default=None, alias="type")

    model_config = ConfigDict(
        frozen=True,  # Immutable
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _validate_input(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            raise PaymentError("payment", "payment must be a mapping")

        context = info.context or {}
        checksum_enabled = context.get(CHECKSUM_CONTEXT_KEY, True)

        values = {_WIRE_NAMES.get(key, key): value for key, value in data.items()}
        check_required(values, PAYMENT_REQUIRED, PaymentError)
        run_validators(values, payment_validators(checksum_enabled), PaymentError)

        for field in _TEXT_FIELDS:
            if values.get(field.value) is not None:
                values[field.value] = str(values[field.value])
        for field in (InputField.BIC, InputField.END_TO_END_ID):
            if values.get(field.value) == "":
                values[field.value] = None
        if values.get(InputField.TYPE.value) is not None:
            values[InputField.TYPE.value] = TransferType(values[InputField.TYPE.value])
        return values

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        checksum_validation: bool = True,
    ) -> PaymentInstruction:
        """Build a payment from caller keys (``name``, ``IBAN``, ``amount``, ...).

        Parameters
        ----------
        data
            Caller-supplied payment mapping
        checksum_validation
            The message's ``validate`` flag; False skips IBAN/BIC checks

        Raises
        ------
        PaymentError
            For the first missing, empty or invalid field
        """
        return cls.model_validate(
            data,
            context={CHECKSUM_CONTEXT_KEY: checksum_validation},
        )

    @property
    def amount_minor_units(self) -> int:
        return int(self.amount)
