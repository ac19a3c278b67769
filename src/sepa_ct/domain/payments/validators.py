"""Field validators for SEPA credit transfer input.

Every validator takes one untyped value and returns ``None`` when the value
is valid, or a human-readable reason when it is not. Malformed input is the
expected failure case, so validators never raise.

Validators are looked up by ``InputField`` through static mappings. The
config and payment value objects run them in mapping order and turn the first
reason into a ConfigError / PaymentError.
"""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from functools import partial
from typing import Any, Callable, Mapping, Optional

from sepa_ct.domain.payments.document.node import has_non_xml_chars
from sepa_ct.domain.payments.value_objects.amount import MAX_AMOUNT_DIGITS
from sepa_ct.domain.payments.value_objects.transfer_type import TransferType
from sepa_ct.domain.shared.iban import is_valid_iban_checksum

Validator = Callable[[Any], Optional[str]]
ErrorFactory = Callable[[str, str], Exception]

MAX_TEXT_LENGTH = 140
MAX_END_TO_END_ID_LENGTH = 35

# Unanchored on purpose: a zero-length match always exists, so only the
# explicit length bound in validate_text can reject a value.
_TEXT_PATTERN = re.compile(r"[a-zA-Z0-9/–?:().,'‘+\s]{0,140}")
_IBAN_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[a-zA-Z0-9]{1,30}")
_BIC_PATTERN = re.compile(r"[a-zA-Z]{4}[a-zA-Z]{2}[a-zA-Z0-9]{2}([a-zA-Z0-9]{3})?")
_AMOUNT_PATTERN = re.compile(r"[0-9]+")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_CURRENCY_PATTERN = re.compile(r"[A-Za-z]{3}")


class InputField(str, Enum):
    """Closed set of input keys, named as callers supply them."""

    NAME = "name"
    IBAN = "IBAN"
    BIC = "BIC"
    BATCH = "batch"
    CURRENCY = "currency"
    DEBITOR_ID = "debitor_id"
    VALIDATE = "validate"
    VERSION = "version"
    AMOUNT = "amount"
    EXECUTION_DATE = "execution_date"
    DESCRIPTION = "description"
    END_TO_END_ID = "end_to_end_id"
    TYPE = "type"


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def validate_text(value: Any) -> Optional[str]:
    text = _as_text(value)
    if len(text) > MAX_TEXT_LENGTH:
        return f"text is longer than {MAX_TEXT_LENGTH} characters"
    if has_non_xml_chars(text):
        return "text contains characters that cannot be written to XML"
    if _TEXT_PATTERN.search(text) is None:
        return f"{text} contains characters outside the SEPA character set"
    return None


def validate_iban(value: Any, checksum_enabled: bool = True) -> Optional[str]:
    """Check IBAN format and MOD97-10 checksum (skipped when disabled)."""
    if not checksum_enabled:
        return None
    iban = _as_text(value)
    if not _IBAN_PATTERN.fullmatch(iban):
        return f"{iban} is not a valid IBAN format"
    if not is_valid_iban_checksum(iban):
        return f"{iban} has an invalid checksum"
    return None


def validate_bic(value: Any, checksum_enabled: bool = True) -> Optional[str]:
    """Check BIC format. BICs carry no checksum, only the structure is checked."""
    if not checksum_enabled:
        return None
    bic = _as_text(value)
    if not _BIC_PATTERN.fullmatch(bic):
        return f"{bic} is not a valid BIC"
    return None


def validate_amount(value: Any) -> Optional[str]:
    """Amounts are minor-unit digit strings: no sign, no decimal point."""
    if isinstance(value, bool):
        return f"{value} is not an amount in minor units"
    amount = _as_text(value)
    if not _AMOUNT_PATTERN.fullmatch(amount):
        return f"{amount} is not an amount in minor units"
    if len(amount.lstrip("0")) > MAX_AMOUNT_DIGITS:
        return f"{amount} exceeds {MAX_AMOUNT_DIGITS} digits"
    return None


def validate_date(value: Any) -> Optional[str]:
    text = _as_text(value)
    if not _DATE_PATTERN.fullmatch(text):
        return f"{text} is not a valid ISO Date"
    try:
        date.fromisoformat(text)
    except ValueError:
        return f"{text} is not a valid ISO Date"
    return None


def validate_end_to_end_id(value: Any) -> Optional[str]:
    identifier = _as_text(value)
    if not identifier.isascii():
        return f"{identifier} is not ASCII"
    if has_non_xml_chars(identifier):
        return "end-to-end id contains control characters"
    if len(identifier) > MAX_END_TO_END_ID_LENGTH:
        return f"{identifier} is longer than {MAX_END_TO_END_ID_LENGTH} characters"
    return None


def validate_ct_type(value: Any) -> Optional[str]:
    code = value.value if isinstance(value, TransferType) else _as_text(value)
    if code in TransferType.codes():
        return None
    return f"{code} is not a valid Sepa Credit Transfer Transaction Type."


def validate_batch(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return f"{value!r} is not a boolean"


def validate_currency(value: Any) -> Optional[str]:
    code = _as_text(value).strip()
    if not _CURRENCY_PATTERN.fullmatch(code):
        return f"Currency code must be 3 letters: {code}"
    return None


# Checksum-aware validators are bound to the config's ``validate`` flag;
# the rest are flag-independent.
def config_validators(checksum_enabled: bool) -> dict[InputField, Validator]:
    return {
        InputField.NAME: validate_text,
        InputField.IBAN: partial(validate_iban, checksum_enabled=checksum_enabled),
        InputField.BIC: partial(validate_bic, checksum_enabled=checksum_enabled),
        InputField.BATCH: validate_batch,
        InputField.CURRENCY: validate_currency,
    }


def payment_validators(checksum_enabled: bool) -> dict[InputField, Validator]:
    return {
        InputField.NAME: validate_text,
        InputField.IBAN: partial(validate_iban, checksum_enabled=checksum_enabled),
        InputField.BIC: partial(validate_bic, checksum_enabled=checksum_enabled),
        InputField.AMOUNT: validate_amount,
        InputField.EXECUTION_DATE: validate_date,
        InputField.END_TO_END_ID: validate_end_to_end_id,
        InputField.DESCRIPTION: validate_text,
        InputField.TYPE: validate_ct_type,
    }


CONFIG_REQUIRED = (
    InputField.NAME,
    InputField.IBAN,
    InputField.BATCH,
    InputField.CURRENCY,
)

PAYMENT_REQUIRED = (
    InputField.NAME,
    InputField.IBAN,
    InputField.AMOUNT,
    InputField.EXECUTION_DATE,
    InputField.DESCRIPTION,
)


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def check_required(
    data: Mapping[str, Any],
    fields: tuple[InputField, ...],
    error: ErrorFactory,
) -> None:
    """Raise for the first required field that is absent or empty.

    ``False`` counts as a present value so boolean flags can be required.
    """
    for field in fields:
        if field.value not in data:
            raise error(field.value, f"{field.value} does not exist.")
        value = data[field.value]
        if value is not False and is_empty(value):
            raise error(field.value, f"{field.value} is empty.")


def run_validators(
    data: Mapping[str, Any],
    validators: Mapping[InputField, Validator],
    error: ErrorFactory,
) -> None:
    """Run each validator whose field is present; raise for the first failure."""
    for field, validator in validators.items():
        if data.get(field.value) is None:
            continue
        reason = validator(data[field.value])
        if reason is not None:
            raise error(field.value, f"{field.value} does not validate: {reason}")
