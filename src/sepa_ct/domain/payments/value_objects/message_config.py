"""Message configuration value object."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sepa_ct.domain.payments.exceptions import ConfigError
from sepa_ct.domain.payments.validators import (
    CONFIG_REQUIRED,
    InputField,
    check_required,
    config_validators,
    run_validators,
    validate_batch,
)
from sepa_ct.domain.payments.value_objects.schema_version import SchemaVersion

# Python attribute names that differ from the caller-facing keys
_WIRE_NAMES = {
    "iban": InputField.IBAN.value,
    "bic": InputField.BIC.value,
    "checksum_validation": InputField.VALIDATE.value,
}

_TEXT_FIELDS = (
    InputField.NAME,
    InputField.IBAN,
    InputField.BIC,
    InputField.CURRENCY,
    InputField.DEBITOR_ID,
)


class MessageConfig(BaseModel):
    """Originator configuration, fixed for the lifetime of one message.

    Instances are validated on construction: required keys must be present
    and non-empty, and IBAN/BIC must pass their checks unless ``validate`` is
    False. Any violation raises ConfigError naming the offending key.
    """

    name: str
    iban: str = Field(alias="IBAN")
    bic: str | None = Field(default=None, alias="BIC")
    currency: str
    batch: bool
    debitor_id: str | None = None
    checksum_validation: bool = Field(default=True, alias="validate")
    version: SchemaVersion = SchemaVersion.default()

    model_config = ConfigDict(
        frozen=True,  # Immutable
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _validate_input(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise ConfigError("config", "config must be a mapping")

        values = {_WIRE_NAMES.get(key, key): value for key, value in data.items()}
        check_required(values, CONFIG_REQUIRED, ConfigError)

        checksum_enabled = values.get(InputField.VALIDATE.value, True)
        reason = validate_batch(checksum_enabled)
        if reason is not None:
            raise ConfigError(
                InputField.VALIDATE.value,
                f"{InputField.VALIDATE.value} does not validate: {reason}",
            )

        run_validators(values, config_validators(checksum_enabled), ConfigError)

        version = values.get(InputField.VERSION.value)
        if version is not None:
            try:
                values[InputField.VERSION.value] = SchemaVersion(str(version))
            except ValueError:
                raise ConfigError(
                    InputField.VERSION.value,
                    f"{version} is not a supported schema version",
                ) from None

        for field in _TEXT_FIELDS:
            if values.get(field.value) is not None:
                values[field.value] = str(values[field.value])
        values[InputField.CURRENCY.value] = values[InputField.CURRENCY.value].upper()
        return values

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MessageConfig:
        """Build a config from caller keys (``name``, ``IBAN``, ``BIC``, ...)."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        return f"{self.name} ({self.iban}, {self.currency})"
