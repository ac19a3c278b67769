"""Result of building a credit transfer message."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from sepa_ct.domain.payments.value_objects import (
    CreditTransferSummary,
    SchemaValidationResult,
)


class BuildResult(BaseModel):
    """Serialized message, its summary and, if requested, the schema check."""

    xml: bytes
    summary: CreditTransferSummary
    end_to_end_ids: tuple[str, ...]
    validation: Optional[SchemaValidationResult] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_valid(self) -> Optional[bool]:
        return self.validation.is_valid if self.validation is not None else None
