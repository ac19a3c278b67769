"""Load message configuration and payments from a JSON file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sepa_ct.infrastructure.exceptions import InputFileError


class MessageInput(BaseModel):
    """Raw message input: one config mapping and a list of payment mappings.

    The mappings are kept untyped here; MessageConfig and PaymentInstruction
    validate them when the message is built, so errors name the same fields
    whether input comes from a file or from code.
    """

    config: dict[str, Any]
    payments: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_message_file(path: Path) -> MessageInput:
    """
    Read a JSON file of the form ``{"config": {...}, "payments": [...]}``.

    Raises
    ------
    InputFileError
        If the file cannot be read or does not have the expected shape
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFileError(path, exc.strerror or str(exc)) from exc

    try:
        return MessageInput.model_validate_json(content)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "document"
        raise InputFileError(path, f"{location}: {first['msg']}") from exc
