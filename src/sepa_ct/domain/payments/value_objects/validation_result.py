"""Outcome of validating a serialized message against its XSD."""

from pydantic import BaseModel, ConfigDict


class SchemaValidationResult(BaseModel):
    """Schema validation outcome with the validator's error messages."""

    is_valid: bool
    schema_file: str
    errors: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return self.is_valid
