"""Infrastructure exceptions for file and schema handling."""

from pathlib import Path

from sepa_ct.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)


class SchemaNotFoundError(EntityNotFoundError):
    """Raised when the XSD for a schema version is not available."""

    def __init__(self, schema_path: Path) -> None:
        super().__init__(
            message=f"Schema file not found: {schema_path}",
            code=ErrorCode.SCHEMA_NOT_FOUND,
            details={"schema_path": str(schema_path)},
        )
        self.schema_path = schema_path


class InputFileError(DomainException):
    """Raised when a message input file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            message=f"Cannot read message input {path}: {reason}",
            code=ErrorCode.INVALID_INPUT_FILE,
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
