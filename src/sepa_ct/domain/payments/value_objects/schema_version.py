"""Supported pain.001 schema versions."""

from enum import Enum

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


class SchemaVersion(str, Enum):
    """pain.001 schema variant selected by the ``version`` config option."""

    V2 = "2"
    V3 = "3"

    @property
    def message_name(self) -> str:
        return f"pain.001.001.0{self.value}"

    @property
    def namespace(self) -> str:
        return f"urn:iso:std:iso:20022:tech:xsd:{self.message_name}"

    @property
    def schema_filename(self) -> str:
        return f"{self.message_name}.xsd"

    @classmethod
    def default(cls) -> "SchemaVersion":
        return cls.V2
