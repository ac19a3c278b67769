"""Ports (interfaces) required by the payments domain."""

from sepa_ct.domain.payments.ports.document_ports import (
    DocumentSerializerPort,
    SchemaValidatorPort,
)

__all__ = ["DocumentSerializerPort", "SchemaValidatorPort"]
