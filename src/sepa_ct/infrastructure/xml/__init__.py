"""XML adapters built on lxml."""

from sepa_ct.infrastructure.xml.schema_validator import XsdSchemaValidator
from sepa_ct.infrastructure.xml.serializer import XmlSerializer

__all__ = ["XmlSerializer", "XsdSchemaValidator"]
