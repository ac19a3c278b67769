"""Tests for the XSD schema validator."""

import pytest

from sepa_ct.domain.payments import CreditTransferMessage, SchemaVersion
from sepa_ct.domain.shared.exceptions import ErrorCode
from sepa_ct.infrastructure.exceptions import SchemaNotFoundError
from sepa_ct.infrastructure.xml import XmlSerializer, XsdSchemaValidator


class TestXsdSchemaValidator:
    """Test cases for XsdSchemaValidator."""

    def test_schema_path(self, schema_dir):
        validator = XsdSchemaValidator(schema_dir)

        assert validator.schema_path(SchemaVersion.V3) == schema_dir / "pain.001.001.03.xsd"
        assert validator.schema_path(SchemaVersion.V2) == schema_dir / "pain.001.001.02.xsd"

    def test_valid_message(self, schema_dir, config_data, payment_data, clock, random_source):
        message = CreditTransferMessage(config_data, clock=clock, random_source=random_source)
        message.add_payment(payment_data)
        xml = message.save(XmlSerializer())

        result = message.validate(xml, XsdSchemaValidator(schema_dir))

        assert result.is_valid
        assert result.schema_file == "pain.001.001.03.xsd"
        assert result.errors == ()

    def test_invalid_document(self, schema_dir):
        xml = (
            b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:pain.001.001.03">'
            b"<Other/></Document>"
        )

        result = XsdSchemaValidator(schema_dir).validate(xml, SchemaVersion.V3)

        assert not result.is_valid
        assert result.errors
        assert result.errors[0].startswith("line 1:")

    def test_wrong_namespace_is_invalid(self, schema_dir):
        xml = (
            b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:pain.001.001.02">'
            b"<CstmrCdtTrfInitn/></Document>"
        )

        result = XsdSchemaValidator(schema_dir).validate(xml, SchemaVersion.V3)

        assert not result.is_valid

    def test_syntax_error(self, schema_dir):
        result = XsdSchemaValidator(schema_dir).validate(b"<Document", SchemaVersion.V3)

        assert not result.is_valid
        assert result.errors[0].startswith("XML syntax error")

    def test_missing_schema(self, tmp_path):
        validator = XsdSchemaValidator(tmp_path)

        with pytest.raises(SchemaNotFoundError) as exc_info:
            validator.validate(b"<Document/>", SchemaVersion.V3)

        assert exc_info.value.code == ErrorCode.SCHEMA_NOT_FOUND
        assert exc_info.value.schema_path == tmp_path / "pain.001.001.03.xsd"

    def test_schema_is_cached(self, schema_dir):
        validator = XsdSchemaValidator(schema_dir)
        xml = (
            b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:pain.001.001.03">'
            b"<CstmrCdtTrfInitn/></Document>"
        )
        assert validator.validate(xml, SchemaVersion.V3).is_valid

        (schema_dir / "pain.001.001.03.xsd").unlink()

        assert validator.validate(xml, SchemaVersion.V3).is_valid
