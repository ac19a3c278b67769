"""XSD validation adapter using lxml."""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from sepa_ct.domain.payments.ports import SchemaValidatorPort
from sepa_ct.domain.payments.value_objects import SchemaValidationResult, SchemaVersion
from sepa_ct.infrastructure.exceptions import SchemaNotFoundError

logger = logging.getLogger(__name__)


class XsdSchemaValidator(SchemaValidatorPort):
    """Validate serialized messages against ``<schema_dir>/pain.001.001.0X.xsd``.

    Parsed schemas are cached per version for the lifetime of the validator.
    """

    def __init__(self, schema_dir: Path):
        self._schema_dir = Path(schema_dir)
        self._schemas: dict[SchemaVersion, etree.XMLSchema] = {}

    def schema_path(self, version: SchemaVersion) -> Path:
        return self._schema_dir / version.schema_filename

    def _load_schema(self, version: SchemaVersion) -> etree.XMLSchema:
        if version not in self._schemas:
            path = self.schema_path(version)
            if not path.is_file():
                raise SchemaNotFoundError(path)
            logger.debug("Loading schema %s", path)
            self._schemas[version] = etree.XMLSchema(etree.parse(str(path)))
        return self._schemas[version]

    def validate(self, xml: bytes, version: SchemaVersion) -> SchemaValidationResult:
        schema = self._load_schema(version)
        schema_file = self.schema_path(version).name

        try:
            document = etree.fromstring(xml)
        except etree.XMLSyntaxError as exc:
            return SchemaValidationResult(
                is_valid=False,
                schema_file=schema_file,
                errors=(f"XML syntax error: {exc}",),
            )

        is_valid = schema.validate(document)
        errors = tuple(
            f"line {error.line}: {error.message}" for error in schema.error_log
        )
        if not is_valid:
            logger.info("Document failed %s validation with %d errors", schema_file, len(errors))
        return SchemaValidationResult(
            is_valid=is_valid,
            schema_file=schema_file,
            errors=errors,
        )
