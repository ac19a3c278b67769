"""Use case: build a complete credit transfer message from raw input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from sepa_ct.application.dtos import BuildResult
from sepa_ct.domain.payments import CreditTransferMessage

if TYPE_CHECKING:
    from sepa_ct.domain.payments.ports import (
        DocumentSerializerPort,
        SchemaValidatorPort,
    )
    from sepa_ct.domain.shared.time import ClockPort, RandomSourcePort

logger = logging.getLogger(__name__)


class CreditTransferService:
    """
    Application service that turns config and payments into pain.001 XML.

    Wires the CreditTransferMessage aggregate to the serializer and,
    optionally, the schema validator.
    """

    def __init__(
        self,
        serializer: DocumentSerializerPort,
        validator: Optional[SchemaValidatorPort] = None,
        clock: Optional[ClockPort] = None,
        random_source: Optional[RandomSourcePort] = None,
    ):
        self._serializer = serializer
        self._validator = validator
        self._clock = clock
        self._random_source = random_source

    def build(
        self,
        config: Mapping[str, Any],
        payments: Iterable[Mapping[str, Any]],
        validate_schema: bool = False,
    ) -> BuildResult:
        """
        Build, finalize and serialize one message.

        Parameters
        ----------
        config
            Message configuration mapping
        payments
            Payment mappings, added in order
        validate_schema
            Also validate the XML; requires a validator

        Raises
        ------
        ConfigError
            If the configuration is invalid
        PaymentError
            For the first invalid payment; nothing is serialized
        SchemaNotFoundError
            If validation is requested and the XSD is missing
        """
        if validate_schema and self._validator is None:
            msg = "Schema validation requested but no validator configured"
            raise ValueError(msg)

        message = CreditTransferMessage(
            config,
            clock=self._clock,
            random_source=self._random_source,
        )
        end_to_end_ids = tuple(message.add_payment(payment) for payment in payments)
        xml = message.save(self._serializer)

        validation = None
        if validate_schema and self._validator is not None:
            validation = message.validate(xml, self._validator)
            if not validation.is_valid:
                logger.warning(
                    "Message %s does not validate against %s",
                    message.message_id,
                    validation.schema_file,
                )

        return BuildResult(
            xml=xml,
            summary=message.summary(),
            end_to_end_ids=end_to_end_ids,
            validation=validation,
        )
