"""Build a batched SEPA credit transfer message and print it.

Run with ``python examples/credit_transfer_example.py`` after installing the
package. Set SEPA_SCHEMA_DIR to a directory containing the pain.001 XSDs to
also validate the result.
"""

import logging
from datetime import date

from sepa_config import get_settings
from sepa_ct import CreditTransferMessage
from sepa_ct.domain.shared.exceptions import DomainException
from sepa_ct.infrastructure.xml import XmlSerializer, XsdSchemaValidator
from sepa_ct.logging_config import configure_logging

logger = logging.getLogger("sepa_ct.example")

config = {
    "name": "Test",
    "IBAN": "NL91ABNA0417164300",
    # "BIC": "ABNANL2A",  # Optional, banks may disallow BIC in future
    "batch": True,
    "debitor_id": "00000",
    "currency": "EUR",
    # "validate": False,  # Optional, disables the IBAN and BIC checks
    "version": "3",
}

payment = {
    "name": "Test von Testenstein",
    "IBAN": "DE89370400440532013000",
    # "BIC": "COBADEFFXXX",  # Optional
    "amount": "1000",
    "execution_date": date.today().isoformat(),
    "description": "Test transaction",
    "type": "OOFF",
}


def main() -> None:
    configure_logging()
    settings = get_settings()

    try:
        message = CreditTransferMessage(config)
        end_to_end_id = message.add_payment(payment)
        xml = message.save(XmlSerializer(pretty_print=settings.pretty_print))
    except DomainException as exc:
        logger.error("Could not build message: %s", exc)
        raise SystemExit(1) from exc

    print(xml.decode("utf-8"))
    print(f"End-to-end id: {end_to_end_id}")
    print(message.summary().to_dict())

    validator = XsdSchemaValidator(settings.schema_dir)
    if validator.schema_path(message.config.version).is_file():
        result = message.validate(xml, validator)
        print("Schema valid" if result.is_valid else "\n".join(result.errors))


if __name__ == "__main__":
    main()
