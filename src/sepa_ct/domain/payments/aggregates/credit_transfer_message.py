"""Credit transfer message aggregate root.

Assembles a pain.001 CstmrCdtTrfInitn document: one group header followed by
payment information blocks (PmtInf), each holding one or more credit
transfer transactions (CdtTrfTxInf).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from sepa_ct.domain.payments.document import Node, has_non_xml_chars, is_valid_name
from sepa_ct.domain.payments.entities import Batch, BatchKey
from sepa_ct.domain.payments.exceptions import (
    CustomNodeError,
    LocationError,
    PaymentError,
    StateError,
)
from sepa_ct.domain.payments.ports import DocumentSerializerPort, SchemaValidatorPort
from sepa_ct.domain.payments.services import (
    BatchRegistry,
    IdentifierFactory,
    compute_tree_totals,
)
from sepa_ct.domain.payments.validators import InputField
from sepa_ct.domain.payments.value_objects import (
    MAX_AMOUNT_DIGITS,
    MAX_MINOR_UNITS,
    BatchSummary,
    CreditTransferSummary,
    MessageConfig,
    MessageState,
    PaymentInstruction,
    SchemaValidationResult,
    to_decimal,
)
from sepa_ct.domain.shared.exceptions import ErrorCode
from sepa_ct.domain.shared.time import (
    ClockPort,
    RandomSourcePort,
    SystemClock,
    SystemRandomSource,
)

logger = logging.getLogger(__name__)

# Fixed codes written into every payment information block
PAYMENT_METHOD = "TRF"
SERVICE_LEVEL = "SEPA"
LOCAL_INSTRUMENT = "CORE"
CATEGORY_PURPOSE = "SALA"
PURPOSE = "SALA"
NOT_PROVIDED = "NOTPROVIDED"
CHARGE_BEARER_BATCH = "SLEV"
CHARGE_BEARER_SINGLE = "SHAR"


class CreditTransferMessage:
    """
    Builder for one SEPA credit transfer initiation message.

    The message starts INITIALIZED with its group header written, moves to
    ACCUMULATING once payments are added and ends FINALIZED. A finalized
    message is sealed: adding payments or custom nodes, or finalizing again,
    raises StateError.

    In batch mode payments are grouped into PmtInf blocks by (transfer type,
    execution date). The blocks stay in the batch registry until finalize
    appends them to the document. Without batch mode every payment gets its
    own PmtInf block, appended to the document immediately.
    """

    def __init__(
        self,
        config: Union[MessageConfig, Mapping[str, Any]],
        *,
        clock: Optional[ClockPort] = None,
        random_source: Optional[RandomSourcePort] = None,
    ):
        """
        Validate the configuration and write the group header.

        Parameters
        ----------
        config
            MessageConfig, or a mapping with the keys ``name``, ``IBAN``,
            ``BIC``, ``batch``, ``currency``, ``debitor_id``, ``validate``
            and ``version``
        clock
            Time source for MsgId and CreDtTm (defaults to the system clock)
        random_source
            Random source for identifier suffixes

        Raises
        ------
        ConfigError
            If a required key is missing or a value fails validation
        """
        if isinstance(config, MessageConfig):
            self._config = config
        else:
            self._config = MessageConfig.from_mapping(config)

        self._ids = IdentifierFactory(
            self._config.name,
            clock or SystemClock(),
            random_source or SystemRandomSource(),
        )
        self._registry = BatchRegistry()
        self._state = MessageState.INITIALIZED
        self._running_count = 0
        self._running_total = 0

        self._document = Node("Document")
        self._initiation = self._document.add("CstmrCdtTrfInitn")
        self._message_id = self._ids.message_id()
        self._header_count, self._header_sum = self._create_group_header()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> MessageConfig:
        return self._config

    @property
    def state(self) -> MessageState:
        return self._state

    @property
    def message_id(self) -> str:
        return self._message_id

    @property
    def document(self) -> Node:
        return self._document

    @property
    def is_finalized(self) -> bool:
        return self._state == MessageState.FINALIZED

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add_payment(
        self,
        payment: Union[PaymentInstruction, Mapping[str, Any]],
    ) -> str:
        """
        Validate a payment and add it to the message.

        Parameters
        ----------
        payment
            PaymentInstruction, or a mapping with the keys ``name``,
            ``IBAN``, ``BIC``, ``amount``, ``execution_date``,
            ``description``, ``end_to_end_id`` and ``type``

        Returns
        -------
        The end-to-end id of the transaction, generated if none was given

        Raises
        ------
        PaymentError
            If the payment is invalid; the message is left unchanged
        StateError
            If the message is already finalized
        """
        self._ensure_accepts("add payment")

        try:
            instruction = self._to_instruction(payment)
            amount = instruction.amount_minor_units
            self._check_total_capacity(amount)
        except PaymentError as exc:
            logger.warning("Rejected payment (%s): %s", exc.field, exc.reason)
            raise

        end_to_end_id = instruction.end_to_end_id or self._ids.payment_id()
        entry = self._build_transaction(instruction, end_to_end_id)

        if self._config.batch:
            batch = self._registry.resolve(
                instruction.transfer_type,
                instruction.execution_date,
                self._create_batch,
            )
            self._registry.apply_payment(batch, entry, amount)
        else:
            block = self._build_payment_information(
                payment_information_id=self._ids.payment_id(),
                execution_date=instruction.execution_date,
                batch_booking=False,
                charge_bearer=CHARGE_BEARER_SINGLE,
                count="1",
                control_sum=to_decimal(amount),
            )
            block.append(entry)
            self._initiation.append(block)

        self._running_count += 1
        self._running_total += amount
        self._state = MessageState.ACCUMULATING
        logger.debug(
            "Added payment %s (%s) to message %s",
            end_to_end_id,
            to_decimal(amount),
            self._message_id,
        )
        return end_to_end_id

    def add_custom_node(
        self,
        location: str,
        name: str,
        value: str = "",
        attributes: Optional[Mapping[str, str]] = None,
    ) -> Node:
        """
        Attach a node the builder does not model itself.

        Parameters
        ----------
        location
            Path of the parent element, e.g. ``Document/CstmrCdtTrfInitn/GrpHdr``
            or ``//GrpHdr/InitgPty``; must match exactly one node
        name
            Tag of the new node
        value
            Text of the new node; empty means no text
        attributes
            Attributes of the new node

        Raises
        ------
        CustomNodeError
            If the name, value or attributes cannot be written as XML
        LocationError
            If the location matches no node or more than one, or the
            matched node holds text or is a header total
        StateError
            If the message is already finalized
        """
        self._ensure_accepts("add custom node")
        _check_custom_node(name, value, attributes)
        matches = self._document.select(location)
        if len(matches) != 1:
            raise LocationError(location, len(matches))
        parent = matches[0]
        if parent.text is not None:
            raise LocationError(location, 1, reason=f"{parent.tag} holds text")
        if parent is self._header_count or parent is self._header_sum:
            raise LocationError(
                location, 1, reason=f"{parent.tag} is written on finalize"
            )
        return parent.add(name, value or None, attributes)

    def finalize(self) -> None:
        """
        Flush the batches and write the group header totals.

        Batches are appended in creation order with their totals written.
        The header count and control sum are then recomputed from every
        transaction in the document, independent of the batch counters.
        Afterwards the whole document is sealed.

        Raises
        ------
        StateError
            If the message was already finalized
        """
        self._ensure_accepts("finalize")

        for batch in self._registry.all():
            self._initiation.append(batch.close())

        totals = compute_tree_totals(self._document)
        if (totals.count, totals.amount_minor_units) != (
            self._running_count,
            self._running_total,
        ):
            logger.error(
                "Running totals drifted from document for message %s: "
                "counted %d/%d, document has %d/%d",
                self._message_id,
                self._running_count,
                self._running_total,
                totals.count,
                totals.amount_minor_units,
            )

        self._header_count.set_text(str(totals.count))
        self._header_sum.set_text(totals.amount_decimal)
        self._document.seal()
        self._state = MessageState.FINALIZED
        logger.info(
            "Finalized message %s: %d transactions, control sum %s",
            self._message_id,
            totals.count,
            totals.amount_decimal,
        )

    def save(self, serializer: DocumentSerializerPort) -> bytes:
        """Finalize the message if needed and return the serialized document."""
        if not self.is_finalized:
            self.finalize()
        return serializer.serialize(self._document, self._config.version)

    def validate(
        self,
        xml: bytes,
        validator: SchemaValidatorPort,
    ) -> SchemaValidationResult:
        """Validate serialized XML against the schema of the configured version."""
        return validator.validate(xml, self._config.version)

    def is_empty(self) -> bool:
        """Return True if no batch has been created (meaningful in batch mode)."""
        return self._registry.is_empty()

    def summary(self) -> CreditTransferSummary:
        """Return message id, per-batch totals and grand totals.

        Amounts are in minor units. In batch mode the totals come from the
        batch registry; otherwise they are computed from the document tree.
        """
        if self._config.batch:
            batches = tuple(
                BatchSummary(
                    type=batch.key.type_code,
                    execution_date=batch.key.execution_date,
                    batch_id=batch.batch_id,
                    transactions=batch.count,
                    amount=str(batch.control_sum),
                )
                for batch in self._registry.all()
            )
            return CreditTransferSummary(
                message_id=self._message_id,
                total_transactions=self._registry.total_count(),
                total_amount=str(self._registry.total_control_sum()),
                batched=True,
                batches=batches,
            )

        totals = compute_tree_totals(self._document)
        return CreditTransferSummary(
            message_id=self._message_id,
            total_transactions=totals.count,
            total_amount=str(totals.amount_minor_units),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_accepts(self, operation: str) -> None:
        if not self._state.accepts_payments():
            raise StateError(operation, details={"message_id": self._message_id})

    def _to_instruction(
        self,
        payment: Union[PaymentInstruction, Mapping[str, Any]],
    ) -> PaymentInstruction:
        if isinstance(payment, PaymentInstruction):
            # Re-check against this message's validate flag
            payment = payment.model_dump(by_alias=True)
        return PaymentInstruction.from_mapping(
            payment,
            checksum_validation=self._config.checksum_validation,
        )

    def _check_total_capacity(self, amount: int) -> None:
        if self._running_total + amount > MAX_MINOR_UNITS:
            raise PaymentError(
                InputField.AMOUNT.value,
                f"{InputField.AMOUNT.value} does not validate: control sum would "
                f"exceed {MAX_AMOUNT_DIGITS} digits",
                code=ErrorCode.AMOUNT_OVERFLOW,
            )

    def _create_group_header(self) -> tuple[Node, Node]:
        header = self._initiation.add("GrpHdr")
        header.add("MsgId", self._message_id)
        header.add("CreDtTm", self._ids.creation_timestamp())
        count = header.add("NbOfTxs")
        control_sum = header.add("CtrlSum")

        initiating_party = header.add("InitgPty")
        initiating_party.add("Nm", self._config.name)
        if self._config.debitor_id:
            other = initiating_party.add("Id").add("OrgId").add("Othr")
            other.add("Id", self._config.debitor_id)
        return count, control_sum

    def _create_batch(self, key: BatchKey) -> Batch:
        batch_id = self._ids.payment_id()
        node = self._build_payment_information(
            payment_information_id=batch_id,
            execution_date=key.execution_date,
            batch_booking=True,
            charge_bearer=CHARGE_BEARER_BATCH,
        )
        return Batch(key, batch_id, node)

    def _build_payment_information(
        self,
        *,
        payment_information_id: str,
        execution_date: str,
        batch_booking: bool,
        charge_bearer: str,
        count: Optional[str] = None,
        control_sum: Optional[str] = None,
    ) -> Node:
        block = Node("PmtInf")
        block.add("PmtInfId", payment_information_id)
        block.add("PmtMtd", PAYMENT_METHOD)
        block.add("BtchBookg", "true" if batch_booking else "false")
        block.add("NbOfTxs", count)
        block.add("CtrlSum", control_sum)

        payment_type = block.add("PmtTpInf")
        payment_type.add("SvcLvl").add("Cd", SERVICE_LEVEL)
        payment_type.add("LclInstrm").add("Cd", LOCAL_INSTRUMENT)
        payment_type.add("CtgyPurp").add("Cd", CATEGORY_PURPOSE)

        block.add("ReqdExctnDt", execution_date)
        block.add("Dbtr").add("Nm", self._config.name)
        block.add("DbtrAcct").add("Id").add("IBAN", self._config.iban)

        institution = block.add("DbtrAgt").add("FinInstnId")
        if self._config.bic:
            institution.add("BIC", self._config.bic)
        else:
            institution.add("Othr").add("Id", NOT_PROVIDED)

        block.add("ChrgBr", charge_bearer)
        return block

    def _build_transaction(
        self,
        instruction: PaymentInstruction,
        end_to_end_id: str,
    ) -> Node:
        entry = Node("CdtTrfTxInf")
        entry.add("PmtId").add("EndToEndId", end_to_end_id)
        entry.add("Amt").add(
            "InstdAmt",
            to_decimal(instruction.amount),
            {"Ccy": self._config.currency},
        )
        if instruction.bic:
            entry.add("CdtrAgt").add("FinInstnId").add("BIC", instruction.bic)
        entry.add("Cdtr").add("Nm", instruction.name)
        entry.add("CdtrAcct").add("Id").add("IBAN", instruction.iban)
        entry.add("Purp").add("Cd", PURPOSE)
        entry.add("RmtInf").add("Ustrd", instruction.description)
        return entry

    def __repr__(self) -> str:
        return (
            f"CreditTransferMessage(message_id={self._message_id!r}, "
            f"state={self._state.value!r}, batch={self._config.batch})"
        )


def _check_custom_node(
    name: str,
    value: str,
    attributes: Optional[Mapping[str, str]],
) -> None:
    if not is_valid_name(name):
        raise CustomNodeError("name", f"{name!r} is not a valid XML element name")
    if has_non_xml_chars(value or ""):
        raise CustomNodeError(
            "value", "value contains characters that cannot be written to XML"
        )
    for key, text in (attributes or {}).items():
        if not is_valid_name(key):
            raise CustomNodeError(
                "attributes", f"{key!r} is not a valid XML attribute name"
            )
        if has_non_xml_chars(str(text)):
            raise CustomNodeError(
                "attributes",
                f"{key} contains characters that cannot be written to XML",
            )
