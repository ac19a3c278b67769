"""Ports for rendering and schema-checking finished messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sepa_ct.domain.payments.document import Node
    from sepa_ct.domain.payments.value_objects import SchemaVersion
    from sepa_ct.domain.payments.value_objects.validation_result import (
        SchemaValidationResult,
    )


class DocumentSerializerPort(ABC):
    """Turns a document tree into its wire representation."""

    @abstractmethod
    def serialize(self, root: Node, version: SchemaVersion) -> bytes:
        """
        Render the document.

        Parameters
        ----------
        root
            The ``Document`` node of a finalized message
        version
            Schema version, selects the root namespace

        Returns
        -------
        The encoded XML document
        """


class SchemaValidatorPort(ABC):
    """Checks a serialized document against the XSD of its schema version."""

    @abstractmethod
    def validate(self, xml: bytes, version: SchemaVersion) -> SchemaValidationResult:
        """
        Validate a serialized document.

        Raises
        ------
        SchemaNotFoundError
            If no schema file is available for the version
        """
