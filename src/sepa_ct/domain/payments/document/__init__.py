"""Document tree for pain.001 messages."""

from sepa_ct.domain.payments.document.node import Node, has_non_xml_chars, is_valid_name

__all__ = ["Node", "has_non_xml_chars", "is_valid_name"]
