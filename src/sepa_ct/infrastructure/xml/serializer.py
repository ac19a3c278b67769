"""lxml serializer - infrastructure adapter rendering the document tree."""

from __future__ import annotations

from lxml import etree

from sepa_ct.domain.payments.document import Node
from sepa_ct.domain.payments.ports import DocumentSerializerPort
from sepa_ct.domain.payments.value_objects import XSI_NAMESPACE, SchemaVersion


class XmlSerializer(DocumentSerializerPort):
    """Render a Node tree as namespaced pain.001 XML.

    Every element is placed in the schema version's namespace, which is
    declared as the default namespace on the root together with ``xsi``.
    Child order is preserved exactly.
    """

    def __init__(self, pretty_print: bool = True):
        self._pretty_print = pretty_print

    def to_element(self, root: Node, version: SchemaVersion) -> etree._Element:
        namespace = version.namespace
        element = etree.Element(
            f"{{{namespace}}}{root.tag}",
            attrib=root.attributes,
            nsmap={None: namespace, "xsi": XSI_NAMESPACE},
        )
        self._fill(element, root, namespace)
        return element

    def serialize(self, root: Node, version: SchemaVersion) -> bytes:
        return etree.tostring(
            self.to_element(root, version),
            pretty_print=self._pretty_print,
            xml_declaration=True,
            encoding="UTF-8",
        )

    def _fill(self, element: etree._Element, node: Node, namespace: str) -> None:
        if node.text is not None:
            element.text = node.text
        for child in node.children:
            sub = etree.SubElement(
                element,
                f"{{{namespace}}}{child.tag}",
                attrib=child.attributes,
            )
            self._fill(sub, child, namespace)
