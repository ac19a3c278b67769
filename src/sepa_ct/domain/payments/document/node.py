"""Document tree node for the credit transfer message.

A Node is an element with a tag, ordered attributes and either text or an
ordered list of children. Nodes are mutable while the message is being
assembled and become read-only once sealed.
"""

from __future__ import annotations

import re
from typing import Iterator, Mapping, Optional

from sepa_ct.domain.payments.exceptions import StateError

DESCENDANT_PREFIX = "//"

# Element and attribute names are unprefixed (NCName); the serializer puts
# every element into the message namespace.
_NAME_PATTERN = re.compile(r"[^\W\d][\w.\-]*")

# Control characters, surrogates and non-characters excluded from XML 1.0
_NON_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def is_valid_name(name: str) -> bool:
    """Return True if ``name`` can be written as an XML element or attribute name."""
    return isinstance(name, str) and _NAME_PATTERN.fullmatch(name) is not None


def has_non_xml_chars(text: str) -> bool:
    """Return True if ``text`` holds characters XML 1.0 cannot represent."""
    return _NON_XML_CHARS.search(text) is not None


def _check_name(name: str, kind: str) -> None:
    if not is_valid_name(name):
        msg = f"{name!r} is not a valid XML {kind} name"
        raise ValueError(msg)


class Node:
    """Tagged tree element with seal semantics."""

    def __init__(
        self,
        tag: str,
        text: Optional[str] = None,
        attributes: Optional[Mapping[str, str]] = None,
    ):
        _check_name(tag, "element")
        for name in attributes or {}:
            _check_name(name, "attribute")
        self._tag = tag
        self._text = text
        self._attributes: dict[str, str] = dict(attributes or {})
        self._children: list[Node] = []
        self._sealed = False

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def text(self) -> Optional[str]:
        return self._text

    @property
    def attributes(self) -> dict[str, str]:
        return self._attributes.copy()

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def _ensure_mutable(self, operation: str) -> None:
        if self._sealed:
            raise StateError(operation, details={"node": self._tag})

    def append(self, child: Node) -> Node:
        """Append an existing node as the last child and return it."""
        self._ensure_mutable(f"append to {self._tag}")
        if self._text is not None:
            msg = f"Node '{self._tag}' holds text and cannot have children"
            raise ValueError(msg)
        self._children.append(child)
        return child

    def add(
        self,
        tag: str,
        text: Optional[str] = None,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> Node:
        """Create a child node, append it and return it."""
        return self.append(Node(tag, text, attributes))

    def set_text(self, text: str) -> None:
        self._ensure_mutable(f"set text of {self._tag}")
        if self._children:
            msg = f"Node '{self._tag}' has children and cannot hold text"
            raise ValueError(msg)
        self._text = text

    def set_attribute(self, name: str, value: str) -> None:
        self._ensure_mutable(f"set attribute of {self._tag}")
        _check_name(name, "attribute")
        self._attributes[name] = value

    def seal(self) -> None:
        """Make this node and its whole subtree read-only."""
        self._sealed = True
        for child in self._children:
            child.seal()

    def find(self, path: str) -> Optional[Node]:
        """Return the first node matching a child path like ``Amt/InstdAmt``."""
        candidates = [self]
        for step in path.split("/"):
            candidates = [c for node in candidates for c in node._children if c.tag == step]
            if not candidates:
                return None
        return candidates[0]

    def find_text(self, path: str) -> Optional[str]:
        node = self.find(path)
        return node.text if node is not None else None

    def iter(self, tag: Optional[str] = None) -> Iterator[Node]:
        """Depth-first iteration over this node and its descendants."""
        if tag is None or self._tag == tag:
            yield self
        for child in self._children:
            yield from child.iter(tag)

    def select(self, location: str) -> list[Node]:
        """Return all nodes matching a location path.

        The path is a slash-separated list of element names starting at this
        node, e.g. ``Document/CstmrCdtTrfInitn/GrpHdr``. A leading ``//``
        lets the first step match at any depth, e.g. ``//GrpHdr/InitgPty``.
        """
        location = location.strip()
        if location.startswith(DESCENDANT_PREFIX):
            steps = location[len(DESCENDANT_PREFIX) :].split("/")
            candidates = list(self.iter(steps[0]))
        else:
            steps = location.lstrip("/").split("/")
            candidates = [self] if self._tag == steps[0] else []

        for step in steps[1:]:
            candidates = [c for node in candidates for c in node._children if c.tag == step]
        return candidates

    def __repr__(self) -> str:
        if self._text is not None:
            return f"Node({self._tag!r}, text={self._text!r})"
        return f"Node({self._tag!r}, children={len(self._children)})"
