"""
Nodes - Data structures for markup nodes and their attributes.

The tree itself is produced by an external tree builder. This module only
describes the shape the linter consumes:
1. AttributeToken: One raw attribute occurrence from an opening tag
2. AttributeRecord: The de-duplicated, offset-annotated attribute
3. TagNode: A node of the markup tree
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional


class NodeType(str, Enum):
    """Node types a rule can fire on."""

    TAG = "tag"
    STYLE = "style"
    SCRIPT = "script"
    TEXT = "text"
    COMMENT = "comment"
    DIRECTIVE = "directive"
    CDATA = "cdata"

    ATTR = "attr"
    """Pseudo type: rules listening on it are fed one attribute at a time."""

    @classmethod
    def from_string(cls, value: str) -> "NodeType":
        """Convert string to NodeType (case-insensitive)."""
        return cls(value.lower())


class AttributeToken(NamedTuple):
    """One parsed attribute occurrence, in document order."""

    name: str
    raw_value: Optional[str] = None


@dataclass
class AttributeRecord:
    """
    A uniquely named attribute of a node.

    Offsets are filled in by the position resolver. For an attribute
    without a value, value_index equals name_index.
    """

    name: str
    """Lower-cased attribute name."""

    value: Optional[str] = None
    """Attribute content without quotes."""

    raw_value: Optional[str] = None
    """Attribute value as written, quotes included."""

    raw_eq_value: Optional[str] = None
    """The '=' segment with its surrounding whitespace, value included."""

    name_index: Optional[int] = None
    value_index: Optional[int] = None

    @property
    def has_value(self) -> bool:
        return self.raw_value is not None

    @property
    def is_resolved(self) -> bool:
        return self.name_index is not None


@dataclass
class TagNode:
    """
    A node of the markup tree.

    `open` is the opening tag text without the leading '<' and the closing
    '>' (so a self-closed tag ends with '/'). `open_index` is the absolute
    source offset of the '<'.
    """

    type: NodeType
    name: str = ""
    open: str = ""
    open_index: int = 0
    attribs: Dict[str, AttributeRecord] = field(default_factory=dict)
    children: List["TagNode"] = field(default_factory=list)
    data: Optional[str] = None
    """Text content for text, comment and directive nodes."""

    attributes_resolved: bool = False

    def walk(self):
        """Yield this node and its descendants, depth first in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        if self.name:
            return f"TagNode({self.type.value}, <{self.name}>, {len(self.attribs)} attribs)"
        return f"TagNode({self.type.value})"
