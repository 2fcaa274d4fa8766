"""
Tag utilities - Pure queries over an already-built node.
"""

import re
from typing import List

from ..contracts.nodes import NodeType, TagNode


TAG_NODE_TYPES = frozenset({NodeType.TAG, NodeType.STYLE, NodeType.SCRIPT})

_WHITESPACE_RUN = re.compile(r"\s+")


def is_selfclosing(node: TagNode) -> bool:
    """
    Check whether the opening tag ends with '/'.

    Only the last character is looked at: `<img src="x" / >` is not
    recognized as self-closed.
    """
    return node.open[-1:] == "/"


def has_non_empty_attr(node: TagNode, name: str, allow_null: bool = False) -> bool:
    """
    Check whether the node has a non-empty attribute with the given name.

    An empty value counts as non-empty only if allow_null is True, so
    allow_null turns this into a plain presence test.
    """
    attribute = node.attribs.get(name)
    if attribute is None:
        return False
    return allow_null or bool(attribute.value)


def attribute_value(node: TagNode, name: str) -> str:
    """Value of the attribute, or '' if it is absent."""
    attribute = node.attribs.get(name)
    if attribute is None or attribute.value is None:
        return ""
    return attribute.value


def is_tag_node(node: TagNode) -> bool:
    """Check if the node is an element (tag, style or script)."""
    return node.type in TAG_NODE_TYPES


def get_classes(node: TagNode) -> List[str]:
    """
    Split the class attribute into class names, in order.

    A missing or blank class attribute gives [''].
    """
    return _WHITESPACE_RUN.split(attribute_value(node, "class").strip())
