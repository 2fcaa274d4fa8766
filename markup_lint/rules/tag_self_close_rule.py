"""
TagSelfCloseRule - Enforce a self-closing style.

Styles:
- always: void elements (img, br, ...) must be written self-closed
- never: no tag may be written self-closed
"""

from typing import FrozenSet, List

from ..analyzers.tag_utils import is_selfclosing
from ..contracts.issues import Issue, Severity
from ..contracts.nodes import NodeType, TagNode
from .base_rule import Options, Rule


VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


class TagSelfCloseRule(Rule):
    name = "tag-self-close"
    description = "Void elements must (or must not) be self-closed"
    on: FrozenSet[NodeType] = frozenset({NodeType.TAG})
    severity = Severity.WARNING

    def __init__(self, style: str = "always"):
        if style not in ("always", "never"):
            raise ValueError(f"Unknown self-close style: {style}")
        self.style = style

    def lint(self, node: TagNode, options: Options = None) -> List[Issue]:
        closed = is_selfclosing(node)
        tag = node.name.lower()

        if self.style == "always" and tag in VOID_ELEMENTS and not closed:
            return [self.issue(f"<{tag}> should be self-closed", node.open_index, tag=tag)]
        if self.style == "never" and closed:
            return [self.issue(f"<{tag}> should not be self-closed", node.open_index, tag=tag)]
        return []
