"""
ImgReqAltRule - Images need an alt attribute.

An empty alt is accepted: it marks the image as decorative.
"""

from typing import FrozenSet, List

from ..analyzers.tag_utils import has_non_empty_attr
from ..contracts.issues import Issue
from ..contracts.nodes import NodeType, TagNode
from .base_rule import Options, Rule


class ImgReqAltRule(Rule):
    name = "img-req-alt"
    description = "<img> tags must have an alt attribute"
    on: FrozenSet[NodeType] = frozenset({NodeType.TAG})

    def lint(self, node: TagNode, options: Options = None) -> List[Issue]:
        if node.name.lower() != "img":
            return []
        if has_non_empty_attr(node, "alt", allow_null=True):
            return []
        return [self.issue("<img> is missing an alt attribute", node.open_index)]
