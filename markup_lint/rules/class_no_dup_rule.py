"""
ClassNoDupRule - A class name must not be listed twice on the same tag.
"""

from typing import FrozenSet, List, Set

from ..analyzers.tag_utils import get_classes
from ..contracts.issues import Issue
from ..contracts.nodes import NodeType, TagNode
from .base_rule import Options, Rule


class ClassNoDupRule(Rule):
    name = "class-no-dup"
    description = "Class names must not be duplicated"
    on: FrozenSet[NodeType] = frozenset({NodeType.TAG})

    def lint(self, node: TagNode, options: Options = None) -> List[Issue]:
        attribute = node.attribs.get("class")
        if attribute is None:
            return []

        issues: List[Issue] = []
        seen: Set[str] = set()
        for class_name in get_classes(node):
            if not class_name:
                continue
            if class_name in seen:
                issues.append(
                    self.issue(
                        f'Duplicate class "{class_name}"',
                        attribute.value_index,
                        **{"class": class_name},
                    )
                )
            seen.add(class_name)
        return issues
