"""
Test helpers: a small tag builder standing in for a tree builder, and
rules that record how they were called.
"""

import re
from typing import FrozenSet, List, Optional

from markup_lint.analyzers import records_from_open_tag
from markup_lint.contracts import Issue, NodeType, TagNode
from markup_lint.rules import Rule


def build_tag(source: str, start: int = 0, node_type: NodeType = NodeType.TAG) -> TagNode:
    """Build a TagNode for the opening tag starting at `start` in `source`."""
    end = source.index(">", start)
    open_text = source[start + 1:end]
    name = re.split(r"[\s/]", open_text, maxsplit=1)[0]
    return TagNode(
        type=node_type,
        name=name.lower(),
        open=open_text,
        open_index=start,
        attribs=records_from_open_tag(open_text),
    )


def build_tags(source: str) -> List[TagNode]:
    """Build a flat list of TagNodes, one per opening tag in `source`."""
    return [build_tag(source, m.start()) for m in re.finditer(r"<(?![/!])", source)]


class RecordingRule(Rule):
    """Rule logging every call into a shared list and returning one issue."""

    description = "Records its calls"

    def __init__(
        self,
        name: str,
        calls: list,
        on: FrozenSet[NodeType] = frozenset({NodeType.ATTR}),
        trigger: Optional[FrozenSet[str]] = None,
    ):
        self._name = name
        self._calls = calls
        self._on = on
        self.trigger = trigger

    @property
    def name(self) -> str:
        return self._name

    @property
    def on(self) -> FrozenSet[NodeType]:
        return self._on

    def lint(self, target, options=None) -> List[Issue]:
        self._calls.append((self.name, target.name, options))
        index = target.name_index if self.is_attribute_rule else target.open_index
        return [self.issue(f"{self.name} saw {target.name}", index)]

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class ExplodingRule(Rule):
    """Rule raising on every call."""

    name = "exploding"
    description = "Always fails"
    on = frozenset({NodeType.TAG})

    def lint(self, target, options=None) -> List[Issue]:
        raise RuntimeError("boom")
