"""
AttrRule - Meta rule that fans out each attribute of a tag to attribute rules.

One call on a tag becomes one apply_rules() call per unique attribute,
restricted to the subscribers whose trigger accepts that attribute name.
Issues come back in attribute order, then subscriber order.
"""

import logging
from typing import FrozenSet, List, Sequence, Tuple

from ..contracts.issues import Issue
from ..contracts.nodes import NodeType, TagNode
from .apply import apply_rules
from .base_rule import Options, Rule


logger = logging.getLogger(__name__)


def dispatch(
    meta_rule: Rule,
    subscribers: Sequence[Rule],
    node: TagNode,
    options: Options = None,
) -> List[Issue]:
    """
    Lint every attribute of a node with the matching subscribers.

    Args:
        meta_rule: The rule dispatching (used for logging)
        subscribers: Attribute rules, in registration order
        node: Tag node whose attribs are linted
        options: Opaque configuration passed to each subscriber

    Returns:
        Concatenated issues of all attributes
    """
    issues: List[Issue] = []
    for name, attribute in node.attribs.items():
        # subscribers see the attribs key, not the tree builder's spelling
        attribute.name = name
        matching = [rule for rule in subscribers if rule.triggers_on(name)]
        if not matching:
            continue
        logger.debug(
            f"{meta_rule.name}: <{node.name}> {name} -> "
            f"{', '.join(rule.name for rule in matching)}"
        )
        issues.extend(apply_rules(matching, attribute, options))
    return issues


class AttrRule(Rule):
    """
    Meta rule emitting attribute events.

    Holds an immutable tuple of subscribers. The linter builds a fresh
    instance for each lint pass.
    """

    name = "attr"
    description = "A meta rule that emits attribute events"
    on: FrozenSet[NodeType] = frozenset({NodeType.TAG, NodeType.STYLE, NodeType.SCRIPT})

    def __init__(self, subscribers: Sequence[Rule] = ()):
        self._subscribers: Tuple[Rule, ...] = tuple(subscribers)

    @property
    def subscribers(self) -> Tuple[Rule, ...]:
        return self._subscribers

    def lint(self, target: TagNode, options: Options = None) -> List[Issue]:
        return dispatch(self, self._subscribers, target, options)

    def __repr__(self) -> str:
        return f"AttrRule({len(self._subscribers)} subscribers)"
