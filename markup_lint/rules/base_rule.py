"""
Rule - Abstract base class for lint rules.

A rule declares which node types it fires on and, for attribute rules, an
optional trigger set of attribute names. Its lint() returns a list of
Issues and must not keep state between calls.

Usage:
    class MyRule(Rule):
        name = "my-rule"
        description = "Explains what my-rule checks"
        on = frozenset({NodeType.ATTR})
        trigger = frozenset({"id"})

        def lint(self, attribute, options=None):
            return [self.issue("Bad id", attribute.value_index)]
"""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, List, Mapping, Optional, Union

from ..contracts.issues import Issue, Severity
from ..contracts.nodes import AttributeRecord, NodeType, TagNode


Options = Optional[Mapping[str, Any]]
"""Opaque configuration passed through unchanged to every lint() call."""

Target = Union[TagNode, AttributeRecord]


class Rule(ABC):
    """
    Abstract base class for lint rules.

    Subclasses must provide:
    - name: Rule name reported on each issue
    - description: One-line explanation
    - on: Node types this rule fires for (NodeType.ATTR for attribute rules)
    - lint(): Check one target and return issues

    Optional:
    - trigger: Attribute names an attribute rule is limited to (None = all)
    - severity: Severity of the issues built with issue()
    """

    severity: Severity = Severity.ERROR
    trigger: Optional[FrozenSet[str]] = None

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def on(self) -> FrozenSet[NodeType]:
        pass

    @abstractmethod
    def lint(self, target: Target, options: Options = None) -> List[Issue]:
        """
        Check a node (or an attribute, for attribute rules).

        Args:
            target: TagNode, or AttributeRecord when on contains NodeType.ATTR
            options: Opaque configuration

        Returns:
            Issues found, possibly empty
        """
        pass

    @property
    def is_attribute_rule(self) -> bool:
        """Whether the rule is fed attributes by the attr meta-rule."""
        return NodeType.ATTR in self.on

    def fires_on(self, node_type: NodeType) -> bool:
        return node_type in self.on

    def triggers_on(self, attribute_name: str) -> bool:
        """Whether the rule wants the attribute with this name."""
        return self.trigger is None or attribute_name in self.trigger

    def issue(self, message: str, index: Optional[int], **data: Any) -> Issue:
        """Build an Issue attributed to this rule."""
        return Issue(
            rule_name=self.name,
            severity=self.severity,
            message=message,
            index=index,
            data=data,
        )

    def __repr__(self) -> str:
        types = sorted(t.value for t in self.on)
        if self.trigger is None:
            return f"{self.__class__.__name__}(name={self.name!r}, on={types})"
        return (
            f"{self.__class__.__name__}(name={self.name!r}, on={types}, "
            f"trigger={sorted(self.trigger)})"
        )

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, Rule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        return hash(self.__class__.__name__)
