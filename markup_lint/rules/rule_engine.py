"""
Linter - Runs registered rules over a markup tree.

The linter is the per-document caller: it annotates attribute offsets,
fires node rules and the attr meta-rule on every node, and turns a rule
failure into a LintError for the whole document.

Usage:
    from markup_lint.rules import Linter, create_default_linter

    linter = create_default_linter()
    issues = linter.lint(nodes, source=html, file_name="index.html")

    # Or build a custom linter
    linter = Linter()
    linter.register(AttrQuoteStyleRule())
    report = linter.lint_report(nodes)
"""

import logging
from typing import Iterable, Iterator, List, Optional, Type, Union

from ..analyzers.attr_parse import annotate
from ..analyzers.source_map import SourceMap
from ..analyzers.tag_utils import is_tag_node
from ..contracts.errors import LintError
from ..contracts.issues import Issue, LintReport
from ..contracts.nodes import NodeType, TagNode
from .attr_rule import AttrRule
from .base_rule import Options, Rule


logger = logging.getLogger(__name__)

Nodes = Union[TagNode, Iterable[TagNode]]


def iter_nodes(nodes: Nodes) -> Iterator[TagNode]:
    """Yield every node of a tree or forest, depth first in document order."""
    if isinstance(nodes, TagNode):
        nodes = [nodes]
    for root in nodes:
        yield from root.walk()


class Linter:
    """
    Holds the rules of a lint run, in registration order.

    Rules whose `on` contains NodeType.ATTR are subscribers of the attr
    meta-rule; every other rule fires directly on matching nodes.
    Diagnostics are ordered by node (document order), then the attr
    meta-rule's issues, then node rules in registration order.
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: List[Rule] = []
        if rules:
            self.register_all(rules)

    def register(self, rule: Rule) -> None:
        """
        Register a rule.

        Args:
            rule: Rule instance to register
        """
        self._rules.append(rule)
        kind = "attribute" if rule.is_attribute_rule else "node"
        logger.debug(f"Registered {kind} rule: {rule.name}")

    def register_all(self, rules: Iterable[Rule]) -> None:
        for rule in rules:
            self.register(rule)

    def unregister(self, rule_class: Type[Rule]) -> bool:
        """
        Unregister rules by class.

        Returns:
            True if at least one rule was removed
        """
        original_count = len(self._rules)
        self._rules = [r for r in self._rules if not isinstance(r, rule_class)]
        removed = len(self._rules) < original_count
        if removed:
            logger.debug(f"Unregistered rule: {rule_class.__name__}")
        return removed

    @property
    def rules(self) -> List[Rule]:
        return self._rules.copy()

    @property
    def subscribers(self) -> List[Rule]:
        """Attribute rules, in registration order."""
        return [r for r in self._rules if r.is_attribute_rule]

    @property
    def node_rules(self) -> List[Rule]:
        return [r for r in self._rules if not r.is_attribute_rule]

    def get_rules_for_type(self, node_type: NodeType) -> List[Rule]:
        """Node rules firing on the given node type."""
        return [r for r in self.node_rules if r.fires_on(node_type)]

    def lint(
        self,
        nodes: Nodes,
        options: Options = None,
        source: Optional[str] = None,
        file_name: Optional[str] = None,
    ) -> List[Issue]:
        """
        Lint one document.

        Args:
            nodes: Root node or top-level nodes of the document
            options: Opaque configuration passed to every rule
            source: Document text; when given, issues get line/column
            file_name: Document name used in errors

        Returns:
            Issues in document order

        Raises:
            LintError: A rule raised; the document is reported as failed
        """
        subscribers = self.subscribers
        rules: List[Rule] = [AttrRule(subscribers)] if subscribers else []
        rules.extend(self.node_rules)

        issues: List[Issue] = []
        node_count = 0
        for node in iter_nodes(nodes):
            node_count += 1
            if is_tag_node(node):
                annotate(node)
            for rule in rules:
                if not rule.fires_on(node.type):
                    continue
                try:
                    issues.extend(rule.lint(node, options))
                except Exception as e:
                    logger.error(
                        f"Rule {rule.name} failed on {node!r}"
                        + (f" in {file_name}" if file_name else "")
                        + f": {e}"
                    )
                    raise LintError(
                        f"Rule '{rule.name}' failed: {e}",
                        file_name=file_name,
                        rule_name=rule.name,
                    ) from e

        if source is not None:
            source_map = SourceMap(source)
            issues = [source_map.locate(issue) for issue in issues]

        logger.info(
            f"Linted {file_name or 'document'}: {node_count} nodes, {len(issues)} issues"
        )
        return issues

    def lint_report(
        self,
        nodes: Nodes,
        options: Options = None,
        source: Optional[str] = None,
        file_name: Optional[str] = None,
    ) -> LintReport:
        """Lint one document and wrap the issues in a LintReport."""
        issues = self.lint(nodes, options=options, source=source, file_name=file_name)
        return LintReport(file_name=file_name, issues=issues)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Linter({len(self._rules)} rules)"


def create_default_linter() -> Linter:
    """
    Create a Linter with the built-in rules registered.

    Returns:
        Configured Linter ready to use
    """
    from .attr_quote_style_rule import AttrQuoteStyleRule
    from .id_no_whitespace_rule import IdNoWhitespaceRule
    from .class_no_dup_rule import ClassNoDupRule
    from .img_req_alt_rule import ImgReqAltRule
    from .tag_self_close_rule import TagSelfCloseRule

    linter = Linter()
    linter.register_all([
        AttrQuoteStyleRule(),
        IdNoWhitespaceRule(),
        ClassNoDupRule(),
        ImgReqAltRule(),
        TagSelfCloseRule(),
    ])

    logger.info(f"Created default linter with {len(linter)} rules")
    return linter
