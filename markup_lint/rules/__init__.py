"""
Rules - Rule contract, dispatch and the linter.

Components:
- Rule: Abstract base class for all rules
- apply_rules: Run several rules on one target
- AttrRule / dispatch: Meta rule fanning attributes out to attribute rules
- Linter: Runs rules over a document
- Built-in rules: AttrQuoteStyleRule, IdNoWhitespaceRule, ClassNoDupRule,
  ImgReqAltRule, TagSelfCloseRule

Usage:
    from markup_lint.rules import create_default_linter

    linter = create_default_linter()
    issues = linter.lint(nodes)
"""

from .base_rule import Options, Rule
from .apply import apply_rules
from .attr_rule import AttrRule, dispatch
from .rule_engine import Linter, create_default_linter, iter_nodes
from .attr_quote_style_rule import AttrQuoteStyleRule
from .id_no_whitespace_rule import IdNoWhitespaceRule
from .class_no_dup_rule import ClassNoDupRule
from .img_req_alt_rule import ImgReqAltRule
from .tag_self_close_rule import TagSelfCloseRule


__all__ = [
    # Base
    "Options",
    "Rule",
    "apply_rules",
    "AttrRule",
    "dispatch",
    "Linter",
    "create_default_linter",
    "iter_nodes",
    # Rules
    "AttrQuoteStyleRule",
    "IdNoWhitespaceRule",
    "ClassNoDupRule",
    "ImgReqAltRule",
    "TagSelfCloseRule",
]
