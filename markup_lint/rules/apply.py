"""
Rule application - Run a list of rules against one target.
"""

from typing import List, Sequence

from ..contracts.issues import Issue
from .base_rule import Options, Rule, Target


def apply_rules(rules: Sequence[Rule], target: Target, options: Options = None) -> List[Issue]:
    """
    Invoke each rule on the target and concatenate their issues.

    Issues keep rule order, then the order each rule returned them in.
    A failing rule is not caught here.
    """
    issues: List[Issue] = []
    for rule in rules:
        issues.extend(rule.lint(target, options))
    return issues
