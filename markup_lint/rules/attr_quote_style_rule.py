"""
AttrQuoteStyleRule - Check how attribute values are quoted.

Styles:
- double: value must be wrapped in double quotes
- single: value must be wrapped in single quotes
- quoted: either kind of quotes, but quoted
"""

from typing import FrozenSet, List

from ..contracts.issues import Issue
from ..contracts.nodes import AttributeRecord, NodeType
from .base_rule import Options, Rule


QUOTE_STYLES = {
    "double": ('"',),
    "single": ("'",),
    "quoted": ('"', "'"),
}


class AttrQuoteStyleRule(Rule):
    """Flag attribute values not written with the configured quotes."""

    name = "attr-quote-style"
    description = "Attribute values must be quoted with the configured style"
    on: FrozenSet[NodeType] = frozenset({NodeType.ATTR})

    def __init__(self, style: str = "double"):
        if style not in QUOTE_STYLES:
            raise ValueError(f"Unknown quote style: {style}")
        self.style = style

    def lint(self, attribute: AttributeRecord, options: Options = None) -> List[Issue]:
        raw = attribute.raw_value
        if raw is None:
            return []

        quotes = QUOTE_STYLES[self.style]
        if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in quotes:
            return []

        wanted = "quoted" if self.style == "quoted" else f"{self.style} quoted"
        return [
            self.issue(
                f'Value of attribute "{attribute.name}" should be {wanted}',
                attribute.value_index,
                attribute=attribute.name,
                style=self.style,
            )
        ]
