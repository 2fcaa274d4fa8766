"""
IdNoWhitespaceRule - An id must be non-empty and contain no whitespace.
"""

import re
from typing import FrozenSet, List

from ..contracts.issues import Issue
from ..contracts.nodes import AttributeRecord, NodeType
from .base_rule import Options, Rule


_WHITESPACE = re.compile(r"\s")


class IdNoWhitespaceRule(Rule):
    name = "id-no-whitespace"
    description = "The id attribute must be non-empty and contain no whitespace"
    on: FrozenSet[NodeType] = frozenset({NodeType.ATTR})
    trigger: FrozenSet[str] = frozenset({"id"})

    def lint(self, attribute: AttributeRecord, options: Options = None) -> List[Issue]:
        value = attribute.value or ""
        if not value:
            return [self.issue("The id attribute is empty", attribute.value_index)]
        if _WHITESPACE.search(value):
            return [
                self.issue(
                    f'The id "{value}" contains whitespace',
                    attribute.value_index,
                    id=value,
                )
            ]
        return []
