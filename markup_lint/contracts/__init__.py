"""
Contracts - Data structures for the markup linter.

Provides:
- NodeType, AttributeToken, AttributeRecord, TagNode: the tree the linter reads
- Severity, Issue, LintReport: what rules produce
- LintError: document-level failure
"""

from .errors import LintError
from .issues import Issue, LintReport, Severity
from .nodes import AttributeRecord, AttributeToken, NodeType, TagNode

__all__ = [
    "NodeType",
    "AttributeToken",
    "AttributeRecord",
    "TagNode",
    "Severity",
    "Issue",
    "LintReport",
    "LintError",
]
