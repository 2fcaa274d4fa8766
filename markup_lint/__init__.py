"""
Markup Lint - Rule-driven linter for markup documents.

Parses opening-tag attribute text, resolves attribute source offsets and
dispatches nodes and attributes to lint rules.
"""

from .core.logger import configure_logging
from .contracts import (
    AttributeRecord,
    AttributeToken,
    Issue,
    LintError,
    LintReport,
    NodeType,
    Severity,
    TagNode,
)
from .analyzers import records_from_open_tag, resolve_indices, tokenize
from .rules import Linter, Rule, create_default_linter

__version__ = "0.1.0"

__all__ = [
    "configure_logging",
    "AttributeRecord",
    "AttributeToken",
    "Issue",
    "LintError",
    "LintReport",
    "NodeType",
    "Severity",
    "TagNode",
    "records_from_open_tag",
    "resolve_indices",
    "tokenize",
    "Linter",
    "Rule",
    "create_default_linter",
]
