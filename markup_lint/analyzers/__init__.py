"""
Analyzers - Attribute parsing and pure node queries.

Components:
- attr_parse: Attribute tokenizer and position resolver
- tag_utils: Node predicate utilities
- source_map: Offset to line/column conversion
"""

from .attr_parse import (
    ATTRIBUTE_PATTERN,
    annotate,
    iter_attributes,
    records_from_open_tag,
    resolve_indices,
    tokenize,
    unquote,
)
from .source_map import SourceMap
from .tag_utils import (
    attribute_value,
    get_classes,
    has_non_empty_attr,
    is_selfclosing,
    is_tag_node,
)

__all__ = [
    "ATTRIBUTE_PATTERN",
    "annotate",
    "iter_attributes",
    "records_from_open_tag",
    "resolve_indices",
    "tokenize",
    "unquote",
    "SourceMap",
    "attribute_value",
    "get_classes",
    "has_non_empty_attr",
    "is_selfclosing",
    "is_tag_node",
]
