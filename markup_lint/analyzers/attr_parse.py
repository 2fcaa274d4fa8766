"""
Attribute parsing - Tokenize opening-tag text and locate attributes in source.

The grammar is a syntactic best effort, not a validating parser: malformed
text (unterminated quotes, stray characters) never raises, it only yields
whatever the pattern captures.

Usage:
    from markup_lint.analyzers.attr_parse import tokenize, resolve_indices

    tokens = tokenize('class="a b" id=foo data-x')
    # [AttributeToken('class', '"a b"'), AttributeToken('id', 'foo'),
    #  AttributeToken('data-x', None)]

    resolve_indices(node.attribs, node.open, node.open_index)
"""

import logging
import re
from typing import Dict, Iterator, List, Optional

from ..contracts.nodes import AttributeRecord, AttributeToken, TagNode


logger = logging.getLogger(__name__)


# Groups:
# 1: leading whitespace
# 2: attribute name
# 3: everything after the name ('=' segment and value)
# 4: the '=' with its surrounding whitespace
# 5: attribute value, quotes included
ATTRIBUTE_PATTERN = re.compile(
    r"""(\s*)([^ "'>=^/]+)((\s*=\s*)("[^"]*"|'[^']*'|\S+))?"""
)

_TAG_NAME_END = re.compile(r"\s")


def iter_attribute_matches(text: str) -> Iterator[re.Match]:
    """
    Scan attribute text left to right, yielding non-overlapping matches.

    Each call owns its cursor, so concurrent or nested scans never
    interfere.
    """
    return ATTRIBUTE_PATTERN.finditer(text)


def iter_attributes(text: str) -> Iterator[AttributeToken]:
    """Lazily yield one AttributeToken per attribute occurrence."""
    for match in iter_attribute_matches(text):
        yield AttributeToken(name=match.group(2), raw_value=match.group(5))


def tokenize(text: str) -> List[AttributeToken]:
    """
    Parse the attribute text of an opening tag.

    Duplicate names are kept as separate tokens, in document order.

    Args:
        text: Raw text inside the opening tag, after the tag name

    Returns:
        List of AttributeToken
    """
    return list(iter_attributes(text))


def unquote(raw_value: Optional[str]) -> Optional[str]:
    """Strip one pair of matching quotes from a raw attribute value."""
    if raw_value is None:
        return None
    if len(raw_value) >= 2 and raw_value[0] == raw_value[-1] and raw_value[0] in "\"'":
        return raw_value[1:-1]
    return raw_value


def split_tag_name(open_text: str) -> int:
    """Length of the tag name at the start of the opening-tag text (-1 if alone)."""
    match = _TAG_NAME_END.search(open_text)
    return match.start() if match else -1


def records_from_open_tag(open_text: str) -> Dict[str, AttributeRecord]:
    """
    Build the attribs mapping for an opening tag.

    Mirrors what an HTML tree builder hands over: keys are lower-cased, the
    first occurrence of a duplicated name provides the value, and no
    offsets are set yet.

    Args:
        open_text: Opening tag text, tag name included, without '<'

    Returns:
        Mapping of lower-cased name to AttributeRecord
    """
    name_len = split_tag_name(open_text)
    if name_len < 0:
        return {}

    records: Dict[str, AttributeRecord] = {}
    for token in iter_attributes(open_text[name_len:]):
        name = token.name.strip().lower()
        if not name or name in records:
            continue
        value = unquote(token.raw_value)
        records[name] = AttributeRecord(
            name=name,
            value=value if value is not None else "",
        )
    return records


def resolve_indices(
    attributes: Dict[str, AttributeRecord],
    open_text: str,
    open_index: int,
) -> None:
    """
    Find the source offsets of attribute names and values.

    If an attribute is duplicated, the first occurrence that has a value
    wins, or the first occurrence if none has a value. Records without a
    value get value_index == name_index.

    Args:
        attributes: Records keyed by lower-cased name, updated in place
        open_text: Opening tag text, tag name included, without '<'
        open_index: Absolute offset of the tag's '<'
    """
    name_len = split_tag_name(open_text)
    if name_len >= 0:
        rest = open_text[name_len:]
        # '<' plus the tag name
        base = open_index + name_len + 1

        for match in iter_attribute_matches(rest):
            name = match.group(2).strip().lower()
            record = attributes.get(name) if name else None
            if record is None:
                continue

            raw_value = match.group(5)
            if record.value_index is not None or (
                raw_value is None and record.name_index is not None
            ):
                continue

            name_index = base + match.start() + len(match.group(1))
            record.name_index = name_index
            record.raw_eq_value = match.group(3)
            record.raw_value = raw_value

            if raw_value is not None:
                record.value_index = name_index + len(match.group(2)) + len(match.group(4))

    for record in attributes.values():
        if record.value_index is None:
            record.value_index = record.name_index


def annotate(node: TagNode) -> TagNode:
    """
    Resolve attribute offsets of a node, once.

    After this pass the node's attribs are treated as read-only.
    """
    if node.attributes_resolved:
        return node
    if node.attribs:
        resolve_indices(node.attribs, node.open, node.open_index)
        unresolved = [name for name, record in node.attribs.items() if not record.is_resolved]
        if unresolved:
            logger.debug(f"<{node.name}> attributes not found in source: {unresolved}")
    node.attributes_resolved = True
    return node
