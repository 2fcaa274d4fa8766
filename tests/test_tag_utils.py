"""
Unit tests for node predicate utilities.
"""

import pytest

from markup_lint.analyzers.tag_utils import (
    attribute_value,
    get_classes,
    has_non_empty_attr,
    is_selfclosing,
    is_tag_node,
)
from markup_lint.contracts import AttributeRecord, NodeType, TagNode

from tests.helpers import build_tag


class TestIsSelfClosing:
    """Tests for is_selfclosing()."""

    def test_trailing_slash(self):
        assert is_selfclosing(TagNode(type=NodeType.TAG, open='<img src="x"/')) is True
        assert is_selfclosing(build_tag("<br/>")) is True

    def test_no_trailing_slash(self):
        assert is_selfclosing(TagNode(type=NodeType.TAG, open="<div")) is False
        assert is_selfclosing(build_tag('<img src="x">')) is False

    def test_whitespace_before_end_is_not_recognized(self):
        assert is_selfclosing(build_tag('<img src="x" / >')) is False

    def test_ignores_attribs(self):
        node = TagNode(
            type=NodeType.TAG,
            open="div",
            attribs={"x": AttributeRecord(name="x", value="/")},
        )
        assert is_selfclosing(node) is False

    def test_empty_open_text(self):
        assert is_selfclosing(TagNode(type=NodeType.TAG, open="")) is False


class TestHasNonEmptyAttr:
    """Tests for has_non_empty_attr()."""

    def test_absent_attribute(self):
        node = build_tag("<div>")

        assert has_non_empty_attr(node, "class") is False
        assert has_non_empty_attr(node, "class", allow_null=True) is False

    def test_empty_value(self):
        node = build_tag('<div class="">')

        assert has_non_empty_attr(node, "class", False) is False
        assert has_non_empty_attr(node, "class", True) is True

    def test_non_empty_value(self):
        node = build_tag('<div class="a">')

        assert has_non_empty_attr(node, "class") is True

    def test_boolean_attribute(self):
        node = build_tag("<input disabled>")

        assert has_non_empty_attr(node, "disabled") is False
        assert has_non_empty_attr(node, "disabled", allow_null=True) is True

    def test_missing_value(self):
        node = TagNode(type=NodeType.TAG, attribs={"alt": AttributeRecord(name="alt")})

        assert has_non_empty_attr(node, "alt") is False


class TestAttributeValue:
    """Tests for attribute_value()."""

    def test_present(self):
        assert attribute_value(build_tag("<a href='/x'>"), "href") == "/x"

    def test_absent_gives_empty_string(self):
        assert attribute_value(build_tag("<a>"), "href") == ""

    def test_none_value_gives_empty_string(self):
        node = TagNode(type=NodeType.TAG, attribs={"href": AttributeRecord(name="href")})
        assert attribute_value(node, "href") == ""


class TestIsTagNode:
    """Tests for is_tag_node()."""

    @pytest.mark.parametrize("node_type", [NodeType.TAG, NodeType.STYLE, NodeType.SCRIPT])
    def test_element_types(self, node_type):
        assert is_tag_node(TagNode(type=node_type)) is True

    @pytest.mark.parametrize(
        "node_type",
        [NodeType.TEXT, NodeType.COMMENT, NodeType.DIRECTIVE, NodeType.CDATA, NodeType.ATTR],
    )
    def test_other_types(self, node_type):
        assert is_tag_node(TagNode(type=node_type)) is False


class TestGetClasses:
    """Tests for get_classes()."""

    def test_splits_on_whitespace_runs(self):
        assert get_classes(build_tag('<div class="  a   b  ">')) == ["a", "b"]

    def test_mixed_whitespace(self):
        assert get_classes(build_tag('<div class="a\tb\nc">')) == ["a", "b", "c"]

    def test_keeps_order_and_duplicates(self):
        assert get_classes(build_tag('<div class="b a b">')) == ["b", "a", "b"]

    def test_no_class_attribute(self):
        assert get_classes(build_tag("<div>")) == [""]

    def test_blank_class_attribute(self):
        assert get_classes(build_tag('<div class="   ">')) == [""]
