"""
Unit tests for the data contracts.
"""

import pytest

from markup_lint.contracts import (
    AttributeRecord,
    Issue,
    LintError,
    LintReport,
    NodeType,
    Severity,
    TagNode,
)


def make_issue(severity=Severity.ERROR, index=3, **kwargs) -> Issue:
    """Helper to create an Issue for tests."""
    return Issue(rule_name="r", severity=severity, message="m", index=index, **kwargs)


class TestIssue:
    """Tests for Issue."""

    def test_position_is_index_without_line(self):
        assert make_issue().position == 3

    def test_position_with_line_column(self):
        issue = make_issue().with_location(2, 5)

        assert issue.position == (2, 5)
        assert issue.index == 3

    def test_is_immutable(self):
        issue = make_issue()

        with pytest.raises(AttributeError):
            issue.message = "other"

    def test_to_dict(self):
        issue = make_issue(data={"tag": "img"}).with_location(1, 4)

        assert issue.to_dict() == {
            "rule": "r",
            "severity": "error",
            "message": "m",
            "index": 3,
            "line": 1,
            "column": 4,
            "data": {"tag": "img"},
        }

    def test_to_dict_minimal(self):
        assert make_issue(Severity.WARNING).to_dict() == {
            "rule": "r",
            "severity": "warning",
            "message": "m",
            "index": 3,
        }


class TestLintReport:
    """Tests for LintReport."""

    def test_counts(self):
        report = LintReport(
            file_name="a.html",
            issues=[make_issue(), make_issue(Severity.WARNING), make_issue(Severity.WARNING)],
        )

        assert report.error_count == 1
        assert report.warning_count == 2
        assert report.problem_count == 3
        assert len(report) == 3
        assert report.summary() == "3 problems (1 error, 2 warnings)"

    def test_empty(self):
        report = LintReport()

        assert report.has_errors is False
        assert report.summary() == "0 problems (0 errors, 0 warnings)"

    def test_to_dict(self):
        report = LintReport(file_name="a.html", issues=[make_issue()])

        assert report.to_dict()["errors"] == 1
        assert report.to_dict()["issues"][0]["rule"] == "r"


class TestNodes:
    """Tests for NodeType, AttributeRecord and TagNode."""

    def test_node_type_from_string(self):
        assert NodeType.from_string("SCRIPT") == NodeType.SCRIPT
        assert NodeType("attr") == NodeType.ATTR

    def test_attribute_record_defaults(self):
        record = AttributeRecord(name="id")

        assert record.has_value is False
        assert record.is_resolved is False

    def test_walk(self):
        leaf = TagNode(type=NodeType.TEXT, data="x")
        inner = TagNode(type=NodeType.TAG, name="b", children=[leaf])
        root = TagNode(type=NodeType.TAG, name="p", children=[inner])

        assert list(root.walk()) == [root, inner, leaf]

    def test_repr(self):
        assert repr(TagNode(type=NodeType.TAG, name="p")) == "TagNode(tag, <p>, 0 attribs)"
        assert repr(TagNode(type=NodeType.TEXT)) == "TagNode(text)"


class TestLintError:
    """Tests for LintError."""

    def test_str_with_file_name(self):
        error = LintError("Rule 'x' failed: boom", file_name="a.html", rule_name="x")

        assert str(error) == "a.html: Rule 'x' failed: boom"
        assert error.rule_name == "x"

    def test_str_without_file_name(self):
        assert str(LintError("boom")) == "boom"
