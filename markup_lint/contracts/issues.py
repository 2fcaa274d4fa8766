"""
Issues - Diagnostics produced by rules.

Issue is the atomic output of a lint pass. Issues are created by rules,
never mutated, and aggregated upward into a LintReport.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class Severity(str, Enum):
    """Severity level of an issue."""

    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def from_string(cls, value: str) -> "Severity":
        """Convert string to Severity, defaulting to ERROR."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.ERROR


@dataclass(frozen=True)
class Issue:
    """
    One diagnostic.

    Example:
        issue = Issue(
            rule_name="attr-quote-style",
            severity=Severity.ERROR,
            message="Attribute value should be double quoted",
            index=42,
        )
    """

    rule_name: str
    severity: Severity
    message: str
    index: Optional[int] = None
    """Absolute source offset of the offending name or value."""

    line: Optional[int] = None
    column: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def position(self) -> Union[Tuple[int, int], Optional[int]]:
        """(line, column) when known, otherwise the absolute offset."""
        if self.line is not None and self.column is not None:
            return (self.line, self.column)
        return self.index

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def with_location(self, line: int, column: int) -> "Issue":
        """Return a copy carrying a line/column position."""
        return replace(self, line=line, column=column)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: Dict[str, Any] = {
            "rule": self.rule_name,
            "severity": self.severity.value,
            "message": self.message,
            "index": self.index,
        }
        if self.line is not None:
            result["line"] = self.line
            result["column"] = self.column
        if self.data:
            result["data"] = dict(self.data)
        return result


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


@dataclass
class LintReport:
    """Issues found in one document."""

    file_name: Optional[str] = None
    issues: List[Issue] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == Severity.WARNING)

    @property
    def problem_count(self) -> int:
        return self.error_count + self.warning_count

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def summary(self) -> str:
        """Human-readable count, e.g. '3 problems (1 error, 2 warnings)'."""
        return (
            f"{_plural(self.problem_count, 'problem')} "
            f"({_plural(self.error_count, 'error')}, "
            f"{_plural(self.warning_count, 'warning')})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file_name,
            "issues": [issue.to_dict() for issue in self.issues],
            "errors": self.error_count,
            "warnings": self.warning_count,
        }

    def __len__(self) -> int:
        return len(self.issues)
